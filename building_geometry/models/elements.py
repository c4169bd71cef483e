"""Linear building elements (walls, beams, model lines)."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Protocol

from .curves import Curve


class LinearElementLike(Protocol):
    """Protocol for objects that behave like LinearElement.

    Host adapters and test mocks only need these three attributes.
    ``flipped`` is None for element kinds that have no flip state.
    """

    @property
    def element_id(self) -> Hashable: ...

    @property
    def location(self) -> Curve | None: ...

    @property
    def flipped(self) -> bool | None: ...


@dataclass(frozen=True, slots=True)
class LinearElement:
    """Snapshot of a host element with a curve-valued location."""

    element_id: Hashable
    location: Curve | None
    flipped: bool | None = None
    name: str = ""

    def __repr__(self) -> str:
        flip = f", flipped={self.flipped}" if self.flipped is not None else ""
        return f"LinearElement(<{self.element_id}> {self.name!r}{flip})"
