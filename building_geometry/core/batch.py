"""Per-element batch processing with failure collection."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ..lib.hostAddInUtils import log
from ..models.elements import LinearElementLike
from ..models.types import GeometryError

_R = TypeVar('_R')


@dataclass(frozen=True, slots=True)
class ElementFailure:
    """An element that could not be processed, and why."""

    element_id: Hashable
    error: GeometryError

    @property
    def message(self) -> str:
        return str(self.error)


@dataclass(slots=True)
class BatchResult(Generic[_R]):
    """Results for the elements that succeeded plus a failure list."""

    results: list[_R] = field(default_factory=list)
    failures: list[ElementFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def process_elements(
    elements: Iterable[LinearElementLike],
    operation: Callable[[LinearElementLike], _R],
) -> BatchResult[_R]:
    """
    Apply an operation to each element, continuing past geometry failures.

    Only GeometryError subclasses are collected; anything else propagates.

    Args:
        elements: Elements to process, in order
        operation: Per-element computation

    Returns:
        BatchResult with results in input order and one ElementFailure per
        element that raised
    """
    batch: BatchResult[_R] = BatchResult()
    for element in elements:
        try:
            batch.results.append(operation(element))
        except GeometryError as e:
            failure = ElementFailure(element.element_id, e)
            log(f"Element {failure.element_id!r}: {failure.message}", logging.WARNING)
            batch.failures.append(failure)
    return batch
