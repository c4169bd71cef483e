"""Endpoint neighbor graph for linear elements.

Endpoints are snapped to an integer lattice so that coincidence becomes an
exact, hashable key. Two elements are neighbors at an endpoint when their
endpoints fall on the same lattice key.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..models.elements import LinearElementLike
from ..models.types import EndpointIndex, Point3D
from .curve_trimming import endpoints
from .tolerances import JOIN_GRID

JoinKey = tuple[int, int, int]
EndpointRef = tuple[Hashable, EndpointIndex]

ENDPOINT_NAMES: tuple[str, str] = ('start', 'end')


def quantize_point(point: Point3D, grid: float = JOIN_GRID) -> JoinKey:
    """Round a point onto the join lattice."""
    return (
        round(point[0] / grid),
        round(point[1] / grid),
        round(point[2] / grid),
    )


@dataclass(frozen=True, slots=True)
class NeighborGraph:
    """Read-only neighbor index built from one snapshot of elements.

    ``neighbors`` maps ``(element_id, endpoint_index)`` to the ids of the
    other elements joined there, in insertion order. ``joins`` maps the
    same key to the ``(neighbor_id, neighbor_endpoint_index)`` pairs.
    """

    neighbors: Mapping[EndpointRef, tuple[Hashable, ...]]
    joins: Mapping[EndpointRef, tuple[EndpointRef, ...]]
    missing_curve: tuple[Hashable, ...] = ()
    element_ids: tuple[Hashable, ...] = ()

    def __contains__(self, element_id: object) -> bool:
        return element_id in self.element_ids


def build_neighbor_graph(
    elements: Iterable[LinearElementLike],
    grid: float = JOIN_GRID,
) -> NeighborGraph:
    """
    Index elements by endpoint and collect each endpoint's neighbors.

    Args:
        elements: Snapshot of linear elements; ids must be unique
        grid: Lattice spacing used to decide endpoint coincidence

    Returns:
        NeighborGraph for the snapshot. Elements without a location curve
        are listed in ``missing_curve`` and have no endpoint entries.

    Raises:
        UnboundCurveError: If an element's location curve is unbound
        ValueError: If two elements share an id
    """
    index: dict[JoinKey, list[EndpointRef]] = {}
    refs: list[tuple[EndpointRef, JoinKey]] = []
    missing: list[Hashable] = []
    seen: dict[Hashable, None] = {}

    for element in elements:
        element_id = element.element_id
        if element_id in seen:
            raise ValueError(f"Duplicate element id: {element_id!r}")
        seen[element_id] = None

        curve = element.location
        if curve is None:
            missing.append(element_id)
            continue

        for i, point in enumerate(endpoints(curve)):
            key = quantize_point(point, grid)
            ref: EndpointRef = (element_id, i)
            index.setdefault(key, []).append(ref)
            refs.append((ref, key))

    joins: dict[EndpointRef, tuple[EndpointRef, ...]] = {}
    neighbors: dict[EndpointRef, tuple[Hashable, ...]] = {}
    for ref, key in refs:
        element_id = ref[0]
        others = tuple(other for other in index[key] if other[0] != element_id)
        joins[ref] = others
        # An element can touch the same key at both ends (closed loop)
        ids: list[Hashable] = []
        for other_id, _ in others:
            if other_id not in ids:
                ids.append(other_id)
        neighbors[ref] = tuple(ids)

    return NeighborGraph(
        neighbors=MappingProxyType(neighbors),
        joins=MappingProxyType(joins),
        missing_curve=tuple(missing),
        element_ids=tuple(seen),
    )


def _check_index(endpoint_index: int) -> None:
    if endpoint_index not in (0, 1):
        raise ValueError(f"endpoint_index must be 0 or 1, got {endpoint_index}")


def neighbors_at(
    graph: NeighborGraph,
    element_id: Hashable,
    endpoint_index: EndpointIndex,
) -> list[Hashable]:
    """
    Return the other elements joined at one endpoint of an element.

    Args:
        graph: Graph from build_neighbor_graph()
        element_id: Element to query
        endpoint_index: 0 for the start point, 1 for the end point

    Returns:
        Neighbor ids in insertion order; empty if the endpoint is free or
        the element had no location curve

    Raises:
        KeyError: If the element was not part of the snapshot
        ValueError: If endpoint_index is not 0 or 1
    """
    _check_index(endpoint_index)
    if element_id in graph.missing_curve:
        return []
    try:
        return list(graph.neighbors[(element_id, endpoint_index)])
    except KeyError:
        raise KeyError(f"Element {element_id!r} is not in the neighbor graph") from None


def shared_endpoint_index(
    graph: NeighborGraph,
    element_id: Hashable,
    endpoint_index: EndpointIndex,
    neighbor_id: Hashable,
) -> EndpointIndex | None:
    """Return which endpoint of neighbor_id joins element_id at endpoint_index."""
    _check_index(endpoint_index)
    for other_id, other_index in graph.joins.get((element_id, endpoint_index), ()):
        if other_id == neighbor_id:
            return other_index
    return None
