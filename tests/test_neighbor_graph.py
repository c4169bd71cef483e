"""
Tests for the endpoint neighbor graph - runs without a modeling host.

These tests use mock elements that don't require a modeling host.
"""
from __future__ import annotations

import math

import pytest

from helpers import MockLinearElement, wall
from building_geometry.core.neighbor_graph import (
    build_neighbor_graph,
    neighbors_at,
    quantize_point,
    shared_endpoint_index,
)
from building_geometry.core.tolerances import JOIN_GRID
from building_geometry.models.curves import Ellipse, Line, UnboundCurveError


@pytest.fixture
def abc_walls() -> list[MockLinearElement]:
    """A and B meet at (10,0,0); C is off on its own."""
    return [
        wall('A', (0.0, 0.0, 0.0), (10.0, 0.0, 0.0)),
        wall('B', (10.0, 0.0, 0.0), (10.0, 10.0, 0.0)),
        wall('C', (20.0, 0.0, 0.0), (30.0, 0.0, 0.0)),
    ]


@pytest.fixture
def junction() -> list[MockLinearElement]:
    """Four walls meeting at the origin, plus a closing wall between two ends."""
    return [
        wall(1, (0, 0, 0), (5, 0, 0)),
        wall(2, (0, 5, 0), (0, 0, 0)),
        wall(3, (0, 0, 0), (-5, 0, 0)),
        wall(4, (0, -5, 0), (0, 0, 0)),
        wall(5, (5, 0, 0), (0, 5, 0)),
    ]


class TestQuantizePoint:
    """Test quantize_point() function."""

    def test_integer_key(self) -> None:
        key = quantize_point((1.0, 2.0, 3.0), grid=0.5)
        assert key == (2, 4, 6)

    def test_nearby_points_share_key(self) -> None:
        p = (10.0, 0.0, 0.0)
        q = (10.0 + JOIN_GRID * 0.2, 0.0, -JOIN_GRID * 0.2)
        assert quantize_point(p) == quantize_point(q)

    def test_distant_points_differ(self) -> None:
        assert quantize_point((10.0, 0.0, 0.0)) != quantize_point((10.0 + 2 * JOIN_GRID, 0.0, 0.0))


class TestBuildNeighborGraph:
    """Test build_neighbor_graph() and neighbors_at()."""

    def test_end_joined(self, abc_walls) -> None:
        graph = build_neighbor_graph(abc_walls)
        assert neighbors_at(graph, 'A', 1) == ['B']

    def test_free_start(self, abc_walls) -> None:
        graph = build_neighbor_graph(abc_walls)
        assert neighbors_at(graph, 'A', 0) == []

    def test_separate_element_has_no_neighbors(self, abc_walls) -> None:
        graph = build_neighbor_graph(abc_walls)
        assert neighbors_at(graph, 'C', 0) == []
        assert neighbors_at(graph, 'C', 1) == []

    def test_reverse_direction(self, abc_walls) -> None:
        graph = build_neighbor_graph(abc_walls)
        assert neighbors_at(graph, 'B', 0) == ['A']

    def test_insertion_order(self, junction) -> None:
        graph = build_neighbor_graph(junction)
        assert neighbors_at(graph, 1, 0) == [2, 3, 4]
        assert neighbors_at(graph, 3, 0) == [1, 2, 4]

    def test_never_self_neighbor(self, junction) -> None:
        graph = build_neighbor_graph(junction)
        for element in junction:
            for i in (0, 1):
                assert element.element_id not in neighbors_at(graph, element.element_id, i)

    def test_symmetry(self, junction) -> None:
        """If B neighbors A at i, A neighbors B at B's matching endpoint."""
        graph = build_neighbor_graph(junction)
        for element in junction:
            for i in (0, 1):
                for other in neighbors_at(graph, element.element_id, i):
                    j = shared_endpoint_index(graph, element.element_id, i, other)
                    assert j is not None
                    assert element.element_id in neighbors_at(graph, other, j)

    def test_within_grid_tolerance(self) -> None:
        elements = [
            wall('A', (0.0, 0.0, 0.0), (10.0, 0.0, 0.0)),
            wall('B', (10.0 + JOIN_GRID * 0.1, 0.0, 0.0), (10.0, 10.0, 0.0)),
        ]
        graph = build_neighbor_graph(elements)
        assert neighbors_at(graph, 'A', 1) == ['B']

    def test_custom_grid(self) -> None:
        elements = [
            wall('A', (0.0, 0.0, 0.0), (10.0, 0.0, 0.0)),
            wall('B', (10.2, 0.0, 0.0), (10.0, 10.0, 0.0)),
        ]
        assert neighbors_at(build_neighbor_graph(elements), 'A', 1) == []
        assert neighbors_at(build_neighbor_graph(elements, grid=1.0), 'A', 1) == ['B']

    def test_arc_endpoints_join(self) -> None:
        arc = Ellipse.circle((0.0, 0.0, 0.0), 10.0).make_bound(0.0, math.pi / 2)
        elements = [
            MockLinearElement('arc', arc),
            wall('line', (0.0, 10.0, 0.0), (0.0, 20.0, 0.0)),
        ]
        graph = build_neighbor_graph(elements)
        assert neighbors_at(graph, 'arc', 1) == ['line']
        assert neighbors_at(graph, 'line', 0) == ['arc']

    def test_missing_curve_recorded(self, abc_walls) -> None:
        graph = build_neighbor_graph(abc_walls + [MockLinearElement('D', None)])
        assert graph.missing_curve == ('D',)
        assert neighbors_at(graph, 'D', 0) == []
        assert 'D' in graph

    def test_unknown_element_raises(self, abc_walls) -> None:
        graph = build_neighbor_graph(abc_walls)
        with pytest.raises(KeyError, match="not in the neighbor graph"):
            neighbors_at(graph, 'Z', 0)

    def test_bad_endpoint_index(self, abc_walls) -> None:
        graph = build_neighbor_graph(abc_walls)
        with pytest.raises(ValueError, match="endpoint_index"):
            neighbors_at(graph, 'A', 2)

    def test_duplicate_id_rejected(self) -> None:
        with pytest.raises(ValueError, match="Duplicate element id"):
            build_neighbor_graph([
                wall('A', (0, 0, 0), (1, 0, 0)),
                wall('A', (1, 0, 0), (2, 0, 0)),
            ])

    def test_unbound_location_raises(self) -> None:
        with pytest.raises(UnboundCurveError):
            build_neighbor_graph([MockLinearElement('A', Line.unbound((0, 0, 0), (1, 0, 0)))])

    def test_graph_is_read_only(self, abc_walls) -> None:
        graph = build_neighbor_graph(abc_walls)
        with pytest.raises(TypeError):
            graph.neighbors[('A', 0)] = ('C',)

    def test_generator_input(self, abc_walls) -> None:
        graph = build_neighbor_graph(e for e in abc_walls)
        assert graph.element_ids == ('A', 'B', 'C')
