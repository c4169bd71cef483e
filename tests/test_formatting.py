"""
Tests for report formatting utilities.
"""
from __future__ import annotations

import math

import pytest

from helpers import MockLinearElement, wall
from building_geometry.core.azimuth import calculate_azimuth
from building_geometry.core.formatting import (
    angle_string,
    dot_or_colon,
    format_azimuth_report,
    format_neighbor_report,
    format_side_face_count,
    plural_suffix,
    point_string,
    real_string,
)
from building_geometry.core.neighbor_graph import build_neighbor_graph


class TestRealString:
    """Test real_string() function."""

    @pytest.mark.parametrize("value,expected", [
        (3.0, "3"),
        (2.5, "2.5"),
        (2.505, "2.5"),
        (1.239, "1.24"),
        (-0.001, "0"),
        (-4.25, "-4.25"),
        (0.0, "0"),
    ])
    def test_values(self, value: float, expected: str) -> None:
        assert real_string(value) == expected

    def test_nan(self) -> None:
        assert real_string(float('nan')) == "ERROR"

    def test_infinity(self) -> None:
        assert real_string(math.inf) == "ERROR"


class TestAngleAndPointStrings:
    """Test angle_string() and point_string()."""

    def test_right_angle(self) -> None:
        assert angle_string(math.pi / 2) == "90 degrees"

    def test_fractional_degrees(self) -> None:
        assert angle_string(math.radians(33.333)) == "33.33 degrees"

    def test_point(self) -> None:
        assert point_string((1.0, 2.5, -0.125)) == "(1,2.5,-0.12)"


class TestSuffixes:
    """Test plural_suffix() and dot_or_colon()."""

    def test_plural(self) -> None:
        assert plural_suffix(0) == "s"
        assert plural_suffix(1) == ""
        assert plural_suffix(2) == "s"

    def test_dot_or_colon(self) -> None:
        assert dot_or_colon(0) == "."
        assert dot_or_colon(3) == ":"

    def test_side_face_count(self) -> None:
        assert format_side_face_count(1) == "1 side face found."
        assert format_side_face_count(4) == "4 side faces found."


class TestNeighborReport:
    """Test format_neighbor_report() function."""

    def test_report(self) -> None:
        graph = build_neighbor_graph([
            wall('A', (0, 0, 0), (10, 0, 0)),
            wall('B', (10, 0, 0), (10, 10, 0)),
            wall('C', (10, 0, 0), (20, 0, 0)),
        ])
        report = format_neighbor_report(graph, 'A')
        assert report == (
            "<A> start point has 0 neighbours.\n"
            "\n"
            "<A> end point has 2 neighbours:\n"
            "  <B>\n"
            "  <C>"
        )

    def test_single_neighbor_singular(self) -> None:
        graph = build_neighbor_graph([
            wall('A', (0, 0, 0), (10, 0, 0)),
            wall('B', (10, 0, 0), (10, 10, 0)),
        ])
        assert "<B> start point has 1 neighbour:" in format_neighbor_report(graph, 'B')

    def test_custom_description(self) -> None:
        graph = build_neighbor_graph([wall(7, (0, 0, 0), (1, 0, 0))])
        report = format_neighbor_report(graph, 7, describe=lambda i: f"Walls {i}")
        assert report.startswith("Walls 7 start point has 0 neighbours.")

    def test_missing_curve(self) -> None:
        graph = build_neighbor_graph([MockLinearElement('D', None)])
        assert format_neighbor_report(graph, 'D') == "<D>: No wall curve found."


class TestAzimuthReport:
    """Test format_azimuth_report() function."""

    def test_report_lines(self) -> None:
        result = calculate_azimuth(wall('w', (10, 0, 0), (10, 10, 0), flipped=True))
        lines = format_azimuth_report(result).splitlines()
        assert lines == [
            "Start point (10,0,0)",
            "End point (10,10,0)",
            "Angle between start and end point vectors = 45 degrees",
            "Angle between points measured from X axis = 90 degrees",
            "Angle around measured from X axis = 90 degrees",
            "Angle pointing out of wall = 0 degrees",
        ]

    def test_report_without_optional_lines(self) -> None:
        result = calculate_azimuth(wall('w', (0, 0, 0), (10, 0, 0)))
        report = format_azimuth_report(result)
        assert "start and end point vectors" not in report
        assert "pointing out of wall" not in report
