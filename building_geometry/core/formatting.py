"""Formatting utilities for geometry reports."""

from __future__ import annotations

import math
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING

from ..models.types import Point3D
from .neighbor_graph import ENDPOINT_NAMES, NeighborGraph, neighbors_at

if TYPE_CHECKING:
    from .azimuth import AzimuthResult


def real_string(value: float) -> str:
    """
    Format a real number with at most two decimal places.

    Trailing zeros are dropped, so 2.50 becomes "2.5" and 3.00 becomes "3".
    Returns "ERROR" if value is NaN or infinity.
    """
    if math.isnan(value) or math.isinf(value):
        return "ERROR"
    text = f"{value:.2f}".rstrip('0').rstrip('.')
    # Don't return "-0" for values that round to zero
    return "0" if text == "-0" else text


def angle_string(angle: float) -> str:
    """Format an angle given in radians as degrees."""
    return f"{real_string(math.degrees(angle))} degrees"


def point_string(point: Point3D) -> str:
    """Format a point or vector as "(x,y,z)"."""
    return f"({real_string(point[0])},{real_string(point[1])},{real_string(point[2])})"


def plural_suffix(n: int) -> str:
    return "" if n == 1 else "s"


def dot_or_colon(n: int) -> str:
    """A colon when a list follows, otherwise a full stop."""
    return ":" if n > 0 else "."


def describe_id(element_id: Hashable) -> str:
    return f"<{element_id}>"


def format_neighbor_report(
    graph: NeighborGraph,
    element_id: Hashable,
    describe: Callable[[Hashable], str] = describe_id,
) -> str:
    """
    Describe the neighbors at both endpoints of an element.

    Args:
        graph: Graph from build_neighbor_graph()
        element_id: Element to describe
        describe: Turns an element id into display text

    Returns:
        Multi-line report, e.g.::

            <1> start point has 0 neighbours.
            <1> end point has 1 neighbour:
              <2>
    """
    desc = describe(element_id)
    if element_id in graph.missing_curve:
        return f"{desc}: No wall curve found."

    blocks: list[str] = []
    for i, name in enumerate(ENDPOINT_NAMES):
        ids = neighbors_at(graph, element_id, i)
        n = len(ids)
        lines = [f"{desc} {name} point has {n} neighbour{plural_suffix(n)}{dot_or_colon(n)}"]
        lines.extend(f"  {describe(other)}" for other in ids)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_azimuth_report(result: AzimuthResult) -> str:
    """Describe an AzimuthResult one angle per line."""
    lines = [
        f"Start point {point_string(result.start)}",
        f"End point {point_string(result.end)}",
    ]
    if result.position_angle is not None:
        lines.append(
            f"Angle between start and end point vectors = {angle_string(result.position_angle)}"
        )
    lines.append(f"Angle between points measured from X axis = {angle_string(result.angle_from_axis)}")
    lines.append(f"Angle around measured from X axis = {angle_string(result.angle_around)}")
    if result.facing is not None:
        lines.append(f"Angle pointing out of wall = {angle_string(result.facing)}")
    return "\n".join(lines)


def format_side_face_count(n: int) -> str:
    return f"{n} side face{plural_suffix(n)} found."
