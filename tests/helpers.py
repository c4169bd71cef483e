"""
Shared test helpers for building_geometry tests.

This module contains mock classes and utilities used across multiple test files.
"""
from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

from building_geometry.models.curves import Curve, Line
from building_geometry.models.types import Point3D


@dataclass
class MockLinearElement:
    """Mock element for testing without a modeling host.

    Satisfies LinearElementLike Protocol from models.elements.
    """

    element_id: Hashable
    location: Curve | None
    flipped: bool | None = None


def wall(element_id: Hashable, start: Point3D, end: Point3D, flipped: bool | None = None) -> MockLinearElement:
    """A straight element from start to end."""
    return MockLinearElement(element_id, Line.bound(start, end), flipped)
