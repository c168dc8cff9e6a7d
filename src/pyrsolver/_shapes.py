"""Base shape classification.

Maps a side count and its side lengths onto one of the base shapes the solver
understands (triangle, square, rectangle, regular polygon) and, for triangles,
onto equilateral / isosceles / scalene.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence


class ShapeType(Enum):
    """Base shape family."""
    TRIANGLE = auto()
    SQUARE = auto()
    RECTANGLE = auto()
    REGULAR_POLYGON = auto()


class TriangleClass(Enum):
    """Triangle classification by side lengths."""
    EQUILATERAL = "equilateral"
    ISOSCELES = "isosceles"
    SCALENE = "scalene"


@dataclass(frozen=True)
class ShapeKind:
    """Result of base shape classification."""
    shape_type: ShapeType
    n_sides: int

    @property
    def name(self) -> str:
        """Human-readable shape name."""
        if self.shape_type is ShapeType.TRIANGLE:
            return "Triangle"
        elif self.shape_type is ShapeType.SQUARE:
            return "Square"
        elif self.shape_type is ShapeType.RECTANGLE:
            return "Rectangle"
        return f"Polygon with {self.n_sides} sides"


def sides_equal(a: float, b: float, tolerance: float = 0.0) -> bool:
    """Compare two side lengths.

    With tolerance == 0.0 this is exact floating point equality.
    """
    if tolerance == 0.0:
        return a == b
    return math.isclose(a, b, rel_tol=tolerance, abs_tol=0.0)


def accepted_dimension_counts(side_count: int) -> tuple[int, ...]:
    """Number of base dimensions accepted for a side count.

    The first entry is the canonical (reduced) representation.
    """
    if side_count == 3:
        return (3,)
    elif side_count == 4:
        return (2, 4)
    return (1, side_count)


def canonical_dimensions(
    side_count: int, dimensions: Sequence[float]
) -> tuple[float, ...]:
    """Reduce base dimensions to the canonical form for their shape family.

    Triangles keep all three sides, quadrilaterals keep two adjacent sides
    and regular polygons keep a single side.
    """
    if len(dimensions) == 0:
        raise ValueError("At least one base dimension is required")
    n_keep = accepted_dimension_counts(side_count)[0]
    if len(dimensions) < n_keep:
        raise ValueError(
            f"Expected at least {n_keep} dimensions for {side_count} sides, "
            f"got {len(dimensions)}"
        )
    return tuple(float(d) for d in dimensions[:n_keep])


def classify(
    side_count: int, dimensions: Sequence[float], tolerance: float = 0.0
) -> ShapeKind:
    """Classify the base shape of a pyramid.

    Args:
        side_count: Number of sides of the base (>= 3)
        dimensions: Base side lengths, canonical or full form
        tolerance: Relative tolerance for the square/rectangle tie-break.
            0.0 selects exact equality.

    Returns:
        ShapeKind for the base
    """
    if side_count < 3:
        raise ValueError(f"A pyramid base needs at least 3 sides, got {side_count}")
    dims = canonical_dimensions(side_count, dimensions)

    if side_count == 3:
        return ShapeKind(ShapeType.TRIANGLE, 3)
    if side_count == 4:
        if sides_equal(dims[0], dims[1], tolerance):
            return ShapeKind(ShapeType.SQUARE, 4)
        return ShapeKind(ShapeType.RECTANGLE, 4)
    return ShapeKind(ShapeType.REGULAR_POLYGON, side_count)


def classify_triangle(
    sides: Sequence[float], tolerance: float = 0.0
) -> TriangleClass:
    """Classify a triangle as equilateral, isosceles or scalene."""
    if len(sides) != 3:
        raise ValueError(f"A triangle has 3 sides, got {len(sides)}")
    a, b, c = sides
    ab = sides_equal(a, b, tolerance)
    bc = sides_equal(b, c, tolerance)
    ac = sides_equal(a, c, tolerance)

    if ab and bc:
        return TriangleClass.EQUILATERAL
    if ab or bc or ac:
        return TriangleClass.ISOSCELES
    return TriangleClass.SCALENE
