"""Perimeter, base area and slant height formulas.

All functions take canonical base dimensions (see `canonical_dimensions`):
three sides for a triangle, two for a square or rectangle, one for a regular
polygon.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from loguru import logger

from ._shapes import ShapeKind, ShapeType

PI = math.pi


class InvalidGeometryError(ValueError):
    """Side lengths that cannot form the requested base shape."""


def perimeter(shape_kind: ShapeKind, dimensions: Sequence[float]) -> float:
    """Perimeter of the pyramid base."""
    shape_type = shape_kind.shape_type
    if shape_type is ShapeType.TRIANGLE:
        return float(dimensions[0] + dimensions[1] + dimensions[2])
    elif shape_type is ShapeType.SQUARE:
        return float(4 * dimensions[0])
    elif shape_type is ShapeType.RECTANGLE:
        return float(2 * (dimensions[0] + dimensions[1]))
    elif shape_type is ShapeType.REGULAR_POLYGON:
        return float(shape_kind.n_sides * dimensions[0])
    raise ValueError(f"Unknown shape type: {shape_type}")


def violates_triangle_inequality(sides: Sequence[float]) -> bool:
    """True if the sides cannot form a non-degenerate triangle."""
    a, b, c = sorted(sides)
    return a + b <= c


def triangle_area(sides: Sequence[float], strict: bool = True) -> float:
    """
    Area of a triangle from its three sides (Heron's formula).

    Args:
        sides: The three side lengths
        strict: If True, raise for sides violating the triangle inequality.
            If False, the result is NaN for such sides.

    Returns:
        Triangle area

    Raises:
        InvalidGeometryError: If strict and the sides cannot form a triangle
    """
    a, b, c = (float(s) for s in sides)
    if strict and violates_triangle_inequality((a, b, c)):
        raise InvalidGeometryError(
            f"Sides ({a}, {b}, {c}) violate the triangle inequality"
        )

    s = (a + b + c) / 2
    product = s * (s - a) * (s - b) * (s - c)
    if strict:
        # Rounding can push nearly degenerate triangles slightly negative
        return math.sqrt(max(product, 0.0))

    with np.errstate(invalid="ignore"):
        area = float(np.sqrt(product))
    if math.isnan(area):
        logger.debug(f"Heron's formula produced NaN for sides ({a}, {b}, {c})")
    return area


def polygon_area(n_sides: int, side_length: float) -> float:
    """Area of a regular polygon: n * a^2 * cot(pi / n) / 4."""
    return 0.25 * n_sides * side_length**2 * (1 / math.tan(PI / n_sides))


def base_area(
    shape_kind: ShapeKind, dimensions: Sequence[float], strict: bool = True
) -> float:
    """Area of the pyramid base."""
    shape_type = shape_kind.shape_type
    if shape_type is ShapeType.TRIANGLE:
        return triangle_area(dimensions[:3], strict=strict)
    elif shape_type is ShapeType.SQUARE:
        return float(dimensions[0] ** 2)
    elif shape_type is ShapeType.RECTANGLE:
        return float(dimensions[0] * dimensions[1])
    elif shape_type is ShapeType.REGULAR_POLYGON:
        return polygon_area(shape_kind.n_sides, dimensions[0])
    raise ValueError(f"Unknown shape type: {shape_type}")


def apothem(n_sides: int, side_length: float) -> float:
    """Distance from a regular polygon's center to the midpoint of a side."""
    return side_length / (2 * math.tan(PI / n_sides))


def base_height(
    shape_kind: ShapeKind, dimensions: Sequence[float], area: float
) -> float:
    """
    Horizontal leg of the right triangle whose hypotenuse is the slant height.

    Args:
        shape_kind: Classified base shape
        dimensions: Canonical base dimensions
        area: Base area (only used for triangles)

    Returns:
        Base height (half altitude, half width or apothem)
    """
    shape_type = shape_kind.shape_type
    if shape_type is ShapeType.TRIANGLE:
        # Half of the altitude onto the first side
        return (2.0 * area / dimensions[0]) / 2.0
    elif shape_type is ShapeType.SQUARE:
        return dimensions[0] / 2.0
    elif shape_type is ShapeType.RECTANGLE:
        # Sum of both half widths, kept as in the original solver
        return dimensions[0] / 2.0 + dimensions[1] / 2.0
    elif shape_type is ShapeType.REGULAR_POLYGON:
        return apothem(shape_kind.n_sides, dimensions[0])
    raise ValueError(f"Unknown shape type: {shape_type}")


def slant_height(
    shape_kind: ShapeKind,
    dimensions: Sequence[float],
    height: float,
    area: float,
) -> float:
    """Distance from the apex to the midpoint of a base edge."""
    leg = base_height(shape_kind, dimensions, area)
    return math.sqrt(height**2 + leg**2)


def volume(area: float, height: float) -> float:
    """Pyramid volume: base_area * height / 3."""
    return area * height / 3.0
