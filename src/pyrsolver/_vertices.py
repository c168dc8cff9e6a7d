"""Base vertex placement and centroid computation."""

from __future__ import annotations

import math
from typing import NamedTuple, Sequence

import numpy as np
from jaxtyping import Float

from ._config import PolygonRadius, TriangleLayout
from ._formulas import PI, InvalidGeometryError, violates_triangle_inequality
from ._shapes import ShapeKind, ShapeType


class Point2D(NamedTuple):
    """A point in the local base frame."""
    x: float
    y: float


ORIGIN = Point2D(0.0, 0.0)


def polygon_vertices(
    n_sides: int, radius: float, center: Point2D = ORIGIN
) -> Float[np.ndarray, "n 2"]:
    """Vertices at angles i * 2pi/n on a circle of the given radius."""
    angles = np.arange(n_sides) * (2 * PI / n_sides)
    return np.stack(
        [center.x + radius * np.cos(angles), center.y + radius * np.sin(angles)],
        axis=1,
    )


def rectangle_vertices(
    width: float, depth: float, center: Point2D = ORIGIN
) -> Float[np.ndarray, "4 2"]:
    """Corners of an axis-aligned rectangle, counter-clockwise."""
    half = np.array([width / 2.0, depth / 2.0])
    signs = np.array([[1.0, 1.0], [-1.0, 1.0], [-1.0, -1.0], [1.0, -1.0]])
    return np.asarray(center) + signs * half


def equilateral_triangle_vertices(
    side_length: float, center: Point2D = ORIGIN
) -> Float[np.ndarray, "3 2"]:
    """
    Closed-form equilateral layout: apex on top, base edge below.

    Only the side length is used, so for isosceles and scalene bases the
    result is an approximation.
    """
    h = side_length * math.sqrt(3.0) / 2.0
    return np.array(
        [
            [center.x, center.y + h / 3.0],  # Top vertex
            [center.x - side_length / 2.0, center.y - h / 3.0],  # Bottom left
            [center.x + side_length / 2.0, center.y - h / 3.0],  # Bottom right
        ]
    )


def triangle_vertices_from_sides(
    sides: Sequence[float], center: Point2D = ORIGIN, strict: bool = True
) -> Float[np.ndarray, "3 2"]:
    """
    Place a triangle with the given sides, vertex mean at `center`.

    The first side lies along the x axis, the third vertex is found with the
    law of cosines.

    Raises:
        InvalidGeometryError: If strict and the sides cannot form a triangle.
            If not strict, every coordinate is NaN instead.
    """
    a, b, c = (float(s) for s in sides)
    if violates_triangle_inequality((a, b, c)):
        if not strict:
            return np.full((3, 2), np.nan)
        raise InvalidGeometryError(
            f"Sides ({a}, {b}, {c}) violate the triangle inequality"
        )

    # Side a runs from P0 to P1, side b from P1 to P2, side c from P2 to P0
    x = (a**2 + c**2 - b**2) / (2 * a)
    y = math.sqrt(max(c**2 - x**2, 0.0))
    points = np.array([[0.0, 0.0], [a, 0.0], [x, y]])
    return points - points.mean(axis=0) + np.asarray(center)


def base_vertices(
    shape_kind: ShapeKind,
    dimensions: Sequence[float],
    center: Point2D = ORIGIN,
    triangle_layout: TriangleLayout = TriangleLayout.EQUILATERAL,
    polygon_radius: PolygonRadius = PolygonRadius.SIDE_LENGTH,
    strict: bool = True,
) -> Float[np.ndarray, "n 2"]:
    """
    Vertices of the pyramid base in the local frame.

    Args:
        shape_kind: Classified base shape
        dimensions: Canonical base dimensions
        center: Where the base is centered
        triangle_layout: Vertex placement for triangles
        polygon_radius: Vertex placement for everything else
        strict: Raise for impossible triangles instead of returning NaN

    Returns:
        (n, 2) array of vertices
    """
    shape_type = shape_kind.shape_type

    if shape_type is ShapeType.TRIANGLE:
        if triangle_layout is TriangleLayout.LAW_OF_COSINES:
            return triangle_vertices_from_sides(dimensions[:3], center, strict=strict)
        return equilateral_triangle_vertices(dimensions[0], center)

    if polygon_radius is PolygonRadius.SIDE_LENGTH:
        return polygon_vertices(shape_kind.n_sides, dimensions[0], center)

    if shape_type is ShapeType.SQUARE:
        return rectangle_vertices(dimensions[0], dimensions[0], center)
    elif shape_type is ShapeType.RECTANGLE:
        return rectangle_vertices(dimensions[0], dimensions[1], center)
    elif shape_type is ShapeType.REGULAR_POLYGON:
        n = shape_kind.n_sides
        circumradius = dimensions[0] / (2 * math.sin(PI / n))
        return polygon_vertices(n, circumradius, center)
    raise ValueError(f"Unknown shape type: {shape_type}")


def centroid(vertices: Float[np.ndarray, "n 2"]) -> Point2D:
    """Arithmetic mean of the vertices (not the area-weighted centroid)."""
    mean = np.asarray(vertices, dtype=float).mean(axis=0)
    return Point2D(float(mean[0]), float(mean[1]))


def shoelace_area(vertices: Float[np.ndarray, "n 2"]) -> float:
    """Area enclosed by an ordered vertex loop."""
    x, y = np.asarray(vertices, dtype=float).T
    return float(0.5 * abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))
