"""Tests for base vertex placement and centroids."""

from __future__ import annotations

import math

import numpy as np
import pytest

from pyrsolver import (
    InvalidGeometryError,
    Point2D,
    PolygonRadius,
    ShapeKind,
    ShapeType,
    TriangleLayout,
)
from pyrsolver._formulas import base_area
from pyrsolver._vertices import (
    base_vertices,
    centroid,
    equilateral_triangle_vertices,
    polygon_vertices,
    rectangle_vertices,
    shoelace_area,
    triangle_vertices_from_sides,
)

from .conftest import REL_TOL, ZERO_TOL


def _edge_lengths(vertices: np.ndarray) -> np.ndarray:
    return np.linalg.norm(np.roll(vertices, -1, axis=0) - vertices, axis=1)


class TestPolygonVertices:
    """Vertices on a circle."""

    @pytest.mark.parametrize("n_sides", [4, 5, 6, 9])
    def test_radius_is_side_length(self, n_sides: int):
        vertices = polygon_vertices(n_sides, 2.5)
        assert vertices.shape == (n_sides, 2)
        np.testing.assert_allclose(np.linalg.norm(vertices, axis=1), 2.5)

    def test_first_vertex_on_positive_x_axis(self):
        vertices = polygon_vertices(6, 3.0, Point2D(1.0, -2.0))
        np.testing.assert_allclose(vertices[0], [4.0, -2.0])

    @pytest.mark.parametrize("n_sides", [4, 5, 6, 9])
    def test_centroid_is_center(self, n_sides: int):
        center = Point2D(3.0, -1.0)
        c = centroid(polygon_vertices(n_sides, 2.0, center))
        assert c.x == pytest.approx(center.x, abs=ZERO_TOL)
        assert c.y == pytest.approx(center.y, abs=ZERO_TOL)


class TestTriangleVertices:
    """Equilateral and law-of-cosines triangle layouts."""

    def test_equilateral_layout(self):
        side = 6.0
        h = side * math.sqrt(3) / 2
        vertices = equilateral_triangle_vertices(side)
        np.testing.assert_allclose(
            vertices, [[0.0, h / 3], [-3.0, -h / 3], [3.0, -h / 3]]
        )

    def test_equilateral_layout_centroid_offset(self):
        """The closed-form layout puts the vertex mean h/9 below the center."""
        side = 6.0
        h = side * math.sqrt(3) / 2
        c = centroid(equilateral_triangle_vertices(side))
        assert c.x == pytest.approx(0.0, abs=ZERO_TOL)
        assert c.y == pytest.approx(-h / 9, rel=REL_TOL)

    def test_equilateral_layout_ignores_other_sides(self):
        kind = ShapeKind(ShapeType.TRIANGLE, 3)
        scalene = base_vertices(kind, (6.0, 7.0, 8.0))
        np.testing.assert_allclose(scalene, equilateral_triangle_vertices(6.0))

    @pytest.mark.parametrize("sides", [(3.0, 4.0, 5.0), (6.0, 6.0, 6.0), (2.0, 3.0, 4.0), (5.0, 5.0, 8.0)])
    def test_law_of_cosines_edge_lengths(self, sides):
        vertices = triangle_vertices_from_sides(sides)
        np.testing.assert_allclose(_edge_lengths(vertices), sides, rtol=1e-12)

    def test_law_of_cosines_centered(self):
        c = centroid(triangle_vertices_from_sides((3.0, 4.0, 5.0), Point2D(1.0, 2.0)))
        assert c.x == pytest.approx(1.0, abs=ZERO_TOL)
        assert c.y == pytest.approx(2.0, abs=ZERO_TOL)

    def test_law_of_cosines_invalid_strict(self):
        with pytest.raises(InvalidGeometryError):
            triangle_vertices_from_sides((1.0, 1.0, 10.0))

    def test_law_of_cosines_invalid_non_strict(self):
        vertices = triangle_vertices_from_sides((1.0, 1.0, 10.0), strict=False)
        assert vertices.shape == (3, 2)
        assert np.all(np.isnan(vertices))


class TestTrueGeometry:
    """Vertices that reproduce the computed base area."""

    @pytest.mark.parametrize(
        "kind, dims",
        [
            (ShapeKind(ShapeType.TRIANGLE, 3), (3.0, 4.0, 5.0)),
            (ShapeKind(ShapeType.SQUARE, 4), (5.0, 5.0)),
            (ShapeKind(ShapeType.RECTANGLE, 4), (3.0, 4.0)),
            (ShapeKind(ShapeType.REGULAR_POLYGON, 5), (2.0,)),
            (ShapeKind(ShapeType.REGULAR_POLYGON, 6), (3.0,)),
            (ShapeKind(ShapeType.REGULAR_POLYGON, 12), (0.7,)),
        ],
    )
    def test_shoelace_matches_base_area(self, kind, dims):
        vertices = base_vertices(
            kind,
            dims,
            triangle_layout=TriangleLayout.LAW_OF_COSINES,
            polygon_radius=PolygonRadius.TRUE_GEOMETRY,
        )
        assert shoelace_area(vertices) == pytest.approx(base_area(kind, dims), rel=1e-9)

    def test_regular_polygon_edges_equal_side(self):
        kind = ShapeKind(ShapeType.REGULAR_POLYGON, 7)
        vertices = base_vertices(kind, (2.0,), polygon_radius=PolygonRadius.TRUE_GEOMETRY)
        np.testing.assert_allclose(_edge_lengths(vertices), 2.0)

    def test_rectangle_corners(self):
        vertices = rectangle_vertices(3.0, 4.0)
        np.testing.assert_allclose(np.abs(vertices), [[1.5, 2.0]] * 4)

    def test_simplified_square_is_not_true_square(self):
        """With radius = side length the square's diagonal is twice its side."""
        kind = ShapeKind(ShapeType.SQUARE, 4)
        vertices = base_vertices(kind, (5.0, 5.0))
        assert shoelace_area(vertices) == pytest.approx(50.0, rel=REL_TOL)


class TestCentroid:
    """Tests for centroid()."""

    def test_mean_of_vertices(self):
        c = centroid(np.array([[0.0, 0.0], [4.0, 0.0], [0.0, 3.0], [4.0, 3.0]]))
        assert c == Point2D(2.0, 1.5)

    def test_unweighted_mean(self):
        """Extra vertices along one edge pull the mean, unlike an area centroid."""
        c = centroid(np.array([[0.0, 0.0], [1.0, 0.0], [2.0, 0.0], [0.0, 2.0]]))
        assert c == Point2D(0.75, 0.5)
