"""Geometric properties of pyramids with triangular, rectangular and regular polygon bases."""

from ._config import PolygonRadius as PolygonRadius
from ._config import SolverConfig as SolverConfig
from ._config import SolverPreset as SolverPreset
from ._config import SurfaceAreaMode as SurfaceAreaMode
from ._config import TriangleLayout as TriangleLayout
from ._formulas import InvalidGeometryError as InvalidGeometryError
from ._input import UsageError as UsageError
from ._mesh import build_mesh as build_mesh
from ._report import format_report as format_report
from ._shapes import ShapeKind as ShapeKind
from ._shapes import ShapeType as ShapeType
from ._shapes import TriangleClass as TriangleClass
from ._shapes import classify as classify
from ._shapes import classify_triangle as classify_triangle
from ._solver import BaseSpec as BaseSpec
from ._solver import PyramidResult as PyramidResult
from ._solver import solve as solve
from ._vertices import Point2D as Point2D

__version__ = "1.1.0"

# Colors for pyramid visualization (RGB tuples, 0-255)
FACE_COLORS: tuple[tuple[int, int, int], ...] = (
    (255, 100, 100),
    (100, 255, 100),
    (100, 100, 255),
    (255, 255, 100),
    (255, 100, 255),
    (100, 255, 255),
)
