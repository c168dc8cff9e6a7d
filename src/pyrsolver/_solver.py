"""Pyramid solver: from base specification to computed properties."""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from loguru import logger

from ._config import SolverConfig, SurfaceAreaMode
from ._formulas import base_area, base_height, perimeter, slant_height, volume
from ._shapes import (
    ShapeKind,
    ShapeType,
    TriangleClass,
    accepted_dimension_counts,
    canonical_dimensions,
    classify,
    classify_triangle,
)
from ._vertices import ORIGIN, Point2D, base_vertices, centroid


@dataclass(frozen=True)
class BaseSpec:
    """Validated solver input: side count, base dimensions and height."""

    side_count: int
    dimensions: tuple[float, ...]
    height: float

    def __post_init__(self) -> None:
        if self.side_count < 3:
            raise ValueError(
                f"A pyramid base needs at least 3 sides, got {self.side_count}"
            )
        if not (math.isfinite(self.height) and self.height > 0):
            raise ValueError(f"Height must be a positive number, got {self.height}")
        object.__setattr__(self, "height", float(self.height))

        dims = tuple(float(d) for d in self.dimensions)
        object.__setattr__(self, "dimensions", dims)

        accepted = accepted_dimension_counts(self.side_count)
        if len(dims) not in accepted:
            expected = " or ".join(str(n) for n in accepted)
            raise ValueError(
                f"Expected {expected} base dimensions for {self.side_count} sides, "
                f"got {len(dims)}"
            )
        for d in dims:
            if not (math.isfinite(d) and d > 0):
                raise ValueError(f"Base dimensions must be positive numbers, got {d}")

        # Full-length forms must still describe a rectangle or regular polygon
        if self.side_count == 4 and len(dims) == 4:
            if dims[0] != dims[2] or dims[1] != dims[3]:
                raise ValueError(
                    f"Opposite sides of a rectangular base must be equal, got {dims}"
                )
        elif self.side_count > 4 and len(dims) == self.side_count:
            if any(d != dims[0] for d in dims):
                raise ValueError(
                    f"All sides of a regular polygon base must be equal, got {dims}"
                )

    @property
    def canonical_dimensions(self) -> tuple[float, ...]:
        """Dimensions reduced to the canonical form of the shape family."""
        return canonical_dimensions(self.side_count, self.dimensions)


def _finite_or_none(value: float) -> float | None:
    """JSON has no NaN or infinity; those values are written as null."""
    value = float(value)
    return value if math.isfinite(value) else None


@dataclass(frozen=True)
class PyramidResult:
    """Computed pyramid properties."""

    shape_kind: ShapeKind
    triangle_class: TriangleClass | None  # None unless the base is a triangle
    dimensions: tuple[float, ...]  # Canonical base dimensions
    perimeter: float
    base_area: float
    base_height: float
    slant_height: float
    volume: float
    surface_area: float
    height: float
    vertices: np.ndarray = field(repr=False)  # (n, 2) base vertices
    centroid: Point2D = ORIGIN

    @property
    def shape_name(self) -> str:
        """Human-readable base shape name."""
        return self.shape_kind.name

    def to_dict(self) -> dict:
        """JSON-serializable representation. Non-finite values become None."""
        return {
            "shape": self.shape_name,
            "n_sides": self.shape_kind.n_sides,
            "triangle_class": (
                self.triangle_class.value if self.triangle_class is not None else None
            ),
            "dimensions": list(self.dimensions),
            "perimeter": _finite_or_none(self.perimeter),
            "base_area": _finite_or_none(self.base_area),
            "base_height": _finite_or_none(self.base_height),
            "slant_height": _finite_or_none(self.slant_height),
            "volume": _finite_or_none(self.volume),
            "surface_area": _finite_or_none(self.surface_area),
            "height": _finite_or_none(self.height),
            "vertices": [
                [_finite_or_none(x), _finite_or_none(y)]
                for x, y in np.asarray(self.vertices, dtype=float)
            ],
            "centroid": [_finite_or_none(self.centroid.x), _finite_or_none(self.centroid.y)],
        }

    def save_json(self, path: Path) -> None:
        """
        Save the result to a JSON file.

        Args:
            path: Output path (must have .json extension)

        Raises:
            ValueError: If path doesn't have .json extension
        """
        resolved_path = Path(path).resolve()
        if resolved_path.suffix.lower() != ".json":
            raise ValueError(
                f"Output file must have .json extension, got: '{resolved_path.suffix}'"
            )
        with resolved_path.open(mode="w") as f:
            json.dump(self.to_dict(), f, indent=2, allow_nan=False)


def surface_area(
    area: float,
    base_perimeter: float,
    slant: float,
    height: float,
    mode: SurfaceAreaMode = SurfaceAreaMode.SLANT_HEIGHT,
) -> float:
    """Total surface area: base area plus the lateral term selected by `mode`."""
    if mode is SurfaceAreaMode.SLANT_HEIGHT:
        return area + 0.5 * base_perimeter * slant
    elif mode is SurfaceAreaMode.SOLID_HEIGHT:
        return area + 0.5 * base_perimeter * height
    raise ValueError(f"Unknown surface area mode: {mode}")


def solve(
    spec: BaseSpec,
    config: SolverConfig | None = None,
    center: Point2D = ORIGIN,
) -> PyramidResult:
    """
    Compute all pyramid properties for a base specification.

    Args:
        spec: Validated base specification
        config: Solver configuration. Defaults to SolverConfig().
        center: Center of the local base frame

    Returns:
        PyramidResult with all computed properties

    Raises:
        InvalidGeometryError: If config.strict_geometry and the triangle
            sides violate the triangle inequality
    """
    if config is None:
        config = SolverConfig()

    dims = spec.canonical_dimensions
    kind = classify(spec.side_count, dims, tolerance=config.equality_tolerance)
    triangle_class = (
        classify_triangle(dims, tolerance=config.equality_tolerance)
        if kind.shape_type is ShapeType.TRIANGLE
        else None
    )
    logger.debug(f"Classified {spec.side_count}-sided base {dims} as {kind.name}")

    base_perimeter = perimeter(kind, dims)
    area = base_area(kind, dims, strict=config.strict_geometry)

    vertices = base_vertices(
        kind,
        dims,
        center=center,
        triangle_layout=config.triangle_layout,
        polygon_radius=config.polygon_radius,
        strict=config.strict_geometry,
    )
    base_centroid = centroid(vertices)

    pyramid_volume = volume(area, spec.height)

    leg = base_height(kind, dims, area)
    slant = slant_height(kind, dims, spec.height, area)
    total_area = surface_area(
        area, base_perimeter, slant, spec.height, mode=config.surface_area_mode
    )

    logger.debug(
        f"perimeter={base_perimeter:.6f}, base_area={area:.6f}, "
        f"slant_height={slant:.6f}, volume={pyramid_volume:.6f}"
    )

    return PyramidResult(
        shape_kind=kind,
        triangle_class=triangle_class,
        dimensions=dims,
        perimeter=base_perimeter,
        base_area=area,
        base_height=leg,
        slant_height=slant,
        volume=pyramid_volume,
        surface_area=total_area,
        height=spec.height,
        vertices=vertices,
        centroid=base_centroid,
    )
