"""Configuration for the pyramid solver."""

from __future__ import annotations

from enum import Enum

import jax_dataclasses as jdc


class SurfaceAreaMode(Enum):
    """Which length multiplies the half perimeter in the lateral-area term.

    SLANT_HEIGHT: base_area + 0.5 * perimeter * slant_height. Geometrically
                  correct for right pyramids with an apothem-based slant.

    SOLID_HEIGHT: base_area + 0.5 * perimeter * height. The lateral term
                  used by the original pyramid solver.
    """

    SLANT_HEIGHT = "slant_height"
    SOLID_HEIGHT = "solid_height"


class TriangleLayout(Enum):
    """How triangle base vertices are placed.

    EQUILATERAL: Closed-form equilateral layout from the first side only.
                 Approximate for isosceles and scalene bases.

    LAW_OF_COSINES: True placement from all three side lengths.
    """

    EQUILATERAL = "equilateral"
    LAW_OF_COSINES = "law_of_cosines"


class PolygonRadius(Enum):
    """Radius used when placing square, rectangle and n-gon vertices.

    SIDE_LENGTH: Vertices on a circle whose radius is the first side length.

    TRUE_GEOMETRY: n-gons on their circumradius, squares and rectangles on
                   their real corners.
    """

    SIDE_LENGTH = "side_length"
    TRUE_GEOMETRY = "true_geometry"


class SolverPreset(Enum):
    """Preset configurations for the solver.

    LEGACY: Source-compatible surface area term (solid height) and NaN
            propagation for impossible triangles. Base areas still use the
            shape-specific formulas.

    STANDARD: Default. Slant height in the surface area term and an error
              for impossible triangles. Vertex layout is unchanged.

    GEOMETRIC: True vertex geometry everywhere and a small relative
               tolerance when comparing side lengths.
    """

    LEGACY = "legacy"
    STANDARD = "standard"
    GEOMETRIC = "geometric"


@jdc.pytree_dataclass
class SolverConfig:
    """Unified configuration for the pyramid solver.

    Usage:
        # Use a preset
        config = SolverConfig.from_preset(SolverPreset.GEOMETRIC)

        # Customize from preset
        config = SolverConfig.from_preset(SolverPreset.LEGACY)
        config = jdc.replace(config, equality_tolerance=1e-9)
    """

    surface_area_mode: SurfaceAreaMode = SurfaceAreaMode.SLANT_HEIGHT
    """Length used in the lateral surface term."""

    triangle_layout: TriangleLayout = TriangleLayout.EQUILATERAL
    """Vertex placement for triangular bases."""

    polygon_radius: PolygonRadius = PolygonRadius.SIDE_LENGTH
    """Vertex placement for square, rectangular and n-gon bases."""

    equality_tolerance: float = 0.0
    """Relative tolerance when comparing side lengths.

    0.0 means exact floating point equality: a 4-sided base with sides that
    differ only by rounding is classified as a rectangle.
    """

    strict_geometry: bool = True
    """Raise InvalidGeometryError for sides violating the triangle inequality.

    If False, Heron's formula yields NaN and the NaN propagates into slant
    height, volume and surface area.
    """

    @classmethod
    def from_preset(cls, preset: SolverPreset) -> "SolverConfig":
        """Create config from a preset.

        Args:
            preset: Base preset to use

        Returns:
            SolverConfig with preset values
        """
        return jdc.replace(_PRESET_CONFIGS[preset])


# Preset definitions
_PRESET_CONFIGS: dict[SolverPreset, SolverConfig] = {
    SolverPreset.LEGACY: SolverConfig(
        surface_area_mode=SurfaceAreaMode.SOLID_HEIGHT,
        triangle_layout=TriangleLayout.EQUILATERAL,
        polygon_radius=PolygonRadius.SIDE_LENGTH,
        equality_tolerance=0.0,
        strict_geometry=False,
    ),
    SolverPreset.STANDARD: SolverConfig(),
    SolverPreset.GEOMETRIC: SolverConfig(
        surface_area_mode=SurfaceAreaMode.SLANT_HEIGHT,
        triangle_layout=TriangleLayout.LAW_OF_COSINES,
        polygon_radius=PolygonRadius.TRUE_GEOMETRY,
        equality_tolerance=1e-9,  # Absorbs rounding from parsed decimals
        strict_geometry=True,
    ),
}
