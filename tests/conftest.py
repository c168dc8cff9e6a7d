"""Pytest configuration and fixtures for pyrsolver tests."""

from __future__ import annotations

import math
from dataclasses import dataclass

import pytest

from pyrsolver import BaseSpec, SolverConfig, SolverPreset


# =============================================================================
# TOLERANCE SETTINGS
# =============================================================================

# Relative tolerance for comparing computed real values
REL_TOL = 1e-9

# Absolute tolerance for coordinates expected to be zero
ZERO_TOL = 1e-12


# =============================================================================
# REFERENCE PYRAMIDS
# =============================================================================


@dataclass
class PyramidCase:
    """A pyramid with hand-computed reference values."""

    name: str
    spec: BaseSpec
    shape_name: str
    perimeter: float
    base_area: float
    volume: float


REFERENCE_CASES: list[PyramidCase] = [
    PyramidCase(
        name="square",
        spec=BaseSpec(side_count=4, dimensions=(5.0, 5.0), height=10.0),
        shape_name="Square",
        perimeter=20.0,
        base_area=25.0,
        volume=250.0 / 3.0,
    ),
    PyramidCase(
        name="equilateral_triangle",
        spec=BaseSpec(side_count=3, dimensions=(6.0, 6.0, 6.0), height=4.0),
        shape_name="Triangle",
        perimeter=18.0,
        base_area=9.0 * math.sqrt(3.0),
        volume=12.0 * math.sqrt(3.0),
    ),
    PyramidCase(
        name="hexagon",
        spec=BaseSpec(side_count=6, dimensions=(3.0,), height=5.0),
        shape_name="Polygon with 6 sides",
        perimeter=18.0,
        base_area=0.25 * 6 * 9 / math.tan(math.pi / 6),
        volume=0.25 * 6 * 9 / math.tan(math.pi / 6) * 5.0 / 3.0,
    ),
    PyramidCase(
        name="rectangle",
        spec=BaseSpec(side_count=4, dimensions=(3.0, 4.0), height=6.0),
        shape_name="Rectangle",
        perimeter=14.0,
        base_area=12.0,
        volume=24.0,
    ),
]


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def standard_config() -> SolverConfig:
    """Default solver configuration."""
    return SolverConfig.from_preset(SolverPreset.STANDARD)


@pytest.fixture
def legacy_config() -> SolverConfig:
    """Configuration with the solid-height surface area term and NaN propagation."""
    return SolverConfig.from_preset(SolverPreset.LEGACY)


@pytest.fixture
def geometric_config() -> SolverConfig:
    """Configuration with true vertex geometry."""
    return SolverConfig.from_preset(SolverPreset.GEOMETRIC)


@pytest.fixture
def scripted_prompt():
    """Build a prompt function that replays lines and records prompts shown."""

    def factory(lines: list[str]):
        remaining = list(lines)
        shown: list[str] = []

        def prompt(message: str) -> str:
            shown.append(message)
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        prompt.shown = shown
        return prompt

    return factory
