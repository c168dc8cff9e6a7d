"""Command-line interface: `pyrsolver SIDES [DIMS...] HEIGHT`."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal

import jax_dataclasses as jdc
import tyro
from loguru import logger

from ._config import SolverConfig, SolverPreset
from ._formulas import InvalidGeometryError
from ._input import UsageError, parse_arguments, read_base_spec
from ._mesh import save_mesh
from ._report import format_report
from ._solver import solve


def _configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO")


def main(
    tokens: tyro.conf.Positional[tuple[str, ...]] = (),
    preset: Literal["legacy", "standard", "geometric"] = "standard",
    equality_tolerance: float | None = None,
    json_path: Path | None = None,
    mesh_path: Path | None = None,
    verbose: bool = False,
) -> None:
    """Solve a pyramid from its side count, base dimensions and height.

    Args:
        tokens: SIDES [DIMS...] HEIGHT. Base dimensions are prompted for when
            they are missing from the command line or do not fit SIDES.
        preset: Solver preset (legacy keeps the solid-height surface area term
            and NaN for impossible triangles).
        equality_tolerance: Relative tolerance for comparing side lengths.
            Overrides the preset.
        json_path: Also write the result to this JSON file.
        mesh_path: Also export the pyramid mesh (STL, OBJ, PLY, etc.).
        verbose: Log intermediate values.

    Examples:
        pyrsolver 4 10
        pyrsolver 4 5 5 10
        pyrsolver 3 6 6 6 4 --preset geometric --mesh-path pyramid.stl
    """
    _configure_logging(verbose)
    from . import __version__

    logger.info(f"pyrsolver {__version__}")

    try:
        invocation = parse_arguments(tokens)
    except UsageError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        spec = read_base_spec(invocation)
    except EOFError:
        logger.error("Input ended before valid base dimensions were entered")
        sys.exit(1)

    config = SolverConfig.from_preset(SolverPreset(preset))
    if equality_tolerance is not None:
        config = jdc.replace(config, equality_tolerance=equality_tolerance)
    logger.debug(f"Solver config: {config}")

    try:
        result = solve(spec, config)
    except InvalidGeometryError as e:
        logger.error(str(e))
        sys.exit(1)

    print(format_report(result))

    if json_path is not None:
        result.save_json(json_path)
        logger.info(f"Exported result to {json_path}")
    if mesh_path is not None:
        save_mesh(result, mesh_path)


def entrypoint() -> None:
    """Console script entry point."""
    tyro.cli(main)
