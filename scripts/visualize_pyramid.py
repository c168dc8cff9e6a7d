#!/usr/bin/env python3
"""Visualize a solved pyramid in the browser.

Usage:
    python scripts/visualize_pyramid.py --side-count 6 --dimensions 3 --height 5
    python scripts/visualize_pyramid.py --side-count 3 --dimensions 3 4 5 --height 2 --preset geometric
"""

from __future__ import annotations

import time
from typing import Literal

import tyro
import viser
from loguru import logger

from pyrsolver import (
    FACE_COLORS,
    BaseSpec,
    SolverConfig,
    SolverPreset,
    build_mesh,
    format_report,
    solve,
)


def main(
    side_count: int = 4,
    dimensions: tuple[float, ...] = (1.0, 1.0),
    height: float = 1.0,
    preset: Literal["legacy", "standard", "geometric"] = "geometric",
    opacity: float = 0.8,
    port: int = 8080,
) -> None:
    """Solve a pyramid and show its mesh, base vertices and centroid.

    Args:
        side_count: Number of sides of the base.
        dimensions: Base side lengths (canonical or full form).
        height: Pyramid height.
        preset: Solver preset. Only geometric gives vertices matching the numbers.
        opacity: Mesh opacity (0.1 to 1.0).
        port: Port for the viser web server.
    """
    spec = BaseSpec(side_count=side_count, dimensions=dimensions, height=height)
    result = solve(spec, SolverConfig.from_preset(SolverPreset(preset)))
    print(format_report(result))

    mesh = build_mesh(result)
    logger.info(f"Mesh volume {mesh.volume:.6f} vs computed volume {result.volume:.6f}")

    # Start viser server
    server = viser.ViserServer(port=port)
    server.scene.add_grid("/ground", width=2, height=2, cell_size=0.1)

    color = FACE_COLORS[side_count % len(FACE_COLORS)]
    rgb = (color[0] / 255.0, color[1] / 255.0, color[2] / 255.0)
    server.scene.add_mesh_simple(
        "/pyramid",
        vertices=mesh.vertices.astype("float32"),
        faces=mesh.faces.astype("uint32"),
        color=rgb,
        opacity=opacity,
    )

    marker_radius = 0.02 * max(result.dimensions)
    for i, (x, y) in enumerate(result.vertices):
        server.scene.add_icosphere(
            f"/vertices/{i}",
            radius=marker_radius,
            position=(float(x), float(y), 0.0),
            color=(1.0, 1.0, 1.0),
        )
    server.scene.add_icosphere(
        "/centroid",
        radius=marker_radius,
        position=(result.centroid.x, result.centroid.y, 0.0),
        color=(0.0, 0.0, 0.0),
    )

    print(f"Visualization ready at http://localhost:{port}")
    while True:
        time.sleep(1)


if __name__ == "__main__":
    tyro.cli(main)
