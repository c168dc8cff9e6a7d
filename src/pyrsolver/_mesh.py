"""Triangle mesh of a solved pyramid."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import trimesh
from loguru import logger

from ._solver import PyramidResult


def pyramid_points(result: PyramidResult) -> np.ndarray:
    """(n + 1, 3) points: base vertices at z=0 and the apex above the centroid."""
    base = np.asarray(result.vertices, dtype=float)
    base_3d = np.column_stack([base, np.zeros(len(base))])
    apex = np.array([[result.centroid.x, result.centroid.y, result.height]])
    return np.vstack([base_3d, apex])


def build_mesh(result: PyramidResult) -> trimesh.Trimesh:
    """
    Build a watertight triangle mesh of the pyramid.

    The mesh is the convex hull of the base vertices and the apex, so it is
    only as accurate as the vertex layout used to solve the pyramid. With true
    vertex geometry its volume equals `result.volume`.

    Raises:
        ValueError: If the vertices are not finite
    """
    points = pyramid_points(result)
    if not np.all(np.isfinite(points)):
        raise ValueError(f"Cannot build a mesh for {result.shape_name}: non-finite vertices")

    mesh = trimesh.convex.convex_hull(points)
    logger.debug(
        f"Pyramid mesh: {len(mesh.vertices)} vertices, {len(mesh.faces)} faces, "
        f"volume={mesh.volume:.6f}"
    )
    return mesh


def save_mesh(result: PyramidResult, path: Path) -> None:
    """Export the pyramid mesh; the file format follows the path suffix."""
    mesh = build_mesh(result)
    mesh.export(Path(path))
    logger.info(f"Exported pyramid mesh to {path}")
