"""Terrain mesh export utilities."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import numpy as np

from faultmesh.mesh.terrain import TerrainMesh

logger = logging.getLogger(__name__)


def iter_obj_lines(mesh: TerrainMesh, normals: bool = True) -> Iterator[str]:
    """Yield Wavefront OBJ lines for the mesh.

    Emits ``v`` lines, then ``vn`` lines, then ``f`` lines with 1-based ids.
    Also useful for dumping buffers while debugging.

    Args:
        mesh: Terrain mesh.
        normals: If True, include ``vn`` lines and ``v//vn`` face references.
    """
    for x, y, z in mesh.positions:
        yield f"v {x:.9g} {y:.9g} {z:.9g}"
    if normals:
        for nx, ny, nz in mesh.normals:
            yield f"vn {nx:.9g} {ny:.9g} {nz:.9g}"

    for a, b, c in mesh.get_face_indices() + 1:
        if normals:
            yield f"f {a}//{a} {b}//{b} {c}//{c}"
        else:
            yield f"f {a} {b} {c}"


def save_obj(mesh: TerrainMesh, path: str | Path, normals: bool = True) -> None:
    """Write the mesh as a Wavefront OBJ file.

    Args:
        mesh: Terrain mesh.
        path: Output path (typically .obj extension).
        normals: If True, include vertex normals.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as f:
        f.write(f"# faultmesh terrain div={mesh.div}\n")
        for line in iter_obj_lines(mesh, normals=normals):
            f.write(line)
            f.write("\n")
    logger.info(f"Saved OBJ terrain: {path}")


def save_terrain(mesh: TerrainMesh, path: str | Path) -> None:
    """Save mesh arrays to a compressed ``.npz`` archive.

    The mesh can be loaded later using load_terrain().

    Example:
        >>> from faultmesh.io import save_terrain, load_terrain
        >>> save_terrain(mesh, "output/terrain.npz")
        >>> # Later:
        >>> mesh = load_terrain("output/terrain.npz")
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    domain = mesh.domain
    np.savez_compressed(
        path,
        div=np.array(mesh.div),
        domain=np.array(
            [domain.min_x, domain.max_x, domain.min_y, domain.max_y]
        ),
        positions=mesh.positions,
        normals=mesh.normals,
        faces=mesh.get_face_indices(),
        edges=mesh.get_edge_indices(),
    )
    logger.info(f"Saved terrain arrays: {path}")
