"""Reader for saved terrain archives."""

from __future__ import annotations

from pathlib import Path

import numpy as np

from faultmesh.exceptions import DataLoadError
from faultmesh.geometry.domain import Domain
from faultmesh.mesh.terrain import TerrainMesh

_REQUIRED_KEYS = ("div", "domain", "positions", "normals", "faces", "edges")


def load_terrain(path: str | Path) -> TerrainMesh:
    """Load a mesh written by ``save_terrain``.

    Args:
        path: Path to ``.npz`` archive.

    Returns:
        TerrainMesh with the stored arrays.

    Raises:
        DataLoadError: If the file is missing, malformed or inconsistent.
    """
    path = Path(path)

    if not path.exists():
        raise DataLoadError(f"File not found: {path}")

    try:
        with np.load(path) as data:
            missing = [key for key in _REQUIRED_KEYS if key not in data.files]
            if missing:
                raise DataLoadError(
                    f"Missing arrays in {path}: {', '.join(missing)}"
                )

            div = int(data["div"])
            domain = Domain(*data["domain"].tolist())
            positions = data["positions"]
            normals = data["normals"]
            faces = data["faces"]
            edges = data["edges"]

        if div < 1:
            raise DataLoadError(f"div must be at least 1, found {div}")
        if len(positions) != (div + 1) ** 2:
            raise DataLoadError(
                f"Expected {(div + 1) ** 2} vertices for div={div}, "
                f"found {len(positions)}"
            )
        if len(faces) != 2 * div**2 or len(edges) != 3 * len(faces):
            raise DataLoadError(f"Face/edge counts do not match div={div}")
        for name, ids in (("faces", faces), ("edges", edges)):
            if ids.size and (ids.min() < 0 or ids.max() >= len(positions)):
                raise DataLoadError(
                    f"{name} reference vertex ids outside [0, {len(positions)})"
                )

        return TerrainMesh(domain, div, positions, normals, faces, edges)

    except Exception as e:
        if isinstance(e, DataLoadError):
            raise
        raise DataLoadError(f"Failed to read terrain archive {path}: {e}") from e
