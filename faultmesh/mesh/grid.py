"""Regular grid construction and triangulation."""

from __future__ import annotations

import logging
import numbers

import numpy as np

from faultmesh.exceptions import InvalidDomain
from faultmesh.geometry.domain import Domain

logger = logging.getLogger(__name__)


def validate_divisions(div: int) -> int:
    """Return ``div`` as an int, raising InvalidDomain unless it is >= 1."""
    if isinstance(div, bool) or not isinstance(div, numbers.Integral):
        raise InvalidDomain(f"div must be an integer, got {div!r}")
    if div < 1:
        raise InvalidDomain(f"div must be at least 1, got {div}")
    return int(div)


def vertex_id(i: int, j: int, div: int) -> int:
    """Return the id of the grid vertex at row ``i``, column ``j``."""
    return i * (div + 1) + j


def grid_positions(div: int, domain: Domain) -> np.ndarray:
    """Lay out the (div+1) x (div+1) vertex lattice at z = 0.

    Vertices are stored row by row: row ``i`` varies y, column ``j`` varies x,
    so vertex (i, j) sits at ``(min_x + j*dx, min_y + i*dy, 0)``.

    Args:
        div: Number of cells along each axis.
        domain: Rectangle covered by the grid.

    Returns:
        Float64 array of shape ((div+1)**2, 3).
    """
    div = validate_divisions(div)
    dx, dy = domain.spacing(div)
    steps = np.arange(div + 1, dtype=float)

    xs = domain.min_x + steps * dx
    ys = domain.min_y + steps * dy
    rows, cols = np.meshgrid(ys, xs, indexing="ij")

    positions = np.zeros(((div + 1) ** 2, 3))
    positions[:, 0] = cols.ravel()
    positions[:, 1] = rows.ravel()
    return positions


def grid_faces(div: int) -> np.ndarray:
    """Triangulate the lattice with a fixed diagonal per cell.

    Each cell with lower-left vertex ``index`` yields two counter-clockwise
    triangles sharing the diagonal ``index`` -> ``index + div + 2``:

        A = (index, index + 1, index + div + 1)
        B = (index + 1, index + div + 2, index + div + 1)

    Cells are emitted row-major with A before B.

    Returns:
        Integer array of shape (2 * div**2, 3).
    """
    div = validate_divisions(div)
    i, j = np.meshgrid(np.arange(div), np.arange(div), indexing="ij")
    index = (i * (div + 1) + j).ravel()

    tri_a = np.stack([index, index + 1, index + div + 1], axis=1)
    tri_b = np.stack([index + 1, index + div + 2, index + div + 1], axis=1)

    # Interleave so each cell contributes A then B
    faces = np.empty((2 * len(index), 3), dtype=np.int64)
    faces[0::2] = tri_a
    faces[1::2] = tri_b
    return faces


def build_grid(div: int, domain: Domain) -> tuple[np.ndarray, np.ndarray]:
    """Build the flat grid mesh.

    Args:
        div: Number of cells along each axis (>= 1).
        domain: Rectangle covered by the grid.

    Returns:
        Tuple of (positions, faces).

    Raises:
        InvalidDomain: If ``div`` is not a positive integer.
    """
    positions = grid_positions(div, domain)
    faces = grid_faces(div)
    logger.debug(
        f"Built {div}x{div} grid: {len(positions)} vertices, {len(faces)} faces"
    )
    return positions, faces
