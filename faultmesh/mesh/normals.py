"""Per-vertex normal estimation."""

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)


def face_normals(positions: np.ndarray, faces: np.ndarray) -> np.ndarray:
    """Unnormalised face normals ``(b - a) x (c - a)``.

    The magnitude of each normal is twice the triangle area.
    """
    a = positions[faces[:, 0]]
    b = positions[faces[:, 1]]
    c = positions[faces[:, 2]]
    return np.cross(b - a, c - a)


def compute_vertex_normals(
    positions: np.ndarray,
    faces: np.ndarray,
) -> np.ndarray:
    """Compute area-weighted unit vertex normals.

    Face normals are summed into the accumulators of their three corners and
    the sums normalised. A vertex with no incident face (or whose incident
    faces cancel out) keeps a zero normal.

    Must be called after all elevation changes; the result reflects the
    positions passed in.

    Args:
        positions: Vertex positions, shape (n_vertices, 3).
        faces: Triangle vertex ids, shape (n_faces, 3).

    Returns:
        Normals, shape (n_vertices, 3).
    """
    positions = np.asarray(positions, dtype=float)
    faces = np.asarray(faces)

    normals = np.zeros_like(positions)
    fn = face_normals(positions, faces)
    for k in range(3):
        np.add.at(normals, faces[:, k], fn)

    lengths = np.linalg.norm(normals, axis=1)
    nonzero = lengths > 0
    normals[nonzero] /= lengths[nonzero, np.newaxis]

    n_zero = int(np.count_nonzero(~nonzero))
    if n_zero:
        logger.debug(f"{n_zero} vertices have a zero normal")
    return normals
