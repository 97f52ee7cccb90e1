"""Wireframe edge extraction."""

from __future__ import annotations

import numpy as np


def extract_edges(faces: np.ndarray) -> np.ndarray:
    """Return the wireframe edge list for a triangle list.

    Each face (a, b, c) contributes (a, b), (b, c), (c, a) in that order.
    Edges shared by two triangles are listed once per triangle; this is a
    line-rendering list, not a topological edge set.

    Args:
        faces: Integer array of shape (n_faces, 3).

    Returns:
        Integer array of shape (3 * n_faces, 2).
    """
    faces = np.asarray(faces)
    if faces.ndim != 2 or faces.shape[1] != 3:
        raise ValueError("faces must have shape (n_faces, 3)")

    rolled = np.roll(faces, -1, axis=1)
    edges = np.stack([faces, rolled], axis=2)
    return edges.reshape(-1, 2)
