"""Elevation queries over vertex positions."""

from __future__ import annotations

import numpy as np


def min_elevation(positions: np.ndarray) -> float:
    """Return the smallest z coordinate."""
    return float(np.min(np.asarray(positions)[:, 2]))


def max_elevation(positions: np.ndarray) -> float:
    """Return the greatest z coordinate."""
    return float(np.max(np.asarray(positions)[:, 2]))


def elevation_range(positions: np.ndarray) -> tuple[float, float]:
    """Return (min, max) z coordinate."""
    return min_elevation(positions), max_elevation(positions)


def normalized_elevation(positions: np.ndarray) -> np.ndarray:
    """Map every vertex z into [0, 1] using the mesh's elevation range.

    Used for colour-by-elevation shading:

        t = (z - z_min) / (z_max - z_min)

    A flat mesh (z_max == z_min) maps to all zeros.

    Args:
        positions: Vertex positions, shape (n_vertices, 3).

    Returns:
        Normalized elevations, shape (n_vertices,).
    """
    z = np.asarray(positions)[:, 2]
    z_min, z_max = elevation_range(positions)
    span = z_max - z_min
    if span == 0:
        return np.zeros_like(z, dtype=float)
    return (z - z_min) / span


def validate_elevations(positions: np.ndarray) -> tuple[bool, str]:
    """Check that vertex positions are usable for upload.

    Checks that:
    - Positions have shape (n_vertices, 3) with at least one vertex
    - No NaN or infinite values

    Returns:
        Tuple of (is_valid, message).
    """
    positions = np.asarray(positions)

    if positions.ndim != 2 or positions.shape[1] != 3:
        return False, "positions must have shape (n_vertices, 3)"
    if len(positions) == 0:
        return False, "mesh has no vertices"
    if np.any(~np.isfinite(positions)):
        n_bad = int(np.sum(~np.isfinite(positions).all(axis=1)))
        return False, f"{n_bad} vertices contain NaN or infinite values"

    return True, "Elevation data is valid"
