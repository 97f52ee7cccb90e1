"""Terrain height lookup at arbitrary (x, y) using scipy.spatial.cKDTree."""

from __future__ import annotations

from typing import Literal

import numpy as np
from scipy.spatial import cKDTree

from faultmesh.exceptions import SamplingError
from faultmesh.mesh.terrain import TerrainMesh


class ElevationSampler:
    """Look up terrain elevation at scattered (x, y) points.

    Builds a cKDTree over the vertex xy lattice and answers queries with
    nearest-vertex or inverse distance weighted (IDW) estimates.

    Args:
        mesh: Terrain to sample.

    Example:
        >>> sampler = ElevationSampler(mesh)
        >>> sampler.nearest([[0.0, 0.0]])
        >>> sampler.idw([[0.1, -0.3], [0.5, 0.5]], k=4)
    """

    def __init__(self, mesh: TerrainMesh):
        positions = mesh.positions
        self._xy = np.array(positions[:, :2])
        self._z = np.array(positions[:, 2])
        self._domain = mesh.domain
        self._tree = cKDTree(self._xy)

    @property
    def n_points(self) -> int:
        """Number of vertices in the lookup tree."""
        return len(self._z)

    def _prepare(self, points: np.ndarray, clip: bool) -> np.ndarray:
        query = np.asarray(points, dtype=float)
        if query.ndim == 1:
            query = query.reshape(1, -1)
        if query.ndim != 2 or query.shape[1] < 2:
            raise SamplingError("points must have shape (m, 2)")

        # Extra columns (e.g. an existing z) are ignored
        query = query[:, :2]

        if clip:
            return query
        xmin, ymin, xmax, ymax = self._domain.bounds
        outside = (
            (query[:, 0] < xmin)
            | (query[:, 0] > xmax)
            | (query[:, 1] < ymin)
            | (query[:, 1] > ymax)
        )
        if np.any(outside):
            raise SamplingError(
                f"{int(outside.sum())} points lie outside the terrain domain"
            )
        return query

    def nearest(self, points: np.ndarray, clip: bool = False) -> np.ndarray:
        """Elevation of the closest vertex to each point.

        Args:
            points: Query coordinates, shape (m, 2).
            clip: If True, points outside the domain take the elevation of
                the closest edge vertex instead of raising.

        Returns:
            Elevations, shape (m,).

        Raises:
            SamplingError: If a point lies outside the domain and ``clip``
                is False.
        """
        query = self._prepare(points, clip)
        _, indices = self._tree.query(query, k=1)
        return self._z[indices]

    def idw(
        self,
        points: np.ndarray,
        k: int = 4,
        power: float = 2.0,
        eps: float = 1e-12,
        clip: bool = False,
    ) -> np.ndarray:
        """Inverse distance weighted elevation.

        Args:
            points: Query coordinates, shape (m, 2).
            k: Number of neighbouring vertices. Default: 4.
            power: Distance weighting exponent. Default: 2.0.
            eps: Guard against division by zero on exact vertex hits.
            clip: See ``nearest``.

        Returns:
            Elevations, shape (m,).
        """
        query = self._prepare(points, clip)
        k = min(k, self.n_points)
        distances, indices = self._tree.query(query, k=k)

        if k == 1:
            distances = distances.reshape(-1, 1)
            indices = indices.reshape(-1, 1)

        weights = 1.0 / (distances**power + eps)
        weights /= weights.sum(axis=1, keepdims=True)
        return (weights * self._z[indices]).sum(axis=1)

    def __call__(
        self,
        points: np.ndarray,
        method: Literal["nearest", "idw"] = "nearest",
        **kwargs,
    ) -> np.ndarray:
        if method == "nearest":
            return self.nearest(points, **kwargs)
        elif method == "idw":
            return self.idw(points, **kwargs)
        else:
            raise SamplingError(
                f"Unknown sampling method: {method}. "
                f"Supported methods: 'nearest', 'idw'"
            )


def sample_elevation(
    mesh: TerrainMesh,
    points: np.ndarray,
    method: Literal["nearest", "idw"] = "nearest",
    **kwargs,
) -> np.ndarray:
    """Convenience function for one-shot elevation sampling."""
    return ElevationSampler(mesh)(points, method=method, **kwargs)
