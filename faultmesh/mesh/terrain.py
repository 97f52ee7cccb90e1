"""Terrain mesh container."""

from __future__ import annotations

import numbers

import numpy as np

from faultmesh.geometry.domain import Domain
from faultmesh.mesh.elevation import max_elevation, min_elevation


def _read_only(array: np.ndarray) -> np.ndarray:
    view = array.view()
    view.flags.writeable = False
    return view


class TerrainBuffers:
    """Flat typed arrays laid out for GPU upload.

    Component ``k`` of vertex ``i`` lives at ``positions[i * 3 + k]``.

    Args:
        positions: float32 array of length 3 * n_vertices.
        normals: float32 array of length 3 * n_vertices.
        faces: uint32 array of length 3 * n_faces.
        edges: uint32 array of length 2 * n_edges.
    """

    def __init__(
        self,
        positions: np.ndarray,
        normals: np.ndarray,
        faces: np.ndarray,
        edges: np.ndarray,
    ):
        self.positions = positions
        self.normals = normals
        self.faces = faces
        self.edges = edges

    def __repr__(self) -> str:
        return (
            f"TerrainBuffers(n_positions={len(self.positions)}, "
            f"n_faces={len(self.faces)}, n_edges={len(self.edges)})"
        )


class TerrainMesh:
    """A sculpted heightfield triangle mesh.

    Instances are produced by ``TerrainBuilder.build()`` or ``build_terrain``
    and are read-only afterwards: array properties return non-writeable views.

    Args:
        domain: Rectangle covered by the grid.
        div: Number of cells along each axis.
        positions: Vertex positions, shape ((div+1)**2, 3).
        normals: Vertex normals, same shape as positions.
        faces: Triangle vertex ids, shape (2*div**2, 3).
        edges: Wireframe vertex id pairs, shape (3*n_faces, 2).
    """

    def __init__(
        self,
        domain: Domain,
        div: int,
        positions: np.ndarray,
        normals: np.ndarray,
        faces: np.ndarray,
        edges: np.ndarray,
    ):
        self._domain = domain
        self._div = div
        self._positions = np.asarray(positions, dtype=float)
        self._normals = np.asarray(normals, dtype=float)
        self._faces = np.asarray(faces, dtype=np.int64)
        self._edges = np.asarray(edges, dtype=np.int64)

        if self._positions.shape != self._normals.shape:
            raise ValueError(
                f"positions {self._positions.shape} and normals "
                f"{self._normals.shape} must have the same shape"
            )

    @property
    def domain(self) -> Domain:
        return self._domain

    @property
    def div(self) -> int:
        return self._div

    @property
    def vertex_count(self) -> int:
        return len(self._positions)

    @property
    def face_count(self) -> int:
        return len(self._faces)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def positions(self) -> np.ndarray:
        """Vertex positions, shape (vertex_count, 3), read-only."""
        return _read_only(self._positions)

    @property
    def normals(self) -> np.ndarray:
        """Vertex normals, shape (vertex_count, 3), read-only."""
        return _read_only(self._normals)

    def _check_vertex_id(self, i: int) -> int:
        if isinstance(i, bool) or not isinstance(i, numbers.Integral):
            raise TypeError(f"vertex id must be an integer, got {i!r}")
        if not 0 <= i < self.vertex_count:
            raise IndexError(
                f"vertex id {i} out of range [0, {self.vertex_count})"
            )
        return int(i)

    def get_vertex_position(self, i: int) -> tuple[float, float, float]:
        """Return the (x, y, z) position of vertex ``i``."""
        x, y, z = self._positions[self._check_vertex_id(i)]
        return (float(x), float(y), float(z))

    def get_vertex_normal(self, i: int) -> tuple[float, float, float]:
        """Return the (nx, ny, nz) normal of vertex ``i``."""
        nx, ny, nz = self._normals[self._check_vertex_id(i)]
        return (float(nx), float(ny), float(nz))

    def get_face_indices(self) -> np.ndarray:
        """Triangle vertex ids, shape (face_count, 3), read-only."""
        return _read_only(self._faces)

    def get_edge_indices(self) -> np.ndarray:
        """Wireframe vertex id pairs, shape (edge_count, 2), read-only."""
        return _read_only(self._edges)

    def min_elevation(self) -> float:
        return min_elevation(self._positions)

    def max_elevation(self) -> float:
        return max_elevation(self._positions)

    def to_buffers(self) -> TerrainBuffers:
        """Return flat float32/uint32 copies ready for upload."""
        return TerrainBuffers(
            positions=self._positions.astype(np.float32).ravel(),
            normals=self._normals.astype(np.float32).ravel(),
            faces=self._faces.astype(np.uint32).ravel(),
            edges=self._edges.astype(np.uint32).ravel(),
        )

    def get_mesh_info(self) -> dict:
        """Return information about the mesh.

        Returns:
            Dictionary with mesh configuration and statistics.
        """
        return {
            "div": self._div,
            "domain_bounds": self._domain.bounds,
            "n_vertices": self.vertex_count,
            "n_faces": self.face_count,
            "n_edges": self.edge_count,
            "min_elevation": self.min_elevation(),
            "max_elevation": self.max_elevation(),
        }

    def __repr__(self) -> str:
        return (
            f"TerrainMesh(div={self._div}, n_vertices={self.vertex_count}, "
            f"n_faces={self.face_count}, domain={self._domain!r})"
        )
