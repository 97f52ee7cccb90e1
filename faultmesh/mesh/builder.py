"""High-level TerrainBuilder API for fault-formation terrain meshes."""

from __future__ import annotations

import logging

import numpy as np

from faultmesh.exceptions import FaultMeshError, MeshGenerationError
from faultmesh.geometry.domain import Domain
from faultmesh.mesh.edges import extract_edges
from faultmesh.mesh.elevation import validate_elevations
from faultmesh.mesh.fault import FaultConfig, FaultRecord, FaultSculptor
from faultmesh.mesh.grid import build_grid, validate_divisions
from faultmesh.mesh.normals import compute_vertex_normals
from faultmesh.mesh.terrain import TerrainMesh

logger = logging.getLogger(__name__)


class TerrainBuilder:
    """High-level API for building sculpted terrain meshes.

    Orchestrates the full generation workflow:
    1. Lay out and triangulate a regular grid over the domain
    2. Extract the wireframe edge list
    3. Sculpt elevations with random fault cuts
    4. Estimate vertex normals from the final geometry

    Args:
        domain: Domain object or (min_x, max_x, min_y, max_y) tuple.

    Example:
        >>> from faultmesh import TerrainBuilder
        >>> mesh = (
        ...     TerrainBuilder((-50, 50, -50, 50))
        ...     .set_divisions(90)
        ...     .set_seed(1234)
        ...     .build()
        ... )
    """

    def __init__(self, domain: Domain | tuple[float, float, float, float]):
        if isinstance(domain, Domain):
            self._domain = domain
        else:
            self._domain = Domain(*domain)

        # Configuration (set via builder methods)
        self._div: int | None = None
        self._fault_config = FaultConfig()
        self._seed: int | np.random.Generator | None = None
        self._sculpt = True

        # Set during build
        self._fault_record: FaultRecord | None = None

    @property
    def domain(self) -> Domain:
        """Return the grid domain."""
        return self._domain

    @property
    def is_configured(self) -> bool:
        """Return True if all required parameters are set."""
        return self._div is not None

    @property
    def fault_record(self) -> FaultRecord | None:
        """Draws of the last sculpting pass, or None if none has run."""
        return self._fault_record

    def set_divisions(self, div: int) -> TerrainBuilder:
        """Set number of grid cells along each axis.

        Raises:
            InvalidDomain: If ``div`` is not an integer >= 1.
        """
        self._div = validate_divisions(div)
        return self

    def set_fault_config(self, config: FaultConfig) -> TerrainBuilder:
        """Set fault sculpting parameters."""
        self._fault_config = config
        return self

    def set_seed(
        self, seed: int | np.random.Generator | None
    ) -> TerrainBuilder:
        """Set the random source used for sculpting.

        Args:
            seed: Integer seed, an existing Generator, or None for fresh
                OS entropy on every build. An integer seed restarts its
                stream on every build, so repeated builds are identical. A
                Generator is used as is and keeps advancing across builds.
        """
        self._seed = seed
        return self

    def _make_rng(self) -> np.random.Generator:
        if isinstance(self._seed, np.random.Generator):
            return self._seed
        return np.random.default_rng(self._seed)

    def disable_sculpting(self) -> TerrainBuilder:
        """Skip the fault pass; the terrain stays flat at z = 0."""
        self._sculpt = False
        return self

    def _validate_configuration(self) -> None:
        if self._div is None:
            raise FaultMeshError(
                "Grid divisions not set. Call set_divisions() first."
            )

    def build(self) -> TerrainMesh:
        """Build the terrain mesh.

        Returns:
            Fully constructed TerrainMesh.

        Raises:
            FaultMeshError: If required parameters are not set.
            MeshGenerationError: If sculpting produced unusable positions.
        """
        self._validate_configuration()
        div = self._div

        # Step 1: Grid vertices and triangles
        positions, faces = build_grid(div, self._domain)

        # Step 2: Wireframe edges (independent of elevation)
        edges = extract_edges(faces)
        logger.debug(f"Extracted {len(edges)} wireframe edges")

        # Step 3: Fault sculpting
        if self._sculpt:
            sculptor = FaultSculptor(self._fault_config, self._make_rng())
            self._fault_record = sculptor.sculpt(positions, self._domain, div)
        else:
            self._fault_record = None
            logger.debug("Sculpting disabled; terrain left flat")

        is_valid, message = validate_elevations(positions)
        if not is_valid:
            raise MeshGenerationError(f"Invalid terrain data: {message}")

        # Step 4: Normals from final positions
        normals = compute_vertex_normals(positions, faces)
        logger.debug("Computed vertex normals")

        mesh = TerrainMesh(self._domain, div, positions, normals, faces, edges)
        logger.info(
            f"Built terrain: {mesh.vertex_count} vertices, "
            f"{mesh.face_count} faces, elevation "
            f"[{mesh.min_elevation():.4f}, {mesh.max_elevation():.4f}]"
        )
        return mesh


def build_terrain(
    div: int,
    min_x: float,
    max_x: float,
    min_y: float,
    max_y: float,
    *,
    config: FaultConfig | None = None,
    seed: int | np.random.Generator | None = None,
    sculpt: bool = True,
) -> TerrainMesh:
    """Convenience function to build a terrain mesh in one call.

    Args:
        div: Number of grid cells along each axis.
        min_x, max_x, min_y, max_y: Domain rectangle.
        config: Fault sculpting parameters. Default: ``FaultConfig()``.
        seed: Integer seed or Generator for reproducible terrain.
        sculpt: If False, skip the fault pass.

    Returns:
        Fully constructed TerrainMesh.

    Raises:
        InvalidDomain: If ``div < 1`` or the rectangle is degenerate.
    """
    builder = TerrainBuilder(Domain(min_x, max_x, min_y, max_y))
    builder.set_divisions(div).set_seed(seed)
    if config is not None:
        builder.set_fault_config(config)
    if not sculpt:
        builder.disable_sculpting()
    return builder.build()
