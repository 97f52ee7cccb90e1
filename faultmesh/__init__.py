"""faultmesh - procedural fault-formation terrain meshes.

Builds a regular triangulated grid, sculpts it with random fault planes,
and derives per-vertex normals and a wireframe edge list for rendering.

Example:
    >>> from faultmesh import TerrainBuilder
    >>> mesh = (
    ...     TerrainBuilder((-1.0, 1.0, -1.0, 1.0))
    ...     .set_divisions(50)
    ...     .set_seed(42)
    ...     .build()
    ... )
    >>> mesh.vertex_count
    2601
    >>> from faultmesh.io import save_obj
    >>> save_obj(mesh, "terrain.obj")
"""

from faultmesh.exceptions import (
    DataLoadError,
    FaultMeshError,
    InvalidDomain,
    MeshGenerationError,
    SamplingError,
)
from faultmesh.geometry import Domain
from faultmesh.mesh import (
    FaultConfig,
    TerrainBuilder,
    TerrainMesh,
    build_terrain,
)

__version__ = "0.1.0"

__all__ = [
    # Main API
    "TerrainBuilder",
    "build_terrain",
    "TerrainMesh",
    "Domain",
    "FaultConfig",
    # Exceptions
    "FaultMeshError",
    "InvalidDomain",
    "MeshGenerationError",
    "SamplingError",
    "DataLoadError",
]
