"""Terrain mesh generation."""

from faultmesh.mesh.builder import TerrainBuilder, build_terrain
from faultmesh.mesh.edges import extract_edges
from faultmesh.mesh.elevation import (
    elevation_range,
    max_elevation,
    min_elevation,
    normalized_elevation,
    validate_elevations,
)
from faultmesh.mesh.fault import (
    FaultConfig,
    FaultCut,
    FaultRecord,
    FaultSculptor,
    apply_fault_cuts,
    apply_fault_cuts_inplace,
    displacement_schedule,
    draw_cuts,
)
from faultmesh.mesh.grid import build_grid, grid_faces, grid_positions, vertex_id
from faultmesh.mesh.normals import compute_vertex_normals, face_normals
from faultmesh.mesh.terrain import TerrainBuffers, TerrainMesh

__all__ = [
    "TerrainBuilder",
    "build_terrain",
    "TerrainMesh",
    "TerrainBuffers",
    "build_grid",
    "grid_positions",
    "grid_faces",
    "vertex_id",
    "extract_edges",
    "FaultConfig",
    "FaultCut",
    "FaultRecord",
    "FaultSculptor",
    "apply_fault_cuts",
    "apply_fault_cuts_inplace",
    "displacement_schedule",
    "draw_cuts",
    "compute_vertex_normals",
    "face_normals",
    "min_elevation",
    "max_elevation",
    "elevation_range",
    "normalized_elevation",
    "validate_elevations",
]
