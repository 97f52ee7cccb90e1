"""I/O utilities for exporting and reloading terrain meshes."""

from faultmesh.io.readers import load_terrain
from faultmesh.io.writers import iter_obj_lines, save_obj, save_terrain

__all__ = [
    "iter_obj_lines",
    "load_terrain",
    "save_obj",
    "save_terrain",
]
