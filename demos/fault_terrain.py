"""
Fault Terrain Demo

Builds the two terrains used by the interactive viewer pages and exports
them for inspection in any OBJ viewer.

Usage:
    python fault_terrain.py [seed]

The script will:
1. Build a 50x50 terrain on [-1, 1] x [-1, 1]
2. Build a 90x90 terrain on [-50, 50] x [-50, 50]
3. Print mesh statistics and the elevation range used for shading
4. Save both meshes as OBJ and NPZ next to this script
"""

import logging
import sys
from pathlib import Path

from faultmesh import TerrainBuilder
from faultmesh.fields import ElevationSampler
from faultmesh.io import save_obj, save_terrain


TERRAINS = {
    "stagnant": (50, (-1.0, 1.0, -1.0, 1.0)),
    "mobile": (90, (-50.0, 50.0, -50.0, 50.0)),
}


def main(seed=None):
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")
    output_dir = Path(__file__).parent

    meshes = {}
    for name, (div, domain) in TERRAINS.items():
        print(f"Building '{name}' terrain...")
        builder = (
            TerrainBuilder(domain)
            .set_divisions(div)
            .set_seed(seed)
        )
        mesh = builder.build()
        record = builder.fault_record

        print(f"  Vertices: {mesh.vertex_count}")
        print(f"  Faces: {mesh.face_count}")
        print(f"  Edges: {mesh.edge_count}")
        print(f"  Fault cuts: {record.n_cuts} (H={record.roughness:.3f})")
        print(
            f"  Elevation: [{mesh.min_elevation():.3f}, "
            f"{mesh.max_elevation():.3f}]"
        )

        center = [mesh.domain.center]
        height = ElevationSampler(mesh).idw(center)[0]
        print(f"  Height at centre: {height:.3f}")

        save_obj(mesh, output_dir / f"terrain_{name}.obj")
        save_terrain(mesh, output_dir / f"terrain_{name}.npz")
        meshes[name] = mesh

    return meshes


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else None)
