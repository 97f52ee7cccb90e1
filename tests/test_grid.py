import numpy as np
import pytest

from faultmesh import Domain, InvalidDomain
from faultmesh.mesh.grid import build_grid, grid_faces, grid_positions, vertex_id


@pytest.mark.parametrize("div", [1, 2, 3, 7, 16])
def test_grid_counts(div):
    positions, faces = build_grid(div, Domain(0.0, 3.0, -2.0, 5.0))
    assert positions.shape == ((div + 1) ** 2, 3)
    assert faces.shape == (2 * div**2, 3)


def test_grid_indexing_law():
    div = 4
    domain = Domain(-3.0, 5.0, 10.0, 12.0)
    positions = grid_positions(div, domain)
    dx = (5.0 - -3.0) / div
    dy = (12.0 - 10.0) / div
    for i in range(div + 1):
        for j in range(div + 1):
            x, y, z = positions[vertex_id(i, j, div)]
            assert x == pytest.approx(-3.0 + j * dx)
            assert y == pytest.approx(10.0 + i * dy)
            assert z == 0.0


def test_grid_corners_hit_domain_bounds():
    positions = grid_positions(5, Domain(-1.0, 1.0, -2.0, 2.0))
    assert tuple(positions[0]) == pytest.approx((-1.0, -2.0, 0.0))
    assert tuple(positions[-1]) == pytest.approx((1.0, 2.0, 0.0))


def test_flat_grid_has_zero_elevation():
    positions, _ = build_grid(9, Domain(-1.0, 1.0, -1.0, 1.0))
    assert np.all(positions[:, 2] == 0.0)


def test_single_cell_triangles():
    faces = grid_faces(1)
    np.testing.assert_array_equal(faces, [[0, 1, 2], [1, 3, 2]])


def test_cell_diagonal_and_order():
    div = 3
    faces = grid_faces(div)
    # Cell (1, 2): index = 1 * 4 + 2 = 6, emitted as the 6th cell (row-major)
    cell = 1 * div + 2
    index = vertex_id(1, 2, div)
    np.testing.assert_array_equal(
        faces[2 * cell], [index, index + 1, index + div + 1]
    )
    np.testing.assert_array_equal(
        faces[2 * cell + 1], [index + 1, index + div + 2, index + div + 1]
    )


def test_faces_reference_valid_vertices():
    div = 6
    faces = grid_faces(div)
    assert faces.min() == 0
    assert faces.max() == (div + 1) ** 2 - 1


@pytest.mark.parametrize("div", [0, -1, 1.5, True, "3"])
def test_invalid_divisions(div):
    with pytest.raises(InvalidDomain):
        build_grid(div, Domain(-1.0, 1.0, -1.0, 1.0))


def test_numpy_integer_divisions_accepted():
    positions, faces = build_grid(np.int64(2), Domain(-1.0, 1.0, -1.0, 1.0))
    assert len(positions) == 9
    assert len(faces) == 8
