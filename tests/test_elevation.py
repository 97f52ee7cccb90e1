import numpy as np

from faultmesh.mesh.elevation import (
    elevation_range,
    max_elevation,
    min_elevation,
    normalized_elevation,
    validate_elevations,
)


def _positions(z):
    z = np.asarray(z, dtype=float)
    return np.column_stack([np.arange(len(z)), np.zeros(len(z)), z])


def test_min_max():
    positions = _positions([0.5, -1.25, 3.0, 0.0])
    assert min_elevation(positions) == -1.25
    assert max_elevation(positions) == 3.0
    assert elevation_range(positions) == (-1.25, 3.0)


def test_normalized_elevation():
    t = normalized_elevation(_positions([-1.0, 0.0, 3.0]))
    np.testing.assert_allclose(t, [0.0, 0.25, 1.0])


def test_normalized_elevation_flat():
    t = normalized_elevation(_positions([2.0, 2.0, 2.0]))
    np.testing.assert_array_equal(t, [0.0, 0.0, 0.0])


def test_validate_elevations():
    assert validate_elevations(_positions([0.0, 1.0]))[0]

    is_valid, message = validate_elevations(_positions([0.0, np.nan, np.inf]))
    assert not is_valid
    assert "2 vertices" in message

    assert not validate_elevations(np.zeros((0, 3)))[0]
    assert not validate_elevations(np.zeros((4, 2)))[0]
