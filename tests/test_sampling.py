import numpy as np
import pytest

from faultmesh import SamplingError
from faultmesh.fields import ElevationSampler, sample_elevation


def test_nearest_at_vertices(sculpted_mesh):
    sampler = ElevationSampler(sculpted_mesh)
    positions = sculpted_mesh.positions
    np.testing.assert_array_equal(
        sampler.nearest(positions[:, :2]), positions[:, 2]
    )


def test_idw_at_vertex(sculpted_mesh):
    sampler = ElevationSampler(sculpted_mesh)
    x, y, z = sculpted_mesh.get_vertex_position(100)
    assert sampler.idw([x, y])[0] == pytest.approx(z, abs=1e-6)


def test_idw_between_vertices_is_bounded(sculpted_mesh):
    sampler = ElevationSampler(sculpted_mesh)
    values = sampler.idw([[0.03, -0.47], [0.51, 0.52]], k=4)
    assert values.shape == (2,)
    assert np.all(values >= sculpted_mesh.min_elevation())
    assert np.all(values <= sculpted_mesh.max_elevation())


def test_flat_terrain_samples_zero(flat_mesh):
    values = sample_elevation(flat_mesh, [[0.3, 0.3], [-0.9, 0.1]], method="idw")
    np.testing.assert_allclose(values, 0.0)


def test_outside_domain(flat_mesh):
    sampler = ElevationSampler(flat_mesh)
    with pytest.raises(SamplingError):
        sampler.nearest([[2.0, 0.0]])
    assert sampler.nearest([[2.0, 0.0]], clip=True)[0] == 0.0


def test_extra_columns_ignored(flat_mesh):
    sampler = ElevationSampler(flat_mesh)
    assert sampler([[0.0, 0.0, 99.0]])[0] == 0.0


def test_bad_input(flat_mesh):
    sampler = ElevationSampler(flat_mesh)
    with pytest.raises(SamplingError):
        sampler.nearest([1.0])
    with pytest.raises(SamplingError):
        sampler([[0.0, 0.0]], method="cubic")
