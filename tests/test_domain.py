import numpy as np
import pytest
from shapely.geometry import LineString, Polygon

from faultmesh import Domain, InvalidDomain


def test_domain_properties():
    domain = Domain(-2.0, 4.0, 1.0, 3.0)
    assert domain.width == 6.0
    assert domain.height == 2.0
    assert domain.area == pytest.approx(12.0)
    assert domain.center == pytest.approx((1.0, 2.0))
    assert domain.bounds == (-2.0, 1.0, 4.0, 3.0)
    assert domain.spacing(4) == (1.5, 0.5)


@pytest.mark.parametrize(
    "bounds",
    [
        (1.0, 1.0, -1.0, 1.0),
        (1.0, -1.0, -1.0, 1.0),
        (-1.0, 1.0, 2.0, 2.0),
        (-1.0, 1.0, 3.0, 2.0),
        (float("nan"), 1.0, -1.0, 1.0),
        (-1.0, float("inf"), -1.0, 1.0),
    ],
)
def test_degenerate_domain(bounds):
    with pytest.raises(InvalidDomain):
        Domain(*bounds)


def test_from_bounds_uses_shapely_order():
    domain = Domain.from_bounds((0.0, 10.0, 5.0, 20.0))
    assert domain == Domain(0.0, 5.0, 10.0, 20.0)


def test_from_shapely_envelope():
    polygon = Polygon([(0, 35), (140, 0), (280, 0), (201, 130), (0, 100)])
    domain = Domain.from_shapely(polygon)
    assert domain.bounds == (0.0, 0.0, 280.0, 130.0)


def test_from_shapely_rejects_flat_geometry():
    with pytest.raises(InvalidDomain):
        Domain.from_shapely(LineString([(0, 0), (5, 0)]))
    with pytest.raises(InvalidDomain):
        Domain.from_shapely(Polygon())


def test_contains_includes_boundary():
    domain = Domain(-1.0, 1.0, -1.0, 1.0)
    assert domain.contains(0.0, 0.0)
    assert domain.contains(1.0, -1.0)
    assert not domain.contains(1.01, 0.0)


def test_sample_point_inside(rng):
    domain = Domain(-50.0, 50.0, 10.0, 20.0)
    for _ in range(100):
        assert domain.contains(*domain.sample_point(rng))


def test_sample_point_draw_order():
    domain = Domain(0.0, 2.0, 10.0, 14.0)
    draws = np.random.default_rng(5).random(2)
    x, y = domain.sample_point(np.random.default_rng(5))
    assert x == draws[0] * 2.0 + 0.0
    assert y == draws[1] * 4.0 + 10.0


def test_overflowing_extent():
    with pytest.raises(InvalidDomain):
        Domain(-1e308, 1e308, -1.0, 1.0)
    with pytest.raises(InvalidDomain):
        Domain(-1.0, 1.0, -1e308, 1e308)
