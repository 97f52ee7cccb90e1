import numpy as np
import pytest

from faultmesh import Domain, TerrainBuilder


@pytest.fixture
def unit_domain():
    return Domain(-1.0, 1.0, -1.0, 1.0)


@pytest.fixture
def flat_mesh(unit_domain):
    return (
        TerrainBuilder(unit_domain)
        .set_divisions(2)
        .disable_sculpting()
        .build()
    )


@pytest.fixture
def sculpted_mesh(unit_domain):
    return TerrainBuilder(unit_domain).set_divisions(20).set_seed(1234).build()


@pytest.fixture
def rng():
    return np.random.default_rng(2024)
