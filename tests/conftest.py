import matplotlib

matplotlib.use('Agg')

import matplotlib.pyplot as plt
import pytest

from colonization import SpaceColonization, Vector


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


@pytest.fixture
def chain_engine():
    """One root at the origin and one default attractor 10 units along x."""
    engine = SpaceColonization(400.0, 1.0, max_length=100, max_branches=10, move_distance=1.0)
    engine.add_root_node(Vector(0.0, 0.0))
    engine.add_default_attractor(Vector(10.0, 0.0), payload='target')
    return engine
