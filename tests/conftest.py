import numpy as np
import pytest

from main import mixed_example, uniform_example
from flow_network import FlowNetwork


@pytest.fixture
def uniform():
    return uniform_example()


@pytest.fixture
def mixed():
    return mixed_example()


def random_network(seed: int, num_vertices: int = 7, num_roads: int = 16) -> FlowNetwork:
    """Random roads without self-loops; parallel and opposite roads allowed."""
    rng = np.random.RandomState(seed)
    g = FlowNetwork(num_vertices)
    while g.num_roads < num_roads:
        u, v = rng.randint(0, num_vertices, size=2)
        if u == v:
            continue
        g.add_edge(int(u), int(v), int(rng.randint(0, 16)))
    return g
