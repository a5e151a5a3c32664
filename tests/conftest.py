import math

import pytest

from navgraph.domain.builders import grid_graph
from navgraph.domain.entities.vertex import Vertex
from navgraph.domain.graph import Graph

SQRT2 = math.sqrt(2.0)


@pytest.fixture
def triangle() -> Graph:
    g = Graph()
    g.add_vertex(Vertex.at((0.0, 0.0, 0.0)))
    g.add_vertex(Vertex.at((1.0, 0.0, 0.0)))
    g.add_vertex(Vertex.at((1.0, 1.0, 0.0)))
    g.link_bidirect(0, 1)
    g.link_bidirect(1, 2)
    g.link_bidirect(2, 0)
    return g


@pytest.fixture(scope="module")
def grid40() -> Graph:
    return grid_graph(40, 40)


@pytest.fixture
def line_with_island() -> Graph:
    """Vertices 0..4 on the x axis linked in a chain; vertex 5 at x=10 has no links."""
    g = Graph(Vertex.at((float(x), 0.0, 0.0)) for x in range(5))
    for i in range(4):
        g.link_bidirect(i, i + 1)
    g.add_vertex(Vertex.at((10.0, 0.0, 0.0)))
    return g


def assert_grid_path(graph: Graph, result, from_: int, to: int):
    assert result.positions, "path must not be empty"
    assert result.positions[0] == graph.vertex(from_).position
    assert result.positions[-1] == graph.vertex(to).position
    for a, b in zip(result.positions, result.positions[1:]):
        assert a.distance(b) <= SQRT2 + 1e-9


@pytest.fixture
def check_grid_path():
    return assert_grid_path
