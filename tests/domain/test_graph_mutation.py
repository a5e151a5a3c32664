import copy

import pytest

from navgraph.domain.entities.geometry import Vec3
from navgraph.domain.entities.vertex import Vertex
from navgraph.domain.errors import CyclicReferenceError, InvalidIndexError
from navgraph.domain.graph import Graph
from navgraph.sampling import query_rng


def neighbors(g: Graph) -> list[list[int]]:
    return [list(v.neighbors) for v in g]


def random_graph(n: int, links: int, seed: int) -> Graph:
    rng = query_rng(seed, "graph")
    g = Graph(Vertex.at((float(i), 0.0, 0.0)) for i in range(n))
    for _ in range(links):
        a, b = (int(x) for x in rng.integers(0, n, size=2))
        if a != b:
            g.link_unidirect(a, b)
    return g


# ---------- Scenarios


def test_remove_vertex_from_triangle(triangle: Graph):
    removed = triangle.remove_vertex(0)
    assert removed.position == Vec3(0.0, 0.0, 0.0)
    assert len(triangle) == 2
    assert triangle.vertex(0).neighbors == [1]
    assert triangle.vertex(1).neighbors == [0]
    assert triangle.vertex(2) is None

    triangle.remove_vertex(0)
    assert triangle.vertex(0).neighbors == []
    assert triangle.vertex(1) is None


def test_insert_vertex_shifts_references(triangle: Graph):
    assert neighbors(triangle) == [[1, 2], [0, 2], [1, 0]]

    triangle.insert_vertex(0, Vertex.at((1.0, 1.0, 1.0)))

    assert neighbors(triangle) == [[], [2, 3], [1, 3], [2, 1]]


def test_insert_at_end_is_append(triangle: Graph):
    triangle.insert_vertex(3, Vertex.at((5.0, 5.0, 0.0)))
    assert len(triangle) == 4
    assert neighbors(triangle)[:3] == [[1, 2], [0, 2], [1, 0]]


def test_add_vertex_returns_index_and_keeps_others():
    g = Graph()
    assert g.add_vertex(Vertex.at((0.0, 0.0, 0.0))) == 0
    assert g.add_vertex(Vertex.at((1.0, 0.0, 0.0))) == 1
    g.link_bidirect(0, 1)
    assert g.add_vertex(Vertex.at((2.0, 0.0, 0.0))) == 2
    assert neighbors(g) == [[1], [0], []]


def test_pop_vertex_cleans_references(triangle: Graph):
    popped = triangle.pop_vertex()
    assert popped.position == Vec3(1.0, 1.0, 0.0)
    assert neighbors(triangle) == [[1], [0]]
    assert Graph().pop_vertex() is None


# ---------- Linking


def test_link_unidirect_is_idempotent_and_directed():
    g = Graph([Vertex(), Vertex()])
    g.link_unidirect(0, 1)
    g.link_unidirect(0, 1)
    assert neighbors(g) == [[1], []]


def test_link_from_missing_vertex_is_noop():
    g = Graph([Vertex()])
    g.link_unidirect(5, 0)
    g.link_unidirect(-1, 0)
    assert neighbors(g) == [[]]


def test_self_link_rejected_at_creation():
    g = Graph([Vertex(), Vertex()])
    with pytest.raises(CyclicReferenceError) as ei:
        g.link_unidirect(1, 1)
    assert ei.value.index == 1
    assert neighbors(g) == [[], []]


def test_validate_reports_corruption():
    g = Graph([Vertex(neighbors=[1]), Vertex(neighbors=[7])])
    with pytest.raises(InvalidIndexError) as ei:
        g.validate()
    assert ei.value.index == 7

    g.set_vertices([Vertex(neighbors=[0])])
    with pytest.raises(CyclicReferenceError):
        g.validate()


# ---------- Index shifting properties


def test_insert_then_remove_round_trips():
    g = random_graph(12, 40, seed=3)
    before = copy.deepcopy(neighbors(g))
    for k in (0, 5, 12):
        g.insert_vertex(k, Vertex.at((-1.0, -1.0, -1.0)))
        g.link_bidirect(k, (k + 1) % len(g))
        g.remove_vertex(k)
        assert neighbors(g) == before


def test_neighbor_indices_stay_in_range():
    g = random_graph(20, 60, seed=11)
    rng = query_rng(11, "ops")
    for step in range(200):
        n = len(g)
        if n > 2 and rng.random() < 0.5:
            g.remove_vertex(int(rng.integers(0, n)))
        else:
            k = int(rng.integers(0, n + 1))
            g.insert_vertex(k, Vertex.at((float(step), 1.0, 0.0)))
            other = int(rng.integers(0, n + 1))
            if other != k:
                g.link_bidirect(k, other)
        for i, v in enumerate(g):
            assert all(0 <= j < len(g) for j in v.neighbors)
            assert i not in v.neighbors
    g.validate()


def test_out_of_range_insert_and_remove_raise(triangle: Graph):
    with pytest.raises(InvalidIndexError):
        triangle.insert_vertex(4, Vertex())
    with pytest.raises(InvalidIndexError):
        triangle.remove_vertex(3)
    with pytest.raises(InvalidIndexError):
        triangle.remove_vertex(-1)
    assert len(triangle) == 3


# ---------- Closest vertex


def test_closest_vertex(triangle: Graph):
    assert triangle.get_closest_vertex_to((0.9, 0.2, 0.0)) == 1
    assert triangle.get_closest_vertex_to(Vec3(2.0, 2.0, 0.0)) == 2
    assert triangle.get_closest_vertex_to((-5.0, 0.0, 3.0)) == 0


def test_closest_vertex_first_wins_ties():
    g = Graph([Vertex.at((1.0, 0.0, 0.0)), Vertex.at((-1.0, 0.0, 0.0))])
    assert g.get_closest_vertex_to((0.0, 0.0, 0.0)) == 0
    assert Graph().get_closest_vertex_to((0.0, 0.0, 0.0)) is None


def test_negative_penalty_rejected():
    with pytest.raises(ValueError):
        Vertex.at((0.0, 0.0, 0.0), g_penalty=-1.0)
