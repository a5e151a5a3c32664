# navgraph/domain/graph.py
from collections.abc import Iterable, Iterator

import numpy as np

from navgraph.domain.entities.geometry import Pt, to_vec3
from navgraph.domain.entities.vertex import Vertex
from navgraph.domain.errors import CyclicReferenceError, InvalidIndexError
from navgraph.domain.search.search_astar import AStarSearch
from navgraph.domain.search.search_core import SearchResult


class Graph:
    """
    Ordered, index-addressed collection of vertices with directed adjacency.

    Mutations keep neighbor indices consistent: inserting or removing a vertex
    renumbers every reference held by the other vertices. Linking is permissive
    (a link from a vertex that does not exist is ignored), with the exception
    of self-links, which are rejected right away.
    """

    def __init__(self, vertices: Iterable[Vertex] | None = None):
        self._vertices: list[Vertex] = list(vertices) if vertices is not None else []

    # --------------- Read side -----------------------------

    @property
    def vertices(self) -> list[Vertex]:
        return self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)

    def has_index(self, index: int) -> bool:
        return 0 <= index < len(self._vertices)

    def vertex(self, index: int) -> Vertex | None:
        return self._vertices[index] if self.has_index(index) else None

    def get_closest_vertex_to(self, point: Pt) -> int | None:
        """Index of the vertex nearest to ``point``; the lowest index wins ties."""
        if not self._vertices:
            return None
        p = np.asarray(to_vec3(point).as_tuple(), dtype=float)
        pos = np.array([v.position.as_tuple() for v in self._vertices], dtype=float)
        d2 = ((pos - p) ** 2).sum(axis=1)
        return int(np.argmin(d2))  # argmin returns the first minimum

    def validate(self) -> None:
        n = len(self._vertices)
        for i, v in enumerate(self._vertices):
            for j in v.neighbors:
                if j == i:
                    raise CyclicReferenceError(i)
                if not 0 <= j < n:
                    raise InvalidIndexError(j)

    # --------------- Write side ----------------------------

    def set_vertices(self, vertices: Iterable[Vertex]) -> None:
        # links are taken as-is; call validate() to check them
        self._vertices = list(vertices)

    def add_vertex(self, vertex: Vertex) -> int:
        self._vertices.append(vertex)
        return len(self._vertices) - 1

    def insert_vertex(self, index: int, vertex: Vertex) -> None:
        if not 0 <= index <= len(self._vertices):
            raise InvalidIndexError(index)
        for other in self._vertices:
            other.neighbors[:] = [j + 1 if j >= index else j for j in other.neighbors]
        # the new vertex's own links are already expressed in post-insert numbering
        self._vertices.insert(index, vertex)

    def remove_vertex(self, index: int) -> Vertex:
        if not self.has_index(index):
            raise InvalidIndexError(index)
        removed = self._vertices.pop(index)
        for other in self._vertices:
            other.neighbors[:] = [j - 1 if j > index else j for j in other.neighbors if j != index]
        return removed

    def pop_vertex(self) -> Vertex | None:
        if not self._vertices:
            return None
        return self.remove_vertex(len(self._vertices) - 1)

    def link_unidirect(self, a: int, b: int) -> None:
        if not self.has_index(a):
            return
        if a == b:
            raise CyclicReferenceError(a)
        nbrs = self._vertices[a].neighbors
        if b not in nbrs:
            nbrs.append(b)

    def link_bidirect(self, a: int, b: int) -> None:
        self.link_unidirect(a, b)
        self.link_unidirect(b, a)

    # --------------- Queries -------------------------------

    def search(self, from_: int, to: int, engine=None) -> SearchResult:
        return (engine or AStarSearch()).search(self, from_, to)

    def find_path(self, start: Pt, goal: Pt, engine=None) -> SearchResult:
        """Snap two world points onto the graph and search between them."""
        a, b = self.get_closest_vertex_to(start), self.get_closest_vertex_to(goal)
        if a is None or b is None:
            # empty graph; let the engine raise its usual error
            a = b = 0
        return self.search(a, b, engine)
