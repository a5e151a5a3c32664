# navgraph/domain/search/search_core.py
import time
from dataclasses import dataclass, field
from enum import Enum

from navgraph.domain.entities.geometry import Vec3
from navgraph.domain.errors import CyclicReferenceError, EmptyGraphError, InvalidIndexError
from navgraph.domain.search.search_hooks import NoopHooks, SearchHooks


class PathKind(Enum):
    FULL = "full"  # connected path from start to goal
    PARTIAL = "partial"  # goal unreachable; best approximation toward it


@dataclass
class SearchResult:
    kind: PathKind
    indices: list[int]  # start -> goal
    positions: list[Vec3] = field(default_factory=list)  # same order as indices
    expanded: int = 0

    @property
    def is_full(self) -> bool:
        return self.kind is PathKind.FULL


def heuristic(a: Vec3, b: Vec3) -> float:
    # squared distance: cheap, and consistent with the squared step cost
    return a.distance_squared(b)


def step_cost(a: Vec3, b: Vec3, penalty: float) -> float:
    return a.distance_squared(b) * penalty


def checked_neighbors(vertices, i: int) -> list[int]:
    """Neighbors of ``vertices[i]``, rejecting self-links and dangling references."""
    n = len(vertices)
    nbrs = vertices[i].neighbors
    for j in nbrs:
        if j == i:
            raise CyclicReferenceError(i)
        if not 0 <= j < n:
            raise InvalidIndexError(j)
    return nbrs


class BaseSearch:
    """
    Shared entry point: argument checks, timing and hook reporting.
    Subclasses implement ``_run(vertices, from_, to)``.
    """

    name = "base"

    def __init__(self, hooks: SearchHooks | None = None):
        self.hooks = hooks or NoopHooks()

    def search(self, graph, from_: int, to: int) -> SearchResult:
        vertices = graph.vertices
        t0 = time.perf_counter()
        self.hooks.search_start(engine=self.name, from_=from_, to=to, vertices=len(vertices))
        try:
            if not vertices:
                raise EmptyGraphError()
            for i in (to, from_):
                if not 0 <= i < len(vertices):
                    raise InvalidIndexError(i)
            result = self._run(vertices, from_, to)
        except Exception as exc:
            self.hooks.error(engine=self.name, from_=from_, to=to, exc=exc)
            raise
        self.hooks.search_end(
            engine=self.name,
            from_=from_,
            to=to,
            result=result,
            ms=(time.perf_counter() - t0) * 1000,
        )
        return result

    def _run(self, vertices, from_: int, to: int) -> SearchResult:
        """Engine body. Indices are already checked and the graph is non-empty."""
        ...
