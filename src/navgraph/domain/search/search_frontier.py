# navgraph/domain/search/search_frontier.py
import heapq
import math
from dataclasses import dataclass

from navgraph.domain.search.reconstruct import positions_for
from navgraph.domain.search.search_core import (
    BaseSearch,
    PathKind,
    SearchResult,
    checked_neighbors,
    heuristic,
    step_cost,
)
from navgraph.domain.search.search_hooks import SearchHooks

DEFAULT_MAX_EXPANSIONS = 1000


@dataclass(frozen=True)
class PartialPath:
    """A path prefix from the start vertex plus its A* scores.

    Candidates rank by ``f_score`` and then by the remaining estimate
    ``f_score - g_score``; ``a < b`` means ``a`` is the better candidate, so a
    min-heap hands out the best one first.
    """

    vertices: tuple[int, ...]
    g_score: float = math.inf
    f_score: float = math.inf

    @property
    def remaining(self) -> float:
        if math.isinf(self.f_score):
            return 0.0
        return self.f_score - self.g_score

    @property
    def sort_key(self) -> tuple[float, float]:
        return (self.f_score, self.remaining)

    @property
    def last(self) -> int:
        return self.vertices[-1]

    def __lt__(self, other: "PartialPath") -> bool:
        return self.sort_key < other.sort_key

    def extend(self, index: int, g_score: float, f_score: float) -> "PartialPath":
        return PartialPath(self.vertices + (index,), g_score, f_score)


class FrontierSearch(BaseSearch):
    """
    Bounded search over path prefixes.

    Candidates are ranked by f, then by remaining estimate. The first goal
    candidate popped ends the search and is returned even when it does not
    outrank the best prefix seen so far: f can fall along a path under the
    squared heuristic, so a goal candidate is not required to improve on it.
    Until a goal is popped the best ranked candidate is kept as the partial
    answer.

    Every vertex is expanded at most once over the whole search, and at most
    ``max_expansions`` candidates are popped, so the cost ceiling does not
    depend on graph size. The result is not guaranteed to be the cheapest
    path. When the budget runs out the best candidate seen so far is returned.
    """

    name = "frontier"

    def __init__(self, hooks: SearchHooks | None = None, max_expansions: int = DEFAULT_MAX_EXPANSIONS):
        super().__init__(hooks)
        if max_expansions < 1:
            raise ValueError(f"max_expansions must be >= 1, got {max_expansions}")
        self.max_expansions = max_expansions

    def _run(self, vertices, from_: int, to: int) -> SearchResult:
        goal = vertices[to].position
        visited = [False] * len(vertices)
        seq = 0  # FIFO among equal keys
        start = PartialPath((from_,), 0.0, heuristic(vertices[from_].position, goal))
        heap: list[tuple[tuple[float, float], int, PartialPath]] = [(start.sort_key, seq, start)]
        best = PartialPath(())
        expanded = 0

        while heap and expanded < self.max_expansions:
            _, _, cur = heapq.heappop(heap)
            idx = cur.last
            if visited[idx]:
                continue
            expanded += 1

            # f is not monotone along a path under the squared heuristic, so a
            # goal candidate wins outright rather than competing on f
            if idx == to:
                best = cur
                break
            if cur < best:
                best = cur

            cur_pos = vertices[idx].position
            for j in checked_neighbors(vertices, idx):
                if visited[j]:
                    continue
                nb = vertices[j]
                g = cur.g_score + step_cost(cur_pos, nb.position, nb.g_penalty)
                nxt = cur.extend(j, g, g + heuristic(nb.position, goal))
                seq += 1
                heapq.heappush(heap, (nxt.sort_key, seq, nxt))
            visited[idx] = True

        indices = list(best.vertices)
        positions = positions_for(vertices, indices)
        kind = PathKind.FULL if positions and positions[-1] == goal else PathKind.PARTIAL
        return SearchResult(kind, indices, positions, expanded)
