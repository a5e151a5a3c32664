# navgraph/domain/search/search_astar.py
import heapq

from navgraph.domain.entities.vertex import SearchScratch, VertexState
from navgraph.domain.search.reconstruct import indices_from_parents, positions_for
from navgraph.domain.search.search_core import (
    BaseSearch,
    PathKind,
    SearchResult,
    checked_neighbors,
    heuristic,
    step_cost,
)


class AStarSearch(BaseSearch):
    r"""
    Classical best-first (A*) search with one best-known score per vertex.

    The open set is a binary heap keyed by ``(f_score, index)``, which selects
    the same vertex a linear scan with first-index tie-break would. Entries are
    never removed from the heap; an entry is stale once its vertex is closed or
    its recorded f no longer matches the scratch table, and is skipped on pop.

    Step cost from ``u`` to ``v`` is :math:`\|p_u - p_v\|^2 \cdot \text{penalty}_v`,
    and the heuristic is the squared distance to the goal. Closed vertices are
    reopened when a cheaper route to them turns up.

    If the goal is never popped the vertex with the lowest f over the whole
    graph is taken as the end of a partial path.
    """

    name = "astar"

    def _run(self, vertices, from_: int, to: int) -> SearchResult:
        scratch = SearchScratch(len(vertices))
        goal = vertices[to].position

        scratch.open(from_, 0.0, heuristic(vertices[from_].position, goal), None)
        heap: list[tuple[float, int]] = [(scratch.f_score[from_], from_)]
        expanded = 0

        while heap:
            f, cur = heapq.heappop(heap)
            if scratch.state[cur] is not VertexState.OPEN or f != scratch.f_score[cur]:
                continue  # stale
            if cur == to:
                return self._finish(vertices, scratch, cur, PathKind.FULL, expanded)

            scratch.close(cur)
            expanded += 1
            # locals only; the scratch table is the only thing written below
            cur_pos, cur_g = vertices[cur].position, scratch.g_score[cur]
            for j in checked_neighbors(vertices, cur):
                nb = vertices[j]
                g = cur_g + step_cost(cur_pos, nb.position, nb.g_penalty)
                if g < scratch.g_score[j]:
                    f_j = g + heuristic(nb.position, goal)
                    scratch.open(j, g, f_j, cur)
                    heapq.heappush(heap, (f_j, j))

        end = scratch.best_f_index()
        return self._finish(vertices, scratch, end, PathKind.PARTIAL, expanded)

    @staticmethod
    def _finish(vertices, scratch, end, kind, expanded) -> SearchResult:
        idx = indices_from_parents(scratch.parent, end)
        return SearchResult(kind, idx, positions_for(vertices, idx), expanded)
