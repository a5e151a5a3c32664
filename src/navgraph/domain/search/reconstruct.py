# navgraph/domain/search/reconstruct.py
from collections.abc import Sequence

from navgraph.domain.entities.geometry import Vec3
from navgraph.domain.errors import InvalidIndexError


def indices_from_parents(parents: Sequence[int | None], end: int) -> list[int]:
    """Walk the parent chain back from ``end``; returned start -> end."""
    out = [end]
    seen = {end}
    cur = parents[end]
    while cur is not None:
        if cur in seen:
            # a parent loop can only come from corrupted scratch data
            raise RuntimeError(f"parent chain loops at vertex {cur}")
        seen.add(cur)
        out.append(cur)
        cur = parents[cur]
    out.reverse()
    return out


def positions_for(vertices, indices: Sequence[int]) -> list[Vec3]:
    n = len(vertices)
    out = []
    for i in indices:
        if not 0 <= i < n:
            raise InvalidIndexError(i)
        out.append(vertices[i].position)
    return out
