import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from navgraph.domain.entities.geometry import Pt, Vec3, to_vec3


class VertexState(Enum):
    NON_VISITED = "non_visited"
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class Vertex:
    """A positioned graph node.

    ``neighbors`` are directed: listing ``j`` here lets a search step from this
    vertex to ``j`` but says nothing about the way back. ``g_penalty`` scales
    the cost of stepping *onto* this vertex.
    """

    position: Vec3 = field(default_factory=Vec3)
    neighbors: list[int] = field(default_factory=list)
    g_penalty: float = 1.0
    payload: Any = None

    def __post_init__(self):
        self.position = to_vec3(self.position)
        if self.g_penalty < 0:
            raise ValueError(f"g_penalty must be >= 0, got {self.g_penalty}")

    @classmethod
    def at(cls, p: Pt, *, g_penalty: float = 1.0, payload: Any = None) -> "Vertex":
        return cls(position=to_vec3(p), g_penalty=g_penalty, payload=payload)


class SearchScratch:
    """
    Per-search bookkeeping, indexed in parallel with a graph's vertex list.
    A fresh table is created for each search so the graph itself is never written.
    """

    __slots__ = ("state", "g_score", "f_score", "parent")

    def __init__(self, n: int):
        self.state = [VertexState.NON_VISITED] * n
        self.g_score = [math.inf] * n
        self.f_score = [math.inf] * n
        self.parent: list[int | None] = [None] * n

    def __len__(self) -> int:
        return len(self.state)

    def open(self, i: int, g: float, f: float, parent: int | None) -> None:
        self.state[i] = VertexState.OPEN
        self.g_score[i], self.f_score[i], self.parent[i] = g, f, parent

    def close(self, i: int) -> None:
        self.state[i] = VertexState.CLOSED

    def best_f_index(self) -> int:
        # first index wins ties
        best, best_f = 0, self.f_score[0]
        for i, f in enumerate(self.f_score):
            if f < best_f:
                best, best_f = i, f
        return best
