from typing import Protocol, runtime_checkable

from navgraph.domain.search.search_core import SearchResult


@runtime_checkable
class SearchEngine(Protocol):
    """
    Responsibilities:
      • Find a path between two vertex indices of a graph.
      • Fall back to a partial path toward the goal when it is unreachable.
    Paths are ordered start -> goal. Must not write to the graph.
    """

    name: str

    def search(self, graph, from_: int, to: int) -> SearchResult: ...
