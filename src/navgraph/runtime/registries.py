# runtime/registries.py
from collections.abc import Callable

from navgraph.app.protocols import SearchEngine
from navgraph.config.models import SearchAStarModel, SearchFrontierModel, SearchUnion
from navgraph.domain.search.search_astar import AStarSearch
from navgraph.domain.search.search_frontier import FrontierSearch
from navgraph.domain.search.search_hooks import SearchHooks

SearchFactory = Callable[[SearchUnion, dict], SearchEngine]

_search_registry: dict[str, SearchFactory] = {}


def register_search(kind: str):
    def deco(fn: SearchFactory):
        _search_registry[kind] = fn
        return fn

    return deco


def make_search(cfg: SearchUnion, *, hooks: SearchHooks | None = None) -> SearchEngine:
    try:
        factory = _search_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown search kind {cfg.kind!r}") from None
    return factory(cfg, {"hooks": hooks})


@register_search("astar")
def _make_astar(cfg: SearchAStarModel, deps):
    return AStarSearch(hooks=deps["hooks"])


@register_search("frontier")
def _make_frontier(cfg: SearchFrontierModel, deps):
    return FrontierSearch(hooks=deps["hooks"], max_expansions=cfg.max_expansions)
