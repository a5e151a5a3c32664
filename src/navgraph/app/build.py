# navgraph/app/build.py
import time
from collections.abc import Mapping
from dataclasses import dataclass

from navgraph.app.protocols import SearchEngine
from navgraph.config.models import NavModel
from navgraph.domain.builders import grid_graph
from navgraph.domain.graph import Graph
from navgraph.domain.search.search_core import PathKind
from navgraph.domain.search.search_hooks import NoopHooks, SearchHooks
from navgraph.io.search_logging import SearchLogging
from navgraph.runtime.registries import make_search
from navgraph.sampling import query_pairs


@dataclass
class App:
    model: NavModel
    graph: Graph
    engine: SearchEngine
    hooks: SearchHooks

    def bench(self) -> dict:
        pairs = query_pairs(len(self.graph), self.model.bench.queries, self.model.bench.seed)
        full = partial = hops = 0
        t0 = time.perf_counter()
        for a, b in pairs:
            res = self.engine.search(self.graph, a, b)
            if res.kind is PathKind.FULL:
                full += 1
            else:
                partial += 1
            hops += len(res.indices) - 1
        return {
            "name": self.model.name,
            "engine": self.engine.name,
            "vertices": len(self.graph),
            "queries": len(pairs),
            "full": full,
            "partial": partial,
            "mean_hops": hops / len(pairs),
            "wall_ms": (time.perf_counter() - t0) * 1000,
        }


def build(cfg: NavModel | Mapping, *, use_logging: bool = True) -> App:
    model = cfg if isinstance(cfg, NavModel) else NavModel.model_validate(cfg)

    hooks = (
        SearchLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    graph = grid_graph(
        model.grid.width,
        model.grid.height,
        spacing=model.grid.spacing,
        diagonal=model.grid.diagonal,
    )
    engine = make_search(model.search, hooks=hooks)
    return App(model, graph, engine, hooks)
