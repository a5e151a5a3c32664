# io/search_logging.py
import json
import logging
import sys

from navgraph.domain.search.search_core import PathKind, SearchResult
from navgraph.domain.search.search_hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="navgraph", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class SearchLogging(NoopHooks):
    """
    Structured logs for path searches.

    Partial results and errors are always reported; per-search start/end
    records only when ``debug`` is set, and then only every ``sample_every``-th
    search.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self.searches = 0
        self.partial = 0
        self.errors = 0

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    def _sampled(self) -> bool:
        return self.debug and (self.searches % self.sample_every) == 0

    @staticmethod
    def _shape_result(result: SearchResult) -> dict:
        return {
            "kind": result.kind.value,
            "hops": max(0, len(result.indices) - 1),
            "end": result.indices[-1] if result.indices else None,
            "expanded": result.expanded,
        }

    # --------------------------------------------------------

    def search_start(self, *, engine: str, from_: int, to: int, vertices: int):
        self.searches += 1
        if self._sampled():
            self._emit("DEBUG", "search_start", engine=engine, src=from_, dst=to, vertices=vertices)

    def search_end(self, *, engine: str, from_: int, to: int, result: SearchResult, ms: float):
        shaped = self._shape_result(result)
        if result.kind is PathKind.PARTIAL:
            self.partial += 1
            self._emit("INFO", "search_partial", engine=engine, src=from_, dst=to, ms=ms, **shaped)
        elif self._sampled():
            self._emit("DEBUG", "search_end", engine=engine, src=from_, dst=to, ms=ms, **shaped)

    def error(self, *, engine: str, from_: int, to: int, exc: BaseException):
        self.errors += 1
        self._emit(
            "ERROR",
            "search_error",
            engine=engine,
            src=from_,
            dst=to,
            error=type(exc).__name__,
            detail=str(exc),
        )
