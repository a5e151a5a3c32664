# domain/search/search_hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def search_start(self, *, engine: str, from_: int, to: int, vertices: int): ...
    def search_end(self, *, engine: str, from_: int, to: int, result, ms: float): ...
    def error(self, *, engine: str, from_: int, to: int, exc: BaseException): ...


class NoopHooks:
    def search_start(self, **_):
        pass

    def search_end(self, **_):
        pass

    def error(self, **_):
        pass
