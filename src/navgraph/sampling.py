# navgraph/sampling.py
from zlib import crc32

import numpy as np


def query_rng(seed: int, stream: str = "queries") -> np.random.Generator:
    """Deterministic generator for a named stream, independent of call order."""
    ss = np.random.SeedSequence([seed & 0xFFFFFFFF, crc32(stream.encode("utf-8"))])
    return np.random.Generator(np.random.PCG64(ss))


def query_pairs(n_vertices: int, n: int, seed: int = 0) -> list[tuple[int, int]]:
    if n_vertices < 1:
        raise ValueError("need at least one vertex to sample queries")
    rng = query_rng(seed)
    src = rng.integers(0, n_vertices, size=n)
    dst = rng.integers(0, n_vertices, size=n)
    return [(int(a), int(b)) for a, b in zip(src, dst)]
