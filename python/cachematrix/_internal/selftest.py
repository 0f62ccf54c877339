from __future__ import annotations

import sys
from typing import Any, TextIO

import numpy as np

from .cacheable import CacheableMatrix
from .linalg_cache import cache_solve

_SENTINEL = -1


def _random_matrix(size: int, rng: Any) -> np.ndarray:
    return rng.uniform(0.0, 1.0, size=(size, size))


def check_cache(size: int = 4, *, seed: int | None = None, stream: TextIO | None = None) -> bool:
    """Exercise CacheableMatrix/cache_solve on a random matrix.

    Progress and failures are written to ``stream`` (default stderr). Returns
    True when every check passes and False at the first failure. A ``size``
    below 1 is rejected with ValueError before anything is generated.
    """

    size = int(size)
    if size < 1:
        raise ValueError(f"check_cache size must be >= 1, got {size}")

    out = sys.stderr if stream is None else stream

    def report(message: str) -> None:
        print(message, file=out)

    rng = np.random.default_rng(seed)
    m1 = _random_matrix(size, rng)
    report("Generated matrix:")
    report(str(m1))

    cm = CacheableMatrix(m1)
    if cm.get() is not m1:
        report("ERROR: matrix not set in wrapper.")
        return False

    if cm.getinverse() is not None:
        report("ERROR: the cache was already set.")
        return False

    expected = np.linalg.inv(m1)
    inv = cache_solve(cm)
    report("Inverse:")
    report(str(inv))

    if not np.allclose(expected, inv):
        report("ERROR: the inverse was not correct.")
        return False

    if cm.getinverse() is None:
        report("ERROR: the inverse was not cached.")
        return False

    again = cache_solve(cm)
    if again is not inv or not np.allclose(expected, again):
        report("ERROR: the second call did not return the cached inverse.")
        return False

    # A sentinel that is not the inverse must come back unchanged on a hit.
    cm.setinverse(_SENTINEL)
    if cache_solve(cm) is not _SENTINEL:
        report("ERROR: the cache was not used.")
        return False

    return True
