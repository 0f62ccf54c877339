from __future__ import annotations

import time
from typing import Any, Callable

from .linalg import _invert, invert
from .solve_observability import default_instance


def cache_solve(x: Any, *, solver: Callable[[Any], Any] | None = None) -> Any:
    """Return the inverse of ``x.get()``, computing it only on a cache miss.

    On a hit the cached value is returned unchanged and ``x`` is not touched.
    On a miss the inverse is computed with ``solver`` (default: ``invert``) and
    stored with ``x.setinverse``. Solver errors propagate and leave the cache empty.
    """

    obs = default_instance()
    inv = x.getinverse()
    if inv is not None:
        obs.record("cache_solve", "hit", result=inv)
        return inv

    start = time.perf_counter()
    if solver is None:
        # Called directly so numeric warnings point at the cache_solve caller.
        solve = invert
        inv = _invert(x.get(), stacklevel=3)
    else:
        solve = solver
        inv = solve(x.get())
    elapsed = time.perf_counter() - start
    x.setinverse(inv)
    obs.record("cache_solve", "miss", result=inv, solver=solve, elapsed=elapsed)
    return inv


def last_solve_trace(outcome: str | None = None) -> dict[str, Any] | None:
    return default_instance().last(outcome)


def clear_solve_traces() -> None:
    default_instance().clear()
