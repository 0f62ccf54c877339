"""Memoizing wrapper around a square matrix that caches its inverse."""
from __future__ import annotations

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"

from typing import Any

import numpy as _np

from ._internal import formatting as _formatting
from ._internal.cacheable import CacheableMatrix, make_cache_matrix
from ._internal.errors import CacheMatrixError, ShapeError, SingularMatrixError
from ._internal.linalg import invert
from ._internal.linalg_cache import cache_solve, clear_solve_traces, last_solve_trace
from ._internal.selftest import check_cache
from ._internal.warnings import CacheMatrixNumericWarning, CacheMatrixWarning

_formatting.configure(np_module=_np, edge_items=4)


def set_print_options(*, edge_items: int | None = None) -> None:
    """Configure how CacheableMatrix values are printed.

    ``edge_items`` is the number of leading and trailing rows/columns shown
    before the output is elided with ``...``.
    """
    if edge_items is not None:
        _formatting.set_edge_items(edge_items)


def get_print_options() -> dict[str, Any]:
    return {"edge_items": _formatting.get_edge_items()}


__all__ = [
    "CacheableMatrix",
    "make_cache_matrix",
    "cache_solve",
    "invert",
    "check_cache",
    "last_solve_trace",
    "clear_solve_traces",
    "set_print_options",
    "get_print_options",
    "CacheMatrixError",
    "ShapeError",
    "SingularMatrixError",
    "CacheMatrixWarning",
    "CacheMatrixNumericWarning",
    "__version__",
]
