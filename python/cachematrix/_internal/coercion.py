from __future__ import annotations

from collections.abc import Sequence as _SequenceABC
from typing import Any

from .errors import ShapeError


def is_sequence_like(value: Any) -> bool:
    return isinstance(value, _SequenceABC) and not isinstance(value, (str, bytes, bytearray))


def _rows_cols(candidate: Any) -> tuple[int, int] | None:
    rows_attr = getattr(candidate, "rows", None)
    cols_attr = getattr(candidate, "cols", None)
    if callable(rows_attr) and callable(cols_attr):
        return int(rows_attr()), int(cols_attr())
    return None


def as_square_array(candidate: Any, *, np_module: Any) -> Any:
    """Coerce matrix-like input into a square 2D NumPy array.

    Accepted inputs:
    - NumPy arrays and anything ``np.asarray`` understands (nested sequences,
      objects implementing ``__array__``).
    - Matrix objects exposing ``rows()``, ``cols()`` and ``get(i, j)``; these
      are read element-wise.

    Raises ShapeError for missing, non-2D, empty or non-square input.
    """

    if candidate is None:
        raise ShapeError("no matrix has been set; call set() with a square matrix first")

    shape = _rows_cols(candidate)
    get_attr = getattr(candidate, "get", None)
    if shape is not None and callable(get_attr):
        rows, cols = shape
        if rows == 0 or cols == 0:
            raise ShapeError("matrix input must not be empty")
        array = np_module.asarray([[get_attr(i, j) for j in range(cols)] for i in range(rows)])
    else:
        try:
            array = np_module.asarray(candidate)
        except ValueError as exc:
            # Ragged nested sequences.
            raise ShapeError("matrix rows must all have the same length") from exc

    if array.ndim != 2:
        raise ShapeError(f"matrix input must be 2D, got {array.ndim} dimension(s)")
    if array.shape[0] != array.shape[1]:
        raise ShapeError(f"matrix input must be square (rows == columns), got shape {array.shape}")
    if array.shape[0] == 0:
        raise ShapeError("matrix input must not be empty")
    return array
