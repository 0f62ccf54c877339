from __future__ import annotations

from typing import Any

from .formatting import MatrixMixin


class CacheableMatrix(MatrixMixin):
    """A square matrix together with its (optionally) cached inverse.

    ``set`` replaces the matrix and drops the cached inverse. ``setinverse``
    stores whatever it is given: no check is made that the value really is the
    inverse of the current matrix, which lets callers (and tests) inject a
    known value and confirm that ``cache_solve`` returns it without recomputing.

    Constructing without a matrix stores ``None`` as a placeholder; inverting
    the placeholder raises ShapeError when the inverse is first requested.
    """

    def __init__(self, matrix: Any = None) -> None:
        self._value = matrix
        self._inverse: Any = None

    def set(self, matrix: Any) -> None:
        self._value = matrix
        self._inverse = None

    def get(self) -> Any:
        return self._value

    def setinverse(self, inverse: Any) -> None:
        self._inverse = inverse

    def getinverse(self) -> Any:
        return self._inverse

    def has_inverse(self) -> bool:
        return self._inverse is not None


def make_cache_matrix(matrix: Any = None) -> CacheableMatrix:
    return CacheableMatrix(matrix)
