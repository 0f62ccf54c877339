from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from .coercion import as_square_array
from .errors import SingularMatrixError
from .warnings import CacheMatrixNumericWarning


def _invert(matrix: Any, *, stacklevel: int) -> np.ndarray:
    array = as_square_array(matrix, np_module=np)

    if np.issubdtype(array.dtype, np.number) and not np.all(np.isfinite(array)):
        warnings.warn(
            "cachematrix: matrix contains NaN or inf entries; its inverse is not meaningful.",
            CacheMatrixNumericWarning,
            stacklevel=stacklevel,
        )

    try:
        return np.linalg.inv(array)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError(f"matrix of shape {array.shape} is singular: {exc}") from exc


def invert(matrix: Any) -> np.ndarray:
    """Return the inverse of a square matrix as a NumPy array.

    Raises ShapeError for missing/non-square input and SingularMatrixError when
    the matrix has no inverse. Non-finite entries only warn; NumPy decides what
    the inverse of such a matrix is.
    """
    return _invert(matrix, stacklevel=3)
