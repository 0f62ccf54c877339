"""cachematrix exception types.

Both concrete errors also derive from the builtin/NumPy exception a caller
would catch without knowing about this package (ValueError for bad shapes,
numpy.linalg.LinAlgError for singular input).
"""

import numpy as np


class CacheMatrixError(Exception):
    """Base class for errors raised by cachematrix."""


class ShapeError(CacheMatrixError, ValueError):
    """The matrix is missing, not two-dimensional, empty, or not square."""


class SingularMatrixError(CacheMatrixError, np.linalg.LinAlgError):
    """The matrix has no inverse."""
