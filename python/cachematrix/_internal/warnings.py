"""Warning categories emitted by cachematrix.

``CacheMatrixWarning`` is the umbrella category, so
``warnings.simplefilter("ignore", CacheMatrixWarning)`` silences the package
without touching unrelated UserWarnings.
"""


class CacheMatrixWarning(UserWarning):
    """Root of the cachematrix warning hierarchy."""


class CacheMatrixNumericWarning(CacheMatrixWarning):
    """A matrix handed to ``invert`` holds NaN or inf entries."""
