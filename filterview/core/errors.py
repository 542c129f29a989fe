# filterview/core/errors.py

"""
Exception types raised by the FilterView core.

All errors are synchronous contract violations reported to the caller; the core
performs pure computations, so nothing here is transient or retryable.
"""


class FilterViewError(Exception):
    """Base class for errors raised by the FilterView core."""
    pass


class InvalidParameterError(FilterViewError, ValueError):
    """A design, analysis or buffer parameter is outside its valid range."""
    pass


class DegenerateNormalizationError(FilterViewError, ArithmeticError):
    """The unnormalized coefficient sum is zero or not finite, so unity-gain normalization is impossible."""
    pass


class InsufficientHistoryError(FilterViewError, ValueError):
    """Fewer samples are available than the kernel has taps."""
    pass
