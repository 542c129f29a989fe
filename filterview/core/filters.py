# filterview/core/filters.py

"""
Application of FIR kernels to sample histories.

Tap 0 of a kernel always weights the newest sample, so a kernel produced by
`filterview.core.kernels` acts as a causal FIR filter:

    y[n] = sum_i kernel[i] * x[n - i]
"""

import logging
from typing import Sequence, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.signal import lfilter

from .errors import InsufficientHistoryError

logger = logging.getLogger(__name__)


def _as_kernel(kernel: ArrayLike) -> NDArray[np.float64]:
    taps = np.asarray(kernel, dtype=np.float64)
    if taps.ndim != 1 or taps.shape[0] == 0:
        raise ValueError("Kernel must be a non-empty 1D sequence of coefficients.")
    return taps


def apply_fir(kernel: ArrayLike, history: Union[Sequence[float], NDArray[np.float64]]) -> float:
    """
    Computes one filtered output from the most recent samples of a history.

    Args:
        kernel: FIR coefficients of length L; kernel[0] multiplies the newest sample.
        history: Sample history, oldest first. Must hold at least L samples;
                 only the last L are read.

    Returns:
        The filtered value sum(kernel[i] * history[-1 - i]) as a Python float.
        Non-finite inputs propagate into the result unchanged.

    Raises:
        InsufficientHistoryError: If the history holds fewer than L samples.
    """
    taps = _as_kernel(kernel)
    samples = np.asarray(history, dtype=np.float64)
    if samples.ndim != 1:
        raise ValueError("History must be a 1D sequence of samples.")
    if samples.shape[0] < taps.shape[0]:
        raise InsufficientHistoryError(
            f"Kernel has {taps.shape[0]} taps but only {samples.shape[0]} samples are available."
        )

    recent_newest_first = samples[-taps.shape[0]:][::-1]
    return float(np.dot(taps, recent_newest_first))


def fir_filter(kernel: ArrayLike, data: ArrayLike) -> NDArray[np.float64]:
    """
    Filters a whole series causally, as if it were streamed sample by sample.

    The history before the first sample is taken to be zero, so output[n] equals
    `apply_fir(kernel, history)` where history is data[:n + 1] preceded by
    L - 1 zeros.

    Args:
        kernel: FIR coefficients (tap 0 weights the newest sample).
        data: Input series (1D).

    Returns:
        Filtered series (float64), same length as `data`.
    """
    taps = _as_kernel(kernel)
    x = np.asarray(data, dtype=np.float64)
    if x.ndim != 1:
        raise ValueError("Input data must be a 1D array.")
    if x.size == 0:
        return np.zeros(0, dtype=np.float64)

    logger.debug(f"Applying {taps.shape[0]}-tap FIR filter to {x.shape[0]} samples.")
    y = lfilter(taps, [1.0], x)
    return np.asarray(y, dtype=np.float64)
