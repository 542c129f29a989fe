# filterview/core/spectrum.py

"""
Centered magnitude spectra for display.

`analyze_spectrum` runs the fixed pipeline:

1. Size adaptation: zero-pad at the end, or keep only the first `size` samples.
2. Forward FFT (standard normalization) via scipy.fft.
3. Magnitude of each complex bin.
4. Centering shift so the DC bin lands at index size // 2.
5. Sanitization: NaN and +/-inf become 0.0.

Nothing here mutates its input, so analyses of independent snapshots can run
concurrently.
"""

import logging
from numbers import Integral
from typing import Optional, Union

import numpy as np
from numpy.typing import ArrayLike, NDArray
from scipy.fft import fft, fftshift

from .errors import InvalidParameterError

logger = logging.getLogger(__name__)


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, Integral) or size < 1:
        raise InvalidParameterError(f"FFT size must be a positive integer, got {size}.")
    return int(size)


def _as_series(samples: ArrayLike) -> NDArray[np.float64]:
    data = np.asarray(samples, dtype=np.float64)
    if data.ndim != 1:
        raise ValueError("Input samples must be a 1D sequence.")
    return data

# --- Pipeline Steps ---

def adapt_length(samples: ArrayLike, size: int) -> NDArray[np.float64]:
    """
    Fits a series to exactly `size` samples.

    Shorter inputs are zero-padded at the end. Longer inputs keep their first
    `size` samples; the newest samples are the ones dropped (use
    `analyze_recent` to analyze the latest window instead).

    Returns:
        A new float64 array of length `size`.
    """
    size = _check_size(size)
    data = _as_series(samples)
    n = data.shape[0]
    if n < size:
        logger.debug(f"Zero-padding {n} samples to FFT size {size}.")
        return np.pad(data, (0, size - n), mode="constant")
    if n > size:
        logger.debug(f"Truncating {n} samples to the first {size}.")
    return data[:size].copy()


def compute_magnitudes(samples: ArrayLike, size: int) -> NDArray[np.float64]:
    """
    Magnitudes of the forward FFT of the size-adapted series, in standard FFT
    bin order (DC first, then positive, then wrapped negative frequencies).
    """
    adapted = adapt_length(samples, size)
    # Overflowing inputs are expected to yield NaN/inf here; sanitize() clears them.
    with np.errstate(over="ignore", invalid="ignore"):
        spectrum = fft(adapted)
        return np.abs(spectrum).astype(np.float64, copy=False)


def center_spectrum(values: ArrayLike) -> NDArray[np.float64]:
    """
    Moves the zero-frequency bin to the middle of the array.

    Output index k holds FFT bin k - len(values) // 2, i.e. the wrapped
    negative frequencies come first and DC sits at len(values) // 2.
    """
    return np.asarray(fftshift(_as_series(values)), dtype=np.float64)


def sanitize(values: ArrayLike) -> NDArray[np.float64]:
    """Returns a copy of `values` with every NaN or infinite entry replaced by 0.0."""
    data = np.array(values, dtype=np.float64, copy=True)
    invalid = ~np.isfinite(data)
    if invalid.any():
        logger.debug(f"Clamping {int(invalid.sum())} non-finite spectrum values to 0.0.")
        data[invalid] = 0.0
    return data

# --- Full Analysis ---

def analyze_spectrum(samples: ArrayLike, size: int) -> NDArray[np.float64]:
    """
    Computes a centered, display-safe magnitude spectrum.

    Args:
        samples: Time-domain samples (1D). Never modified.
        size: FFT length (>= 1, typically a power of two).

    Returns:
        Frame of `size` finite magnitudes; index 0 is the most negative
        frequency bin and DC is at index size // 2.

    Raises:
        InvalidParameterError: If size is not a positive integer.
    """
    magnitudes = compute_magnitudes(samples, size)
    return sanitize(center_spectrum(magnitudes))


def analyze_recent(samples: ArrayLike, size: int) -> NDArray[np.float64]:
    """
    Like `analyze_spectrum`, but analyzes the newest `size` samples when the
    series is longer than the FFT size.
    """
    size = _check_size(size)
    data = _as_series(samples)
    return analyze_spectrum(data[-size:], size)

# --- Frame Axes ---

def spectrum_bins(size: int) -> NDArray[np.int64]:
    """Bin offsets for a centered frame: -size // 2 ... size - size // 2 - 1."""
    size = _check_size(size)
    return np.arange(size, dtype=np.int64) - size // 2


def spectrum_frequencies(size: int, fs: Optional[Union[int, float]] = None) -> NDArray[np.float64]:
    """
    Frequencies (Hz) of a centered frame for sampling rate `fs`.

    Without `fs` the result is in cycles per sample.
    """
    bins = spectrum_bins(size).astype(np.float64)
    rate = 1.0 if fs is None else float(fs)
    if rate <= 0:
        raise InvalidParameterError(f"Sampling rate must be positive, got {fs}.")
    return bins * rate / size
