# filterview/core/signals.py

"""
Synthetic sample sources for driving streaming sessions without live input.
"""

import logging
from typing import Callable, Dict

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidParameterError

logger = logging.getLogger(__name__)


def _time_axis(n: int, fs: float) -> NDArray[np.float64]:
    if n < 0:
        raise InvalidParameterError(f"Number of samples must be >= 0, got {n}.")
    if fs <= 0:
        raise InvalidParameterError(f"Sampling rate must be positive, got {fs}.")
    return np.arange(n, dtype=np.float64) / fs


def square_wave(
    n: int,
    fs: float,
    frequency: float = 0.5,
    low: float = 0.0,
    high: float = 100.0
) -> NDArray[np.float64]:
    """
    Generates a square wave that sits at `low` for the first half of each
    period and at `high` for the second half.

    The defaults reproduce the oscillation mode of the interactive viewer:
    a 0/100 toggle every second (0.5 Hz).

    Args:
        n: Number of samples.
        fs: Sampling rate (Hz).
        frequency: Square-wave frequency (Hz), > 0.
        low: Value during the first half-period.
        high: Value during the second half-period.
    """
    if frequency <= 0:
        raise InvalidParameterError(f"Square-wave frequency must be positive, got {frequency}.")
    t = _time_axis(n, fs)
    phase = np.mod(t * frequency, 1.0)
    return np.where(phase < 0.5, low, high).astype(np.float64)


def sine_wave(n: int, fs: float, frequency: float = 5.0, amplitude: float = 1.0) -> NDArray[np.float64]:
    """Generates amplitude * sin(2*pi*frequency*t)."""
    t = _time_axis(n, fs)
    return (amplitude * np.sin(2.0 * np.pi * frequency * t)).astype(np.float64)


def constant(n: int, fs: float, value: float = 1.0) -> NDArray[np.float64]:
    """Generates a flat (DC) series."""
    return np.full(_time_axis(n, fs).shape[0], float(value), dtype=np.float64)


SIGNAL_SOURCES: Dict[str, Callable[..., NDArray[np.float64]]] = {
    "square": square_wave,
    "sine": sine_wave,
    "constant": constant,
}


def get_source(name: str) -> Callable[..., NDArray[np.float64]]:
    """Looks up a signal generator by name ('square', 'sine', 'constant')."""
    try:
        return SIGNAL_SOURCES[name]
    except KeyError:
        raise InvalidParameterError(
            f"Unknown signal source '{name}'. Available: {sorted(SIGNAL_SOURCES)}"
        ) from None
