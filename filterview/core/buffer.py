# filterview/core/buffer.py

"""
Bounded sample history used by streaming sessions.
"""

import logging
import threading
from collections import deque
from numbers import Integral
from typing import Iterable

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidParameterError

logger = logging.getLogger(__name__)


class SampleBuffer:
    """
    Fixed-capacity sample history; appending to a full buffer evicts the oldest sample.

    Readers get read-only NumPy copies (`snapshot`, `tail`) taken under the
    buffer's lock, so analysis never races with a concurrent append.

    Args:
        capacity: Maximum number of samples kept (>= 1).
        prefill: If True, start full of zeros, matching a display that is
                 primed with a flat trace before the first sample arrives.
    """

    def __init__(self, capacity: int, prefill: bool = False):
        if isinstance(capacity, bool) or not isinstance(capacity, Integral) or capacity < 1:
            raise InvalidParameterError(f"Buffer capacity must be a positive integer, got {capacity}.")
        self._capacity = int(capacity)
        self._samples = deque(maxlen=self._capacity)
        self._lock = threading.Lock()
        if prefill:
            self._samples.extend([0.0] * self._capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._samples)

    def is_full(self) -> bool:
        return len(self) == self._capacity

    def append(self, sample: float) -> None:
        with self._lock:
            self._samples.append(float(sample))

    def extend(self, samples: Iterable[float]) -> None:
        values = [float(s) for s in samples]
        with self._lock:
            self._samples.extend(values)

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()

    def snapshot(self) -> NDArray[np.float64]:
        """Copy of the whole history, oldest first."""
        with self._lock:
            data = np.fromiter(self._samples, dtype=np.float64, count=len(self._samples))
        data.setflags(write=False)
        return data

    def tail(self, n: int) -> NDArray[np.float64]:
        """Copy of the newest `n` samples (fewer if the buffer holds fewer), oldest first."""
        if n < 0:
            raise InvalidParameterError(f"Tail length must be >= 0, got {n}.")
        data = self.snapshot()
        return data[data.shape[0] - min(n, data.shape[0]):]

    def __repr__(self) -> str:
        return f"SampleBuffer(capacity={self._capacity}, size={len(self)})"
