# filterview/core/session.py

"""
Streaming session: the collaborator that feeds samples through the DSP core.

A session owns two bounded histories (raw and filtered). For every incoming
raw sample it designs the kernel for the filter spec supplied by the caller,
filters the raw tail and records the result. Spectra of both histories can be
requested at any point.

The session holds no filter-selection state of its own: the spec travels with
each `push` call, so switching family or parameters between samples is just a
different argument.
"""

import logging
from numbers import Integral
from typing import Iterable, NamedTuple, Optional, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from .buffer import SampleBuffer
from .errors import InvalidParameterError
from .filters import apply_fir
from .kernels import LowPassSpec, RaisedCosineSpec, design_kernel
from .spectrum import analyze_recent, analyze_spectrum

logger = logging.getLogger(__name__)

AnySpec = Union[RaisedCosineSpec, LowPassSpec]


class SessionTrace(NamedTuple):
    """Raw and filtered values produced during `StreamSession.run`, one per pushed sample."""
    raw: NDArray[np.float64]
    filtered: NDArray[np.float64]


class StreamSession:
    """
    Raw/filtered sample histories plus per-sample FIR filtering.

    Args:
        history_size: Capacity of both histories (oldest samples evicted first).
        fft_size: Default FFT size used by `spectra`.
        prefill: Start both histories full of zeros.
    """

    def __init__(self, history_size: int = 200, fft_size: int = 512, prefill: bool = True):
        self.raw = SampleBuffer(history_size, prefill=prefill)
        self.filtered = SampleBuffer(history_size, prefill=prefill)
        if isinstance(fft_size, bool) or not isinstance(fft_size, Integral) or fft_size < 1:
            raise InvalidParameterError(f"FFT size must be a positive integer, got {fft_size}.")
        self.fft_size = int(fft_size)
        logger.debug(f"Created stream session: history_size={history_size}, fft_size={fft_size}, prefill={prefill}")

    @classmethod
    def from_config(cls, config) -> "StreamSession":
        """Builds a session from a FilterViewConfig's stream parameters."""
        stream = config.stream
        return cls(history_size=stream.history_size, fft_size=stream.fft_size, prefill=stream.prefill)

    def push(self, sample: float, spec: AnySpec) -> float:
        """
        Records a raw sample and returns its filtered value.

        Until the raw history holds as many samples as the kernel has taps,
        the missing older samples are treated as zeros.

        Raises:
            InvalidParameterError: If the kernel is longer than the history capacity.
        """
        kernel = design_kernel(spec)
        taps = kernel.shape[0]
        if taps > self.raw.capacity:
            raise InvalidParameterError(
                f"Filter length {taps} exceeds the session history size {self.raw.capacity}."
            )

        self.raw.append(sample)
        history = self.raw.tail(taps)
        if history.shape[0] < taps:
            history = np.concatenate([np.zeros(taps - history.shape[0]), history])

        value = apply_fir(kernel, history)
        self.filtered.append(value)
        return value

    def run(self, samples: Iterable[float], spec: AnySpec) -> SessionTrace:
        """Pushes every sample with the same spec and returns what was produced."""
        raw, filtered = [], []
        for sample in samples:
            filtered.append(self.push(sample, spec))
            raw.append(float(sample))
        logger.info(f"Streamed {len(raw)} samples through {spec.family} filter (length={spec.length}).")
        return SessionTrace(np.asarray(raw, dtype=np.float64), np.asarray(filtered, dtype=np.float64))

    def spectra(
        self,
        size: Optional[int] = None,
        recent: bool = False
    ) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
        """
        Centered magnitude spectra of the raw and filtered histories.

        Args:
            size: FFT size; defaults to the session's `fft_size`.
            recent: Analyze the newest `size` samples instead of the oldest
                    when a history is longer than the FFT size.

        Returns:
            (raw_frame, filtered_frame), each of length `size`.
        """
        size = self.fft_size if size is None else size
        analyze = analyze_recent if recent else analyze_spectrum
        return analyze(self.raw.snapshot(), size), analyze(self.filtered.snapshot(), size)

    def reset(self, prefill: bool = True) -> None:
        """Empties both histories, optionally re-priming them with zeros."""
        for buffer in (self.raw, self.filtered):
            buffer.clear()
            if prefill:
                buffer.extend([0.0] * buffer.capacity)
