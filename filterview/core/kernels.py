# filterview/core/kernels.py

"""
FIR kernel design for the two supported filter families.

- Raised cosine: a symmetric bell-shaped taper whose edge attenuation is set by
  the roll-off factor `beta` (0 gives a flat moving average).
- Low-pass: an ideal sinc response truncated to `length` taps and tapered with
  a Hamming window.

Both designs are normalized to unity DC gain (coefficients sum to 1.0). Kernels
are returned as read-only float64 arrays so they can be cached and shared.

The family selection is expressed as a tagged variant (`RaisedCosineSpec` |
`LowPassSpec`) which carries only the parameters of its family and is
dispatched once, at design time, by `design_kernel`.
"""

import logging
from functools import lru_cache
from numbers import Integral
from typing import Annotated, Any, Dict, Literal, Union

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .errors import DegenerateNormalizationError, InvalidParameterError

logger = logging.getLogger(__name__)

RAISED_COSINE = "raised_cosine"
LOW_PASS = "low_pass"
FILTER_FAMILIES = (RAISED_COSINE, LOW_PASS)

# --- Parameter Validation ---

def _check_length(length: Any) -> int:
    if isinstance(length, bool) or not isinstance(length, Integral):
        raise InvalidParameterError(f"Filter length must be an integer, got {type(length).__name__}.")
    if length < 1:
        raise InvalidParameterError(f"Filter length must be >= 1, got {length}.")
    return int(length)


def _check_beta(beta: float) -> float:
    beta = float(beta)
    if not 0.0 <= beta <= 1.0:  # NaN fails this too
        raise InvalidParameterError(f"Roll-off factor beta must be within [0, 1], got {beta}.")
    return beta


def _check_cutoff(cutoff: float) -> float:
    cutoff = float(cutoff)
    if not 0.0 < cutoff < 0.5:
        raise InvalidParameterError(
            f"Cutoff must be strictly between 0 and 0.5 (fraction of the sampling rate), got {cutoff}."
        )
    return cutoff


def _normalize(weights: NDArray[np.float64]) -> NDArray[np.float64]:
    """Scales weights to unity DC gain and freezes the resulting array."""
    total = float(np.sum(weights))
    if total == 0.0 or not np.isfinite(total):
        raise DegenerateNormalizationError(
            f"Cannot normalize {weights.shape[0]} filter taps: coefficient sum is {total}."
        )
    kernel = weights / total
    kernel.setflags(write=False)
    return kernel


def _single_tap() -> NDArray[np.float64]:
    kernel = np.ones(1, dtype=np.float64)
    kernel.setflags(write=False)
    return kernel

# --- Design Functions ---

def design_raised_cosine(length: int, beta: float) -> NDArray[np.float64]:
    """
    Designs a normalized raised-cosine FIR kernel.

    For tap i, with t = i / (length - 1), the unnormalized weight is
    0.5 * (1 + cos(pi * (2t - 1) * beta)).

    Args:
        length: Number of taps (>= 1). A single tap yields the identity kernel [1.0].
        beta: Roll-off factor in [0, 1]. 0 yields a uniform kernel (1/length each),
              1 tapers the edge taps down to zero.

    Returns:
        Read-only float64 array of `length` coefficients summing to 1.0.

    Raises:
        InvalidParameterError: If length or beta is out of range.
        DegenerateNormalizationError: If every weight is zero (length=2, beta=1).
    """
    length = _check_length(length)
    beta = _check_beta(beta)
    if length == 1:
        return _single_tap()

    t = np.arange(length, dtype=np.float64) / (length - 1)
    weights = 0.5 * (1.0 + np.cos(np.pi * (2.0 * t - 1.0) * beta))
    logger.debug(f"Designed raised-cosine kernel: length={length}, beta={beta}")
    return _normalize(weights)


def design_low_pass(length: int, cutoff: float) -> NDArray[np.float64]:
    """
    Designs a normalized Hamming-windowed sinc low-pass FIR kernel.

    The ideal response is sampled at t = i - (length - 1) / 2: the centre tap
    (t == 0, odd lengths only) takes the sinc limit 2 * cutoff, every other tap
    sin(2*pi*cutoff*t) / (pi*t). Each tap is then multiplied by the Hamming term
    0.54 - 0.46 * cos(2*pi*i / (length - 1)).

    Args:
        length: Number of taps (>= 1). A single tap yields the identity kernel [1.0].
        cutoff: Cutoff frequency as a fraction of the sampling rate, in (0, 0.5).

    Returns:
        Read-only float64 array of `length` coefficients summing to 1.0.

    Raises:
        InvalidParameterError: If length or cutoff is out of range.
        DegenerateNormalizationError: If the windowed taps sum to zero.
    """
    length = _check_length(length)
    cutoff = _check_cutoff(cutoff)
    if length == 1:
        return _single_tap()

    i = np.arange(length, dtype=np.float64)
    t = i - (length - 1) / 2.0
    ideal = np.empty(length, dtype=np.float64)
    centre = t == 0.0
    ideal[centre] = 2.0 * cutoff
    ideal[~centre] = np.sin(2.0 * np.pi * cutoff * t[~centre]) / (np.pi * t[~centre])

    hamming = 0.54 - 0.46 * np.cos(2.0 * np.pi * i / (length - 1))
    logger.debug(f"Designed low-pass kernel: length={length}, cutoff={cutoff}")
    return _normalize(ideal * hamming)

# --- Tagged Filter Specification ---

class RaisedCosineSpec(BaseModel):
    """Raised-cosine filter selection with its roll-off factor."""
    model_config = ConfigDict(frozen=True)

    family: Literal["raised_cosine"] = RAISED_COSINE
    length: int
    beta: float

    @field_validator("length", mode="before")
    @classmethod
    def validate_length(cls, value: Any) -> int:
        return _check_length(value)

    @field_validator("beta")
    @classmethod
    def validate_beta(cls, value: float) -> float:
        return _check_beta(value)

    def design(self) -> NDArray[np.float64]:
        return design_raised_cosine(self.length, self.beta)


class LowPassSpec(BaseModel):
    """Windowed-sinc low-pass filter selection with its cutoff."""
    model_config = ConfigDict(frozen=True)

    family: Literal["low_pass"] = LOW_PASS
    length: int
    cutoff: float

    @field_validator("length", mode="before")
    @classmethod
    def validate_length(cls, value: Any) -> int:
        return _check_length(value)

    @field_validator("cutoff")
    @classmethod
    def validate_cutoff(cls, value: float) -> float:
        return _check_cutoff(value)

    def design(self) -> NDArray[np.float64]:
        return design_low_pass(self.length, self.cutoff)


FilterSpec = Annotated[Union[RaisedCosineSpec, LowPassSpec], Field(discriminator="family")]
_FILTER_SPEC_ADAPTER = TypeAdapter(FilterSpec)


def parse_filter_spec(data: Dict[str, Any]) -> Union[RaisedCosineSpec, LowPassSpec]:
    """
    Builds a filter spec from a plain mapping, selecting the variant by its 'family' key.

    Example: {"family": "low_pass", "length": 31, "cutoff": 0.1}
    """
    return _FILTER_SPEC_ADAPTER.validate_python(data)


@lru_cache(maxsize=64)
def design_kernel(spec: Union[RaisedCosineSpec, LowPassSpec]) -> NDArray[np.float64]:
    """
    Designs the kernel described by `spec`.

    Results are memoized per spec, so streaming callers can call this once per
    sample and only pay for a redesign when length, beta or cutoff changes.
    """
    return spec.design()
