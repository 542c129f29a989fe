# filterview/core/__init__.py

"""
Core Processing Package for FilterView.

Contains modules for:
- FIR kernel design (raised cosine, windowed-sinc low-pass)
- FIR application to sample histories
- Centered magnitude spectrum analysis
- Bounded sample buffers and streaming sessions
- Synthetic signal sources
- Data I/O
"""

from . import errors
from . import kernels
from . import filters
from . import spectrum
from . import buffer
from . import signals
from . import session
from . import data_handler

from .errors import (
    FilterViewError,
    InvalidParameterError,
    DegenerateNormalizationError,
    InsufficientHistoryError,
)
from .kernels import (
    design_raised_cosine,
    design_low_pass,
    design_kernel,
    parse_filter_spec,
    RaisedCosineSpec,
    LowPassSpec,
)
from .filters import apply_fir, fir_filter
from .spectrum import analyze_spectrum, analyze_recent
from .buffer import SampleBuffer
from .session import StreamSession, SessionTrace

__all__ = [
    "errors",
    "kernels",
    "filters",
    "spectrum",
    "buffer",
    "signals",
    "session",
    "data_handler",
    "FilterViewError",
    "InvalidParameterError",
    "DegenerateNormalizationError",
    "InsufficientHistoryError",
    "design_raised_cosine",
    "design_low_pass",
    "design_kernel",
    "parse_filter_spec",
    "RaisedCosineSpec",
    "LowPassSpec",
    "apply_fir",
    "fir_filter",
    "analyze_spectrum",
    "analyze_recent",
    "SampleBuffer",
    "StreamSession",
    "SessionTrace",
]
