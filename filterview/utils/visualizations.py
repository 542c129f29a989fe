# filterview/utils/visualizations.py

"""
Static plots of streaming results using Matplotlib.

Provides the two views of the interactive filter viewer as image files: the
raw/filtered time-domain traces and the centered magnitude spectra.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import matplotlib.pyplot as plt
import numpy as np
from numpy.typing import NDArray

from ..core.spectrum import spectrum_bins, spectrum_frequencies

logger = logging.getLogger(__name__)


def plot_time_series(
    raw: NDArray[np.float64],
    filtered: Optional[NDArray[np.float64]],
    fs: float,
    output_file: Union[str, Path],
    title: str = "Time Domain"
):
    """
    Generate and save a plot of the raw trace and, optionally, its filtered counterpart.

    Args:
        raw: Raw samples (1D).
        filtered: Filtered samples (1D, same length as raw) or None.
        fs: Sampling rate (Hz), used for the time axis.
        output_file: Path where to save the plot image.
        title: Title for the plot.

    Raises:
        ValueError: If inputs are not 1D or lengths differ.
    """
    raw = np.asarray(raw, dtype=np.float64)
    if raw.ndim != 1:
        raise ValueError("Raw samples must be 1D.")
    if filtered is not None:
        filtered = np.asarray(filtered, dtype=np.float64)
        if filtered.shape != raw.shape:
            raise ValueError(f"Filtered samples shape {filtered.shape} does not match raw shape {raw.shape}.")
    if raw.size == 0:
        logger.warning(f"Input data empty. Skipping time-domain plot for {output_file}.")
        return

    fig = None
    try:
        logger.info(f"Generating time-domain plot: fs={fs}, output={output_file}")
        t = np.arange(raw.size) / fs
        fig, ax = plt.subplots(figsize=(10, 4))
        ax.plot(t, raw, label="Raw", linewidth=1.0)
        if filtered is not None:
            ax.plot(t, filtered, label="Filtered", linewidth=1.0)
            ax.legend(loc="upper right")
        ax.set_xlabel("Time (s)")
        ax.set_ylabel("Value")
        ax.set_title(title)
        ax.grid(True, alpha=0.5)
        fig.tight_layout()
        fig.savefig(output_file, dpi=150, bbox_inches="tight")
        logger.info(f"Time-domain plot saved to {output_file}")
    except Exception as e:
        logger.error(f"Failed to generate/save time-domain plot to {output_file}: {e}")
        raise
    finally:
        if fig is not None:
            plt.close(fig)


def plot_spectrum_frames(
    frames: Dict[str, NDArray[np.float64]],
    output_file: Union[str, Path],
    fs: Optional[float] = None,
    title: str = "Frequency Domain"
):
    """
    Generate and save an overlay of centered magnitude spectra.

    Args:
        frames: Mapping of legend label -> centered spectrum frame. All frames
                must have the same length.
        output_file: Path where to save the plot image.
        fs: Sampling rate (Hz). If given the x-axis is in Hz, otherwise in bin offsets.
        title: Title for the plot.

    Raises:
        ValueError: If no frames are given or their lengths differ.
    """
    if not frames:
        raise ValueError("At least one spectrum frame is required.")
    sizes = {np.asarray(frame).shape[0] for frame in frames.values()}
    if len(sizes) != 1:
        raise ValueError(f"Spectrum frames must share one length, got {sorted(sizes)}.")
    size = sizes.pop()
    x = spectrum_frequencies(size, fs) if fs is not None else spectrum_bins(size)

    fig = None
    try:
        logger.info(f"Generating spectrum plot: size={size}, output={output_file}")
        fig, ax = plt.subplots(figsize=(10, 4))
        for label, frame in frames.items():
            ax.plot(x, frame, label=label, linewidth=1.0)
        ax.set_xlabel("Frequency (Hz)" if fs is not None else "Frequency bin")
        ax.set_ylabel("Magnitude")
        ax.set_title(title)
        ax.grid(True, alpha=0.5)
        ax.legend(loc="upper right")
        fig.tight_layout()
        fig.savefig(output_file, dpi=150, bbox_inches="tight")
        logger.info(f"Spectrum plot saved to {output_file}")
    except Exception as e:
        logger.error(f"Failed to generate/save spectrum plot to {output_file}: {e}")
        raise
    finally:
        if fig is not None:
            plt.close(fig)
