# tests/test_visualizations.py

from pathlib import Path

import pytest
import numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from filterview.core.filters import fir_filter
from filterview.core.kernels import design_raised_cosine
from filterview.core.signals import square_wave
from filterview.core.spectrum import analyze_spectrum
from filterview.utils.visualizations import plot_spectrum_frames, plot_time_series


@pytest.fixture
def trace():
    raw = square_wave(400, 500.0, frequency=2.0)
    return raw, fir_filter(design_raised_cosine(8, 0.5), raw)


def check_plot_saved(filepath: Path):
    """Checks if a plot file exists and has size > 100 bytes."""
    assert filepath.exists(), f"Plot file not found: {filepath}"
    assert filepath.stat().st_size > 100, f"Plot file is too small (likely empty): {filepath}"
    assert plt.get_fignums() == [], "Plot figure was not closed properly."


def test_plot_time_series(tmp_path: Path, trace):
    raw, filtered = trace
    out_file = tmp_path / "trace.png"
    plot_time_series(raw, filtered, 500.0, out_file)
    check_plot_saved(out_file)

    raw_only = tmp_path / "raw.png"
    plot_time_series(raw, None, 500.0, str(raw_only), title="Raw Only")
    check_plot_saved(raw_only)


def test_plot_spectrum_frames(tmp_path: Path, trace):
    raw, filtered = trace
    frames = {"FFT (Unfiltered)": analyze_spectrum(raw, 512), "FFT (Filtered)": analyze_spectrum(filtered, 512)}
    out_hz = tmp_path / "spectrum_hz.png"
    plot_spectrum_frames(frames, out_hz, fs=500.0)
    check_plot_saved(out_hz)

    out_bins = tmp_path / "spectrum_bins.png"
    plot_spectrum_frames(frames, out_bins)
    check_plot_saved(out_bins)


def test_plot_input_validation(tmp_path: Path):
    with pytest.raises(ValueError, match="does not match"):
        plot_time_series(np.ones(4), np.ones(5), 10.0, tmp_path / "x.png")
    with pytest.raises(ValueError, match="share one length"):
        plot_spectrum_frames({"a": np.ones(4), "b": np.ones(8)}, tmp_path / "y.png")
    with pytest.raises(ValueError, match="At least one"):
        plot_spectrum_frames({}, tmp_path / "z.png")
    assert plt.get_fignums() == []


def test_empty_trace_is_skipped(tmp_path: Path):
    out_file = tmp_path / "empty.png"
    plot_time_series(np.array([]), None, 10.0, out_file)
    assert not out_file.exists()
