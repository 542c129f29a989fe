# tests/test_spectrum.py

import math

import pytest
import numpy as np
from numpy.testing import assert_allclose, assert_array_equal

from filterview.core.errors import InvalidParameterError
from filterview.core.spectrum import (
    adapt_length, compute_magnitudes, center_spectrum, sanitize,
    analyze_spectrum, analyze_recent, spectrum_bins, spectrum_frequencies
)


def _reference_frame(samples, size):
    """Centered magnitudes computed directly from numpy's DFT."""
    x = np.zeros(size)
    n = min(size, len(samples))
    x[:n] = np.asarray(samples, dtype=np.float64)[:n]
    mags = np.abs(np.fft.fft(x))
    half = size // 2
    return np.concatenate([mags[half:], mags[:half]]) if size % 2 == 0 else np.roll(mags, half)

# --- Size adaptation ---

def test_adapt_length_pads_at_end():
    assert_array_equal(adapt_length([1.0, 2.0], 5), [1.0, 2.0, 0.0, 0.0, 0.0])


def test_adapt_length_keeps_first_samples():
    assert_array_equal(adapt_length(np.arange(10.0), 4), [0.0, 1.0, 2.0, 3.0])


def test_adapt_length_returns_copy():
    x = np.arange(4.0)
    adapted = adapt_length(x, 4)
    adapted[0] = 99.0
    assert x[0] == 0.0

# --- Full analysis ---

@pytest.mark.parametrize("n_samples", [1, 5, 8, 100])
@pytest.mark.parametrize("size", [1, 7, 8, 64])
def test_analyze_output_length(n_samples, size):
    frame = analyze_spectrum(np.random.default_rng(0).normal(size=n_samples), size)
    assert frame.shape == (size,)
    assert frame.dtype == np.float64


def test_zero_padding_dc_bin():
    """All-ones input of length size/2 padded to size has DC magnitude size/2."""
    size = 16
    frame = analyze_spectrum(np.ones(size // 2), size)
    assert frame[size // 2] == pytest.approx(size / 2)
    assert np.argmax(frame) == size // 2


def test_rectangular_pulse_spectrum():
    """[1,1,1,1,0,0,0,0] gives the sampled Dirichlet (sinc-like) envelope."""
    x = [1, 1, 1, 1, 0, 0, 0, 0]
    frame = analyze_spectrum(x, 8)
    assert_allclose(frame, _reference_frame(x, 8), atol=1e-12)

    k1 = 1.0 / math.sin(math.pi / 8)
    k3 = 1.0 / math.sin(3 * math.pi / 8)
    # Output index k holds bin k - 4
    assert_allclose(frame, [0.0, k3, 0.0, k1, 4.0, k1, 0.0, k3], atol=1e-12)
    # Symmetric around DC for a real input
    assert_allclose(frame[1:4], frame[5:8][::-1], atol=1e-12)


def test_truncation_keeps_oldest_samples():
    x = np.concatenate([np.ones(8), np.full(8, 5.0)])
    assert analyze_spectrum(x, 8)[4] == pytest.approx(8.0)
    assert analyze_recent(x, 8)[4] == pytest.approx(40.0)


def test_analyze_recent_matches_plain_analysis_when_short():
    x = np.arange(5.0)
    assert_allclose(analyze_recent(x, 8), analyze_spectrum(x, 8))


def test_sine_peaks_symmetric_about_dc():
    size = 64
    x = np.sin(2 * np.pi * 8 * np.arange(size) / size)
    frame = analyze_spectrum(x, size)
    top_two = sorted(np.argsort(frame)[-2:])
    assert top_two == [size // 2 - 8, size // 2 + 8]
    assert frame[size // 2 - 8] == pytest.approx(size / 2)


@pytest.mark.parametrize("samples", [
    np.zeros(32),
    np.eye(1, 32, 0)[0],                     # impulse
    np.array([np.nan, 1.0, 2.0]),
    np.array([np.inf, -np.inf, 1.0]),
    np.array([1e308, 1e308, 1e308, 1e308]),  # overflows in the transform
])
def test_analyze_never_returns_non_finite(samples):
    frame = analyze_spectrum(samples, 32)
    assert np.all(np.isfinite(frame))


def test_nan_input_clamps_to_zero():
    frame = analyze_spectrum([np.nan, 1.0], 8)
    assert_array_equal(frame, np.zeros(8))


def test_analyze_is_deterministic_and_pure():
    x = np.random.default_rng(3).normal(size=50)
    original = x.copy()
    first = analyze_spectrum(x, 64)
    second = analyze_spectrum(x, 64)
    assert_array_equal(first, second)
    assert_array_equal(x, original)


@pytest.mark.parametrize("size", [0, -8, 2.5, 8.0, float("nan"), True, "8"])
def test_invalid_size(size):
    with pytest.raises(InvalidParameterError):
        analyze_spectrum([1.0, 2.0], size)


def test_non_1d_input_rejected():
    with pytest.raises(ValueError, match="1D"):
        analyze_spectrum(np.ones((4, 4)), 8)

# --- Individual steps ---

def test_compute_magnitudes_is_unshifted():
    mags = compute_magnitudes([1.0, 1.0], 4)
    assert mags[0] == pytest.approx(2.0)


def test_center_spectrum_even_and_odd():
    assert_array_equal(center_spectrum([0, 1, 2, 3]), [2, 3, 0, 1])
    # DC (index 0) moves to len // 2
    assert_array_equal(center_spectrum([0, 1, 2, 3, 4]), [3, 4, 0, 1, 2])


def test_sanitize_replaces_non_finite_with_zero():
    values = np.array([1.0, np.nan, np.inf, -np.inf, -2.0])
    cleaned = sanitize(values)
    assert_array_equal(cleaned, [1.0, 0.0, 0.0, 0.0, -2.0])
    assert np.isnan(values[1])  # input untouched

# --- Axes ---

def test_spectrum_bins_and_frequencies():
    assert_array_equal(spectrum_bins(8), [-4, -3, -2, -1, 0, 1, 2, 3])
    assert_array_equal(spectrum_bins(5), [-2, -1, 0, 1, 2])
    assert_allclose(spectrum_frequencies(8, 500.0), np.arange(-4, 4) * 62.5)
    assert_allclose(spectrum_frequencies(4), [-0.5, -0.25, 0.0, 0.25])
    with pytest.raises(InvalidParameterError):
        spectrum_frequencies(8, 0.0)
