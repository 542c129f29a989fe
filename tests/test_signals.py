# tests/test_signals.py

import pytest
import numpy as np
from numpy.testing import assert_allclose

from filterview.core.errors import InvalidParameterError
from filterview.core.signals import square_wave, sine_wave, constant, get_source


def test_square_wave_default_oscillation():
    """0.5 Hz at 500 Hz: 500 samples low, then 500 samples high."""
    x = square_wave(2000, 500.0)
    assert x.shape == (2000,)
    assert np.all(x[:500] == 0.0)
    assert np.all(x[500:1000] == 100.0)
    assert np.all(x[1000:1500] == 0.0)
    assert set(np.unique(x)) == {0.0, 100.0}


def test_square_wave_custom_levels():
    x = square_wave(8, fs=8.0, frequency=2.0, low=-1.0, high=1.0)
    assert_allclose(x, [-1, -1, 1, 1, -1, -1, 1, 1])


def test_sine_and_constant():
    x = sine_wave(100, fs=100.0, frequency=1.0, amplitude=2.0)
    assert x[25] == pytest.approx(2.0)
    assert_allclose(constant(5, 10.0, value=3.0), np.full(5, 3.0))


def test_invalid_source_parameters():
    with pytest.raises(InvalidParameterError):
        square_wave(10, fs=0.0)
    with pytest.raises(InvalidParameterError):
        square_wave(10, fs=10.0, frequency=0.0)
    with pytest.raises(InvalidParameterError):
        sine_wave(-1, fs=10.0)


def test_get_source():
    assert get_source("square") is square_wave
    with pytest.raises(InvalidParameterError, match="Unknown signal source"):
        get_source("sawtooth")
