# tests/test_buffer.py

import threading

import pytest
import numpy as np
from numpy.testing import assert_array_equal

from filterview.core.buffer import SampleBuffer
from filterview.core.errors import InvalidParameterError


def test_oldest_samples_are_evicted():
    buf = SampleBuffer(3)
    for value in range(1, 6):
        buf.append(value)
    assert len(buf) == 3
    assert_array_equal(buf.snapshot(), [3.0, 4.0, 5.0])


def test_prefill_with_zeros():
    buf = SampleBuffer(4, prefill=True)
    assert buf.is_full()
    assert_array_equal(buf.snapshot(), np.zeros(4))
    buf.append(7.0)
    assert_array_equal(buf.snapshot(), [0.0, 0.0, 0.0, 7.0])


def test_tail():
    buf = SampleBuffer(10)
    buf.extend([1, 2, 3, 4])
    assert_array_equal(buf.tail(2), [3.0, 4.0])
    assert_array_equal(buf.tail(10), [1.0, 2.0, 3.0, 4.0])
    assert buf.tail(0).shape == (0,)
    with pytest.raises(InvalidParameterError):
        buf.tail(-1)


def test_snapshot_is_read_only_copy():
    buf = SampleBuffer(5)
    buf.extend([1.0, 2.0])
    snap = buf.snapshot()
    buf.append(3.0)
    assert_array_equal(snap, [1.0, 2.0])
    with pytest.raises(ValueError):
        snap[0] = 10.0


def test_clear_and_capacity():
    buf = SampleBuffer(2, prefill=True)
    assert buf.capacity == 2
    buf.clear()
    assert len(buf) == 0
    assert not buf.is_full()
    assert "capacity=2" in repr(buf)


@pytest.mark.parametrize("capacity", [0, -1, 1.5, float("nan"), True])
def test_invalid_capacity(capacity):
    with pytest.raises(InvalidParameterError):
        SampleBuffer(capacity)


def test_concurrent_appends_are_not_lost():
    buf = SampleBuffer(10_000)

    def writer():
        for _ in range(1000):
            buf.append(1.0)

    threads = [threading.Thread(target=writer) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(buf) == 4000
    assert np.sum(buf.snapshot()) == 4000.0
