"""Tests for AudioBuffer domain object."""

import numpy as np
import pytest

from silero_stream.domain.audio_buffer import AudioBuffer


def _buffer(capacity: int) -> AudioBuffer:
    # 1 kHz makes milliseconds and samples line up
    return AudioBuffer(max_duration_ms=capacity, sample_rate=1000)


class TestAudioBuffer:
    def test_empty_buffer(self):
        buf = AudioBuffer(max_duration_ms=500, sample_rate=8000)
        assert buf.is_empty
        assert len(buf) == 0
        assert buf.duration_ms == 0.0
        assert len(buf.get_audio()) == 0

    def test_capacity_rounds_up(self):
        assert AudioBuffer(max_duration_ms=500, sample_rate=8000).capacity == 4000
        assert AudioBuffer(max_duration_ms=100, sample_rate=16000).capacity == 1600
        assert AudioBuffer(max_duration_ms=1.01, sample_rate=1000).capacity == 2

    def test_add_and_get(self):
        buf = AudioBuffer(max_duration_ms=500, sample_rate=8000)
        chunk = np.linspace(-1.0, 1.0, 256, dtype=np.float32)
        buf.add(chunk)
        assert not buf.is_empty
        assert buf.duration_ms == pytest.approx(32.0)
        np.testing.assert_array_equal(buf.get_audio(), chunk)

    def test_multiple_chunks_keep_order(self):
        buf = _buffer(10)
        buf.add(np.array([1, 2, 3], dtype=np.float32))
        buf.add(np.array([4, 5], dtype=np.float32))
        np.testing.assert_array_equal(buf.get_audio(), [1, 2, 3, 4, 5])

    def test_trims_oldest_samples_exactly(self):
        buf = _buffer(5)
        buf.add(np.array([1, 2, 3], dtype=np.float32))
        buf.add(np.array([4, 5, 6], dtype=np.float32))
        assert len(buf) == 5
        np.testing.assert_array_equal(buf.get_audio(), [2, 3, 4, 5, 6])

        buf.add(np.array([7], dtype=np.float32))
        np.testing.assert_array_equal(buf.get_audio(), [3, 4, 5, 6, 7])

    def test_never_exceeds_capacity(self):
        buf = AudioBuffer(max_duration_ms=500, sample_rate=8000)
        for _ in range(100):
            buf.add(np.ones(256, dtype=np.float32))
            assert len(buf) <= 4000
        assert len(buf) == 4000

    def test_oversized_chunk_keeps_tail(self):
        buf = _buffer(4)
        buf.add(np.arange(10, dtype=np.float32))
        np.testing.assert_array_equal(buf.get_audio(), [6, 7, 8, 9])

    def test_zero_capacity_ignores_audio(self):
        buf = _buffer(0)
        buf.add(np.ones(8, dtype=np.float32))
        assert buf.is_empty

    def test_clear(self):
        buf = _buffer(5)
        buf.add(np.ones(4, dtype=np.float32))
        buf.clear()
        assert buf.is_empty
        buf.add(np.array([9], dtype=np.float32))
        np.testing.assert_array_equal(buf.get_audio(), [9])

    def test_get_audio_returns_copy(self):
        buf = _buffer(5)
        buf.add(np.array([1, 2], dtype=np.float32))
        audio = buf.get_audio()
        audio[0] = 42
        np.testing.assert_array_equal(buf.get_audio(), [1, 2])
