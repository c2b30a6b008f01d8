"""Numpy-backed ring buffer for audio samples."""

from __future__ import annotations

import math

import numpy as np


class AudioBuffer:
    """Fixed-capacity sample buffer that overwrites the oldest samples when full.

    Capacity is ``ceil(max_duration_ms / 1000 * sample_rate)`` samples. Writes
    advance a cursor over a preallocated array, so trimming never copies.
    """

    def __init__(self, max_duration_ms: float, sample_rate: int) -> None:
        self._sample_rate = sample_rate
        self._capacity = max(0, math.ceil(max_duration_ms / 1000 * sample_rate))
        self._data = np.zeros(self._capacity, dtype=np.float32)
        self._start = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def duration_ms(self) -> float:
        return self._size / self._sample_rate * 1000

    @property
    def is_empty(self) -> bool:
        return self._size == 0

    def add(self, chunk: np.ndarray) -> None:
        if self._capacity == 0:
            return
        samples = np.asarray(chunk, dtype=np.float32).reshape(-1)
        if len(samples) >= self._capacity:
            # only the tail of an oversized chunk can survive
            self._data[:] = samples[-self._capacity :]
            self._start = 0
            self._size = self._capacity
            return

        write = (self._start + self._size) % self._capacity
        first = min(len(samples), self._capacity - write)
        self._data[write : write + first] = samples[:first]
        self._data[: len(samples) - first] = samples[first:]

        overflow = self._size + len(samples) - self._capacity
        if overflow > 0:
            self._start = (self._start + overflow) % self._capacity
            self._size = self._capacity
        else:
            self._size += len(samples)

    def get_audio(self) -> np.ndarray:
        """Return the buffered samples, oldest first, as a new array."""
        if self._size == 0:
            return np.array([], dtype=np.float32)
        end = self._start + self._size
        if end <= self._capacity:
            return self._data[self._start : end].copy()
        return np.concatenate((self._data[self._start :], self._data[: end - self._capacity]))

    def clear(self) -> None:
        self._start = 0
        self._size = 0
