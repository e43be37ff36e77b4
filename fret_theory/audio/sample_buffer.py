"""Fixed-size buffer holding the most recent audio samples."""

import threading

import numpy as np


class SampleBuffer:
    """Keeps the last ``size`` mono samples written by the audio thread.

    The audio backend writes from its own thread while the tuner loop reads
    snapshots, so both sides go through a lock.
    """

    def __init__(self, size: int = 2048):
        if size <= 0:
            raise ValueError(f"Buffer size must be positive, got {size}")
        self._data = np.zeros(size, dtype=np.float32)
        self._lock = threading.Lock()

    @property
    def size(self) -> int:
        return len(self._data)

    def write(self, samples: np.ndarray) -> None:
        """Append samples, discarding the oldest ones."""
        samples = np.asarray(samples, dtype=np.float32).ravel()
        if samples.size == 0:
            return
        with self._lock:
            n = len(samples)
            if n >= len(self._data):
                self._data[:] = samples[-len(self._data):]
            else:
                # Shift in place; the array is allocated once
                self._data[:-n] = self._data[n:]
                self._data[-n:] = samples

    def snapshot(self) -> np.ndarray:
        with self._lock:
            return self._data.copy()

    def clear(self) -> None:
        with self._lock:
            self._data.fill(0.0)
