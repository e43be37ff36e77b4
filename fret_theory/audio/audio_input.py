"""Base class for audio input handlers."""

from __future__ import annotations
from abc import ABC
from typing import Callable, Optional

import numpy as np

from ..core.interfaces import IAudioInput

AudioCallback = Callable[[np.ndarray, float], None]


class AudioInputHandler(IAudioInput, ABC):
    """Shared state for audio input handlers."""

    def __init__(self, sample_rate: int) -> None:
        self._sample_rate = sample_rate
        self._callback: Optional[AudioCallback] = None
        self._running = False

    def is_running(self) -> bool:
        """Check if audio input is running.

        Returns:
            True if audio input is running, False otherwise
        """
        return self._running

    @property
    def sample_rate(self) -> int:
        return self._sample_rate

    @staticmethod
    def to_mono(indata: np.ndarray) -> np.ndarray:
        """First channel of a (frames x channels) block."""
        return indata[:, 0] if indata.ndim > 1 else indata
