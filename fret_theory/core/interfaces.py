"""Defines the core interfaces for the fret-theory audio components."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Optional

import numpy as np

from ..note_types import PitchEstimate


class IAudioInput(ABC):
    """Interface for audio input handlers."""

    @abstractmethod
    def start(self, callback: Callable[[np.ndarray, float], None]) -> None:
        """Start capturing audio, passing (mono samples, timestamp) to callback.

        Raises:
            InputDeviceUnavailable: If the stream cannot be opened
        """
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop capturing audio and release the stream."""
        pass

    @abstractmethod
    def is_running(self) -> bool:
        """Check if audio is running."""
        pass

    @property
    @abstractmethod
    def sample_rate(self) -> int:
        """The sample rate of the audio stream."""
        pass


class IPitchDetector(ABC):
    """Interface for single-pitch estimation algorithms."""

    @abstractmethod
    def estimate(self, audio_data: np.ndarray, sample_rate: int) -> Optional[PitchEstimate]:
        """Estimate the dominant pitch of one buffer, or None if there is none."""
        pass


class ITunerSession(ABC):
    """Interface for a listening tuner."""

    @abstractmethod
    def start(self) -> None:
        """Acquire the input stream and begin estimating."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop estimating and release the input stream."""
        pass

    @abstractmethod
    def is_listening(self) -> bool:
        pass

    @property
    @abstractmethod
    def current_estimate(self) -> Optional[PitchEstimate]:
        """The latest estimate, None while idle or when no pitch is heard."""
        pass
