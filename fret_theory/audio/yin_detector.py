"""YIN pitch detection backed by aubio.

An alternative to the autocorrelation detector, selected with the factory's
``"yin"`` implementation name.
"""

from __future__ import annotations
from typing import ClassVar, Dict, Optional, Tuple

import aubio
import numpy as np

from ..core.interfaces import IPitchDetector
from ..logger import get_logger
from ..note_types import PitchEstimate
from .pitch_detector import frequency_to_estimate, rms

logger = get_logger(__name__)


class YinPitchDetector(IPitchDetector):
    """Estimates pitch with aubio's YIN implementation."""

    MIN_FREQUENCY: ClassVar[float] = 30.0  # Hz - below this is probably noise
    MAX_FREQUENCY: ClassVar[float] = 2000.0

    def __init__(
        self,
        tolerance: float = 0.8,
        min_confidence: float = 0.5,
        silence_rms: float = 0.01,
    ) -> None:
        self._tolerance = tolerance
        self._min_confidence = min_confidence
        self._silence_rms = silence_rms
        # aubio objects are tied to one buffer size and sample rate
        self._detectors: Dict[Tuple[int, int], aubio.pitch] = {}

    def _detector_for(self, size: int, sample_rate: int) -> aubio.pitch:
        key = (size, sample_rate)
        if key not in self._detectors:
            detector = aubio.pitch("yin", size, size, sample_rate)
            detector.set_unit("Hz")
            detector.set_tolerance(self._tolerance)
            self._detectors[key] = detector
            logger.info(f"YIN detector created: buffer={size}, sample_rate={sample_rate}")
        return self._detectors[key]

    def estimate(self, audio_data: np.ndarray, sample_rate: int) -> Optional[PitchEstimate]:
        audio_data = np.asarray(audio_data, dtype=np.float32).ravel()
        if rms(audio_data) < self._silence_rms:
            return None

        detector = self._detector_for(len(audio_data), int(sample_rate))
        pitch = float(detector(audio_data)[0])
        confidence = float(detector.get_confidence())

        if (
            confidence < self._min_confidence
            or pitch < self.MIN_FREQUENCY
            or pitch > self.MAX_FREQUENCY
        ):
            logger.debug(f"YIN rejected {pitch:.1f}Hz (confidence {confidence:.2f})")
            return None
        return frequency_to_estimate(pitch)
