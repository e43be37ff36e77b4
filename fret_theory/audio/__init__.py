"""Audio input, pitch detection and the tuner session.

Device and file inputs live in ``sound_device_input`` and ``wav_file_input``
and are imported directly, since they load native audio libraries.
"""

from .pitch_detector import (
    PitchDetector,
    autocorrelate,
    estimate_pitch,
    frequency_to_estimate,
)
from .sample_buffer import SampleBuffer
from .tuner_session import TunerSession, TunerState

__all__ = [
    "PitchDetector",
    "SampleBuffer",
    "TunerSession",
    "TunerState",
    "autocorrelate",
    "estimate_pitch",
    "frequency_to_estimate",
]
