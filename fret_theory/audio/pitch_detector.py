"""Autocorrelation pitch detection for the chromatic tuner."""

from __future__ import annotations
from typing import ClassVar, Optional, TypeAlias

import numpy as np

from ..core.interfaces import IPitchDetector
from ..logger import get_logger
from ..note_types import PitchEstimate
from ..note_utils import get_note_name
from ..reference_data import A4_FREQUENCY, PITCH_CLASSES, PITCH_CLASS_INDEX

logger = get_logger(__name__)

Frequency: TypeAlias = float


def rms(audio_data: np.ndarray) -> float:
    """Root mean square level of a buffer."""
    if audio_data.size == 0:
        return 0.0
    return float(np.sqrt(np.mean(np.square(audio_data, dtype=np.float64))))


def trim_edges(audio_data: np.ndarray, threshold: float) -> np.ndarray:
    """Cut the buffer between the first quiet sample from each end.

    The start is the first sample in the first half whose magnitude is below
    threshold; the end is found the same way scanning back through the last
    half.
    """
    size = len(audio_data)
    half = (size + 1) // 2
    magnitude = np.abs(audio_data)

    start, end = 0, size - 1
    for i in range(half):
        if magnitude[i] < threshold:
            start = i
            break
    for i in range(1, half):
        if magnitude[size - i] < threshold:
            end = size - i
            break
    return audio_data[start:end]


def autocorrelation(audio_data: np.ndarray) -> np.ndarray:
    """Unnormalized autocorrelation for lags 0..len(audio_data) - 1."""
    samples = np.asarray(audio_data, dtype=np.float64)
    return np.correlate(samples, samples, mode="full")[len(samples) - 1:]


def refine_peak(correlation: np.ndarray, lag: int) -> float:
    """Parabolic interpolation of the peak around an integer lag."""
    if lag <= 0 or lag >= len(correlation) - 1:
        return float(lag)
    y1, y2, y3 = correlation[lag - 1], correlation[lag], correlation[lag + 1]
    a = (y1 + y3 - 2 * y2) / 2
    b = (y3 - y1) / 2
    if a == 0:
        return float(lag)
    return lag - b / (2 * a)


def autocorrelate(
    audio_data: np.ndarray,
    sample_rate: int,
    silence_rms: float = 0.01,
    trim_threshold: float = 0.2,
) -> Optional[Frequency]:
    """Estimate the fundamental frequency of a buffer.

    Args:
        audio_data: Mono samples in [-1, 1]
        sample_rate: Sample rate in Hz
        silence_rms: Buffers quieter than this RMS level have no pitch
        trim_threshold: Magnitude below which edge samples count as quiet

    Returns:
        Frequency in Hz, or None for silence or when no period is found
    """
    audio_data = np.asarray(audio_data, dtype=np.float64).ravel()
    if rms(audio_data) < silence_rms:
        return None

    trimmed = trim_edges(audio_data, trim_threshold)
    correlation = autocorrelation(trimmed)
    if len(correlation) < 2:
        return None

    # Skip the zero-lag peak and the slope falling away from it
    d = 0
    while d + 1 < len(correlation) and correlation[d] > correlation[d + 1]:
        d += 1

    lag = d + int(np.argmax(correlation[d:]))
    if correlation[lag] <= -1:
        return None

    period = refine_peak(correlation, lag)
    if period <= 0:
        return None
    return sample_rate / period


def frequency_to_estimate(frequency: Frequency) -> Optional[PitchEstimate]:
    """Nearest equal-tempered pitch class (A4 = 440 Hz) and cents deviation."""
    if not np.isfinite(frequency) or frequency <= 0:
        return None

    semitones = 12 * np.log2(frequency / A4_FREQUENCY)
    # Halves round up
    nearest = int(np.floor(semitones + 0.5))
    name = PITCH_CLASSES[(PITCH_CLASS_INDEX["A"] + nearest) % 12]
    perfect = A4_FREQUENCY * 2.0 ** (nearest / 12)
    cents = float(1200 * np.log2(frequency / perfect))

    return PitchEstimate(
        note_name=name,
        cents=cents,
        frequency=float(frequency),
        full_note=get_note_name(frequency),
    )


def estimate_pitch(
    audio_data: np.ndarray,
    sample_rate: int,
    silence_rms: float = 0.01,
    trim_threshold: float = 0.2,
) -> Optional[PitchEstimate]:
    """Nearest note and cents deviation of a buffer, or None if it has no pitch."""
    frequency = autocorrelate(audio_data, sample_rate, silence_rms, trim_threshold)
    if frequency is None:
        return None
    return frequency_to_estimate(frequency)


class PitchDetector(IPitchDetector):
    """Detects the dominant pitch of an audio buffer by autocorrelation."""

    DEFAULT_SILENCE_RMS: ClassVar[float] = 0.01  # Below this the buffer is noise floor
    DEFAULT_TRIM_THRESHOLD: ClassVar[float] = 0.2

    def __init__(
        self,
        silence_rms: float = DEFAULT_SILENCE_RMS,
        trim_threshold: float = DEFAULT_TRIM_THRESHOLD,
    ) -> None:
        self._silence_rms = silence_rms
        self._trim_threshold = trim_threshold
        logger.debug(
            f"Pitch detector initialized: silence_rms={silence_rms}, "
            f"trim_threshold={trim_threshold}"
        )

    def estimate(self, audio_data: np.ndarray, sample_rate: int) -> Optional[PitchEstimate]:
        estimate = estimate_pitch(
            audio_data, sample_rate, self._silence_rms, self._trim_threshold
        )
        if estimate is not None:
            logger.debug(
                f"{estimate.frequency:.2f}Hz -> {estimate.note_name} ({estimate.cents:+.1f} cents)"
            )
        return estimate
