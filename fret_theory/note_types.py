"""Type definitions for the fret-theory project."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


@dataclass(frozen=True)
class Scale:
    """A named scale built from semitone steps that add up to an octave."""

    name: str
    intervals: Tuple[int, ...]


@dataclass(frozen=True)
class ChordType:
    """A named chord built from semitone steps above the root."""

    name: str
    intervals: Tuple[int, ...]
    label: str = ""  # Short suffix for diagram titles (e.g., 'm', 'maj7')

    def display_name(self, root: str) -> str:
        """Title used for chord diagrams, e.g. 'Am' or 'Cmaj7'."""
        return f"{root}{self.label}"


@dataclass(frozen=True)
class Tuning:
    """Open-string notes of an instrument, lowest pitch first."""

    name: str
    notes: Tuple[str, ...]

    @property
    def string_count(self) -> int:
        return len(self.notes)


@dataclass(frozen=True)
class BarreSpan:
    """Strings from_string..to_string (inclusive) pressed by one finger."""

    from_string: int
    to_string: int
    fret: Optional[int] = None  # Only set once the shape is placed on the neck


@dataclass(frozen=True)
class ChordShape:
    """A movable chord fingering, with frets relative to the shape origin."""

    name: str
    root_string: int  # Index of the string carrying the root (0 = lowest)
    frets: Tuple[Optional[int], ...]  # None means muted
    fingers: Tuple[Optional[int], ...]
    barres: Tuple[BarreSpan, ...] = ()


@dataclass(frozen=True)
class ChordVoicing:
    """A chord shape placed at a concrete fret."""

    frets: Tuple[Optional[int], ...]  # Absolute frets, None for muted strings
    fingers: Tuple[Optional[int], ...]
    barres: Tuple[BarreSpan, ...]
    position: int  # Fret the shape origin was placed on
    shape_name: str = ""

    @property
    def sounded_frets(self) -> Tuple[int, ...]:
        return tuple(f for f in self.frets if f is not None)


@dataclass(frozen=True)
class ChordMatch:
    """Result of identifying a chord from a set of notes."""

    root: str
    name: str

    def __str__(self):
        return f"{self.root} {self.name}"


class TuningStatus(Enum):
    """How close a detected pitch is to the nearest tempered note."""

    IN_TUNE = "in tune"
    CLOSE = "close"
    OUT_OF_TUNE = "out of tune"


@dataclass(frozen=True)
class PitchEstimate:
    """Represents the pitch detected in one audio frame."""

    note_name: str  # Pitch class name (e.g., 'A')
    cents: float  # Deviation from the nearest tempered pitch
    frequency: float  # Detected fundamental in Hz
    full_note: str = ""  # Nearest note with octave (e.g., 'A4')

    # Thresholds in cents
    IN_TUNE_CENTS = 5.0
    CLOSE_CENTS = 20.0

    @property
    def status(self) -> TuningStatus:
        deviation = abs(self.cents)
        if deviation < self.IN_TUNE_CENTS:
            return TuningStatus.IN_TUNE
        if deviation < self.CLOSE_CENTS:
            return TuningStatus.CLOSE
        return TuningStatus.OUT_OF_TUNE

    @property
    def needle_angle(self) -> float:
        """Tuner needle rotation in degrees, clamped to +/-45."""
        return max(-45.0, min(45.0, self.cents * 0.9))
