"""fret-theory: scales, chords, guitar voicings and a chromatic tuner."""

from .chord_identifier import ChordIdentifier, identify_chord
from .errors import (
    FretTheoryError,
    InputDeviceUnavailable,
    InvalidNoteFormat,
    UnknownChordType,
    UnknownPitchClass,
    UnknownScale,
)
from .intervals import chord_notes, notes_from_intervals, scale_notes
from .note_types import ChordMatch, ChordVoicing, PitchEstimate, TuningStatus
from .note_utils import (
    fret_for_pitch_class_on_string,
    frequency_for_full_note,
    note_name,
    pitch_class_index,
    transpose_on_string,
)
from .voicings import chord_voicings, display_start_fret

__version__ = "0.1.0"

__all__ = [
    "ChordIdentifier",
    "ChordMatch",
    "ChordVoicing",
    "FretTheoryError",
    "InputDeviceUnavailable",
    "InvalidNoteFormat",
    "PitchEstimate",
    "TuningStatus",
    "UnknownChordType",
    "UnknownPitchClass",
    "UnknownScale",
    "chord_notes",
    "chord_voicings",
    "display_start_fret",
    "fret_for_pitch_class_on_string",
    "frequency_for_full_note",
    "identify_chord",
    "note_name",
    "notes_from_intervals",
    "pitch_class_index",
    "scale_notes",
    "transpose_on_string",
]
