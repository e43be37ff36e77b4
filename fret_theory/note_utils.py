"""Utility functions for working with pitch classes, notes and frequencies."""

import re
from typing import Tuple

import numpy as np

from .errors import InvalidNoteFormat, UnknownPitchClass
from .logger import get_logger
from .reference_data import (
    A4_FREQUENCY,
    A4_OCTAVE,
    FLAT_TO_SHARP,
    PITCH_CLASSES,
    PITCH_CLASS_INDEX,
)

# Get logger for this module
logger = get_logger(__name__)

# Sentinel returned by fret lookups when a pitch class is not recognized
NOT_FOUND = -1

# Trailing octave of a full note (the "4" in "C#4", the "-1" in "C-1")
OCTAVE_PATTERN = re.compile(r"(-?\d+)$")


def pitch_class_index(name: str) -> int:
    """Look up a pitch class in the canonical twelve-note table.

    Args:
        name: Pitch class name using sharps (e.g., 'C#')

    Returns:
        int: Index in [0, 12), where C is 0

    Raises:
        UnknownPitchClass: If the name is not in the table
    """
    try:
        return PITCH_CLASS_INDEX[name]
    except (KeyError, TypeError):
        raise UnknownPitchClass(name) from None


def note_name(note: str) -> str:
    """Strip the octave from a note ('E4' -> 'E', 'C#3' -> 'C#').

    A pitch class name is one character, or two when the second character is
    an accidental.
    """
    if len(note) > 1 and note[1] in ("#", "b"):
        return note[:2]
    return note[:1]


def normalize_to_sharp(note: str) -> str:
    """Respell a flat (or E#/B#) note with the sharp table, keeping any octave.

    Examples:
        >>> normalize_to_sharp('Bb2')
        'A#2'
        >>> normalize_to_sharp('F#')
        'F#'
    """
    name = note_name(note)
    if name in FLAT_TO_SHARP:
        return FLAT_TO_SHARP[name] + note[len(name):]
    return note


def split_full_note(note: str) -> Tuple[str, int]:
    """Split a full note into its pitch class name and octave.

    Raises:
        InvalidNoteFormat: If there are no trailing octave digits
    """
    match = OCTAVE_PATTERN.search(note or "")
    if not match:
        raise InvalidNoteFormat(note)
    return note_name(note), int(match.group(1))


def transpose_on_string(open_string_note: str, fret: int) -> str:
    """Full note sounded at a fret on a string tuned to open_string_note.

    The octave rolls forward once per 12 semitones, so fret 12 on 'E2' is 'E3'
    and fret 2 on 'B3' is 'C#4'.

    Raises:
        InvalidNoteFormat: If the open string note has no octave
        UnknownPitchClass: If its pitch class is not recognized
    """
    open_name, open_octave = split_full_note(open_string_note)
    total_semitones = pitch_class_index(open_name) + fret
    octave = open_octave + total_semitones // 12
    return f"{PITCH_CLASSES[total_semitones % 12]}{octave}"


def fret_for_pitch_class_on_string(pitch_class: str, open_string_note: str) -> int:
    """Lowest fret in [0, 12) that plays pitch_class on the given open string.

    Returns:
        int: The fret, or NOT_FOUND if either pitch class is not recognized
    """
    open_index = PITCH_CLASS_INDEX.get(note_name(open_string_note))
    target_index = PITCH_CLASS_INDEX.get(pitch_class)
    if open_index is None or target_index is None:
        logger.debug(
            f"No fret for {pitch_class!r} on {open_string_note!r}: unknown pitch class"
        )
        return NOT_FOUND
    return (target_index - open_index + 12) % 12


def semitones_from_a4(note: str) -> int:
    """Signed semitone distance from A4 to a full note."""
    name, octave = split_full_note(note)
    a_index = PITCH_CLASS_INDEX["A"]
    return (pitch_class_index(name) - a_index) + (octave - A4_OCTAVE) * 12


def frequency_for_full_note(note: str) -> float:
    """Equal-tempered frequency of a full note, with A4 = 440 Hz.

    Raises:
        InvalidNoteFormat: If the note has no octave (e.g. 'C#')
        UnknownPitchClass: If the pitch class is not recognized
    """
    return A4_FREQUENCY * 2.0 ** (semitones_from_a4(note) / 12.0)


def get_note_name(freq: float) -> str:
    """Convert frequency to note name using Scientific Pitch Notation (SPN).

    Args:
        freq: Frequency in Hz

    Returns:
        Note name with octave in SPN (e.g., 'A4', 'C#4'), or '---' if freq <= 0

    Note:
        - Middle C is C4 (261.63 Hz)
        - Octave numbers change between B and C (e.g., B3 -> C4)
    """
    if freq <= 0:
        return "---"

    # Calculate half steps from A4 (A4 is 69 in MIDI)
    half_steps = int(np.floor(12 * np.log2(freq / A4_FREQUENCY) + 0.5))
    midi_number = 69 + half_steps

    octave = (midi_number // 12) - 1
    return f"{PITCH_CLASSES[midi_number % 12]}{octave}"
