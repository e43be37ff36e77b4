"""Instrument layouts: fretboard windows and piano keyboards."""

from enum import Enum
from typing import List, Optional, Tuple

from .logger import get_logger
from .note_types import Tuning
from .note_utils import NOT_FOUND, fret_for_pitch_class_on_string, transpose_on_string
from .reference_data import BASS_TUNING, FRET_COUNT, GUITAR_TUNING, PIANO_KEY_COUNT

logger = get_logger(__name__)

VIEWPORT_FRET_COUNT = 7
FRET_MARKERS: Tuple[int, ...] = (3, 5, 7, 9, 12, 15, 17, 19, 21, 24)

# (white key, black key to its right)
PIANO_LAYOUT: Tuple[Tuple[str, Optional[str]], ...] = (
    ("C", "C#"),
    ("D", "D#"),
    ("E", None),
    ("F", "F#"),
    ("G", "G#"),
    ("A", "A#"),
    ("B", None),
)
PIANO_START_OCTAVE = 3
PIANO_WHITE_KEYS = 15  # About two octaves


class Instrument(Enum):
    PIANO = "Piano"
    GUITAR = "Guitar"
    BASS = "Bass"

    @property
    def tuning(self) -> Optional[Tuning]:
        return {Instrument.GUITAR: GUITAR_TUNING, Instrument.BASS: BASS_TUNING}.get(self)

    @property
    def fret_count(self) -> int:
        return 0 if self is Instrument.PIANO else FRET_COUNT

    @property
    def key_count(self) -> int:
        return PIANO_KEY_COUNT if self is Instrument.PIANO else 0


def fretboard_start_fret(root: Optional[str], tuning: Tuning) -> int:
    """First fret of a fretboard window that shows the root near its left edge.

    Roots that can be played at fret 0-2 keep the nut in view.
    """
    if not root:
        return 0

    frets = [fret_for_pitch_class_on_string(root, note) for note in tuning.notes]
    frets = [f for f in frets if f != NOT_FOUND]
    if not frets or min(frets) < 3:
        return 0
    return max(0, min(frets) - 2)


def fretboard_window(
    tuning: Tuning, start_fret: int = 0, fret_count: int = VIEWPORT_FRET_COUNT
) -> List[List[str]]:
    """Full note at every position of a fretboard window.

    Returns:
        One row per string (lowest first), each with the notes at frets
        start_fret..start_fret + fret_count inclusive
    """
    frets = range(start_fret, start_fret + fret_count + 1)
    return [[transpose_on_string(open_note, fret) for fret in frets] for open_note in tuning.notes]


def piano_keys(
    start_octave: int = PIANO_START_OCTAVE, white_keys: int = PIANO_WHITE_KEYS
) -> List[Tuple[str, bool]]:
    """Keys of a keyboard from C of start_octave, as (full note, is_black)."""
    keys = []
    octave = start_octave
    for i in range(white_keys):
        white, black = PIANO_LAYOUT[i % len(PIANO_LAYOUT)]
        if white == "C" and i > 0:
            octave += 1
        keys.append((f"{white}{octave}", False))
        if black:
            keys.append((f"{black}{octave}", True))
    return keys
