"""Static reference tables: pitch classes, scales, chords, shapes and tunings.

Everything here is built once at import time and exposed through tuples and
read-only mappings.
"""

from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

from .note_types import BarreSpan, ChordShape, ChordType, Scale, Tuning

PITCH_CLASSES: Tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)

PITCH_CLASS_INDEX: Mapping[str, int] = MappingProxyType(
    {name: index for index, name in enumerate(PITCH_CLASSES)}
)

# Mapping between flat (and other enharmonic) spellings and the sharp table
FLAT_TO_SHARP: Mapping[str, str] = MappingProxyType(
    {
        "Db": "C#",
        "Eb": "D#",
        "Gb": "F#",
        "Ab": "G#",
        "Bb": "A#",
        "Cb": "B",
        "Fb": "E",
        "E#": "F",
        "B#": "C",
    }
)

A4_FREQUENCY = 440.0
A4_OCTAVE = 4

SCALES: Tuple[Scale, ...] = (
    Scale("Major", (2, 2, 1, 2, 2, 2, 1)),
    Scale("Natural Minor", (2, 1, 2, 2, 1, 2, 2)),
    Scale("Harmonic Minor", (2, 1, 2, 2, 1, 3, 1)),
    Scale("Melodic Minor", (2, 1, 2, 2, 2, 2, 1)),
    Scale("Major Pentatonic", (2, 2, 3, 2, 3)),
    Scale("Minor Pentatonic", (3, 2, 2, 3, 2)),
    Scale("Blues", (3, 2, 1, 1, 3, 2)),
    Scale("Dorian", (2, 1, 2, 2, 2, 1, 2)),
    Scale("Phrygian", (1, 2, 2, 2, 1, 2, 2)),
    Scale("Lydian", (2, 2, 2, 1, 2, 2, 1)),
    Scale("Mixolydian", (2, 2, 1, 2, 2, 1, 2)),
    Scale("Locrian", (1, 2, 2, 1, 2, 2, 2)),
    Scale("Whole Tone", (2, 2, 2, 2, 2, 2)),
    Scale("Diminished (H-W)", (1, 2, 1, 2, 1, 2, 1, 2)),
    Scale("Diminished (W-H)", (2, 1, 2, 1, 2, 1, 2, 1)),
    Scale("Augmented", (3, 1, 3, 1, 3, 1)),
)

CHORD_TYPES: Tuple[ChordType, ...] = (
    ChordType("Major Triad", (4, 3), ""),
    ChordType("Minor Triad", (3, 4), "m"),
    ChordType("Diminished Triad", (3, 3), "dim"),
    ChordType("Augmented Triad", (4, 4), "aug"),
    ChordType("Suspended 2nd", (2, 5), "sus2"),
    ChordType("Suspended 4th", (5, 2), "sus4"),
    ChordType("Major 7th", (4, 3, 4), "maj7"),
    ChordType("Minor 7th", (3, 4, 3), "m7"),
    ChordType("Dominant 7th", (4, 3, 3), "7"),
    ChordType("Diminished 7th", (3, 3, 3), "dim7"),
    ChordType("Half-Diminished 7th", (3, 3, 4), "m7b5"),
    ChordType("Major 6th", (4, 3, 2), "6"),
    ChordType("Minor 6th", (3, 4, 2), "m6"),
    ChordType("Major 9th", (4, 3, 4, 3), "maj9"),
    ChordType("Minor 9th", (3, 4, 3, 4), "m9"),
    ChordType("Dominant 9th", (4, 3, 3, 4), "9"),
)

SCALES_BY_NAME: Mapping[str, Scale] = MappingProxyType({s.name: s for s in SCALES})
CHORD_TYPES_BY_NAME: Mapping[str, ChordType] = MappingProxyType(
    {c.name: c for c in CHORD_TYPES}
)


def _shape(
    name: str,
    root_string: int,
    frets: Sequence[Optional[int]],
    fingers: Sequence[Optional[int]],
    barres: Sequence[Tuple[int, int]] = (),
) -> ChordShape:
    return ChordShape(
        name=name,
        root_string=root_string,
        frets=tuple(frets),
        fingers=tuple(fingers),
        barres=tuple(BarreSpan(start, end) for start, end in barres),
    )


X = None  # Muted string

# Movable CAGED shapes; frets are relative to the shape origin (the barre)
GUITAR_MOVABLE_SHAPES: Mapping[str, ChordShape] = MappingProxyType(
    {
        "E_MAJOR": _shape("E Major Shape", 0, (0, 2, 2, 1, 0, 0), (1, 3, 4, 2, 1, 1), [(0, 5)]),
        "E_MINOR": _shape("E Minor Shape", 0, (0, 2, 2, 0, 0, 0), (1, 3, 4, 1, 1, 1), [(0, 5)]),
        "E_DOM7": _shape("E Dom7 Shape", 0, (0, 2, 0, 1, 0, 0), (1, 3, 1, 2, 1, 1), [(0, 5)]),
        "E_MAJ7": _shape("E Maj7 Shape", 0, (0, 2, 1, 1, 0, 0), (1, 3, 2, 2, 1, 1), [(0, 5)]),
        "E_MIN7": _shape("E Min7 Shape", 0, (0, 2, 0, 0, 0, 0), (1, 3, 1, 1, 1, 1), [(0, 5)]),
        "A_MAJOR": _shape("A Major Shape", 1, (X, 0, 2, 2, 2, 0), (X, 1, 3, 4, 2, 1), [(1, 5)]),
        "A_MINOR": _shape("A Minor Shape", 1, (X, 0, 2, 2, 1, 0), (X, 1, 3, 4, 2, 1), [(1, 5)]),
        "A_DOM7": _shape("A Dom7 Shape", 1, (X, 0, 2, 0, 2, 0), (X, 1, 3, 1, 4, 1), [(1, 5)]),
        "A_MAJ7": _shape("A Maj7 Shape", 1, (X, 0, 2, 1, 2, 0), (X, 1, 3, 2, 4, 1), [(1, 5)]),
        "A_MIN7": _shape("A Min7 Shape", 1, (X, 0, 2, 0, 1, 0), (X, 1, 3, 1, 2, 1), [(1, 5)]),
        "D_MAJOR": _shape("D Major Shape", 2, (X, X, 0, 2, 3, 2), (X, X, 1, 2, 4, 3)),
        "D_MINOR": _shape("D Minor Shape", 2, (X, X, 0, 2, 3, 1), (X, X, 1, 2, 4, 3)),
        "D_DOM7": _shape("D Dom7 Shape", 2, (X, X, 0, 2, 1, 2), (X, X, 1, 3, 2, 4)),
        "D_MAJ7": _shape("D Maj7 Shape", 2, (X, X, 0, 2, 2, 2), (X, X, 1, 2, 3, 4)),
        "D_MIN7": _shape("D Min7 Shape", 2, (X, X, 0, 2, 1, 1), (X, X, 1, 3, 2, 2)),
    }
)

# Chord types with a shape library entry; order is the registration order
CHORD_TYPE_TO_MOVABLE_SHAPES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "Major Triad": ("E_MAJOR", "A_MAJOR", "D_MAJOR"),
        "Minor Triad": ("E_MINOR", "A_MINOR", "D_MINOR"),
        "Dominant 7th": ("E_DOM7", "A_DOM7", "D_DOM7"),
        "Major 7th": ("E_MAJ7", "A_MAJ7", "D_MAJ7"),
        "Minor 7th": ("E_MIN7", "A_MIN7", "D_MIN7"),
    }
)

GUITAR_TUNING = Tuning("Standard", ("E2", "A2", "D3", "G3", "B3", "E4"))
BASS_TUNING = Tuning("Standard", ("E1", "A1", "D2", "G2"))

FRET_COUNT = 24
PIANO_KEY_COUNT = 24  # 2 octaves


def shapes_for_chord_type(chord_type_name: str) -> List[ChordShape]:
    """Shapes registered for a chord type, in registration order."""
    keys = CHORD_TYPE_TO_MOVABLE_SHAPES.get(chord_type_name, ())
    return [GUITAR_MOVABLE_SHAPES[key] for key in keys if key in GUITAR_MOVABLE_SHAPES]
