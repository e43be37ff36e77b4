"""Note sets built from a root and a list of semitone steps."""

from typing import List, Sequence

from .errors import UnknownChordType, UnknownScale
from .logger import get_logger
from .note_utils import pitch_class_index
from .reference_data import CHORD_TYPES_BY_NAME, PITCH_CLASSES, SCALES_BY_NAME

logger = get_logger(__name__)


def notes_from_intervals(root: str, intervals: Sequence[int]) -> List[str]:
    """Pitch classes reached by stepping through intervals from the root.

    The root comes first and each step appends one pitch class. A scale's last
    step lands on the root again, so duplicates are dropped while keeping the
    order in which notes were first reached.

    Args:
        root: Root pitch class (e.g., 'C')
        intervals: Semitone steps (e.g., [4, 3] for a major triad)

    Returns:
        Ordered unique pitch classes, e.g. ['C', 'E', 'G']

    Raises:
        UnknownPitchClass: If the root is not recognized
    """
    current = pitch_class_index(root)
    notes = [root]
    for step in intervals:
        current = (current + step) % 12
        notes.append(PITCH_CLASSES[current])
    return list(dict.fromkeys(notes))


def absolute_intervals(intervals: Sequence[int]) -> List[int]:
    """Cumulative offsets from the root, each reduced mod 12 ([4, 3] -> [4, 7])."""
    offsets = []
    total = 0
    for step in intervals:
        total += step
        offsets.append(total % 12)
    return offsets


def scale_notes(root: str, scale_name: str) -> List[str]:
    """Notes of a named scale from the reference table."""
    scale = SCALES_BY_NAME.get(scale_name)
    if scale is None:
        raise UnknownScale(scale_name)
    return notes_from_intervals(root, scale.intervals)


def chord_notes(root: str, chord_type_name: str) -> List[str]:
    """Notes of a named chord type from the reference table."""
    chord_type = CHORD_TYPES_BY_NAME.get(chord_type_name)
    if chord_type is None:
        raise UnknownChordType(chord_type_name)
    return notes_from_intervals(root, chord_type.intervals)
