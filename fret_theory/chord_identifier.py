"""Chord identification from an unordered set of sounded notes."""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from .intervals import absolute_intervals
from .logger import get_logger
from .note_types import ChordMatch, ChordType
from .note_utils import note_name, pitch_class_index
from .reference_data import CHORD_TYPES

logger = get_logger(__name__)

Signature = Tuple[int, ...]


def chord_signature(chord_type: ChordType) -> Signature:
    """Sorted, deduplicated offsets of a chord type's tones above its root.

    Offsets are in [1, 12); a tone landing on the root's pitch class (steps
    adding up to an octave) is left out, as it is when notes are identified.
    """
    return tuple(sorted(set(absolute_intervals(chord_type.intervals)) - {0}))


def build_signature_table(chord_types: Iterable[ChordType]) -> Mapping[Signature, str]:
    """Map each signature to the first chord type registered with it.

    A later chord type whose signature is already taken can never be
    identified; it is reported with a warning and left out of the table.
    """
    table = {}
    for chord_type in chord_types:
        signature = chord_signature(chord_type)
        if signature in table:
            logger.warning(
                f"Chord type {chord_type.name!r} has the same signature {signature} "
                f"as {table[signature]!r} and will not be identified"
            )
            continue
        table[signature] = chord_type.name
    return MappingProxyType(table)


class ChordIdentifier:
    """Matches sets of notes against the signatures of known chord types."""

    def __init__(self, chord_types: Iterable[ChordType] = CHORD_TYPES):
        self._signatures = build_signature_table(chord_types)
        logger.debug(f"Chord signature table built with {len(self._signatures)} entries")

    @property
    def signatures(self) -> Mapping[Signature, str]:
        return self._signatures

    def identify(self, notes: Iterable[str]) -> Optional[ChordMatch]:
        """Identify the chord formed by the given notes.

        Each unique pitch class is tried as the root in the order it first
        appears in ``notes``; the first root whose interval set matches a known
        signature wins.

        Args:
            notes: Pitch classes or full notes (e.g. ['C4', 'E4', 'G4'])

        Returns:
            The matching root and chord type name, or None when fewer than two
            distinct pitch classes are given or nothing matches

        Raises:
            UnknownPitchClass: If a note name is not recognized
        """
        unique = list(dict.fromkeys(note_name(n) for n in notes))
        indices = [pitch_class_index(name) for name in unique]
        if len(unique) < 2:
            return None

        for root, root_index in zip(unique, indices):
            signature = tuple(
                sorted(
                    (index - root_index) % 12
                    for index in indices
                    if index != root_index
                )
            )
            name = self._signatures.get(signature)
            if name is not None:
                logger.debug(f"Identified {root} {name} from {unique}")
                return ChordMatch(root=root, name=name)

        logger.debug(f"No chord matches {unique}")
        return None


_default_identifier = ChordIdentifier()


def identify_chord(notes: Iterable[str]) -> Optional[ChordMatch]:
    """Identify notes against the built-in chord table."""
    return _default_identifier.identify(notes)


def toggle_note(selection: Sequence[str], note: str) -> List[str]:
    """Add a note to a selection, or remove it if it is already selected."""
    if note in selection:
        return [n for n in selection if n != note]
    return [*selection, note]


def displayed_notes(selection: Iterable[str]) -> List[str]:
    """Unique pitch classes of a selection in chromatic order from C."""
    return sorted(set(note_name(n) for n in selection), key=pitch_class_index)


def describe(match: Optional[ChordMatch]) -> str:
    return str(match) if match else "Chord not identified"
