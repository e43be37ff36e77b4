"""Guitar chord voicings generated from movable shape templates."""

from typing import Iterable, List, Optional

from .errors import UnknownChordType
from .logger import get_logger
from .note_types import BarreSpan, ChordShape, ChordVoicing, Tuning
from .note_utils import fret_for_pitch_class_on_string
from .reference_data import (
    CHORD_TYPES_BY_NAME,
    FRET_COUNT,
    GUITAR_TUNING,
    shapes_for_chord_type,
)

logger = get_logger(__name__)


def place_shape(
    shape: ChordShape, root: str, tuning: Tuning, max_fret: int = FRET_COUNT
) -> Optional[ChordVoicing]:
    """Move a shape so its reference string plays the root.

    Returns:
        The placed voicing, or None if it does not fit on the neck
    """
    if len(shape.frets) != tuning.string_count or not (
        0 <= shape.root_string < tuning.string_count
    ):
        logger.debug(
            f"{shape.name} does not fit a {tuning.string_count}-string tuning"
        )
        return None

    position = fret_for_pitch_class_on_string(root, tuning.notes[shape.root_string])
    if not 0 <= position <= max_fret:
        return None

    frets = tuple(None if f is None else f + position for f in shape.frets)
    if any(f > max_fret for f in frets if f is not None):
        logger.debug(f"{shape.name} at fret {position} runs past fret {max_fret}")
        return None

    # Open-position shapes have no barre; otherwise the barre sits on the origin
    barres = ()
    if position > 0:
        barres = tuple(
            BarreSpan(b.from_string, b.to_string, position) for b in shape.barres
        )

    return ChordVoicing(
        frets=frets,
        fingers=shape.fingers,
        barres=barres,
        position=position,
        shape_name=shape.name,
    )


def _lowest_fret(voicing: ChordVoicing) -> int:
    return min(voicing.sounded_frets, default=0)


def voicings_for_shapes(
    shapes: Iterable[ChordShape], root: str, tuning: Tuning, max_fret: int = FRET_COUNT
) -> List[ChordVoicing]:
    """Place every shape and order the results from the lowest fret up.

    Shapes with the same lowest fret keep their registration order.
    """
    voicings = []
    for shape in shapes:
        voicing = place_shape(shape, root, tuning, max_fret)
        if voicing is not None:
            voicings.append(voicing)
    return sorted(voicings, key=_lowest_fret)


def chord_voicings(
    root: str,
    chord_type_name: str,
    tuning: Tuning = GUITAR_TUNING,
    max_fret: int = FRET_COUNT,
) -> List[ChordVoicing]:
    """Playable voicings of a chord type rooted on the given pitch class.

    Chord types without registered shapes give an empty list.

    Raises:
        UnknownChordType: If the chord type name is not in the chord table
    """
    if chord_type_name not in CHORD_TYPES_BY_NAME:
        raise UnknownChordType(chord_type_name)

    shapes = shapes_for_chord_type(chord_type_name)
    if not shapes:
        logger.debug(f"No movable shapes registered for {chord_type_name!r}")
        return []

    voicings = voicings_for_shapes(shapes, root, tuning, max_fret)
    logger.debug(
        f"{len(voicings)}/{len(shapes)} shapes of {root} {chord_type_name} "
        f"fit within fret {max_fret}"
    )
    return voicings


def display_start_fret(voicing: ChordVoicing) -> int:
    """First fret shown on a chord diagram.

    Diagrams with an open string start at fret 1 (next to the nut); otherwise
    they start at the lowest fretted position.
    """
    fretted = [f for f in voicing.sounded_frets if f > 0]
    if not fretted or 0 in voicing.sounded_frets:
        return 1
    return min(fretted)
