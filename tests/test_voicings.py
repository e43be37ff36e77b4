import pytest

from fret_theory.errors import UnknownChordType
from fret_theory.note_types import BarreSpan, ChordShape, ChordVoicing
from fret_theory.reference_data import BASS_TUNING, GUITAR_TUNING
from fret_theory.voicings import (
    chord_voicings,
    display_start_fret,
    place_shape,
    voicings_for_shapes,
)


def test_a_major_voicings():
    voicings = chord_voicings("A", "Major Triad", GUITAR_TUNING, 24)

    assert [v.shape_name for v in voicings] == [
        "A Major Shape",
        "E Major Shape",
        "D Major Shape",
    ]
    open_a, e_shape, d_shape = voicings

    assert open_a.frets == (None, 0, 2, 2, 2, 0)
    assert open_a.position == 0
    assert open_a.barres == ()

    assert e_shape.frets == (5, 7, 7, 6, 5, 5)
    assert e_shape.position == 5
    assert e_shape.barres == (BarreSpan(0, 5, 5),)

    assert d_shape.frets == (None, None, 7, 9, 10, 9)
    assert d_shape.barres == ()


def test_voicings_are_ordered_by_lowest_sounded_fret():
    voicings = chord_voicings("G", "Major Triad")
    assert [v.shape_name for v in voicings] == [
        "E Major Shape",
        "D Major Shape",
        "A Major Shape",
    ]
    assert [v.position for v in voicings] == [3, 5, 10]
    assert voicings[2].barres == (BarreSpan(1, 5, 10),)


def test_max_fret_discards_shapes():
    assert len(chord_voicings("A", "Major Triad", max_fret=8)) == 2
    only = chord_voicings("A", "Major Triad", max_fret=4)
    assert [v.shape_name for v in only] == ["A Major Shape"]


def test_every_fret_within_bounds():
    for root in ("C", "F#", "A#", "B"):
        for voicing in chord_voicings(root, "Minor 7th", max_fret=12):
            assert all(0 <= f <= 12 for f in voicing.sounded_frets)


def test_muted_strings_stay_muted():
    for voicing in chord_voicings("C", "Dominant 7th"):
        if voicing.shape_name.startswith("D "):
            assert voicing.frets[:2] == (None, None)


def test_chord_type_without_shapes():
    assert chord_voicings("C", "Suspended 2nd") == []


def test_unknown_chord_type_raises():
    with pytest.raises(UnknownChordType):
        chord_voicings("C", "Power Chord")


def test_shapes_do_not_fit_bass_tuning():
    assert chord_voicings("A", "Major Triad", BASS_TUNING) == []


def test_results_are_repeatable():
    assert chord_voicings("C", "Major 7th") == chord_voicings("C", "Major 7th")


def test_ties_keep_registration_order():
    first = ChordShape("First", 0, (0, None, None, None, None, None), (1, None, None, None, None, None))
    second = ChordShape("Second", 0, (0, 0, None, None, None, None), (1, 1, None, None, None, None))
    voicings = voicings_for_shapes([first, second], "F", GUITAR_TUNING)
    assert [v.shape_name for v in voicings] == ["First", "Second"]
    voicings = voicings_for_shapes([second, first], "F", GUITAR_TUNING)
    assert [v.shape_name for v in voicings] == ["Second", "First"]


def test_place_shape_rejects_out_of_range_root_string():
    shape = ChordShape("Broken", 7, (0,) * 6, (1,) * 6)
    assert place_shape(shape, "C", GUITAR_TUNING) is None


def test_display_start_fret():
    open_a, e_shape, d_shape = chord_voicings("A", "Major Triad")
    assert display_start_fret(open_a) == 1
    assert display_start_fret(e_shape) == 5
    assert display_start_fret(d_shape) == 7


def test_display_start_fret_all_muted():
    voicing = ChordVoicing(frets=(None,) * 6, fingers=(None,) * 6, barres=(), position=0)
    assert display_start_fret(voicing) == 1
