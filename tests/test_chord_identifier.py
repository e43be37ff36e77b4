import logging
import unittest

import pytest

from fret_theory.chord_identifier import (
    ChordIdentifier,
    build_signature_table,
    chord_signature,
    describe,
    displayed_notes,
    identify_chord,
    toggle_note,
)
from fret_theory.errors import UnknownPitchClass
from fret_theory.note_types import ChordMatch, ChordType
from fret_theory.reference_data import CHORD_TYPES


class TestIdentifyChord(unittest.TestCase):
    def test_major_triad(self):
        self.assertEqual(identify_chord(["C", "E", "G"]), ChordMatch("C", "Major Triad"))

    def test_full_notes_and_octave_duplicates(self):
        self.assertEqual(
            identify_chord(["C4", "E4", "G4", "C5"]), ChordMatch("C", "Major Triad")
        )

    def test_inversion_finds_root(self):
        self.assertEqual(identify_chord(["E", "G", "C"]), ChordMatch("C", "Major Triad"))
        self.assertEqual(identify_chord(["G3", "C4", "E4"]), ChordMatch("C", "Major Triad"))

    def test_minor_triad(self):
        self.assertEqual(identify_chord(["C", "D#", "G"]), ChordMatch("C", "Minor Triad"))

    def test_first_root_in_discovery_order_wins(self):
        # The same four notes are C6 and Am7; the first note decides
        self.assertEqual(identify_chord(["C", "E", "G", "A"]), ChordMatch("C", "Major 6th"))
        self.assertEqual(identify_chord(["A", "C", "E", "G"]), ChordMatch("A", "Minor 7th"))

    def test_suspended_chords_depend_on_order(self):
        self.assertEqual(identify_chord(["C", "D", "G"]), ChordMatch("C", "Suspended 2nd"))
        self.assertEqual(identify_chord(["G", "C", "D"]), ChordMatch("G", "Suspended 4th"))

    def test_symmetric_chord(self):
        match = identify_chord(["B", "D", "F", "G#"])
        self.assertEqual(match, ChordMatch("B", "Diminished 7th"))

    def test_fewer_than_two_pitch_classes(self):
        self.assertIsNone(identify_chord([]))
        self.assertIsNone(identify_chord(["C"]))
        self.assertIsNone(identify_chord(["C3", "C4", "C5"]))

    def test_no_match(self):
        self.assertIsNone(identify_chord(["C", "C#"]))
        self.assertIsNone(identify_chord(["C", "C#", "D", "D#"]))

    def test_unknown_note_raises(self):
        with self.assertRaises(UnknownPitchClass):
            identify_chord(["C", "H", "G"])


class TestSignatureTable(unittest.TestCase):
    def test_signature_is_sorted_offsets(self):
        self.assertEqual(chord_signature(ChordType("Major 9th", (4, 3, 4, 3))), (2, 4, 7, 11))

    def test_octave_tone_is_not_part_of_the_signature(self):
        # Steps adding up to 12 land back on the root
        self.assertEqual(chord_signature(ChordType("Major Triad With Octave", (4, 3, 5))), (4, 7))
        self.assertEqual(chord_signature(ChordType("Power Chord With Octave", (7, 5))), (7,))

    def test_chord_with_octave_can_be_identified(self):
        identifier = ChordIdentifier([ChordType("Power Chord With Octave", (7, 5))])
        self.assertEqual(
            identifier.identify(["E2", "B2", "E3"]), ChordMatch("E", "Power Chord With Octave")
        )

    def test_builtin_table_has_every_chord_type(self):
        self.assertEqual(len(ChordIdentifier().signatures), len(CHORD_TYPES))

    def test_table_is_read_only(self):
        table = ChordIdentifier().signatures
        with self.assertRaises(TypeError):
            table[(4, 7)] = "Other"


def test_signature_collision_keeps_first_type(caplog):
    chord_types = [
        ChordType("Major Triad", (4, 3)),
        ChordType("Open Major Triad", (7, 9)),
    ]
    with caplog.at_level(logging.WARNING, logger="fret_theory.chord_identifier"):
        table = build_signature_table(chord_types)

    assert dict(table) == {(4, 7): "Major Triad"}
    assert "Open Major Triad" in caplog.text


def test_custom_identifier():
    identifier = ChordIdentifier([ChordType("Power Chord", (7,))])
    assert identifier.identify(["E2", "B2", "E3"]) == ChordMatch("E", "Power Chord")
    assert identifier.identify(["C", "E", "G"]) is None


def test_toggle_note():
    selection = toggle_note([], "E4")
    assert selection == ["E4"]
    selection = toggle_note(selection, "G4")
    assert selection == ["E4", "G4"]
    assert toggle_note(selection, "E4") == ["G4"]


def test_toggle_note_does_not_mutate():
    selection = ["C4"]
    toggle_note(selection, "E4")
    assert selection == ["C4"]


def test_displayed_notes_are_chromatic_from_c():
    assert displayed_notes(["G4", "C5", "E4", "C4"]) == ["C", "E", "G"]
    assert displayed_notes([]) == []


@pytest.mark.parametrize(
    "match, text",
    [
        (ChordMatch("A", "Minor 7th"), "A Minor 7th"),
        (None, "Chord not identified"),
    ],
)
def test_describe(match, text):
    assert describe(match) == text
