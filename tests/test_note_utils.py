import unittest

from fret_theory.errors import InvalidNoteFormat, UnknownPitchClass
from fret_theory.note_utils import (
    NOT_FOUND,
    fret_for_pitch_class_on_string,
    frequency_for_full_note,
    get_note_name,
    normalize_to_sharp,
    note_name,
    pitch_class_index,
    split_full_note,
    transpose_on_string,
)


class TestPitchClassIndex(unittest.TestCase):
    def test_canonical_order(self):
        self.assertEqual(pitch_class_index("C"), 0)
        self.assertEqual(pitch_class_index("C#"), 1)
        self.assertEqual(pitch_class_index("A"), 9)
        self.assertEqual(pitch_class_index("B"), 11)

    def test_unknown_names(self):
        for name in ("H", "Db", "c", "", "C#4"):
            with self.assertRaises(UnknownPitchClass):
                pitch_class_index(name)


class TestNoteName(unittest.TestCase):
    def test_strips_octave(self):
        self.assertEqual(note_name("E4"), "E")
        self.assertEqual(note_name("C#3"), "C#")
        self.assertEqual(note_name("A#10"), "A#")
        self.assertEqual(note_name("G"), "G")

    def test_split_full_note(self):
        self.assertEqual(split_full_note("C#4"), ("C#", 4))
        self.assertEqual(split_full_note("E2"), ("E", 2))

    def test_negative_octave(self):
        self.assertEqual(split_full_note("C-1"), ("C", -1))
        self.assertEqual(split_full_note("C#-1"), ("C#", -1))
        self.assertEqual(note_name("C#-1"), "C#")

    def test_split_requires_octave(self):
        with self.assertRaises(InvalidNoteFormat):
            split_full_note("C#")

    def test_normalize_to_sharp(self):
        self.assertEqual(normalize_to_sharp("Bb"), "A#")
        self.assertEqual(normalize_to_sharp("Gb2"), "F#2")
        self.assertEqual(normalize_to_sharp("Cb4"), "B4")
        self.assertEqual(normalize_to_sharp("F#"), "F#")
        self.assertEqual(normalize_to_sharp("E"), "E")


class TestTransposeOnString(unittest.TestCase):
    def test_octave_rolls_over_at_twelve(self):
        self.assertEqual(transpose_on_string("E2", 12), "E3")
        self.assertEqual(transpose_on_string("E2", 24), "E4")

    def test_crossing_b_to_c(self):
        self.assertEqual(transpose_on_string("B3", 2), "C#4")
        self.assertEqual(transpose_on_string("B3", 1), "C4")

    def test_large_offsets(self):
        self.assertEqual(transpose_on_string("E2", 25), "F4")
        self.assertEqual(transpose_on_string("A1", 15), "C3")

    def test_open_string(self):
        self.assertEqual(transpose_on_string("G3", 0), "G3")

    def test_requires_octave(self):
        with self.assertRaises(InvalidNoteFormat):
            transpose_on_string("E", 3)

    def test_from_negative_octave(self):
        self.assertEqual(transpose_on_string("B-1", 1), "C0")
        self.assertEqual(transpose_on_string("C-1", 12), "C0")


class TestFretForPitchClass(unittest.TestCase):
    def test_open_string_is_fret_zero(self):
        self.assertEqual(fret_for_pitch_class_on_string("E", "E2"), 0)

    def test_fretted_notes(self):
        self.assertEqual(fret_for_pitch_class_on_string("G", "E2"), 3)
        self.assertEqual(fret_for_pitch_class_on_string("C", "G3"), 5)
        self.assertEqual(fret_for_pitch_class_on_string("D#", "E2"), 11)

    def test_every_pitch_class_within_an_octave(self):
        for name in ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"):
            fret = fret_for_pitch_class_on_string(name, "A2")
            self.assertTrue(0 <= fret < 12)
            self.assertEqual(note_name(transpose_on_string("A2", fret)), name)

    def test_unknown_pitch_class(self):
        self.assertEqual(fret_for_pitch_class_on_string("H", "E2"), NOT_FOUND)
        self.assertEqual(fret_for_pitch_class_on_string("E", "X2"), NOT_FOUND)


class TestFrequencies(unittest.TestCase):
    def test_a4(self):
        self.assertAlmostEqual(frequency_for_full_note("A4"), 440.0)

    def test_reference_pitches(self):
        self.assertAlmostEqual(frequency_for_full_note("A3"), 220.0)
        self.assertAlmostEqual(frequency_for_full_note("C4"), 261.6256, places=3)
        self.assertAlmostEqual(frequency_for_full_note("E2"), 82.4069, places=3)

    def test_below_octave_zero(self):
        # MIDI note 0
        self.assertAlmostEqual(frequency_for_full_note("C-1"), 8.1758, places=3)
        self.assertEqual(get_note_name(8.1758), "C-1")
        self.assertEqual(get_note_name(frequency_for_full_note("G#-1")), "G#-1")

    def test_missing_octave(self):
        with self.assertRaises(InvalidNoteFormat):
            frequency_for_full_note("A")

    def test_note_name_from_frequency(self):
        # Middle C (C4) should be ~261.63 Hz
        self.assertEqual(get_note_name(261.63), "C4")
        self.assertEqual(get_note_name(440.0), "A4")
        self.assertEqual(get_note_name(246.94), "B3")
        self.assertEqual(get_note_name(277.18), "C#4")
        self.assertEqual(get_note_name(0), "---")


if __name__ == "__main__":
    unittest.main()
