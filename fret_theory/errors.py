"""Exceptions raised by fret-theory.

Only malformed input and device failures are errors. Empty results such as an
unidentified chord, a chord type without guitar shapes, or a silent audio frame
are returned as ``None`` or an empty list.
"""


class FretTheoryError(Exception):
    """Base class for all fret-theory errors."""


class UnknownPitchClass(FretTheoryError, ValueError):
    """A note name is not one of the twelve canonical pitch classes."""

    def __init__(self, name: str):
        super().__init__(f"Unknown pitch class: {name!r}")
        self.name = name


class InvalidNoteFormat(FretTheoryError, ValueError):
    """A full note (pitch class plus octave) was expected but not given."""

    def __init__(self, note: str):
        super().__init__(f"Invalid note format (expected e.g. 'C#4'): {note!r}")
        self.note = note


class UnknownScale(FretTheoryError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown scale: {name!r}")
        self.name = name


class UnknownChordType(FretTheoryError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Unknown chord type: {name!r}")
        self.name = name


class InputDeviceUnavailable(FretTheoryError, RuntimeError):
    """The audio input stream could not be opened."""
