"""Main entry point for the fret-theory CLI."""

import functools
import time
from typing import Optional

import click
import numpy as np

from ..chord_identifier import describe, displayed_notes, identify_chord
from ..core.config import ConfigManager
from ..core.events import TunerEventType
from ..core.factory import ComponentFactory
from ..errors import FretTheoryError
from ..instruments import FRET_MARKERS, Instrument, fretboard_start_fret, fretboard_window
from ..intervals import chord_notes, scale_notes
from ..logger import get_logger
from ..logging_config import setup_logging
from ..note_types import ChordVoicing, PitchEstimate
from ..note_utils import frequency_for_full_note, note_name, normalize_to_sharp
from ..reference_data import CHORD_TYPES, CHORD_TYPES_BY_NAME, SCALES
from ..voicings import chord_voicings, display_start_fret

logger = get_logger(__name__)

SCALE_NAMES = [s.name for s in SCALES]
CHORD_NAMES = [c.name for c in CHORD_TYPES]
FRETTED = {"guitar": Instrument.GUITAR, "bass": Instrument.BASS}


def reports_errors(func):
    """Turn fret-theory errors into clean CLI failures."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FretTheoryError as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def format_voicing(voicing: ChordVoicing) -> str:
    frets = " ".join("x" if f is None else str(f) for f in voicing.frets)
    fingers = " ".join("x" if f is None else str(f) for f in voicing.fingers)
    barres = ", ".join(
        f"strings {b.from_string + 1}-{b.to_string + 1} at fret {b.fret}" for b in voicing.barres
    )
    return (
        f"{voicing.shape_name} (position {voicing.position}, diagram from fret "
        f"{display_start_fret(voicing)}): frets {frets} | fingers {fingers}"
        + (f" | barre {barres}" if barres else "")
    )


def format_estimate(estimate: Optional[PitchEstimate]) -> str:
    if estimate is None:
        return "..."
    return (
        f"{estimate.note_name:<2} {estimate.cents:+6.1f} cents  "
        f"({estimate.status.value}, {estimate.frequency:.2f}Hz)"
    )


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug):
    """fret-theory - scales, chords, guitar voicings and a chromatic tuner"""
    setup_logging(level="DEBUG" if debug else None)


@cli.command()
@click.argument("root")
@click.option("--name", "-n", type=click.Choice(SCALE_NAMES), default="Major", show_default=True)
@reports_errors
def scale(root, name):
    """Show the notes of a scale."""
    click.echo(" ".join(scale_notes(normalize_to_sharp(root), name)))


@cli.command()
@click.argument("root")
@click.option("--type", "-t", "chord_type", type=click.Choice(CHORD_NAMES), default="Major Triad", show_default=True)
@reports_errors
def chord(root, chord_type):
    """Show the notes of a chord."""
    root = normalize_to_sharp(root)
    notes = chord_notes(root, chord_type)
    click.echo(f"{CHORD_TYPES_BY_NAME[chord_type].display_name(root)}: {' '.join(notes)}")


@cli.command()
@click.argument("notes", nargs=-1, required=True)
@reports_errors
def identify(notes):
    """Identify the chord formed by NOTES (e.g. C4 E4 G4)."""
    notes = [normalize_to_sharp(n) for n in notes]
    click.echo(f"Notes: {' '.join(displayed_notes(notes))}")
    click.echo(describe(identify_chord(notes)))


@cli.command()
@click.argument("root")
@click.option("--type", "-t", "chord_type", type=click.Choice(CHORD_NAMES), default="Major Triad", show_default=True)
@click.option("--instrument", "-i", type=click.Choice(sorted(FRETTED)), default="guitar", show_default=True)
@click.option("--max-fret", type=int, default=None, help="Highest playable fret (default from config)")
@reports_errors
def voicings(root, chord_type, instrument, max_fret):
    """List movable-shape voicings of a chord."""
    root = normalize_to_sharp(root)
    if max_fret is None:
        max_fret = ConfigManager().get_config("fretboard").get("max_fret", 24)

    found = chord_voicings(root, chord_type, FRETTED[instrument].tuning, max_fret)
    title = CHORD_TYPES_BY_NAME[chord_type].display_name(root)
    if not found:
        click.echo(f"No voicings for {title} within fret {max_fret}")
        return
    for number, voicing in enumerate(found, start=1):
        click.echo(f"{title} voicing {number} of {len(found)}: {format_voicing(voicing)}")


@cli.command()
@click.argument("root")
@click.option("--name", "-n", type=click.Choice(SCALE_NAMES), default="Major", show_default=True)
@click.option("--instrument", "-i", type=click.Choice(sorted(FRETTED)), default="guitar", show_default=True)
@reports_errors
def fretboard(root, name, instrument):
    """Show where a scale falls on the neck around its root."""
    root = normalize_to_sharp(root)
    highlighted = set(scale_notes(root, name))
    tuning = FRETTED[instrument].tuning
    viewport = ConfigManager().get_config("fretboard").get("viewport_frets", 7)

    start = fretboard_start_fret(root, tuning)
    frets = range(start, start + viewport + 1)
    click.echo("    " + "".join(f"{fret:>4}" for fret in frets))
    click.echo("    " + "".join(f"{'*' if fret in FRET_MARKERS else '':>4}" for fret in frets))
    rows = fretboard_window(tuning, start, viewport)
    # Highest string on top, as on a tab
    for open_note, row in reversed(list(zip(tuning.notes, rows))):
        cells = []
        for full in row:
            name_only = note_name(full)
            cell = name_only if name_only in highlighted else "-"
            cells.append(f"{cell:>4}")
        click.echo(f"{open_note:<4}" + "".join(cells))


@cli.command()
def devices():
    """List audio input devices."""
    from ..audio.sound_device_input import list_input_devices

    for device in list_input_devices():
        click.echo(
            f"[{device['id']}] {device['name']} "
            f"(inputs: {device['channels']}, {device['default_samplerate']:.0f}Hz)"
        )


@cli.command()
@click.argument("note")
@click.option("--out", "-o", "out_path", type=click.Path(dir_okay=False), required=True)
@click.option("--duration", "-d", type=float, default=2.0, show_default=True)
@click.option("--sample-rate", type=int, default=44100, show_default=True)
@reports_errors
def tone(note, out_path, duration, sample_rate):
    """Write a reference sine tone for NOTE (e.g. E2) to a WAV file."""
    import soundfile as sf

    frequency = frequency_for_full_note(normalize_to_sharp(note))
    t = np.arange(int(duration * sample_rate)) / sample_rate
    samples = (0.5 * np.sin(2 * np.pi * frequency * t)).astype(np.float32)
    sf.write(out_path, samples, sample_rate)
    click.echo(f"Wrote {note} ({frequency:.2f}Hz) to {out_path}")


def _print_changes(session):
    """Echo estimates as they change while a session runs."""
    last = {"line": None}

    def on_pitch(estimate):
        line = format_estimate(estimate)
        if line != last["line"]:
            last["line"] = line
            click.echo(line)

    session.events.on(TunerEventType.PITCH_UPDATED, on_pitch)


@cli.command()
@click.option("--device", type=int, default=None, help="Audio input device ID")
@click.option("--duration", "-d", type=float, default=15.0, show_default=True)
@click.option("--implementation", type=click.Choice(["autocorrelation", "yin"]), default=None)
@reports_errors
def tune(device, duration, implementation):
    """Run the chromatic tuner on a live input."""
    factory = ComponentFactory()
    session = factory.create_tuner_session(
        audio_input=factory.create_audio_input(device_id=device),
        pitch_detector=factory.create_pitch_detector(implementation),
    )
    _print_changes(session)
    click.echo("Listening... (Ctrl+C to stop)")
    try:
        with session:
            time.sleep(duration)
    except KeyboardInterrupt:
        click.echo("Stopped")


@cli.command(name="tune-file")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--implementation", type=click.Choice(["autocorrelation", "yin"]), default=None)
@reports_errors
def tune_file(path, implementation):
    """Run the chromatic tuner over a WAV file in real time."""
    factory = ComponentFactory()
    audio_input = factory.create_audio_input(file_path=path)
    session = factory.create_tuner_session(
        audio_input=audio_input,
        pitch_detector=factory.create_pitch_detector(implementation),
    )
    _print_changes(session)
    with session:
        audio_input.wait_until_finished()


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
