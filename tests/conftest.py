import logging
import threading
from typing import Callable, List, Optional

import numpy as np
import pytest

from fret_theory import logging_config
from fret_theory.core.interfaces import IAudioInput
from fret_theory.errors import InputDeviceUnavailable


def sine_wave(
    frequency: float,
    sample_rate: int = 44100,
    size: int = 2048,
    amplitude: float = 0.5,
) -> np.ndarray:
    """A pure tone starting at phase zero."""
    t = np.arange(size) / sample_rate
    return (amplitude * np.sin(2 * np.pi * frequency * t)).astype(np.float32)


class FakeAudioInput(IAudioInput):
    """Audio input that only delivers what a test pushes into it."""

    def __init__(self, sample_rate: int = 44100, fail: bool = False):
        self._sample_rate = sample_rate
        self._fail = fail
        self._callback: Optional[Callable] = None
        self._running = False
        self.calls: List[str] = []
        self.loop_alive_at_stop: Optional[bool] = None

    def start(self, callback):
        if self._fail:
            raise InputDeviceUnavailable("No microphone")
        self.calls.append("start")
        self._callback = callback
        self._running = True

    def stop(self):
        self.calls.append("stop")
        self.loop_alive_at_stop = any(
            t.name == "tuner-loop" and t.is_alive() for t in threading.enumerate()
        )
        self._callback = None
        self._running = False

    def is_running(self):
        return self._running

    @property
    def sample_rate(self):
        return self._sample_rate

    def push(self, samples: np.ndarray) -> None:
        if self._callback:
            self._callback(samples, 0.0)


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Keep ConfigManager files out of the real home directory."""
    directory = tmp_path / "config"
    monkeypatch.setenv("FRET_THEORY_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture
def fake_input():
    return FakeAudioInput()


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo the level, propagation and handler changes made by setup_logging()."""
    names = ["", "fret_theory", "aubio"]
    saved = {}
    for name in names:
        logger = logging.getLogger(name)
        saved[name] = (logger.level, logger.propagate)
    yield
    handler = logging_config._console_handler
    for name, (level, propagate) in saved.items():
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = propagate
        if handler is not None:
            logger.removeHandler(handler)


@pytest.fixture
def sine():
    return sine_wave


@pytest.fixture
def failing_input():
    return FakeAudioInput(fail=True)
