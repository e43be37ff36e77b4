"""Chromatic tuner session: live pitch estimates from an audio input."""

from __future__ import annotations
import threading
from enum import Enum
from typing import Optional

import numpy as np

from ..core.events import EventEmitter, TunerEventType
from ..core.interfaces import IAudioInput, IPitchDetector, ITunerSession
from ..errors import InputDeviceUnavailable
from ..logger import get_logger
from ..note_types import PitchEstimate
from .pitch_detector import PitchDetector
from .sample_buffer import SampleBuffer

logger = get_logger(__name__)


class TunerState(Enum):
    IDLE = "idle"
    LISTENING = "listening"


class TunerSession(ITunerSession):
    """Runs the pitch detector on the latest input buffer at a fixed rate.

    ``start()`` opens the input and launches one loop thread that calls
    ``tick()`` every 1/tick_hz seconds until its stop event is set.
    ``stop()`` ends the loop first and only then releases the input, so the
    loop never reads from a closed device.
    """

    DEFAULT_TICK_HZ = 60.0  # About one display refresh
    DEFAULT_BUFFER_SIZE = 2048

    def __init__(
        self,
        audio_input: IAudioInput,
        pitch_detector: Optional[IPitchDetector] = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        tick_hz: float = DEFAULT_TICK_HZ,
        events: Optional[EventEmitter] = None,
    ) -> None:
        if tick_hz <= 0:
            raise ValueError(f"tick_hz must be positive, got {tick_hz}")

        self._audio_input = audio_input
        self._detector = pitch_detector or PitchDetector()
        self._buffer = SampleBuffer(buffer_size)
        self._tick_interval = 1.0 / tick_hz
        self.events = events or EventEmitter()

        self._state = TunerState.IDLE
        self._estimate: Optional[PitchEstimate] = None
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._stopping = False

    @property
    def state(self) -> TunerState:
        return self._state

    def is_listening(self) -> bool:
        return self._state is TunerState.LISTENING

    @property
    def current_estimate(self) -> Optional[PitchEstimate]:
        return self._estimate

    def start(self) -> None:
        """Open the input stream and start the estimation loop.

        Raises:
            InputDeviceUnavailable: If the input stream cannot be opened
        """
        error: Optional[InputDeviceUnavailable] = None
        with self._lock:
            if self._state is TunerState.LISTENING:
                logger.warning("Tuner already listening")
                return

            self._buffer.clear()
            self._estimate = None
            try:
                self._audio_input.start(self._on_audio)
            except InputDeviceUnavailable as e:
                error = e
            else:
                self._stop_event = threading.Event()
                self._thread = threading.Thread(
                    target=self._run, args=(self._stop_event,), name="tuner-loop", daemon=True
                )
                self._state = TunerState.LISTENING
                self._thread.start()

        # Listeners may call start() or stop() again, so emit outside the lock
        if error is not None:
            logger.error(f"Tuner could not open its input: {error}")
            self.events.emit(TunerEventType.ERROR, error)
            raise error

        logger.info("Tuner listening")
        self.events.emit(TunerEventType.STATE_CHANGED, TunerState.LISTENING)

    def stop(self) -> None:
        """Stop the loop, release the input stream and clear the estimate.

        Safe to call from the loop thread and from several threads at once;
        only the first caller releases the input.
        """
        with self._lock:
            if self._state is TunerState.IDLE or self._stopping:
                return
            self._stopping = True
            self._stop_event.set()
            thread, self._thread = self._thread, None

        try:
            # The loop may be waiting on this lock, so join without holding it
            if thread is not None and thread is not threading.current_thread():
                thread.join()
            self._audio_input.stop()
        finally:
            with self._lock:
                self._buffer.clear()
                self._estimate = None
                self._state = TunerState.IDLE
                self._stopping = False

        logger.info("Tuner stopped")
        self.events.emit(TunerEventType.STATE_CHANGED, TunerState.IDLE)

    def tick(self) -> Optional[PitchEstimate]:
        """Estimate the pitch of the most recent buffer and publish it."""
        samples = self._buffer.snapshot()
        estimate = self._detector.estimate(samples, self._audio_input.sample_rate)
        self._estimate = estimate
        self.events.emit(TunerEventType.PITCH_UPDATED, estimate)
        return estimate

    def _on_audio(self, samples: np.ndarray, _timestamp: float) -> None:
        self._buffer.write(samples)

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._tick_interval):
            try:
                self.tick()
            except Exception as e:
                logger.error(f"Pitch estimation failed, stopping the tuner: {e}", exc_info=True)
                self.events.emit(TunerEventType.ERROR, e)
                self.stop()
                break

    def __enter__(self) -> "TunerSession":
        self.start()
        return self

    def __exit__(self, *exc) -> None:
        self.stop()
