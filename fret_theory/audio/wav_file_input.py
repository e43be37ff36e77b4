"""Audio input that streams a WAV file as if it were a live device."""

from __future__ import annotations
import threading
import time
from typing import Optional

import soundfile as sf

from ..errors import InputDeviceUnavailable
from ..logger import get_logger
from .audio_input import AudioCallback, AudioInputHandler

logger = get_logger(__name__)


class WavFileInput(AudioInputHandler):
    """Provides audio data by reading from a WAV file."""

    def __init__(
        self,
        file_path: str,
        chunk_size: int = 512,
        loop: bool = False,
        gain: float = 1.0,
        realtime: bool = True,
    ) -> None:
        self._file_path = file_path
        self._chunk_size = chunk_size
        self._loop = loop
        self._gain = gain
        self._realtime = realtime
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._finished = threading.Event()

        try:
            info = sf.info(self._file_path)
        except (RuntimeError, OSError) as e:
            raise InputDeviceUnavailable(f"Cannot read {file_path}: {e}") from e
        super().__init__(info.samplerate)

    def start(self, callback: AudioCallback) -> None:
        if self._running:
            return

        self._callback = callback
        self._stop_event.clear()
        self._finished.clear()
        self._running = True
        self._thread = threading.Thread(target=self._stream_data, daemon=True)
        self._thread.start()
        logger.info(f"Streaming {self._file_path} at {self._sample_rate}Hz")

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread:
            self._thread.join()
            self._thread = None
        self._callback = None
        self._running = False

    def wait_until_finished(self, timeout: Optional[float] = None) -> bool:
        """Block until the whole file has been streamed (never, when looping)."""
        return self._finished.wait(timeout)

    def _stream_data(self) -> None:
        try:
            with sf.SoundFile(self._file_path) as f:
                while not self._stop_event.is_set():
                    data = f.read(self._chunk_size, dtype="float32", always_2d=True)
                    if len(data) == 0:
                        if self._loop:
                            f.seek(0)
                            continue
                        break

                    if self._gain != 1.0:
                        data *= self._gain

                    callback = self._callback
                    if callback:
                        callback(self.to_mono(data), time.time())

                    # Simulate real-time playback speed
                    if self._realtime:
                        self._stop_event.wait(self._chunk_size / self._sample_rate)
        except (RuntimeError, OSError) as e:
            logger.error(f"Error streaming WAV file {self._file_path}: {e}")
        finally:
            self._finished.set()
