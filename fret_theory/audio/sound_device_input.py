"""Live audio input using the sounddevice library."""

from __future__ import annotations
import time
from typing import Any, ClassVar, Dict, List, Optional

import numpy as np
import sounddevice as sd

from ..errors import InputDeviceUnavailable
from ..logger import get_logger
from .audio_input import AudioCallback, AudioInputHandler

logger = get_logger(__name__)


def list_input_devices() -> List[Dict[str, Any]]:
    """Devices that can record, as dicts with 'id', 'name' and 'default_samplerate'."""
    devices = []
    for device_id, device in enumerate(sd.query_devices()):
        if device["max_input_channels"] > 0:
            devices.append(
                {
                    "id": device_id,
                    "name": device["name"],
                    "channels": device["max_input_channels"],
                    "default_samplerate": device["default_samplerate"],
                }
            )
    return devices


class SoundDeviceInput(AudioInputHandler):
    """Audio input handler using sounddevice library."""

    # Audio configuration
    SAMPLE_RATE: ClassVar[int] = 44100  # Hz
    FRAMES_PER_BUFFER: ClassVar[int] = 512
    CHANNELS: ClassVar[int] = 1  # Mono audio

    def __init__(
        self,
        device_id: Optional[int] = None,
        sample_rate: Optional[int] = None,
        frames_per_buffer: Optional[int] = None,
        channels: Optional[int] = None,
    ) -> None:
        """Initialize the audio input handler.

        Args:
            device_id: Audio input device ID, or None for the system default
            sample_rate: Sample rate in Hz, or None for default (44100)
            frames_per_buffer: Block size in frames, or None for default (512)
            channels: Number of audio channels, or None for default (1)
        """
        super().__init__(sample_rate or self.SAMPLE_RATE)
        self._device_id = device_id
        self._frames_per_buffer = frames_per_buffer or self.FRAMES_PER_BUFFER
        self._channels = channels or self.CHANNELS
        self._stream: Optional[sd.InputStream] = None

    def _audio_callback(
        self,
        indata: np.ndarray,
        _frames: int,
        _time_info: Any,
        status: sd.CallbackFlags,
    ) -> None:
        """Called from the PortAudio thread; must not block."""
        if status:
            logger.warning(f"Audio callback status: {status}")

        if self._callback:
            self._callback(self.to_mono(indata), time.time())

    def start(self, callback: AudioCallback) -> None:
        """Open the input stream and pass each block to the callback.

        Raises:
            InputDeviceUnavailable: If the device cannot be opened
        """
        if self._running:
            logger.warning("Audio input already running")
            return

        self._callback = callback
        try:
            self._stream = sd.InputStream(
                device=self._device_id,
                samplerate=self._sample_rate,
                blocksize=self._frames_per_buffer,
                channels=self._channels,
                dtype="float32",
                callback=self._audio_callback,
            )
            self._stream.start()
        except (sd.PortAudioError, ValueError) as e:
            logger.error(f"Could not open audio input device {self._device_id}: {e}")
            if self._stream is not None:
                self._stream.close()
                self._stream = None
            self._callback = None
            raise InputDeviceUnavailable(f"Could not open audio input: {e}") from e

        self._running = True
        logger.info(
            f"Audio input started: device={self._device_id}, rate={self._sample_rate}Hz"
        )

    def stop(self) -> None:
        """Stop capturing audio."""
        if not self._running:
            return

        try:
            if self._stream:
                self._stream.stop()
                self._stream.close()
        finally:
            self._stream = None
            self._callback = None
            self._running = False
            logger.info("Audio input stopped")
