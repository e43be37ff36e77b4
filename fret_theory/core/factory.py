"""Factory for creating fret-theory audio components."""

from typing import Dict, Optional, Type

from ..audio.pitch_detector import PitchDetector
from ..audio.tuner_session import TunerSession
from ..logger import get_logger
from .config import ConfigManager
from .interfaces import IAudioInput, IPitchDetector

logger = get_logger(__name__)


class ComponentFactory:
    """Builds detectors, inputs and tuner sessions from configuration."""

    def __init__(self, config_manager: Optional[ConfigManager] = None):
        """Initialize the component factory.

        Args:
            config_manager: Configuration manager, or None to create a default one
        """
        self.config_manager = config_manager or ConfigManager()

        self.pitch_detector_classes: Dict[str, Type[IPitchDetector]] = {
            "autocorrelation": PitchDetector,
        }

    def _pitch_detector_class(self, implementation: str) -> Type[IPitchDetector]:
        if implementation == "yin" and "yin" not in self.pitch_detector_classes:
            # aubio is an optional extra, only imported when YIN is requested
            from ..audio.yin_detector import YinPitchDetector

            self.pitch_detector_classes["yin"] = YinPitchDetector

        if implementation not in self.pitch_detector_classes:
            raise ValueError(f"Unknown pitch detector implementation: {implementation}")
        return self.pitch_detector_classes[implementation]

    def create_pitch_detector(
        self, implementation: Optional[str] = None, **kwargs
    ) -> IPitchDetector:
        """Create a pitch detector.

        Args:
            implementation: "autocorrelation" or "yin"; None uses the tuner config
            **kwargs: Parameters passed to the constructor

        Raises:
            ValueError: If the implementation is not registered
        """
        implementation = implementation or self.config_manager.get_config("tuner").get(
            "implementation", "autocorrelation"
        )
        cls = self._pitch_detector_class(implementation)

        config = {}
        if cls is PitchDetector:
            config = self.config_manager.get_config("pitch_detector")
        config.update(kwargs)

        instance = cls(**config)
        logger.info(f"Created pitch detector: {implementation}")
        return instance

    def create_audio_input(self, file_path: Optional[str] = None, **kwargs) -> IAudioInput:
        """Create a live input, or a WAV file input when file_path is given."""
        if file_path is not None:
            from ..audio.wav_file_input import WavFileInput

            chunk_size = self.config_manager.get_config("audio_input").get("frames_per_buffer", 512)
            kwargs.setdefault("chunk_size", chunk_size)
            instance = WavFileInput(file_path, **kwargs)
            logger.info(f"Created WAV file input: {file_path}")
            return instance

        from ..audio.sound_device_input import SoundDeviceInput

        config = self.config_manager.get_config("audio_input")
        config.update(kwargs)
        instance = SoundDeviceInput(**config)
        logger.info("Created sound device input")
        return instance

    def create_tuner_session(
        self,
        audio_input: Optional[IAudioInput] = None,
        pitch_detector: Optional[IPitchDetector] = None,
        **kwargs,
    ) -> TunerSession:
        """Create a tuner session, building missing components from configuration."""
        config = self.config_manager.get_config("tuner")
        config.pop("implementation", None)
        config.update(kwargs)

        session = TunerSession(
            audio_input=audio_input or self.create_audio_input(),
            pitch_detector=pitch_detector or self.create_pitch_detector(),
            **config,
        )
        logger.info("Created tuner session")
        return session
