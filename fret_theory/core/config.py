"""Configuration management for fret-theory components."""

from typing import Any, Dict, Optional
import json
import os
from pathlib import Path

from ..logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIGS: Dict[str, Dict[str, Any]] = {
    "pitch_detector": {
        "silence_rms": 0.01,
        "trim_threshold": 0.2,
    },
    "audio_input": {
        "sample_rate": 44100,
        "frames_per_buffer": 512,
        "channels": 1,
    },
    "tuner": {
        "tick_hz": 60.0,
        "buffer_size": 2048,
        "implementation": "autocorrelation",
    },
    "fretboard": {
        "max_fret": 24,
        "viewport_frets": 7,
    },
}


class ConfigManager:
    """Configuration manager for fret-theory components."""

    def __init__(self, config_dir: Optional[str] = None):
        """Initialize the configuration manager.

        Args:
            config_dir: Directory to store configuration files, or None to use
                $FRET_THEORY_CONFIG_DIR or ~/.config/fret_theory
        """
        if config_dir is None:
            config_dir = os.environ.get("FRET_THEORY_CONFIG_DIR") or os.path.join(
                os.path.expanduser("~"), ".config", "fret_theory"
            )

        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self.default_configs = {name: dict(values) for name, values in DEFAULT_CONFIGS.items()}

        # Load existing configurations or create default ones
        self.configs: Dict[str, Dict[str, Any]] = {}
        for config_name, default_config in self.default_configs.items():
            self.configs[config_name] = self.load_config(config_name, default_config)

    def load_config(self, name: str, default_config: Dict[str, Any]) -> Dict[str, Any]:
        """Load configuration from file or create default.

        Args:
            name: Configuration name
            default_config: Default configuration to use if file doesn't exist

        Returns:
            Configuration dictionary
        """
        config_file = self.config_dir / f"{name}.json"

        if not config_file.exists():
            config = default_config.copy()
            self.save_config(name, config)
            return config

        try:
            with open(config_file, "r") as f:
                config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error loading configuration from {config_file}: {e}")
            return default_config.copy()

        if not isinstance(config, dict):
            logger.error(f"Configuration in {config_file} is not an object, using defaults")
            return default_config.copy()

        logger.info(f"Loaded configuration from {config_file}")
        # Ensure all default keys are present
        for key, value in default_config.items():
            config.setdefault(key, value)
        return config

    def save_config(self, name: str, config: Dict[str, Any]) -> bool:
        """Save configuration to file.

        Returns:
            True if saved successfully, False otherwise
        """
        config_file = self.config_dir / f"{name}.json"

        try:
            with open(config_file, "w") as f:
                json.dump(config, f, indent=2)
        except OSError as e:
            logger.error(f"Error saving configuration to {config_file}: {e}")
            return False
        logger.debug(f"Saved configuration to {config_file}")
        return True

    def get_config(self, name: str) -> Dict[str, Any]:
        """Get a copy of a configuration section ({} if unknown)."""
        return self.configs.get(name, {}).copy()

    def update_config(self, name: str, updates: Dict[str, Any]) -> bool:
        """Update configuration and save to file.

        Returns:
            True if updated and saved successfully, False otherwise
        """
        if name not in self.configs:
            logger.error(f"Unknown configuration: {name}")
            return False

        self.configs[name].update(updates)
        return self.save_config(name, self.configs[name])

    def reset_config(self, name: str) -> bool:
        """Reset configuration to default.

        Returns:
            True if reset successfully, False otherwise
        """
        if name not in self.default_configs:
            logger.error(f"Unknown configuration: {name}")
            return False

        self.configs[name] = self.default_configs[name].copy()
        return self.save_config(name, self.configs[name])
