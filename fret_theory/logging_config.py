"""Centralized logging configuration for fret-theory.

This module provides a consistent way to configure logging across the application.
"""

import logging
import sys
from typing import Optional

# Log levels for different modules
MODULE_LOG_LEVELS = {
    # Theory engine
    "fret_theory": logging.INFO,
    "fret_theory.note_utils": logging.INFO,
    "fret_theory.intervals": logging.INFO,
    "fret_theory.chord_identifier": logging.INFO,
    "fret_theory.voicings": logging.INFO,
    "fret_theory.instruments": logging.INFO,
    # Audio and tuner
    "fret_theory.audio": logging.INFO,
    "fret_theory.audio.pitch_detector": logging.INFO,  # DEBUG logs every frame
    "fret_theory.audio.tuner_session": logging.INFO,
    "fret_theory.core": logging.WARNING,  # INFO reports config loads and component creation
    "fret_theory.cli": logging.WARNING,
    "fret_theory.logging_config": logging.WARNING,
    # Libraries/third-party
    "aubio": logging.ERROR,
    # Root logger
    "": logging.ERROR,
}

# Shared console handler
_console_handler: Optional[logging.Handler] = None


def setup_logging(level: Optional[str] = None) -> None:
    """Set up logging configuration for the application.

    Args:
        level: If provided, override all 'fret_theory' log levels with this level (e.g., "DEBUG").
    """
    global _console_handler

    # One shared console handler, rebuilt so it writes to the current stdout
    _console_handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    _console_handler.setFormatter(formatter)

    log_levels = MODULE_LOG_LEVELS.copy()
    if level:
        numeric_level = logging.getLevelName(level.upper())
        if isinstance(numeric_level, int):
            for module_name in log_levels:
                if module_name.startswith("fret_theory"):
                    log_levels[module_name] = numeric_level
        else:
            logging.getLogger(__name__).error(f"Invalid log level: {level}")

    for module_name, module_level in log_levels.items():
        logger = logging.getLogger(module_name)
        logger.setLevel(module_level)

        # Only the top-level loggers own the handler; children propagate to them
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        if module_name in ("", "fret_theory", "aubio"):
            logger.addHandler(_console_handler)
            logger.propagate = False

    logging.getLogger("fret_theory").debug("Logging configuration complete")
