"""Centralized lazy-loading logger access for fret-theory."""
import logging
from typing import Dict

# Module-level cache for loggers
_logger_cache: Dict[str, logging.Logger] = {}

# Modules that can be run directly log under their package name
_SCRIPT_MODULE = "fret_theory.cli.main"


def get_logger(name: str) -> logging.Logger:
    """
    Get a lazily initialized logger for a fret-theory module.

    Levels and handlers are applied by ``logging_config.setup_logging``, so
    every logger must sit under the 'fret_theory' hierarchy. A module run as a
    script ('__main__') is mapped back to its package name.

    Args:
        name: The full module name (e.g., 'fret_theory.chord_identifier')

    Returns:
        A logger instance
    """
    if name == "__main__":
        name = _SCRIPT_MODULE
    if name not in _logger_cache:
        _logger_cache[name] = logging.getLogger(name)
    return _logger_cache[name]
