import logging

from fret_theory.logger import get_logger
from fret_theory.logging_config import MODULE_LOG_LEVELS, setup_logging


def test_loggers_are_cached():
    assert get_logger("fret_theory.voicings") is get_logger("fret_theory.voicings")


def test_script_module_logs_under_the_package():
    assert get_logger("__main__").name == "fret_theory.cli.main"


def test_setup_logging_levels():
    setup_logging()
    for name, level in MODULE_LOG_LEVELS.items():
        assert logging.getLogger(name).level == level

    package = logging.getLogger("fret_theory")
    assert len(package.handlers) == 1
    assert not package.propagate


def test_debug_override_only_touches_package_loggers():
    setup_logging("debug")
    assert logging.getLogger("fret_theory.voicings").level == logging.DEBUG
    assert logging.getLogger("fret_theory.cli").level == logging.DEBUG
    assert logging.getLogger("aubio").level == logging.ERROR


def test_repeated_setup_keeps_one_handler():
    setup_logging()
    setup_logging()
    assert len(logging.getLogger("fret_theory").handlers) == 1
    assert len(logging.getLogger().handlers) == 1


def test_invalid_level_keeps_defaults():
    setup_logging("LOUD")
    assert logging.getLogger("fret_theory").level == logging.INFO
