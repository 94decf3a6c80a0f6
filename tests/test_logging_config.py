import logging

from core.logging_config import LOGGER_NAMESPACES, configure_logging, get_logging_config


def test_project_loggers_use_requested_level():
    config = get_logging_config("debug")

    for name in LOGGER_NAMESPACES:
        assert config["loggers"][name]["level"] == "DEBUG"
    assert config["handlers"]["default"]["stream"] == "ext://sys.stderr"


def test_unknown_level_falls_back_to_warning():
    configure_logging("chatty")

    assert logging.getLogger("adapters").level == logging.WARNING


def test_configure_logging_applies_level():
    configure_logging("INFO")

    assert logging.getLogger("core").level == logging.INFO
