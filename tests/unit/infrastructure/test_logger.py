"""Tests for structured logging setup."""

import json
import logging

from creational_patterns.config.schemas.logging_schema import LogFileConfig, LoggingConfig
from creational_patterns.infrastructure.logging.logger import get_logger, setup_logging


def _file_config(tmp_path, **overrides):
    return LoggingConfig(
        destination="file",
        file=LogFileConfig(path=str(tmp_path / "logs" / "app.log")),
        **overrides,
    )


def test_setup_sets_root_level():
    setup_logging(LoggingConfig(level="ERROR"))

    assert logging.getLogger().level == logging.ERROR


def test_file_destination_creates_directory(tmp_path):
    config = _file_config(tmp_path, level="INFO")

    setup_logging(config)
    get_logger("tests.logger").info("Clone finished", primitive=245)

    content = (tmp_path / "logs" / "app.log").read_text()
    assert "Clone finished" in content
    assert "primitive=245" in content
    assert "INFO" in content


def test_json_output(tmp_path):
    config = _file_config(tmp_path, level="DEBUG", json_output=True)

    setup_logging(config)
    get_logger("tests.logger.json").warning("Variant missing", variant="3")

    lines = (tmp_path / "logs" / "app.log").read_text().splitlines()
    event = json.loads(lines[-1])
    assert event["event"] == "Variant missing"
    assert event["variant"] == "3"
    assert event["level"] == "warning"
    assert event["logger"] == "tests.logger.json"
    assert "timestamp" in event


def test_level_filters_events(tmp_path):
    config = _file_config(tmp_path, level="WARNING")

    setup_logging(config)
    get_logger("tests.logger.level").debug("hidden event")
    get_logger("tests.logger.level").error("visible event")

    content = (tmp_path / "logs" / "app.log").read_text()
    assert "hidden event" not in content
    assert "visible event" in content


def test_console_destination_writes_to_stderr(capsys):
    setup_logging(LoggingConfig(level="INFO", destination="console"))

    get_logger("tests.logger.console").info("to stderr")

    captured = capsys.readouterr()
    assert "to stderr" in captured.err
    assert "to stderr" not in captured.out


def test_setup_replaces_handlers(tmp_path):
    setup_logging(_file_config(tmp_path))
    setup_logging(LoggingConfig(destination="both", file=LogFileConfig(path=str(tmp_path / "both.log"))))

    own_handlers = [
        handler for handler in logging.getLogger().handlers
        if not type(handler).__module__.startswith("_pytest")
    ]
    assert len(own_handlers) == 2
