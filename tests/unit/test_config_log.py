"""Tests for settings and logging setup."""

import io
import json
import logging

import pytest

from banglit.config import load_settings
from banglit.utils.log import LOGGER_NAME, log_with_context, setup_logging


def test_bundled_settings():
    settings = load_settings()

    assert settings["logging"]["level"] == "INFO"
    assert settings["logging"]["format"] == "pretty"
    assert settings["transliteration"]["default_mode"] == "avro"
    assert settings["transliteration"]["rules_file"] is None


def test_settings_file_fills_defaults(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("logging:\n  level: DEBUG\n", encoding="utf-8")

    settings = load_settings(path)

    assert settings["logging"]["level"] == "DEBUG"
    assert settings["logging"]["format"] == "pretty"
    assert settings["transliteration"]["default_mode"] == "avro"


def test_missing_settings_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "nope.yaml")


def test_json_logging_with_context():
    stream = io.StringIO()
    logger = setup_logging(level="DEBUG", format_type="json", stream=stream)

    log_with_context(logger, "info", "converted", mode="avro", chars=3)

    record = json.loads(stream.getvalue().strip())
    assert logger.name == LOGGER_NAME
    assert record["message"] == "converted"
    assert record["level"] == "INFO"
    assert record["mode"] == "avro"
    assert record["chars"] == 3


def test_log_file(tmp_path):
    log_file = tmp_path / "logs" / "banglit.log"
    logger = setup_logging(level="INFO", log_file=log_file, stream=io.StringIO())

    logger.warning("rule skipped")
    for handler in logger.handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip()
    assert json.loads(line)["message"] == "rule skipped"


def test_child_loggers_use_package_handlers():
    stream = io.StringIO()
    setup_logging(level="WARNING", stream=stream)

    logging.getLogger("banglit.transliteration").warning("Unsupported mode 'x'")

    assert "Unsupported mode 'x'" in stream.getvalue()
