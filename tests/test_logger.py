import logging
from pathlib import Path

import pytest

from household_categorizer.logger import (
    PACKAGE_LOGGER,
    ColourizedFormatter,
    get_logger,
    get_logging_config,
    setup_logging,
)


@pytest.fixture(autouse=True)
def clean_log_env(monkeypatch: pytest.MonkeyPatch):
    for key in ("LOG_LEVEL", "ENGINE_LOG_LEVEL", "LOG_DIR"):
        monkeypatch.delenv(key, raising=False)


def test_logging_config_console_only(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = get_logging_config()

    assert set(config["handlers"]) == {"console"}
    assert config["loggers"][""]["level"] == "DEBUG"


def test_logging_config_with_log_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setenv("LOG_DIR", str(log_dir))

    config = get_logging_config()

    assert log_dir.is_dir()
    assert config["handlers"]["file"]["filename"] == str(log_dir / "app.log")
    assert config["handlers"]["file"]["formatter"] == "plain"
    assert config["loggers"][""]["handlers"] == ["console", "file"]


def test_engine_level_defaults_to_root_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    config = get_logging_config()

    assert config["loggers"][PACKAGE_LOGGER]["level"] == "WARNING"


def test_engine_level_overrides_package_logger(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("ENGINE_LOG_LEVEL", "debug")

    config = get_logging_config()

    assert config["loggers"][""]["level"] == "WARNING"
    assert config["loggers"][PACKAGE_LOGGER]["level"] == "DEBUG"
    assert config["loggers"][PACKAGE_LOGGER]["propagate"] is True


def test_unknown_level_names_fall_back(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    monkeypatch.setenv("ENGINE_LOG_LEVEL", "loud")

    config = get_logging_config()

    assert config["loggers"][""]["level"] == "INFO"
    assert config["loggers"][PACKAGE_LOGGER]["level"] == "INFO"


def test_colourized_formatter_restores_levelname():
    formatter = ColourizedFormatter("%(levelname)s %(message)s")
    record = logging.LogRecord("test", logging.WARNING, __file__, 1, "careful", None, None)

    output = formatter.format(record)

    assert output == f"{ColourizedFormatter.YELLOW}WARNING{ColourizedFormatter.RESET} careful"
    assert record.levelname == "WARNING"


def test_setup_logging_applies_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.setenv("ENGINE_LOG_LEVEL", "DEBUG")
    root = logging.getLogger()
    package = logging.getLogger(PACKAGE_LOGGER)
    original_level = root.level
    original_handlers = list(root.handlers)
    original_package_level = package.level
    try:
        setup_logging()
        assert root.level == logging.WARNING
        assert get_logger("household_categorizer.test").getEffectiveLevel() == logging.DEBUG
        assert get_logger("somebody.else").getEffectiveLevel() == logging.WARNING
    finally:
        root.handlers = original_handlers
        root.setLevel(original_level)
        package.setLevel(original_package_level)
