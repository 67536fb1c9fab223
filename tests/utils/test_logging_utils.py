"""Unit tests for loguru sink configuration."""

import pytest
from loguru import logger

from image_resizer.utils.logging_utils import LOG_LEVEL_ENV, configure_logging


def test_configure_logging_default_level(monkeypatch: pytest.MonkeyPatch, capsys):
    """Test the requested level filters lower records."""
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

    assert configure_logging("WARNING") == "WARNING"
    logger.info("hidden message")
    logger.warning("shown message")

    err = capsys.readouterr().err
    assert "hidden message" not in err
    assert "shown message" in err


def test_configure_logging_env_overrides(monkeypatch: pytest.MonkeyPatch, capsys):
    """Test the environment variable wins over the argument."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

    assert configure_logging("WARNING") == "DEBUG"
    logger.debug("debug message")

    assert "debug message" in capsys.readouterr().err


def test_configure_logging_unknown_env_level_falls_back(
    monkeypatch: pytest.MonkeyPatch, capsys
):
    """Test an unknown level name falls back to the requested level with a warning."""
    monkeypatch.setenv(LOG_LEVEL_ENV, "loud")

    assert configure_logging("WARNING") == "WARNING"
    logger.info("hidden message")

    err = capsys.readouterr().err
    assert "Unknown log level 'LOUD'" in err
    assert "hidden message" not in err
