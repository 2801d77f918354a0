"""Tests configuration — lecture environnement, cache, logging."""
import logging

import pytest
from pydantic import ValidationError

from typst_builder.config import LOG_FORMAT, Settings, configure_logging, get_settings, reload_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    reload_settings()
    yield
    reload_settings()


def test_default_settings(monkeypatch):
    monkeypatch.delenv("TYPST_BUILDER_LOG_LEVEL", raising=False)
    settings = get_settings()
    assert settings.log_level == "WARNING"
    assert settings.log_format == LOG_FORMAT


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("TYPST_BUILDER_LOG_LEVEL", "debug")
    assert get_settings().log_level == "DEBUG"


def test_settings_cached(monkeypatch):
    monkeypatch.setenv("TYPST_BUILDER_LOG_LEVEL", "INFO")
    first = get_settings()
    monkeypatch.setenv("TYPST_BUILDER_LOG_LEVEL", "ERROR")
    assert get_settings() is first
    reload_settings()
    assert get_settings().log_level == "ERROR"


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("typst_builder")
    previous = logger.level
    try:
        configure_logging(Settings(log_level="DEBUG"))
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)


def test_unknown_level_rejected(monkeypatch):
    monkeypatch.setenv("TYPST_BUILDER_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        get_settings()


def test_settings_level_validated():
    with pytest.raises(ValidationError):
        Settings(log_level="TRACE")
