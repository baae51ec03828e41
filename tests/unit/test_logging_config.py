"""Unit tests for logging setup."""

import logging

import pytest
from colorlog import ColoredFormatter

from holidaycal import _init_logging
from holidaycal.logging_config import PACKAGE_LOGGERS, configure_logging, get_logging_status

pytestmark = pytest.mark.unit


class TestConfigureLogging:
    """Root and package logger levels."""

    def test_default_is_info(self):
        assert configure_logging() == logging.INFO
        assert logging.getLogger().level == logging.INFO
        assert logging.getLogger("holidaycal.store").level == logging.INFO

    def test_debug_mode(self):
        assert configure_logging(debug_mode=True) == logging.DEBUG
        assert all(logging.getLogger(name).level == logging.DEBUG for name in PACKAGE_LOGGERS)

    def test_level_name(self):
        assert configure_logging(level_name="warning") == logging.WARNING
        assert logging.getLogger("holidaycal").level == logging.WARNING

    def test_env_debug(self, monkeypatch):
        monkeypatch.setenv("HOLIDAYCAL_DEBUG", "true")
        assert configure_logging() == logging.DEBUG

    def test_force_debug_overrides_env(self, monkeypatch):
        monkeypatch.setenv("HOLIDAYCAL_DEBUG", "1")
        assert configure_logging(force_debug=False) == logging.INFO

    def test_env_log_level_overrides(self, monkeypatch):
        monkeypatch.setenv("HOLIDAYCAL_LOG_LEVEL", "error")
        assert configure_logging(debug_mode=True) == logging.ERROR
        assert logging.getLogger("holidaycal").level == logging.DEBUG

    def test_status(self):
        configure_logging(level_name="WARNING")
        status = get_logging_status()
        assert status["root"] == "WARNING"
        assert set(PACKAGE_LOGGERS) <= set(status)


class TestInitLogging:
    """Console handler installation."""

    def test_installs_colored_handler_when_none(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        _init_logging("INFO")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ColoredFormatter)

    def test_level(self):
        _init_logging("warning")
        assert logging.getLogger().level == logging.WARNING

    def test_debug_env_forces_debug(self, monkeypatch):
        monkeypatch.setenv("HOLIDAYCAL_DEBUG", "yes")
        _init_logging("ERROR")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_is_info(self):
        _init_logging("chatty")
        assert logging.getLogger().level == logging.INFO
