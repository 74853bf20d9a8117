"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_builder_writes_dated_file_under_project_logs(tmp_path, monkeypatch):
    """LoggerBuilder should place the log file in logs/<subdir>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20250301"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("finance_tracker.test_builder")
        .subdir("imports")
        .prefix("import_logs")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.level == logging.DEBUG
    assert built.propagate is False
    assert len(built.handlers) == 1
    expected = tmp_path / "logs" / "imports" / "20250301_import_logs.log"
    assert built.handlers[0].baseFilename == str(expected)
    assert builder.build() is built
    built.handlers[0].close()


def test_builder_uses_custom_factories(tmp_path, monkeypatch):
    """Formatter and handler factories should be pluggable."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    fmt = logging.Formatter("%(message)s")
    file_handler = logging.NullHandler()
    console_handler = logging.NullHandler()

    built = (
        logger_module.LoggerBuilder()
        .name("finance_tracker.test_factories")
        .console(True)
        .formatter(lambda: fmt)
        .file_handler(lambda path, formatter: file_handler)
        .console_handler(lambda formatter: console_handler)
        .build()
    )

    assert built.handlers == [file_handler, console_handler]


def test_default_handlers_apply_formatter(tmp_path):
    """Default handlers should log at INFO with the given formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "app.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert isinstance(file_handler, logging.FileHandler)
    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.formatter is fmt
    file_handler.close()


def test_singletons_delegate_to_built_logger(monkeypatch):
    """App and usage loggers are singletons forwarding every level."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()
    app_logger.info("hello")
    app_logger.warning("warn")
    app_logger.error("err")
    app_logger.debug("dbg")
    usage_logger.critical("crit")

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    fake_logger.info.assert_called_with("hello")
    fake_logger.warning.assert_called_with("warn")
    fake_logger.error.assert_called_with("err")
    fake_logger.debug.assert_called_with("dbg")
    fake_logger.critical.assert_called_with("crit")


def test_usage_logger_writes_to_usage_directory(monkeypatch):
    """The usage log should live in its own directory without console."""
    captured = {}

    class _Builder:
        def __getattr__(self, attribute):
            def _setter(value):
                captured[attribute] = value
                return self

            return _setter

        def build(self):
            return MagicMock()

    monkeypatch.setattr(logger_module, "LoggerBuilder", _Builder)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    logger_module.get_usage_logger()

    assert captured["subdir"] == "usage"
    assert captured["prefix"] == "usage_logs"
    assert captured["console"] is False
