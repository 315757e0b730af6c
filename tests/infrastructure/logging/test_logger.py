"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from src.infrastructure.logging import logger as logger_module


def test_logger_builder_writes_into_dated_log_file(tmp_path, monkeypatch):
    """LoggerBuilder should place the log file under logs/<subdir>."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("fleet_ledger.test_builder")
        .subdir("invoices")
        .prefix("recompute")
        .console(False)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.name == "fleet_ledger.test_builder"
    assert built.level == logging.DEBUG
    assert built.propagate is False
    file_handlers = [
        h for h in built.handlers if isinstance(h, logging.FileHandler)
    ]
    assert len(file_handlers) == 1
    expected = tmp_path / "logs" / "invoices" / "20240315_recompute.log"
    assert file_handlers[0].baseFilename == str(expected)
    assert builder.build() is built
    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_logger_builder_adds_console_handler_when_enabled(tmp_path, monkeypatch):
    """Console output should use the injected console handler factory."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    console = logging.NullHandler()
    captured = {}

    def _console_factory(fmt):
        captured["fmt"] = fmt
        return console

    built = (
        logger_module.LoggerBuilder()
        .name("fleet_ledger.test_console")
        .console(True)
        .console_handler(_console_factory)
        .build()
    )

    assert console in built.handlers
    assert isinstance(captured["fmt"], logging.Formatter)
    for handler in list(built.handlers):
        handler.close()
        built.removeHandler(handler)


def test_default_handlers_use_formatter(tmp_path):
    """Default handlers should log at INFO with the given formatter."""
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "ledger.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_singleton_delegates_to_underlying_logger(monkeypatch):
    """Logger methods should forward messages to the wrapped logger."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    logger = logger_module.Logger("fleet_ledger")
    logger.info("ledger computed")
    logger.warning("transaction skipped")
    logger.error("db unavailable")
    logger.debug("row mapped")
    logger.critical("stop")

    fake_logger.info.assert_called_with("ledger computed")
    fake_logger.warning.assert_called_with("transaction skipped")
    fake_logger.error.assert_called_with("db unavailable")
    fake_logger.debug.assert_called_with("row mapped")
    fake_logger.critical.assert_called_with("stop")
    assert logger_module.Logger("other") is logger


def test_app_and_usage_loggers_are_separate_singletons(monkeypatch):
    """get_app_logger and get_usage_logger should each return one instance."""
    built_names = []

    def _fake_build(self):
        built_names.append((self._name, self._subdir))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_names == [
        ("fleet_ledger.app", "app"),
        ("fleet_ledger.usage", "usage"),
    ]
