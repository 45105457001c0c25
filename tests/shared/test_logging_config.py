import io
import logging
import sys

from kfs_shared import logging_config


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    logger = logging_config.configure_logging("DEBUG")
    assert logger is logging_config.log
    assert logger.level == logging.DEBUG


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    assert logging_config.configure_logging().level == logging.WARNING


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert logging_config.configure_logging("chatty").level == logging.INFO
    assert logging_config.configure_logging().level == logging.INFO


def test_numeric_string_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "10")
    assert logging_config.configure_logging().level == logging.DEBUG
    assert logging_config.configure_logging(" 30 ").level == logging.WARNING


def test_console_handler_writes_to_stderr(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    logging_config.configure_logging("INFO")
    assert len(root.handlers) == 1
    assert root.handlers[0].stream is sys.stderr
    assert root.handlers[0].formatter._fmt == logging_config.LOG_FORMAT


def test_console_handler_stream_override(monkeypatch):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    stream = io.StringIO()
    logging_config.configure_logging("INFO", stream=stream)
    logging_config.log.info("bucket 007.s ready")
    assert "INFO kfs_shared - bucket 007.s ready" in stream.getvalue()
