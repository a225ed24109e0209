"""Tests for file logging setup."""
from __future__ import annotations

import logging
from logging.handlers import TimedRotatingFileHandler
from types import SimpleNamespace

import pytest

from spacedash.logging import setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_setup_logging_writes_to_file(tmp_path, restore_root_logger):
    settings = SimpleNamespace(SPACEDASH_LOG_DIR=tmp_path / "logs", SPACEDASH_LOG_LEVEL="debug", SPACEDASH_LOG_BACKUP_COUNT=3)

    log_file = setup_logging(settings)

    assert log_file == tmp_path / "logs" / "spacedash.log"
    root = logging.getLogger()
    assert len(root.handlers) == 1
    handler = root.handlers[0]
    assert isinstance(handler, TimedRotatingFileHandler)
    assert handler.backupCount == 3
    assert root.level == logging.DEBUG

    logging.getLogger("spacedash.tests").debug("hello from test")
    handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "spacedash logging enabled" in text
    assert "| DEBUG | spacedash.tests | hello from test" in text


def test_setup_logging_is_idempotent(tmp_path, restore_root_logger):
    settings = SimpleNamespace(SPACEDASH_LOG_DIR=tmp_path, SPACEDASH_LOG_LEVEL="INFO", SPACEDASH_LOG_BACKUP_COUNT=7)
    setup_logging(settings)
    setup_logging(settings, console=True)

    kinds = sorted(type(h).__name__ for h in logging.getLogger().handlers)
    assert kinds == ["StreamHandler", "TimedRotatingFileHandler"]
    assert logging.getLogger("httpx").level == logging.WARNING


def test_relative_log_dir_resolves_against_cwd(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.chdir(tmp_path)
    settings = SimpleNamespace(SPACEDASH_LOG_DIR="rel", SPACEDASH_LOG_LEVEL="nonsense", SPACEDASH_LOG_BACKUP_COUNT=1)

    log_file = setup_logging(settings)

    assert log_file.resolve() == (tmp_path / "rel" / "spacedash.log").resolve()
    assert logging.getLogger().level == logging.INFO
