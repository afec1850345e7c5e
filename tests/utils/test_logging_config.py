"""
Tests for logging setup driven by LOG_LEVEL / LOG_DIR.
"""

import logging

import pytest

from app.utils.logging_config import configure_api_logging, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_console_only():
    assert setup_logging(level="WARNING", log_dir=None) is None
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_file_handler(tmp_path):
    log_path = setup_logging(level="INFO", log_dir=str(tmp_path / "logs"))
    assert log_path == tmp_path / "logs" / "api.log"
    assert len(logging.getLogger().handlers) == 2

    logging.getLogger("app.test").info("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "hello" in log_path.read_text()


def test_sql_logger_quiet_above_debug():
    setup_logging(level="INFO")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_configure_api_logging_reads_env(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_DIR", str(tmp_path))

    log_path = configure_api_logging()
    assert log_path == tmp_path / "api.log"
    assert logging.getLogger().level == logging.DEBUG
