"""Tests for logging setup."""

import logging
import sys
from pathlib import Path

import pytest
from rich.logging import RichHandler

from sshlink.core.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Keep pytest's own handlers intact."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    excepthook = sys.excepthook
    yield
    sys.excepthook = excepthook
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_rich_handler_installed():
    setup_logging("INFO")

    root = logging.getLogger()
    assert root.level == logging.INFO
    assert any(isinstance(h, RichHandler) for h in root.handlers)


def test_unknown_level_falls_back_to_warning():
    setup_logging("LOUD")

    assert logging.getLogger().level == logging.WARNING


def test_log_file(tmp_path: Path):
    log_file = tmp_path / "logs" / "sshlink.log"
    setup_logging("DEBUG", log_file=log_file)

    get_logger("sshlink.test").debug("decoded link")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "sshlink.test - DEBUG - decoded link" in log_file.read_text()


def test_paramiko_kept_quiet():
    setup_logging("DEBUG")

    assert logging.getLogger("paramiko").level == logging.WARNING


@pytest.mark.parametrize("level, expected", [("INFO", False), ("DEBUG", True)])
def test_rich_tracebacks_only_when_debugging(level, expected):
    setup_logging(level)

    handler = next(h for h in logging.getLogger().handlers if isinstance(h, RichHandler))
    assert handler.rich_tracebacks is expected
