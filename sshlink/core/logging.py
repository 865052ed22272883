"""
Logging setup

Records go to stderr through Rich so stdout stays clean for links and
command lines that may be piped elsewhere.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_traceback


_stdout_console = Console()
_stderr_console = Console(stderr=True)

_FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    return handler


def setup_logging(level: str = "WARNING", log_file: Optional[Path] = None) -> None:
    """
    Route log records to stderr, and also to log_file when given.

    Unknown level names fall back to WARNING. At DEBUG, uncaught exceptions
    and logged tracebacks are rendered by Rich.
    """
    log_level = _resolve_level(level)
    debug = log_level <= logging.DEBUG

    if debug:
        install_traceback(console=_stderr_console, width=120)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(RichHandler(
        console=_stderr_console,
        show_path=False,
        markup=False,
        rich_tracebacks=debug,
    ))

    # paramiko's config parser is chatty at DEBUG
    logging.getLogger("paramiko").setLevel(max(log_level, logging.WARNING))

    if log_file:
        root_logger.addHandler(_file_handler(log_file))


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def get_stdout_console() -> Console:
    """Console for links, tables and command lines"""
    return _stdout_console


def get_stderr_console() -> Console:
    """Console for errors and log records"""
    return _stderr_console
