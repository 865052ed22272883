"""
Core infrastructure layer
"""
from .constants import *
from .exceptions import *
from .logging import setup_logging, get_logger, get_stdout_console, get_stderr_console
from .interfaces import ConnectionDialog, PromptProvider
from .system import locate_ssh_executable, mosh_executable_name
from .utils import load_ssh_config

__all__ = [
    "SshLinkError",
    "FormatError",
    "ArgumentError",
    "ConfigError",
    "setup_logging",
    "get_logger",
    "get_stdout_console",
    "get_stderr_console",
    "ConnectionDialog",
    "PromptProvider",
    "locate_ssh_executable",
    "mosh_executable_name",
    "load_ssh_config",
]
