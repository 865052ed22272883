"""
Connection domain module
"""
from .models import (
    CommandLine,
    ConnectionInfo,
    ConnectionKind,
    LineEndingStyle,
    MoshKind,
    ShellProfile,
    SshKind,
    SshOption,
    ValidationResult,
)
from .options import parse_option, parse_options, format_option, split_option
from .uri import decode, encode, is_recognized_scheme
from .validation import validate, describe
from .command import CommandLineBuilder, ExecutableSettings
from .service import ConnectionService

__all__ = [
    "CommandLine",
    "ConnectionInfo",
    "ConnectionKind",
    "LineEndingStyle",
    "MoshKind",
    "ShellProfile",
    "SshKind",
    "SshOption",
    "ValidationResult",
    "parse_option",
    "parse_options",
    "format_option",
    "split_option",
    "decode",
    "encode",
    "is_recognized_scheme",
    "validate",
    "describe",
    "CommandLineBuilder",
    "ExecutableSettings",
    "ConnectionService",
]
