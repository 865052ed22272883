"""
sshlink - SSH / Mosh connection link toolkit

Translates between connection links and structured connection descriptors:
- Decoding ssh:// and mosh:// links (user, identity file, -o options, mosh ports)
- Encoding connection descriptors as canonical links
- Building ssh / mosh command lines for a process launcher
- Importing hosts from ~/.ssh/config
"""

__version__ = "0.1.0"

# Export core components
from .core import (
    SshLinkError,
    FormatError,
    ArgumentError,
    ConfigError,
    locate_ssh_executable,
)

# Export domain models
from .domain.connection import (
    ConnectionInfo,
    SshOption,
    SshKind,
    MoshKind,
    LineEndingStyle,
    ValidationResult,
    CommandLine,
    ShellProfile,
    CommandLineBuilder,
    ExecutableSettings,
    ConnectionService,
    decode,
    encode,
    is_recognized_scheme,
    validate,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "SshLinkError",
    "FormatError",
    "ArgumentError",
    "ConfigError",
    # Models
    "ConnectionInfo",
    "SshOption",
    "SshKind",
    "MoshKind",
    "LineEndingStyle",
    "ValidationResult",
    "CommandLine",
    "ShellProfile",
    # Codec
    "decode",
    "encode",
    "is_recognized_scheme",
    "validate",
    # Command line
    "CommandLineBuilder",
    "ExecutableSettings",
    "ConnectionService",
    "locate_ssh_executable",
]
