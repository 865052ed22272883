"""
Unified exception definitions
"""
from typing import Any, Optional


class SshLinkError(Exception):
    """Base exception class"""
    pass


class FormatError(SshLinkError, ValueError):
    """Malformed connection descriptor text"""

    def __init__(self, message: str, token: Optional[str] = None):
        super().__init__(message)
        self.token = token


class ArgumentError(SshLinkError, ValueError):
    """Invalid structured input handed to an encoder"""

    def __init__(self, message: str, name: Optional[str] = None, result: Any = None):
        super().__init__(message)
        self.name = name
        self.result = result


class ConfigError(SshLinkError):
    """Configuration error"""
    pass
