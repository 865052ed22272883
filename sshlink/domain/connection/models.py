"""
Connection domain models
"""
from dataclasses import dataclass, field
from enum import Enum, Flag
from typing import Optional, Dict, Any, Tuple, Union

from ...core.constants import (
    DEFAULT_SSH_PORT,
    DEFAULT_MOSH_PORT_FROM,
    DEFAULT_MOSH_PORT_TO,
)


class LineEndingStyle(str, Enum):
    """Line ending translation applied by the terminal, passed through as-is"""
    DO_NOT_MODIFY = "DoNotModify"
    TO_CRLF = "ToCRLF"
    TO_CR = "ToCR"
    TO_LF = "ToLF"


class ValidationResult(Flag):
    """Problems found in a ConnectionInfo; VALID when empty"""
    VALID = 0
    HOST_EMPTY = 1
    USERNAME_EMPTY = 2
    SSH_PORT_INVALID = 4
    MOSH_PORT_INVALID = 8
    MOSH_PORT_RANGE_INVALID = 16
    OPTION_NAME_EMPTY = 32
    OPTION_DUPLICATE = 64
    HOST_INVALID = 128


@dataclass(frozen=True)
class SshOption:
    """Single `-o name=value` option"""
    name: str
    value: str = ""

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


@dataclass(frozen=True)
class SshKind:
    """Plain SSH connection"""

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "ssh"}


@dataclass(frozen=True)
class MoshKind:
    """Mosh connection with the client-announced UDP port range"""
    port_from: int = DEFAULT_MOSH_PORT_FROM
    port_to: int = DEFAULT_MOSH_PORT_TO

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "mosh", "port_from": self.port_from, "port_to": self.port_to}


ConnectionKind = Union[SshKind, MoshKind]


@dataclass(frozen=True)
class ConnectionInfo:
    """Remote shell connection descriptor"""
    host: str
    port: int = DEFAULT_SSH_PORT
    username: str = ""
    identity_file: str = ""
    options: Tuple[SshOption, ...] = ()
    kind: ConnectionKind = field(default_factory=SshKind)
    line_ending_style: LineEndingStyle = LineEndingStyle.DO_NOT_MODIFY

    def __post_init__(self):
        # Accept any iterable of options, store a tuple
        if not isinstance(self.options, tuple):
            object.__setattr__(self, "options", tuple(self.options))

    @property
    def use_mosh(self) -> bool:
        return isinstance(self.kind, MoshKind)

    @property
    def mosh_port_from(self) -> Optional[int]:
        return self.kind.port_from if isinstance(self.kind, MoshKind) else None

    @property
    def mosh_port_to(self) -> Optional[int]:
        return self.kind.port_to if isinstance(self.kind, MoshKind) else None

    def get_option(self, name: str) -> Optional[SshOption]:
        """Look up an option by case-insensitive name"""
        key = name.casefold()
        for option in self.options:
            if option.name.casefold() == key:
                return option
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "host": self.host,
            "port": self.port,
            "username": self.username,
            "identity_file": self.identity_file,
            "options": [{"name": o.name, "value": o.value} for o in self.options],
            "kind": self.kind.to_dict(),
            "line_ending_style": self.line_ending_style.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ConnectionInfo":
        """Create from dictionary"""
        kind_data = data.get("kind") or {"type": "ssh"}
        if kind_data.get("type") == "mosh":
            kind: ConnectionKind = MoshKind(
                port_from=kind_data.get("port_from", DEFAULT_MOSH_PORT_FROM),
                port_to=kind_data.get("port_to", DEFAULT_MOSH_PORT_TO),
            )
        else:
            kind = SshKind()
        return cls(
            host=data["host"],
            port=data.get("port", DEFAULT_SSH_PORT),
            username=data.get("username", ""),
            identity_file=data.get("identity_file", ""),
            options=tuple(SshOption(o["name"], o.get("value", "")) for o in data.get("options", [])),
            kind=kind,
            line_ending_style=LineEndingStyle(data.get("line_ending_style", LineEndingStyle.DO_NOT_MODIFY.value)),
        )


@dataclass(frozen=True)
class CommandLine:
    """Executable plus the single argument string handed to a process launcher"""
    executable: str
    arguments: str

    def __str__(self) -> str:
        return f"{self.executable} {self.arguments}"


@dataclass(frozen=True)
class ShellProfile:
    """Launchable terminal profile built from a ConnectionInfo"""
    location: str
    arguments: str
    working_directory: str = ""
    line_ending_translation: LineEndingStyle = LineEndingStyle.DO_NOT_MODIFY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "location": self.location,
            "arguments": self.arguments,
            "working_directory": self.working_directory,
            "line_ending_translation": self.line_ending_translation.value,
        }
