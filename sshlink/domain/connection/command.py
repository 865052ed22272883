"""
Command line builder

Turns a ConnectionInfo into the executable and argument string used to
start ssh or mosh:

    [-p <port>] [-i "<identity>"] [-o "<name>=<value>"]... <user>@<host> [<from>:<to>]
"""
from dataclasses import dataclass
from typing import List, Optional

from ...core.constants import DEFAULT_SSH_PORT
from ...core.logging import get_logger
from ...core.system import locate_ssh_executable, mosh_executable_name
from .models import CommandLine, ConnectionInfo, MoshKind, ShellProfile

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExecutableSettings:
    """Client executables used by the builder"""
    ssh_executable: str
    mosh_executable: str

    @classmethod
    def detect(
        cls,
        ssh_executable: Optional[str] = None,
        mosh_executable: Optional[str] = None,
    ) -> "ExecutableSettings":
        """Fill unset executables from the local system"""
        return cls(
            ssh_executable=ssh_executable or locate_ssh_executable(),
            mosh_executable=mosh_executable or mosh_executable_name(),
        )


class CommandLineBuilder:
    """
    Build client command lines from connection descriptors.

    No validation happens here; callers validate before building.
    """

    def __init__(self, settings: Optional[ExecutableSettings] = None):
        self.settings = settings or ExecutableSettings.detect()

    def build_arguments(self, info: ConnectionInfo) -> str:
        """Build the argument string for ssh/mosh"""
        args: List[str] = []

        if info.port != DEFAULT_SSH_PORT:
            args.append(f"-p {info.port}")

        if info.identity_file:
            args.append(f'-i "{info.identity_file}"')

        for option in info.options:
            args.append(f'-o "{option.name}={option.value}"')

        args.append(f"{info.username}@{info.host}")

        if isinstance(info.kind, MoshKind):
            args.append(f"{info.kind.port_from}:{info.kind.port_to}")

        return " ".join(args)

    def build(self, info: ConnectionInfo) -> CommandLine:
        """
        Build executable path and argument string.

        Args:
            info: Connection descriptor, validated by the caller

        Returns:
            CommandLine for a process launcher
        """
        executable = self.settings.mosh_executable if info.use_mosh else self.settings.ssh_executable
        command = CommandLine(executable=executable, arguments=self.build_arguments(info))
        logger.debug("Built command line: %s", command)
        return command

    def create_shell_profile(self, info: ConnectionInfo) -> ShellProfile:
        """Build a terminal profile for the connection"""
        command = self.build(info)
        return ShellProfile(
            location=command.executable,
            arguments=command.arguments,
            working_directory="",
            line_ending_translation=info.line_ending_style,
        )
