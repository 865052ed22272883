"""Tests for the command line builder."""

import pytest

from sshlink.domain.connection.command import CommandLineBuilder, ExecutableSettings
from sshlink.domain.connection.models import (
    ConnectionInfo,
    LineEndingStyle,
    MoshKind,
    SshOption,
)


def test_full_argument_order(builder: CommandLineBuilder) -> None:
    """Port, identity, options, then user@host."""
    info = ConnectionInfo(
        host="h",
        port=2222,
        username="bob",
        identity_file="k.pem",
        options=(SshOption("Compression", "yes"),),
    )

    command = builder.build(info)

    assert command.executable == "/usr/bin/ssh"
    assert command.arguments == '-p 2222 -i "k.pem" -o "Compression=yes" bob@h'


def test_default_port_omitted(builder: CommandLineBuilder) -> None:
    assert builder.build(ConnectionInfo(host="h", username="bob")).arguments == "bob@h"


def test_options_keep_order(builder: CommandLineBuilder) -> None:
    info = ConnectionInfo(
        host="h",
        username="bob",
        options=(SshOption("B", "2"), SshOption("A", "1"), SshOption("BatchMode", "")),
    )

    assert builder.build(info).arguments == '-o "B=2" -o "A=1" -o "BatchMode=" bob@h'


def test_identity_file_quoted_verbatim(builder: CommandLineBuilder) -> None:
    info = ConnectionInfo(host="h", username="bob", identity_file='C:\\keys\\my "key"')

    assert builder.build(info).arguments == '-i "C:\\keys\\my "key"" bob@h'


def test_empty_username_passed_through(builder: CommandLineBuilder) -> None:
    assert builder.build(ConnectionInfo(host="h")).arguments == "@h"


def test_mosh_uses_mosh_executable(builder: CommandLineBuilder) -> None:
    info = ConnectionInfo(host="h", username="bob", port=2222, kind=MoshKind(60000, 60010))

    command = builder.build(info)

    assert command.executable == "mosh"
    assert command.arguments == "-p 2222 bob@h 60000:60010"


def test_command_line_str(builder: CommandLineBuilder) -> None:
    command = builder.build(ConnectionInfo(host="h", username="bob"))

    assert str(command) == "/usr/bin/ssh bob@h"


def test_shell_profile(builder: CommandLineBuilder) -> None:
    info = ConnectionInfo(host="h", username="bob", line_ending_style=LineEndingStyle.TO_CRLF)

    profile = builder.create_shell_profile(info)

    assert profile.location == "/usr/bin/ssh"
    assert profile.arguments == "bob@h"
    assert profile.working_directory == ""
    assert profile.line_ending_translation == LineEndingStyle.TO_CRLF


def test_detect_keeps_explicit_executables() -> None:
    settings = ExecutableSettings.detect(ssh_executable="/opt/ssh", mosh_executable="/opt/mosh")

    assert settings == ExecutableSettings("/opt/ssh", "/opt/mosh")


def test_default_settings_detected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sshlink.domain.connection.command.locate_ssh_executable", lambda: "/found/ssh")
    monkeypatch.setattr("sshlink.domain.connection.command.mosh_executable_name", lambda: "mosh")

    builder = CommandLineBuilder()

    assert builder.settings == ExecutableSettings("/found/ssh", "mosh")
