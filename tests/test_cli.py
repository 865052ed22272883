"""Tests for the sshlink CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sshlink.adapters.cli.app import app
from sshlink.domain.connection import SshOption, decode


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def env(tmp_path: Path) -> dict:
    """Fixed executables and an empty home so no user config is picked up."""
    return {
        "HOME": str(tmp_path),
        "SSHLINK_SSH_EXECUTABLE": "/usr/bin/ssh",
        "SSHLINK_MOSH_EXECUTABLE": "mosh",
    }


class TestDecodeCommand:
    """Test `sshlink decode`."""

    def test_json_output(self, runner, env):
        result = runner.invoke(
            app, ["decode", "ssh://bob;IdentityFile=%2Fhome%2Fk,Compression=yes@h:2222", "--json"], env=env
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["host"] == "h"
        assert data["port"] == 2222
        assert data["identity_file"] == "/home/k"
        assert data["options"] == [{"name": "Compression", "value": "yes"}]
        assert data["kind"] == {"type": "ssh"}

    def test_table_output(self, runner, env):
        result = runner.invoke(app, ["decode", "mosh://bob@h?mosh_ports=60000-60010"], env=env)

        assert result.exit_code == 0
        assert "mosh" in result.stdout
        assert "60000-60010" in result.stdout

    def test_malformed_link(self, runner, env):
        result = runner.invoke(app, ["decode", "ssh://u;A=1,A=2@h"], env=env)

        assert result.exit_code == 1
        assert "defined more than once" in result.output


class TestEncodeCommand:
    """Test `sshlink encode`."""

    def test_ssh_link(self, runner, env):
        result = runner.invoke(
            app, ["encode", "-H", "h", "-u", "bob", "-p", "2222", "-o", "Compression=yes"], env=env
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == "ssh://bob;Compression=yes@h:2222"

    def test_mosh_link(self, runner, env):
        result = runner.invoke(
            app, ["encode", "-H", "h", "-u", "bob", "--mosh", "--mosh-ports", "60000:60010"], env=env
        )

        assert result.exit_code == 0
        assert result.stdout.strip() == "mosh://bob@h?mosh_ports=60000-60010"

    def test_option_values_taken_literally(self, runner, env):
        result = runner.invoke(
            app,
            [
                "encode", "-H", "h", "-u", "bob",
                "-o", "SetEnv=A+B",
                "-o", "LocalCommand=echo 100%25",
                "-o", "RemoteCommand=env X=1",
            ],
            env=env,
        )

        assert result.exit_code == 0
        link = result.stdout.strip()
        assert link == "ssh://bob;SetEnv=A%2BB,LocalCommand=echo+100%2525,RemoteCommand=env+X%3D1@h"
        assert decode(link).options == (
            SshOption("SetEnv", "A+B"),
            SshOption("LocalCommand", "echo 100%25"),
            SshOption("RemoteCommand", "env X=1"),
        )

    def test_invalid_option(self, runner, env):
        result = runner.invoke(app, ["encode", "-H", "h", "-o", "noequals"], env=env)

        assert result.exit_code == 1
        assert "Invalid SSH option" in result.output

    def test_invalid_port(self, runner, env):
        result = runner.invoke(app, ["encode", "-H", "h", "-p", "0"], env=env)

        assert result.exit_code == 1
        assert "ssh port invalid" in result.output


class TestCommandCommand:
    """Test `sshlink command`."""

    def test_ssh_command_line(self, runner, env):
        result = runner.invoke(
            app, ["command", "ssh://bob;IdentityFile=k.pem,Compression=yes@h:2222"], env=env
        )

        assert result.exit_code == 0
        assert "Executable: /usr/bin/ssh" in result.stdout
        assert 'Arguments: -p 2222 -i "k.pem" -o "Compression=yes" bob@h' in result.stdout

    def test_mosh_command_line(self, runner, env):
        result = runner.invoke(app, ["command", "mosh://bob@h?mosh_ports=60000-60010"], env=env)

        assert result.exit_code == 0
        assert "Executable: mosh" in result.stdout
        assert "Arguments: bob@h 60000:60010" in result.stdout

    def test_missing_username(self, runner, env):
        result = runner.invoke(app, ["command", "ssh://h"], env=env)

        assert result.exit_code == 1
        assert "username empty" in result.output

    def test_not_an_ssh_link(self, runner, env):
        result = runner.invoke(app, ["command", "https://example.com"], env=env)

        assert result.exit_code == 1
        assert "Not an SSH link" in result.output


class TestNewCommand:
    """Test `sshlink new`."""

    def test_cancel(self, runner, env):
        result = runner.invoke(app, ["new"], input="\n", env=env)

        assert result.exit_code == 0
        assert "Link:" not in result.stdout

    def test_creates_link(self, runner, env):
        # host, user, port (default), identity, no options, no mosh, default line endings
        result = runner.invoke(app, ["new"], input="h\nbob\n\n\n\nn\n\n", env=env)

        assert result.exit_code == 0
        assert "Link: ssh://bob@h" in result.stdout
        assert "Arguments: bob@h" in result.stdout


class TestFromConfigCommand:
    """Test `sshlink from-config`."""

    def test_from_config(self, runner, env, tmp_path):
        ssh_config = tmp_path / "ssh_config"
        ssh_config.write_text("""
Host web
    HostName web.example.com
    User deploy
    Port 2200
""")

        result = runner.invoke(app, ["from-config", "web", "-F", str(ssh_config)], env=env)

        assert result.exit_code == 0
        assert "Link: ssh://deploy@web.example.com:2200" in result.stdout
        assert "Arguments: -p 2200 deploy@web.example.com" in result.stdout

    def test_unknown_alias(self, runner, env, tmp_path):
        ssh_config = tmp_path / "ssh_config"
        ssh_config.write_text("Host web\n    HostName web.example.com\n")

        result = runner.invoke(app, ["from-config", "db", "-F", str(ssh_config)], env=env)

        assert result.exit_code == 1
        assert "not found" in result.output


def test_config_file_option(runner, env, tmp_path):
    config = tmp_path / "sshlink.toml"
    config.write_text('[executables]\nmosh = "/opt/mosh"\n')
    env = {key: value for key, value in env.items() if key != "SSHLINK_MOSH_EXECUTABLE"}

    result = runner.invoke(app, ["--config", str(config), "command", "mosh://bob@h"], env=env)

    assert result.exit_code == 0
    assert "Executable: /opt/mosh" in result.stdout


def test_missing_config_file(runner, env, tmp_path):
    result = runner.invoke(app, ["--config", str(tmp_path / "nope.toml"), "decode", "ssh://h"], env=env)

    assert result.exit_code == 1
    assert "Configuration file not found" in result.output
