"""
Connection link CLI commands
"""
import json
import typer
from pathlib import Path
from typing import List, NoReturn, Optional

from rich.markup import escape
from rich.table import Table

from ...core.logging import get_logger, get_stdout_console, get_stderr_console
from ...core.constants import DEFAULT_SSH_PORT, MOSH_PORTS_RANGE_RE
from ...core.exceptions import SshLinkError
from ...domain.connection import (
    CommandLineBuilder,
    ConnectionInfo,
    ConnectionService,
    LineEndingStyle,
    MoshKind,
    SshKind,
    decode,
    encode,
    split_option,
)
from ..config.ssh_config import connection_from_ssh_config
from .dialog import RichConnectionDialog

logger = get_logger(__name__)
stdout_console = get_stdout_console()
stderr_console = get_stderr_console()


def register_link_commands(app: typer.Typer) -> None:
    """Register link commands directly on the main app"""
    app.command(name="decode")(link_decode)
    app.command(name="encode")(link_encode)
    app.command(name="command")(link_command)
    app.command(name="new")(link_new)
    app.command(name="from-config")(link_from_config)


def _builder(ctx: typer.Context) -> CommandLineBuilder:
    settings = (ctx.obj or {}).get("settings")
    return CommandLineBuilder(settings)


def _print_plain(text: str) -> None:
    stdout_console.print(text, markup=False, highlight=False, soft_wrap=True)


def _print_field(label: str, value: str) -> None:
    stdout_console.print(f"[bold]{label}:[/bold] {escape(value)}", highlight=False, soft_wrap=True)


def _fail(error: Exception) -> NoReturn:
    stderr_console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False, soft_wrap=True)
    raise typer.Exit(1)


def _print_profile_summary(info: ConnectionInfo, builder: CommandLineBuilder) -> None:
    command = builder.build(info)
    _print_field("Link", encode(info))
    _print_field("Executable", command.executable)
    _print_field("Arguments", command.arguments)


def link_decode(
    uri: str = typer.Argument(..., help="ssh:// or mosh:// link"),
    as_json: bool = typer.Option(False, "--json", help="Print as JSON"),
):
    """
    Decode a connection link

    Examples:
        sshlink decode "ssh://bob;IdentityFile=%2Fhome%2Fbob%2F.ssh%2Fid@example.com:2222"
        sshlink decode "mosh://bob@example.com?mosh_ports=60000-60010" --json
    """
    try:
        info = decode(uri)
    except SshLinkError as e:
        _fail(e)

    if as_json:
        typer.echo(json.dumps(info.to_dict(), indent=2))
        return

    table = Table(title="Connection", show_header=True, header_style="bold cyan")
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Protocol", "mosh" if info.use_mosh else "ssh")
    table.add_row("Host", escape(info.host))
    table.add_row("Port", str(info.port))
    table.add_row("Username", escape(info.username) or "-")
    table.add_row("Identity File", escape(info.identity_file) or "-")
    for option in info.options:
        table.add_row(f"Option {escape(option.name)}", escape(option.value))
    if isinstance(info.kind, MoshKind):
        table.add_row("Mosh Ports", f"{info.kind.port_from}-{info.kind.port_to}")

    stdout_console.print(table)


def link_encode(
    host: str = typer.Option(..., "--host", "-H", help="Remote host"),
    user: str = typer.Option("", "--user", "-u", help="Username"),
    port: int = typer.Option(DEFAULT_SSH_PORT, "--port", "-p", help="SSH port"),
    identity_file: str = typer.Option("", "--identity-file", "-i", help="Identity (private key) file"),
    option: Optional[List[str]] = typer.Option(None, "--option", "-o", help="SSH option as NAME=VALUE (repeatable)"),
    mosh: bool = typer.Option(False, "--mosh", help="Connect with mosh"),
    mosh_ports: Optional[str] = typer.Option(None, "--mosh-ports", help="Mosh UDP port range FROM-TO"),
):
    """
    Encode a connection as a link

    Examples:
        sshlink encode -H example.com -u bob -p 2222 -o Compression=yes
        sshlink encode -H example.com -u bob --mosh --mosh-ports 60000-60010
    """
    try:
        options = tuple(split_option(text) for text in option or [])

        kind = SshKind()
        if mosh:
            kind = MoshKind()
            if mosh_ports:
                match = MOSH_PORTS_RANGE_RE.match(mosh_ports)
                if not match:
                    raise typer.BadParameter(f"Invalid mosh ports range '{mosh_ports}'", param_hint="--mosh-ports")
                kind = MoshKind(port_from=int(match.group("from")), port_to=int(match.group("to")))

        info = ConnectionInfo(
            host=host,
            port=port,
            username=user,
            identity_file=identity_file,
            options=options,
            kind=kind,
        )
        _print_plain(encode(info))
    except SshLinkError as e:
        _fail(e)


def link_command(
    ctx: typer.Context,
    uri: str = typer.Argument(..., help="ssh:// or mosh:// link"),
    interactive: bool = typer.Option(
        False, "--interactive", "-I",
        help="Ask for missing fields (such as the username) interactively",
    ),
):
    """
    Print the command line that opens a connection link

    Examples:
        sshlink command "ssh://bob@example.com:2222"
        sshlink command "ssh://example.com" --interactive
    """
    dialog = RichConnectionDialog() if interactive else None
    service = ConnectionService(_builder(ctx), dialog)

    try:
        profile = service.from_uri(uri)
    except SshLinkError as e:
        _fail(e)

    if profile is None:
        return

    _print_field("Executable", profile.location)
    _print_field("Arguments", profile.arguments)
    if profile.line_ending_translation != LineEndingStyle.DO_NOT_MODIFY:
        _print_field("Line Endings", profile.line_ending_translation.value)


def link_new(ctx: typer.Context):
    """
    Create a connection interactively and print its link and command line

    Leave the host empty to cancel.
    """
    builder = _builder(ctx)
    dialog = RichConnectionDialog()

    info = dialog.show()
    if info is None:
        return

    try:
        _print_profile_summary(info, builder)
    except SshLinkError as e:
        _fail(e)


def link_from_config(
    ctx: typer.Context,
    alias: str = typer.Argument(..., help="Host alias from the SSH client configuration"),
    ssh_config: Optional[Path] = typer.Option(
        None, "--ssh-config", "-F",
        help="SSH client configuration file (default: ~/.ssh/config)",
    ),
):
    """
    Build a connection link from an ~/.ssh/config host entry

    Examples:
        sshlink from-config my-server
        sshlink from-config my-server -F ./ssh_config
    """
    try:
        info = connection_from_ssh_config(alias, ssh_config)
        _print_profile_summary(info, _builder(ctx))
    except SshLinkError as e:
        _fail(e)
    except Exception as e:
        logger.exception("Failed to read SSH configuration")
        _fail(e)
