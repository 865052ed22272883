"""
Main CLI application
"""
import typer
from pathlib import Path
from typing import Optional

from rich.markup import escape

from ...core.constants import DEFAULT_CONFIG_PATH
from ...core.exceptions import ConfigError
from ...core.logging import setup_logging, get_logger, get_stderr_console
from ..config.loader import ConfigLoader
from .link import register_link_commands

logger = get_logger(__name__)
stderr_console = get_stderr_console()

# Create main app
app = typer.Typer(
    name="sshlink",
    add_completion=False,
    help="SSH / Mosh connection link toolkit",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

register_link_commands(app)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Log file path",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help=f"Configuration file path (TOML, default: {DEFAULT_CONFIG_PATH} if present)",
    ),
):
    """
    sshlink - SSH / Mosh connection link toolkit
    
    Use subcommands to perform different operations:
    - decode / encode: Convert between ssh:// or mosh:// links and their fields
    - command: Show the ssh / mosh command line for a link
    - new: Create a link interactively
    - from-config: Create a link from an ~/.ssh/config host
    """
    config_loader = ConfigLoader()
    
    if config_file is None:
        default_path = Path(DEFAULT_CONFIG_PATH).expanduser()
        config_file = default_path if default_path.exists() else None
    
    try:
        cfg = config_loader.load(toml_path=config_file, cli_overrides={"log_level": log_level})
        settings = config_loader.executable_settings(cfg)
    except ConfigError as e:
        stderr_console.print(f"[red]Configuration Error:[/red] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)
    
    # Setup logging
    setup_logging(level=str(cfg.get("log_level", "WARNING")), log_file=log_file)
    logger.debug("Using ssh=%s mosh=%s", settings.ssh_executable, settings.mosh_executable)
    
    ctx.obj = {"config": cfg, "settings": settings}


def run():
    """CLI entry point"""
    app()


if __name__ == "__main__":
    run()
