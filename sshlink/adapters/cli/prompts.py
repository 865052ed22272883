"""
Rich-based user prompts
"""
from typing import Optional, Sequence
from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt, Confirm

from ...core.interfaces import PromptProvider
from ...core.logging import get_stdout_console


class RichPromptProvider(PromptProvider):
    """Rich-based prompt provider"""
    
    def __init__(self, console: Optional[Console] = None):
        self.console = console or get_stdout_console()
    
    def prompt(self, message: str, default: Optional[str] = None, password: bool = False) -> str:
        """Prompt user for input"""
        if default:
            return Prompt.ask(message, default=default, password=password, console=self.console)
        return Prompt.ask(message, default="", show_default=False, password=password, console=self.console)
    
    def choose(self, message: str, choices: Sequence[str], default: str) -> str:
        """Prompt user to pick one of choices"""
        return Prompt.ask(message, choices=list(choices), default=default, console=self.console)
    
    def confirm(self, message: str, default: bool = False) -> bool:
        """Prompt user for confirmation"""
        return Confirm.ask(message, default=default, console=self.console)
    
    def info(self, message: str) -> None:
        """Display info message"""
        self.console.print(f"[cyan]ℹ[/cyan] {escape(message)}")
    
    def error(self, message: str) -> None:
        """Display error message"""
        self.console.print(f"[red]✗[/red] {escape(message)}")
