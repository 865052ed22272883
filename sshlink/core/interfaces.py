"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.connection.models import ConnectionInfo


class ConnectionDialog(ABC):
    """Modal dialog collecting a connection from the user"""
    
    @abstractmethod
    def show(self, initial: Optional["ConnectionInfo"] = None) -> Optional["ConnectionInfo"]:
        """Show the dialog; returns None when the user cancels"""
        pass


class PromptProvider(ABC):
    """User prompt interface"""
    
    @abstractmethod
    def prompt(self, message: str, default: Optional[str] = None, password: bool = False) -> str:
        """Prompt user for input"""
        pass
    
    @abstractmethod
    def confirm(self, message: str, default: bool = False) -> bool:
        """Prompt user for confirmation"""
        pass
    
    @abstractmethod
    def choose(self, message: str, choices: Sequence[str], default: str) -> str:
        """Prompt user to pick one of choices"""
        pass
    
    @abstractmethod
    def info(self, message: str) -> None:
        """Display info message"""
        pass
    
    @abstractmethod
    def error(self, message: str) -> None:
        """Display error message"""
        pass
