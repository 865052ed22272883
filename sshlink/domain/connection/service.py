"""
Connection service: dialog and link handling on top of the codec and builder
"""
from typing import Optional

from ...core.exceptions import ArgumentError, FormatError
from ...core.interfaces import ConnectionDialog
from ...core.logging import get_logger
from .command import CommandLineBuilder
from .models import ConnectionInfo, ShellProfile, ValidationResult
from .uri import decode, is_recognized_scheme
from .validation import validate, describe

logger = get_logger(__name__)


class ConnectionService:
    """Produce launchable shell profiles from dialogs and links"""
    
    def __init__(self, builder: CommandLineBuilder, dialog: Optional[ConnectionDialog] = None):
        self.builder = builder
        self.dialog = dialog
    
    def create_shell_profile(self, info: ConnectionInfo) -> ShellProfile:
        """
        Validate a connection and build its shell profile.
        
        Raises:
            ArgumentError: If info does not pass validation
        """
        result = validate(info)
        if result != ValidationResult.VALID:
            raise ArgumentError(f"Invalid connection info: {describe(result)}", name="info", result=result)
        return self.builder.create_shell_profile(info)
    
    def request_shell_profile(self, initial: Optional[ConnectionInfo] = None) -> Optional[ShellProfile]:
        """
        Ask the user for a connection.
        
        Returns:
            ShellProfile, or None if the dialog was cancelled
        """
        if self.dialog is None:
            raise ArgumentError("No connection dialog configured.", name="dialog")
        
        info = self.dialog.show(initial)
        if info is None:
            logger.info("Connection dialog cancelled")
            return None
        
        return self.create_shell_profile(info)
    
    def from_uri(self, uri: str) -> Optional[ShellProfile]:
        """
        Build a shell profile from an ssh:// or mosh:// link.
        
        Links without a username are completed through the dialog when one
        is configured.
        
        Returns:
            ShellProfile, or None if the dialog was cancelled
        
        Raises:
            FormatError: If the link is not an ssh/mosh link or is malformed
        """
        if not is_recognized_scheme(uri):
            raise FormatError(f"Not an SSH link: '{uri}'.", token=uri)
        
        info = decode(uri)
        if validate(info) != ValidationResult.VALID and self.dialog is not None:
            return self.request_shell_profile(info)
        
        return self.create_shell_profile(info)
