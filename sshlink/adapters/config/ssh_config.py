"""
Build connection descriptors from OpenSSH client configuration
"""
from pathlib import Path
from typing import Dict, Any, Optional

from ...core.constants import DEFAULT_SSH_PORT
from ...core.exceptions import ConfigError
from ...core.utils import load_ssh_config
from ...domain.connection.models import ConnectionInfo, SshOption

# Directives mapped onto dedicated ConnectionInfo fields
_FIELD_DIRECTIVES = {"host", "hostname", "user", "port", "identityfile"}


def connection_from_entry(alias: str, entry: Dict[str, Any]) -> ConnectionInfo:
    """
    Map a resolved ssh_config entry onto a ConnectionInfo.
    
    Multi-valued directives other than IdentityFile are skipped since
    option names must stay unique.
    """
    try:
        port = int(entry.get("port", DEFAULT_SSH_PORT))
    except ValueError as e:
        raise ConfigError(f"Invalid port for host '{alias}': {entry.get('port')}") from e
    
    identity_files = entry.get("identityfile") or []
    
    options = [
        SshOption(name=key, value=value)
        for key, value in entry.items()
        if key not in _FIELD_DIRECTIVES and isinstance(value, str)
    ]
    
    return ConnectionInfo(
        host=entry.get("hostname", alias),
        port=port,
        username=entry.get("user", ""),
        identity_file=identity_files[0] if identity_files else "",
        options=tuple(options),
    )


def connection_from_ssh_config(alias: str, config_path: Optional[Path] = None) -> ConnectionInfo:
    """
    Load a host alias from ~/.ssh/config.
    
    Raises:
        ConfigError: If the config file or the alias is missing
    """
    return connection_from_entry(alias, load_ssh_config(alias, config_path))
