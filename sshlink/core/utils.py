"""
Core utility functions
"""
import paramiko
from pathlib import Path
from typing import Dict, Any, Optional

from .constants import SSH_CONFIG_PATH
from .exceptions import ConfigError


# ============================================================
# SSH Config Management
# ============================================================

def load_ssh_config(hostname: str, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration for specified Host from ~/.ssh/config.
    
    Args:
        hostname: Host name in SSH configuration
        config_path: Alternative config file
    
    Returns:
        Lower-cased directive mapping as resolved by paramiko
    
    Raises:
        ConfigError: If the config file doesn't exist or no Host pattern matches
    """
    path = Path(config_path or SSH_CONFIG_PATH).expanduser()
    if not path.exists():
        raise ConfigError(f"{path} does not exist")

    ssh_config = paramiko.SSHConfig.from_path(str(path))
    entry = dict(ssh_config.lookup(hostname))

    # lookup() always answers, with just hostname=alias when no Host pattern matched
    matched = hostname in ssh_config.get_hostnames() or entry != {"hostname": hostname}
    if not matched:
        raise ConfigError(f"Host '{hostname}' not found in {path}")

    return entry
