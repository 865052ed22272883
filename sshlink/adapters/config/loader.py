"""
Configuration loader with priority: env > CLI > TOML > defaults
"""
import os
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional

from ...core.constants import ENV_PREFIX
from ...core.exceptions import ConfigError
from ...domain.connection.command import ExecutableSettings


class ConfigLoader:
    """Configuration loader with priority support"""

    def __init__(self, environ: Optional[Dict[str, str]] = None):
        self._env_prefix = ENV_PREFIX
        self._environ = os.environ if environ is None else environ

    def load_toml(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file"""
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        try:
            return tomllib.loads(path.read_text(encoding='utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse TOML configuration: {e}") from e

    def load_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config: Dict[str, Any] = {}

        # Map environment variables to config keys
        env_mappings = {
            f"{self._env_prefix}SSH_EXECUTABLE": "executables.ssh",
            f"{self._env_prefix}MOSH_EXECUTABLE": "executables.mosh",
            f"{self._env_prefix}LOG_LEVEL": "log_level",
        }

        for env_key, config_key in env_mappings.items():
            value = self._environ.get(env_key)
            if value:
                # Handle nested keys
                if "." in config_key:
                    section, key = config_key.split(".", 1)
                    config.setdefault(section, {})[key] = value
                else:
                    config[config_key] = value

        return config

    def merge_configs(self, *configs: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configurations with priority.
        Later configs override earlier ones.
        """
        result: Dict[str, Any] = {}

        for config in configs:
            result = self._deep_merge(result, config)

        return result

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries, skipping unset (None) overrides"""
        result = base.copy()

        for key, value in override.items():
            if value is None:
                continue
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def load(
        self,
        toml_path: Optional[Path] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
        use_env: bool = True,
    ) -> Dict[str, Any]:
        """
        Load configuration with priority: env > CLI > TOML > defaults

        Args:
            toml_path: Path to TOML configuration file
            cli_overrides: CLI parameter overrides
            use_env: Whether to load from environment variables

        Returns:
            Merged configuration dictionary
        """
        configs = [{"log_level": "WARNING", "executables": {}}]

        # 1. Load TOML if provided
        if toml_path:
            configs.append(self.load_toml(toml_path))

        # 2. Apply CLI overrides
        if cli_overrides:
            configs.append(cli_overrides)

        # 3. Environment variables (highest priority)
        if use_env:
            env_config = self.load_env()
            if env_config:
                configs.append(env_config)

        return self.merge_configs(*configs)

    def executable_settings(self, config: Dict[str, Any]) -> ExecutableSettings:
        """Resolve client executables, detecting the ones not configured"""
        executables = config.get("executables") or {}
        if not isinstance(executables, dict):
            raise ConfigError("'executables' must be a table")

        return ExecutableSettings.detect(
            ssh_executable=executables.get("ssh"),
            mosh_executable=executables.get("mosh"),
        )
