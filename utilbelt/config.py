"""
Configuration handling for the utilbelt command line
"""
import copy
import os
from typing import Dict, Any, Optional

import yaml

from .services.errors import ConfigError


class Config:
    """Application configuration: defaults, YAML file, then CLI overrides"""

    DEFAULT_CONFIG = {
        'log_level': 'WARNING',
        'page_size': 10,
        'round_digits': 0,
        'simple': False,
        'bar': {
            'filled': '🔘',
            'empty': '▬',
        },
    }

    # Keys whose mapping values are merged rather than replaced
    NESTED_KEYS = ('bar',)

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialise the configuration

        Args:
            config_file: Path to a YAML configuration file (optional)
        """
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration values from a YAML file

        Args:
            config_file: Path to the configuration file

        Raises:
            ConfigError: if the file cannot be read or parsed
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading configuration file: {e}") from e

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError("Configuration file must contain a mapping")

        for key, value in file_config.items():
            current = self.config.get(key)
            if key in self.NESTED_KEYS and isinstance(value, dict) and isinstance(current, dict):
                self.config[key] = _merged(current, value)
            else:
                self.config[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Apply command line arguments; they take precedence over the file.
        ``None`` values are skipped so unset flags keep the file value.

        Args:
            args: Mapping of argument names to values
        """
        self.config.update({key: value for key, value in args.items() if value is not None})

    def get(self, key: str, default: Any = None) -> Any:
        """
        Return a configuration value; dotted keys reach into sections

        Args:
            key: Configuration key, e.g. ``page_size`` or ``bar.filled``
            default: Value returned when the key is missing

        Returns:
            The configured value
        """
        node: Any = self.config
        for part in key.split('.'):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_all(self) -> Dict[str, Any]:
        """
        Return an independent copy of the whole configuration
        """
        return copy.deepcopy(self.config)


def _merged(base: dict, update: dict) -> dict:
    """Return ``base`` updated with ``update``, merging nested sections."""
    result = dict(base)
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _merged(result[key], value)
        else:
            result[key] = value
    return result
