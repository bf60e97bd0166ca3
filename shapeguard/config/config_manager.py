"""
Configuration management for applications using shapeguard.

The validator algebra never reads configuration; this module only governs
ambient concerns such as logging.
"""
import os
import json
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from copy import deepcopy

from shapeguard.utils.logging_config import get_logger, LoggerFactory
from shapeguard.utils.exceptions import AssertionFailedError, ConfigurationError
from shapeguard.validation import Validator, asserts
from .presets import ConfigPresets, SHAPEGUARD_SCHEMA

LOGGING_KEYS = (
    'log_dir',
    'log_level',
    'enable_console',
    'enable_file',
    'enable_structured',
    'max_bytes',
    'backup_count',
)


class Config:
    """Configuration container with dot notation access."""

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = data or {}

    def __getattr__(self, key: str) -> Any:
        """Get config value using dot notation."""
        if key.startswith('_'):
            return object.__getattribute__(self, key)

        if key not in self._data:
            raise AttributeError(f"Config has no attribute '{key}'")

        value = self._data[key]
        if isinstance(value, dict):
            return Config(value)
        return value

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any):
        self._data[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        """Get config value by dotted key, e.g. ``logging.log_level``."""
        try:
            keys = key.split('.')
            value = self._data
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def set(self, key: str, value: Any):
        """Set config value by dotted key, creating intermediate sections."""
        keys = key.split('.')
        data = self._data
        for k in keys[:-1]:
            if not isinstance(data.get(k), dict):
                data[k] = {}
            data = data[k]
        data[keys[-1]] = value

    def to_dict(self) -> Dict[str, Any]:
        return deepcopy(self._data)

    def update(self, other: Dict[str, Any]):
        """Update configuration with another dict."""
        self._deep_update(self._data, other)

    @staticmethod
    def _deep_update(base: Dict, update: Dict):
        """Recursively update nested dictionaries."""
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                Config._deep_update(base[key], value)
            else:
                base[key] = deepcopy(value)


class ConfigManager:
    """
    Configuration loaded from files, environment variables and dicts.

    Loaded data can be checked against schemas, which are ordinary
    shapeguard validators registered by name. ``DEFAULT_SCHEMA`` is
    registered on every manager and is always checked when validating.
    """

    DEFAULT_SCHEMA = 'shapeguard'

    def __init__(self):
        self._config = Config()
        self._schemas: Dict[str, Validator] = {}
        self.logger = get_logger(self.__class__.__name__)
        self.register_schema(self.DEFAULT_SCHEMA, SHAPEGUARD_SCHEMA)

    def load_from_file(self, filepath: str, validate: bool = True):
        """
        Load configuration from file (JSON or YAML).

        Args:
            filepath: Path to configuration file
            validate: Whether to check the data against the default schema
                and the schema registered under the file's stem, if any
        """
        path = Path(filepath)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {filepath}",
                details={'filepath': str(path)}
            )

        if path.suffix not in ('.yaml', '.yml', '.json'):
            raise ConfigurationError(
                f"Unsupported file format: {path.suffix}",
                details={'filepath': str(path)}
            )

        try:
            with open(path, 'r') as f:
                if path.suffix == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load configuration from {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        # An empty YAML document loads as None
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {filepath} must be a mapping, got {type(data).__name__}",
                details={'filepath': str(path)}
            )

        if validate:
            self._validate(data, self.DEFAULT_SCHEMA, source=str(path))
            if path.stem in self._schemas:
                self._validate(data, path.stem, source=str(path))

        self._config.update(data)
        self.logger.info(f"Loaded configuration from {filepath}")

    def load_from_env(self, prefix: str = "SHAPEGUARD_") -> int:
        """
        Load configuration from environment variables.

        A double underscore separates sections, so
        ``SHAPEGUARD_LOGGING__LOG_LEVEL=DEBUG`` sets ``logging.log_level``.
        Values are parsed as JSON when possible and kept as strings otherwise.

        Returns:
            Number of values loaded
        """
        loaded = 0

        for key, value in os.environ.items():
            if not key.startswith(prefix):
                continue

            config_key = key[len(prefix):].lower()
            if not config_key:
                continue

            try:
                parsed_value = json.loads(value)
            except json.JSONDecodeError:
                parsed_value = value

            self._config.set(config_key.replace('__', '.'), parsed_value)
            loaded += 1

        self.logger.info(f"Loaded {loaded} configuration values from environment")
        return loaded

    def load_from_dict(self, data: Dict[str, Any], validate: bool = False, schema_name: Optional[str] = None):
        """
        Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            validate: Whether to validate against schema
            schema_name: Name of schema to use for validation; defaults to
                ``DEFAULT_SCHEMA``
        """
        if validate:
            self._validate(data, schema_name or self.DEFAULT_SCHEMA, source='dict')

        self._config.update(data)
        self.logger.info("Loaded configuration from dictionary")

    def load_preset(self, name: str):
        """Load one of the ``ConfigPresets`` by name."""
        self.load_from_dict(ConfigPresets.get_preset(name), validate=True)

    def save_to_file(self, filepath: str, format: str = 'yaml'):
        """
        Save configuration to file.

        Args:
            filepath: Path to save configuration
            format: File format ('yaml' or 'json')
        """
        if format not in ('yaml', 'json'):
            raise ConfigurationError(f"Unsupported format: {format}")

        path = Path(filepath)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, 'w') as f:
                if format == 'yaml':
                    yaml.safe_dump(self._config.to_dict(), f, default_flow_style=False)
                else:
                    json.dump(self._config.to_dict(), f, indent=2)
        except (OSError, TypeError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to save configuration to {filepath}: {e}",
                details={'filepath': str(path), 'error': str(e)}
            ) from e

        self.logger.info(f"Saved configuration to {filepath}")

    def register_schema(self, name: str, schema: Validator):
        """Register a validator that configuration named ``name`` must satisfy."""
        self._schemas[name] = schema
        self.logger.debug(f"Registered schema: {name}")

    def _validate(self, data: Dict[str, Any], schema_name: str, source: str):
        if schema_name not in self._schemas:
            raise ConfigurationError(
                f"Unknown schema: {schema_name}",
                details={'schema': schema_name}
            )
        try:
            asserts(self._schemas[schema_name])(data)
        except AssertionFailedError as e:
            raise ConfigurationError(
                f"Configuration from {source} does not match schema '{schema_name}'",
                details={'schema': schema_name, 'source': source}
            ) from e

    def apply_logging(self):
        """
        Configure shapeguard logging from the ``logging`` section.

        Raises ConfigurationError when the configuration does not match
        ``DEFAULT_SCHEMA``, whichever source it was loaded from.
        """
        self._validate(self._config.to_dict(), self.DEFAULT_SCHEMA, source='logging')
        section = self._config.get('logging', {}) or {}
        options = {key: section[key] for key in LOGGING_KEYS if key in section}
        LoggerFactory.configure(**options)
        self.logger.debug(f"Applied logging configuration: {options}")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set configuration value."""
        self._config.set(key, value)
        self.logger.debug(f"Set config: {key} = {value}")

    def get_config(self) -> Config:
        """Get the full configuration object."""
        return self._config

    def merge_configs(self, *configs: Dict[str, Any]):
        """Merge multiple configuration dictionaries."""
        for config in configs:
            self._config.update(config)
        self.logger.info(f"Merged {len(configs)} configurations")

    def clear(self):
        """Clear all configuration."""
        self._config = Config()
        self.logger.info("Cleared all configuration")


# Global configuration manager instance
_global_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _global_config_manager
    if _global_config_manager is None:
        _global_config_manager = ConfigManager()
    return _global_config_manager


def load_config(filepath: str):
    """Load configuration from file into global manager."""
    manager = get_config_manager()
    manager.load_from_file(filepath)


def get_config(key: str, default: Any = None) -> Any:
    """Get configuration value from global manager."""
    manager = get_config_manager()
    return manager.get(key, default)


def set_config(key: str, value: Any):
    """Set configuration value in global manager."""
    manager = get_config_manager()
    manager.set(key, value)
