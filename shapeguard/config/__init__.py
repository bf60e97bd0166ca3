"""
Configuration management for shapeguard.
"""
from .config_manager import (
    Config,
    ConfigManager,
    get_config_manager,
    load_config,
    get_config,
    set_config
)
from .presets import ConfigPresets, LOGGING_OPTIONS, SHAPEGUARD_SCHEMA

__all__ = [
    'Config',
    'ConfigManager',
    'get_config_manager',
    'load_config',
    'get_config',
    'set_config',
    'ConfigPresets',
    'LOGGING_OPTIONS',
    'SHAPEGUARD_SCHEMA',
]
