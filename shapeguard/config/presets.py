"""
Predefined logging configurations and the schema they follow.
"""
from typing import Dict, Any

from shapeguard.validation import (
    all_,
    any_,
    boolean,
    literal,
    number,
    optional,
    record,
    string
)

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

LOGGING_OPTIONS = record({
    'log_level': optional(any_(*(literal(level) for level in LOG_LEVELS))),
    'log_dir': optional(string),
    'enable_console': optional(boolean),
    'enable_file': optional(boolean),
    'enable_structured': optional(boolean),
    'max_bytes': optional(all_(number, lambda x: x > 0)),
    'backup_count': optional(all_(number, lambda x: x >= 0)),
})

# Schema every loaded configuration is checked against.
SHAPEGUARD_SCHEMA = record({
    'logging': optional(LOGGING_OPTIONS),
})


class ConfigPresets:
    """Collection of predefined logging configurations."""

    @staticmethod
    def default() -> Dict[str, Any]:
        """Console logging at WARNING, no files."""
        return {
            'logging': {
                'log_level': 'WARNING',
                'enable_console': True,
                'enable_file': False,
                'enable_structured': False
            }
        }

    @staticmethod
    def debug() -> Dict[str, Any]:
        """Verbose console and file logging, useful when tracing rejections."""
        return {
            'logging': {
                'log_level': 'DEBUG',
                'log_dir': 'logs/debug',
                'enable_console': True,
                'enable_file': True,
                'enable_structured': False
            }
        }

    @staticmethod
    def structured() -> Dict[str, Any]:
        """JSON lines on the console, for log collectors."""
        return {
            'logging': {
                'log_level': 'INFO',
                'enable_console': True,
                'enable_file': False,
                'enable_structured': True
            }
        }

    @staticmethod
    def get_preset(name: str) -> Dict[str, Any]:
        """Get preset by name."""
        presets = {
            'default': ConfigPresets.default,
            'debug': ConfigPresets.debug,
            'structured': ConfigPresets.structured,
        }

        if name not in presets:
            raise ValueError(f"Unknown preset: {name}. Available: {list(presets.keys())}")

        return presets[name]()
