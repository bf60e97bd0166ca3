"""
Logging configuration with structured logging and optional file handlers.

Importing shapeguard never installs handlers: the package logger only gets a
``NullHandler``. Applications opt in with ``LoggerFactory.configure``.

Public surface: ``get_logger``, ``LoggerFactory``, ``StructuredFormatter``
and ``LogContext``, which tags every record emitted inside a ``with`` block
with extra fields that ``StructuredFormatter`` merges into its JSON output.
"""
import logging
import logging.handlers
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Dict, Optional
import traceback

ROOT_LOGGER_NAME = "shapeguard"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_data['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        if hasattr(record, 'extra_fields'):
            log_data.update(record.extra_fields)

        return json.dumps(log_data, default=str)


class LoggerFactory:
    """Factory for creating loggers under the shapeguard namespace."""

    _loggers: Dict[str, logging.Logger] = {}
    _handlers: list = []
    _configured = False

    @classmethod
    def configure(
        cls,
        log_dir: str = "logs",
        log_level: str = "INFO",
        enable_console: bool = True,
        enable_file: bool = False,
        enable_structured: bool = False,
        max_bytes: int = 10 * 1024 * 1024,  # 10MB
        backup_count: int = 5
    ):
        """
        Attach handlers to the shapeguard logger.

        Calling this again replaces the handlers installed by the previous
        call.
        """
        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        cls.reset()
        package_logger.setLevel(getattr(logging, log_level.upper()))

        if enable_structured:
            console_formatter = StructuredFormatter()
            file_formatter = StructuredFormatter()
        else:
            console_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
            file_formatter = logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
            )

        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setFormatter(console_formatter)
            cls._add_handler(package_logger, console_handler)

        # File handler with rotation
        if enable_file:
            log_path = Path(log_dir)
            log_path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                log_path / "shapeguard.log",
                maxBytes=max_bytes,
                backupCount=backup_count
            )
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(file_formatter)
            cls._add_handler(package_logger, file_handler)

        cls._configured = True

    @classmethod
    def reset(cls):
        """Remove handlers installed by ``configure``."""
        package_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in cls._handlers:
            package_logger.removeHandler(handler)
            handler.close()
        cls._handlers = []
        package_logger.setLevel(logging.NOTSET)
        cls._configured = False

    @classmethod
    def is_configured(cls) -> bool:
        return cls._configured

    @classmethod
    def _add_handler(cls, logger: logging.Logger, handler: logging.Handler):
        logger.addHandler(handler)
        cls._handlers.append(handler)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Get or create a logger with the given name."""
        if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
            name = f"{ROOT_LOGGER_NAME}.{name}"

        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return cls._loggers[name]


class LogContext:
    """Context manager for adding extra fields to logs."""

    def __init__(self, logger: logging.Logger, **extra_fields):
        self.logger = logger
        self.extra_fields = extra_fields
        self.old_factory: Optional[Callable] = None

    def __enter__(self):
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args, **kwargs):
            record = old_factory(*args, **kwargs)
            record.extra_fields = self.extra_fields
            return record

        logging.setLogRecordFactory(record_factory)
        self.old_factory = old_factory
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.old_factory:
            logging.setLogRecordFactory(self.old_factory)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the shapeguard namespace."""
    return LoggerFactory.get_logger(name)
