"""Tests for logging configuration."""
import json
import logging
import tempfile
from pathlib import Path

import pytest
from shapeguard import LogContext, LoggerFactory, StructuredFormatter, get_logger


@pytest.fixture(autouse=True)
def reset_logging():
    LoggerFactory.reset()
    yield
    LoggerFactory.reset()


class TestGetLogger:
    """Tests for get_logger."""

    def test_namespaced(self):
        """Test loggers live under the shapeguard namespace."""
        assert get_logger('custom').name == 'shapeguard.custom'
        assert get_logger('shapeguard.validation').name == 'shapeguard.validation'

    def test_cached(self):
        """Test the same logger object is returned."""
        assert get_logger('custom') is get_logger('custom')

    def test_import_installs_no_real_handlers(self):
        """Test only a NullHandler is attached before configure."""
        handlers = logging.getLogger('shapeguard').handlers
        assert all(isinstance(h, logging.NullHandler) for h in handlers)


class TestLoggerFactory:
    """Tests for LoggerFactory.configure."""

    def test_file_logging(self):
        """Test file handlers write into log_dir."""
        with tempfile.TemporaryDirectory() as tmpdir:
            LoggerFactory.configure(
                log_dir=tmpdir,
                log_level='DEBUG',
                enable_console=False,
                enable_file=True
            )
            get_logger('test').debug('hello file')
            LoggerFactory.reset()

            content = (Path(tmpdir) / 'shapeguard.log').read_text()

        assert 'hello file' in content

    def test_reconfigure_replaces_handlers(self):
        """Test configuring twice does not stack handlers."""
        LoggerFactory.configure(enable_console=True)
        count = len(logging.getLogger('shapeguard').handlers)
        LoggerFactory.configure(enable_console=True)
        assert len(logging.getLogger('shapeguard').handlers) == count

    def test_reset(self):
        """Test reset removes configured handlers."""
        LoggerFactory.configure(enable_console=True)
        assert LoggerFactory.is_configured()
        LoggerFactory.reset()
        assert not LoggerFactory.is_configured()
        handlers = logging.getLogger('shapeguard').handlers
        assert all(isinstance(h, logging.NullHandler) for h in handlers)


class TestStructuredFormatter:
    """Tests for the JSON formatter."""

    def test_format(self):
        """Test records render as JSON with extra fields."""
        logger = get_logger('structured')
        record = logger.makeRecord(logger.name, logging.INFO, __file__, 1, 'hello %s', ('world',), None)
        record.extra_fields = {'request_id': 'abc'}

        data = json.loads(StructuredFormatter().format(record))

        assert data['message'] == 'hello world'
        assert data['level'] == 'INFO'
        assert data['request_id'] == 'abc'

    def test_log_context(self):
        """Test LogContext attaches extra fields to records."""
        captured = []

        class Capture(logging.Handler):
            def emit(self, record):
                captured.append(record)

        logger = get_logger('context')
        handler = Capture()
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        try:
            with LogContext(logger, job='nightly'):
                logger.info('inside')
            logger.info('outside')
        finally:
            logger.removeHandler(handler)
            logger.setLevel(logging.NOTSET)

        assert captured[0].extra_fields == {'job': 'nightly'}
        assert not hasattr(captured[1], 'extra_fields')
