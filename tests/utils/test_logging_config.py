"""
Unit tests for logging configuration.
"""

import importlib
import logging

import pytest

import movielist.api.main
from movielist.utils.logging_config import configure_api_logging, get_logger, setup_logging


@pytest.fixture
def root_logger():
    """The root logger, with its handlers and level restored afterwards."""
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestLoggingSetup:

    def test_importing_app_leaves_logging_alone(self, root_logger):
        """Only the runner configures logging; importing the app must not."""
        sentinel = logging.NullHandler()
        root_logger.addHandler(sentinel)
        root_logger.setLevel(logging.CRITICAL)

        importlib.reload(movielist.api.main)

        assert sentinel in root_logger.handlers
        assert root_logger.level == logging.CRITICAL

    def test_setup_logging_console_only(self, root_logger):
        setup_logging(level="debug")
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0], logging.StreamHandler)

    def test_setup_logging_file(self, root_logger, tmp_path):
        setup_logging(log_file="test.log", level="INFO", log_dir=str(tmp_path / "logs"))
        get_logger("movielist.tests").info("user %s registered", "alice")
        for handler in root_logger.handlers:
            handler.flush()

        content = (tmp_path / "logs" / "test.log").read_text()
        assert "user alice registered" in content
        assert "movielist.tests - INFO" in content

    def test_configure_api_logging_level(self, root_logger, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        configure_api_logging(level="WARNING")
        assert root_logger.level == logging.WARNING
        assert (tmp_path / "logs" / "api.log").exists()

        configure_api_logging(debug=True, level="WARNING")
        assert root_logger.level == logging.DEBUG

    def test_get_logger_level_override(self):
        logger = get_logger("movielist.tests.quiet", level="error")
        assert logger.level == logging.ERROR
