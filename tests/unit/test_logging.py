"""Unit tests for logging configuration."""

import logging
from pathlib import Path

import pytest
import structlog

from md2resume.utils.logging import configure_logging, get_logger


@pytest.fixture
def restore_logging():
    """Undo global logging changes made by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_reads_current_environment(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, restore_logging
    ):
        """Test the log file location comes from the environment at call time."""
        log_dir = tmp_path / "logs"
        monkeypatch.setenv("LOG_DIRECTORY", str(log_dir))
        monkeypatch.setenv("LOG_FILE_NAME", "deploys.log")
        monkeypatch.setenv("LOG_FORMAT", "json")

        configure_logging()

        assert (log_dir / "deploys.log").exists()

    def test_get_logger(self, restore_logging):
        """Test named loggers are returned."""
        assert get_logger("md2resume.test") is not None
