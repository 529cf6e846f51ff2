"""
Logging Configuration Tests - Unit Tests for Handler Setup

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- eurofx.shared.logging_conf (resolve_log_path, setup_logging, setup_logging_from_settings)
- eurofx.config.settings (Settings)
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from eurofx.config.settings import Settings
from eurofx.shared.logging_conf import (
    LOG_FILE_NAME,
    resolve_log_path,
    setup_logging,
    setup_logging_from_settings,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestResolveLogPath:
    def test_disabled(self):
        assert resolve_log_path() is None

    def test_log_file(self, tmp_path):
        assert resolve_log_path(log_file=tmp_path / "x.log") == tmp_path / "x.log"

    def test_log_dir_wins(self, tmp_path):
        path = resolve_log_path(log_file=tmp_path / "x.log", log_dir=str(tmp_path / "logs"))
        assert path == tmp_path / "logs" / LOG_FILE_NAME


class TestSetupLogging:
    def test_stdout_only(self):
        assert setup_logging() is None
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_file_and_stdout(self, tmp_path):
        path = setup_logging(level=logging.DEBUG, log_dir=tmp_path / "logs")
        assert path == tmp_path / "logs" / LOG_FILE_NAME
        assert path.exists()
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        assert any(isinstance(h, RotatingFileHandler) for h in root.handlers)

    def test_file_only(self, tmp_path):
        setup_logging(log_file=tmp_path / "eurofx.log", log_to_stdout=False)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)

    def test_stdout_kept_without_file(self):
        setup_logging(log_to_stdout=False)
        assert len(logging.getLogger().handlers) == 1

    def test_rotation_limits(self, tmp_path):
        setup_logging(log_dir=tmp_path, max_bytes=1024, backup_count=2)
        handler = next(h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler))
        assert handler.maxBytes == 1024
        assert handler.backupCount == 2

    def test_records_reach_file(self, tmp_path):
        path = setup_logging(log_dir=tmp_path, log_to_stdout=False)
        logging.getLogger("eurofx.test").warning("feed refresh failed")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "feed refresh failed" in Path(path).read_text(encoding="utf-8")


class TestSetupLoggingFromSettings:
    @patch("eurofx.shared.logging_conf.setup_logging")
    def test_passes_settings_fields(self, mock_setup):
        settings = Mock(
            log_file="a.log", log_dir=None, log_max_bytes=2048, log_backup_count=1, log_stdout=False
        )
        setup_logging_from_settings(settings, verbose=True)
        mock_setup.assert_called_once_with(
            level=logging.DEBUG,
            log_file="a.log",
            log_dir=None,
            max_bytes=2048,
            backup_count=1,
            log_to_stdout=False,
        )

    def test_real_settings(self, tmp_path):
        settings = Settings(LOG_DIR=str(tmp_path), EUROFX_LOG_STDOUT=False, _env_file=None)
        path = setup_logging_from_settings(settings)
        assert path == tmp_path / LOG_FILE_NAME
        assert logging.getLogger().level == logging.INFO
