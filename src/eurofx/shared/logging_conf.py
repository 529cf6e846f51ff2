"""
Logging Configuration - Handlers for the Console Explorer

Builds the root logging configuration for the layers around the rate core.
The rate table, calculator and series builder never log; the controller,
the feed providers and the entry point do, through module loggers.

Two entry points:
- setup_logging(): explicit arguments, used by tests and scripts
- setup_logging_from_settings(): reads the LOG_* fields of Settings

Files that USE this module:
- eurofx.app (setup_logging_from_settings at startup)

Files that this module USES:
- None (settings are passed in, not imported)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "eurofx.log"


def resolve_log_path(
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
) -> Optional[Path]:
    """
    Decide where file logs go.

    ``log_dir`` wins over ``log_file``; inside a directory the file is
    named eurofx.log. Returns None when file logging is off.
    """
    if log_dir:
        return Path(log_dir) / LOG_FILE_NAME
    if log_file:
        return Path(log_file)
    return None


def _file_handler(path: Path, max_bytes: int, backup_count: int) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_stdout: bool = True,
) -> Optional[Path]:
    """
    Replace the root handlers with stdout and/or rotating file handlers.

    Stdout is always used when no file is configured, so turning stdout off
    without a log file still leaves one handler.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path of the log file
        log_dir: Optional directory for eurofx.log (takes precedence)
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of rotated files to keep (default: 5)
        log_to_stdout: Whether to also log to stdout

    Returns:
        Path of the log file, or None when logging to stdout only
    """
    log_path = resolve_log_path(log_file, log_dir)
    handlers: list[logging.Handler] = []
    if log_to_stdout or log_path is None:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_path is not None:
        handlers.append(_file_handler(log_path, max_bytes, backup_count))

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    logging.basicConfig(level=level, handlers=handlers, force=True)

    logging.getLogger(__name__).info(
        "Logging configured: %s, level=%s",
        f"file={log_path}" if log_path else "stdout",
        logging.getLevelName(level),
    )
    return log_path


def setup_logging_from_settings(settings: Any, verbose: bool = False) -> Optional[Path]:
    """Configure logging from the LOG_* fields of an eurofx Settings object."""
    return setup_logging(
        level=logging.DEBUG if verbose else logging.INFO,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_to_stdout=settings.log_stdout,
    )
