# src/swapwatch/shared/logging_conf.py
"""
Logging Configuration - Logging Setup and Configuration

This module provides centralized logging configuration for SwapWatch.
Library modules only create module-level loggers; the host (or the
composition root) calls setup_logging once to attach handlers.

Files that USE this module:
- swapwatch.app (setup_logging function for logging initialization)
- tests.test_logging_conf (unit tests)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "swapwatch.log"


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a level name ('debug', 'INFO') or number into a logging level.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.INFO


def _file_path(log_file: Optional[Union[str, Path]], log_dir: Optional[Union[str, Path]]) -> Optional[Path]:
    if log_dir:
        path = Path(log_dir) / LOG_FILE_NAME
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    log_stdout: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> List[logging.Handler]:
    """
    Configure application-wide logging settings.

    Logs to stdout, to a rotating file, or both. When neither is enabled,
    stdout is used anyway so that nothing is silently discarded.

    Args:
        level: Logging level or level name (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; wins over log_file
        log_stdout: Whether to log to stdout (default: True)
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)

    Returns:
        The handlers that were installed
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if log_stdout:
        handlers.append(logging.StreamHandler(sys.stdout))

    file_path = _file_path(log_file, log_dir)
    if file_path is not None:
        handlers.append(RotatingFileHandler(
            file_path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        ))

    if not handlers:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=resolve_level(level), handlers=handlers, force=True)

    logger = logging.getLogger(__name__)
    if file_path is not None:
        logger.info("Logging configured: file=%s, level=%s", file_path, level)
    else:
        logger.info("Logging configured: stdout, level=%s", level)
    return handlers
