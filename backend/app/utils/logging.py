"""Unified logging configuration for the campaign backend.

Provides consistent logging with both console and file output.
Log files are written to the logs directory from settings with rotation support.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

from app.settings import settings

LOG_FORMAT = "[%(asctime)s.%(msecs)03d][%(levelname)s][%(filename)s:%(lineno)d]: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _ensure_app_logger_configured() -> None:
    """
    Ensure the app parent logger is configured with a console handler.
    This is called automatically on module import.
    """
    app_logger = logging.getLogger("app")

    has_formatted_handler = any(
        isinstance(h, logging.StreamHandler)
        and h.formatter
        and "%(asctime)s" in (h.formatter._fmt if hasattr(h.formatter, "_fmt") else "")
        for h in app_logger.handlers
    )

    if not has_formatted_handler:
        app_logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        app_logger.addHandler(console_handler)

        if settings.debug:
            app_logger.setLevel(logging.DEBUG)
        else:
            app_logger.setLevel(logging.INFO)

        # Keep uvicorn's root handlers from printing every record twice
        app_logger.propagate = False


def setup_logging(log_name: str = "campaigns") -> logging.Logger:
    """
    Setup logging configuration with console and file output.

    Log file path pattern: {logs_root}/{log_name}.log

    Args:
        log_name: The name of the log file (without .log extension).

    Returns:
        Configured logger instance
    """
    _ensure_app_logger_configured()

    log_dir = _get_logs_root()
    logger = logging.getLogger(f"app.{log_name}")

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        log_file_path = os.path.join(log_dir, f"{log_name}.log")

        app_logger = logging.getLogger("app")
        if not any(
            isinstance(h, RotatingFileHandler) and h.baseFilename == log_file_path
            for h in app_logger.handlers
        ):
            file_handler = RotatingFileHandler(
                log_file_path,
                maxBytes=settings.log_max_bytes,
                backupCount=settings.log_backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
            app_logger.addHandler(file_handler)

        logger.propagate = True

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name, typically __name__ of the calling module

    Returns:
        Logger instance under the app.* namespace
    """
    _ensure_app_logger_configured()

    if not name.startswith("app."):
        name = f"app.{name}"

    return logging.getLogger(name)


def _get_logs_root() -> Path | None:
    """Get the logs root directory, or None if it cannot be created."""
    logs_root = settings.get_logs_root()
    if _can_create_dir(logs_root):
        return logs_root
    return None


def _can_create_dir(path: Path) -> bool:
    """Check if a directory can be created."""
    try:
        path.mkdir(parents=True, exist_ok=True)
        return True
    except (OSError, PermissionError):
        return False


_ensure_app_logger_configured()
