#!/usr/bin/env python3
"""Centralized logging utilities with consistent formatting."""

import json
import logging
import sys
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

# Global configuration
_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LEVEL = logging.INFO
_CONFIGURED_LOGGERS: set[str] = set()


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": time.time(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logger(
    name: str,
    level: int | None = None,
    format_string: str | None = None,
    stream: Any = None,
) -> logging.Logger:
    """Set up a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
        stream: Output stream (default: sys.stdout)

    Returns:
        Configured logger instance

    Example:
        >>> from layered_i18n.core.logging_utils import setup_logger
        >>> logger = setup_logger(__name__)
        >>> logger.info("Locale store ready")
    """
    logger = logging.getLogger(name)

    # Only configure once per logger name
    if name in _CONFIGURED_LOGGERS:
        return logger

    if level is None:
        level = _DEFAULT_LEVEL
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(stream or sys.stdout)
        formatter = logging.Formatter(
            format_string or _LOG_FORMAT,
            datefmt=_LOG_DATE_FORMAT,
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    # Prevent propagation to root logger (avoid duplicate logs)
    logger.propagate = False

    _CONFIGURED_LOGGERS.add(name)

    return logger


def set_global_log_level(level: int):
    """Set log level for all configured loggers.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
    """
    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level

    for logger_name in _CONFIGURED_LOGGERS:
        logging.getLogger(logger_name).setLevel(level)


def configure_file_logging(
    log_file: str | Path,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 3,
    structured: bool = False,
):
    """Attach a rotating file handler to every configured logger.

    Args:
        log_file: Path of the log file (parent directories are created)
        max_bytes: Maximum file size before rotation
        backup_count: Number of backup files to keep
        structured: Write JSON lines instead of plain text
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    if structured:
        file_handler.setFormatter(JSONFormatter())
    else:
        file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATE_FORMAT))

    for logger_name in _CONFIGURED_LOGGERS:
        logger = logging.getLogger(logger_name)
        has_file_handler = any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
        if not has_file_handler:
            logger.addHandler(file_handler)


def configure_logging(config: dict[str, Any]):
    """Apply the ``logging`` section of a config dictionary.

    Args:
        config: Configuration dictionary (see config_schema.LoggingConfig)
    """
    log_config = config.get("logging") or {}
    level_str = log_config.get("level", "INFO")
    set_global_log_level(getattr(logging, str(level_str).upper(), logging.INFO))

    log_file = log_config.get("file")
    if log_file:
        configure_file_logging(
            log_file,
            max_bytes=log_config.get("max_size_mb", 10) * 1024 * 1024,
            backup_count=log_config.get("backup_count", 3),
            structured=log_config.get("structured", False),
        )


def get_logger_stats() -> dict[str, Any]:
    """Get statistics about configured loggers."""
    return {
        "count": len(_CONFIGURED_LOGGERS),
        "loggers": sorted(_CONFIGURED_LOGGERS),
        "default_level": logging.getLevelName(_DEFAULT_LEVEL),
    }
