"""
Logging Configuration Module.

This module provides centralized logging configuration for the Pink Nail API.
It sets up structured logging with different levels for different modules and environments.

Features:
- Configurable log levels per module
- Console and file logging
- One-object-per-line JSON output for log shippers (LOG_FORMAT=json)
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional


def _get_logging_config():
    """Get logging configuration from settings model.

    This function is used to defer settings import until needed,
    avoiding circular imports during module initialization.
    """
    try:
        from pinknail.server.core.config import settings

        return {
            "log_level": settings.log_level.upper(),
            "log_format": settings.log_format,
            "log_file_dir": settings.log_file_dir,
            "enable_file_logging": settings.enable_file_logging,
        }
    except Exception:
        # Fallback to environment variables if settings not available
        return {
            "log_level": os.getenv("PINKNAIL_LOG_LEVEL", "INFO").upper(),
            "log_format": os.getenv("LOG_FORMAT", "detailed"),
            "log_file_dir": os.getenv("LOG_FILE_DIR", "logs"),
            "enable_file_logging": os.getenv("ENABLE_FILE_LOGGING", "false").lower() in ("true", "1", "yes"),
        }


_config = _get_logging_config()
LOG_LEVEL = _config["log_level"]
LOG_FORMAT = _config["log_format"]
LOG_FILE_DIR = _config["log_file_dir"]
ENABLE_FILE_LOGGING = _config["enable_file_logging"]

if ENABLE_FILE_LOGGING:
    Path(LOG_FILE_DIR).mkdir(parents=True, exist_ok=True)


SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

FORMATS = {
    "simple": SIMPLE_FORMAT,
    "detailed": DETAILED_FORMAT,
}

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Quotes and newlines in messages are escaped, so every line stays valid
    JSON for log shippers.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "module": record.filename,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def build_formatter(fmt: str) -> logging.Formatter:
    """Return the formatter for ``fmt``; unknown names fall back to ``detailed``."""
    if fmt == "json":
        return JsonFormatter(datefmt=DATE_FORMAT)
    return logging.Formatter(FORMATS.get(fmt, DETAILED_FORMAT), datefmt=DATE_FORMAT)


MODULE_LOG_LEVELS = {
    # Core modules
    "pinknail.core": "INFO",
    "pinknail.core.database": "INFO",
    # Server modules
    "pinknail.server": "INFO",
    "pinknail.server.api": "DEBUG",
    "pinknail.server.services": "DEBUG",
    "pinknail.server.core": "INFO",
    # Third-party libraries (reduce noise)
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "aiosqlite": "WARNING",
    "passlib": "ERROR",
    "httpx": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
        enable_file: Whether to enable file logging
    """
    level = (log_level or LOG_LEVEL).upper()
    fmt = log_format or LOG_FORMAT
    formatter = build_formatter(fmt)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Filter at handler level

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if enable_file and ENABLE_FILE_LOGGING:
        log_file = Path(LOG_FILE_DIR) / "pinknail.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(
        f"Logging configured: level={level}, format={fmt}, file_logging={enable_file and ENABLE_FILE_LOGGING}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)


# Configure logging on module import
setup_logging()
