"""
Logging Configuration Module.

Centralized logging for JuiceBox Factory. The level, format and optional log
file come from the server settings (``JUICEBOX_LOG_LEVEL``, ``LOG_FORMAT``,
``LOG_FILE_DIR``, ``ENABLE_FILE_LOGGING``); domain packages and noisy
third-party libraries get their own levels.

Formats:
- simple: level, logger and message
- detailed: timestamp and source location (default)
- json: one JSON object per record
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

LOG_FILE_NAME = "juicebox_factory.log"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

# Levels for the domain packages and the libraries they drive
MODULE_LOG_LEVELS = {
    "juicebox_factory.scoring": "DEBUG",
    "juicebox_factory.comparison": "DEBUG",
    "juicebox_factory.search": "DEBUG",
    "juicebox_factory.ai": "INFO",
    "juicebox_factory.discovery": "INFO",
    "juicebox_factory.notifications": "INFO",
    "juicebox_factory.core.database": "INFO",
    "juicebox_factory.server": "INFO",
    "juicebox_factory.server.api": "DEBUG",
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "httpx": "WARNING",
    "asyncio": "WARNING",
    "uvicorn": "INFO",
    "uvicorn.access": "INFO",
}


@dataclass(frozen=True)
class LoggingOptions:
    """Resolved logging options."""

    level: str = "INFO"
    format: str = "detailed"
    file_dir: str = "logs"
    file_enabled: bool = False


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "module": record.filename,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def load_logging_options() -> LoggingOptions:
    """Read logging options from the server settings.

    The settings import is deferred so that modules can create loggers while
    the configuration module itself is still loading. If the settings cannot
    be built (for example a malformed ``.env``), the raw environment is used.
    """
    try:
        from juicebox_factory.server.core.config import settings
    except Exception as e:
        logging.getLogger(__name__).warning(f"Settings unavailable for logging, reading environment: {e}")
        return LoggingOptions(
            level=os.getenv("JUICEBOX_LOG_LEVEL", "INFO").upper(),
            format=os.getenv("LOG_FORMAT", "detailed"),
            file_dir=os.getenv("LOG_FILE_DIR", "logs"),
            file_enabled=os.getenv("ENABLE_FILE_LOGGING", "false").lower() in ("true", "1", "yes"),
        )
    return LoggingOptions(
        level=settings.log_level.upper(),
        format=settings.log_format,
        file_dir=settings.log_file_dir,
        file_enabled=settings.enable_file_logging,
    )


def build_formatter(fmt: str) -> logging.Formatter:
    """Formatter for ``fmt``; unknown names get the detailed format."""
    if fmt == "json":
        return JsonFormatter(datefmt=DATE_FORMAT)
    if fmt == "simple":
        return logging.Formatter(SIMPLE_FORMAT, datefmt=DATE_FORMAT)
    return logging.Formatter(DETAILED_FORMAT, datefmt=DATE_FORMAT)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = True,
    options: Optional[LoggingOptions] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Override the configured level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override the configured format (simple, detailed, json)
        enable_file: Allow the file handler when file logging is configured
        options: Use these options instead of the server settings
    """
    options = options or load_logging_options()
    level = (log_level or options.level).upper()
    fmt = log_format or options.format
    formatter = build_formatter(fmt)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # handlers filter
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    file_logging = enable_file and options.file_enabled
    if file_logging:
        log_dir = Path(options.file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={file_logging}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
