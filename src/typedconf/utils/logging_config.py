"""
Logging configuration for typedconf.

Deprecation warnings and loader messages go through the standard logging
module. This module sets up the root logger with standard, detailed or JSON
output and an optional rotating log file.
"""

import json
import logging
import logging.handlers
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class LogLevel(Enum):
    """Log level enumeration."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class LogFormat(str, Enum):
    """Log format types."""
    STANDARD = "standard"
    JSON = "json"
    DETAILED = "detailed"


class JSONFormatter(logging.Formatter):
    """Formats each record as a single-line JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "logger": record.name,
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False, separators=(',', ':'))


def parse_file_size(size: str) -> int:
    """Convert a size such as "10MB" to bytes."""
    units = {"KB": 1024, "MB": 1024 * 1024, "GB": 1024 * 1024 * 1024}
    for suffix, multiplier in units.items():
        if size.endswith(suffix):
            return int(size[:-len(suffix)]) * multiplier
    return int(size)


class LoggingManager:
    """
    Root logger setup with console and optional file output.
    """

    def __init__(
        self,
        log_level: LogLevel = LogLevel.INFO,
        log_format: LogFormat = LogFormat.STANDARD,
        log_file: Optional[Path] = None,
        enable_console: bool = True,
        enable_rotation: bool = False,
        max_file_size: str = "10MB",
        backup_count: int = 5
    ):
        self.log_level = log_level
        self.log_format = log_format
        self.log_file = log_file
        self.enable_console = enable_console
        self.enable_rotation = enable_rotation
        self.max_file_size = max_file_size
        self.backup_count = backup_count

        self._setup_root_logger()

    def _setup_root_logger(self) -> None:
        """Setup the root logger configuration."""
        root_logger = logging.getLogger()
        root_logger.setLevel(self.log_level.value)

        # Clear existing handlers
        root_logger.handlers.clear()

        formatter = self._create_formatters()[self.log_format]

        if self.enable_console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(self.log_level.value)
            console_handler.setFormatter(formatter)
            root_logger.addHandler(console_handler)

        if self.log_file:
            file_handler = self._create_file_handler()
            file_handler.setLevel(self.log_level.value)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    def _create_formatters(self) -> Dict[LogFormat, logging.Formatter]:
        return {
            LogFormat.STANDARD: logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ),
            LogFormat.JSON: JSONFormatter(),
            LogFormat.DETAILED: logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
            )
        }

    def _create_file_handler(self) -> logging.Handler:
        """Create appropriate file handler based on rotation settings."""
        if self.enable_rotation:
            return logging.handlers.RotatingFileHandler(
                filename=self.log_file,
                maxBytes=parse_file_size(self.max_file_size),
                backupCount=self.backup_count
            )
        return logging.FileHandler(self.log_file)
