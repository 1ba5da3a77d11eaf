"""
Logging Configuration
=====================

Console logging for interactive use and a rotating JSON log file for
later inspection. Every record carries a short per-thread run ID so the
lines of one archiving run can be grouped.
"""

import json
import logging
import logging.handlers
import sys
import threading
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


ROOT_LOGGER_NAME = "pdf_archiver"
LOG_FILE_NAME = "pdf_archiver.log"

# Record attributes passed through ``extra=`` and kept in the JSON output
_EXTRA_FIELDS = ("file_path", "operation", "tags", "destination")

_run_ids = threading.local()


def get_correlation_id() -> str:
    """Return the run ID of the calling thread, creating one on first use."""
    run_id = getattr(_run_ids, "value", None)
    if run_id is None:
        run_id = uuid.uuid4().hex[:8]
        _run_ids.value = run_id
    return run_id


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": get_correlation_id(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in _EXTRA_FIELDS
            if hasattr(record, name)
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Short colored lines for a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        line = (
            f"{color}[{datetime.now():%H:%M:%S}] {record.levelname:8}{self.RESET} "
            f"[{get_correlation_id()}] {record.name}: {record.getMessage()}"
        )
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


@dataclass
class LoggingConfig:
    """Where and how much to log."""
    level: str = "INFO"
    log_dir: Path = field(default_factory=lambda: Path.home() / ".pdf_archiver" / "logs")
    console_output: bool = True
    file_output: bool = True
    max_file_size: int = 5 * 1024 * 1024
    backup_count: int = 3


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """Install handlers on the package logger and return it.

    Calling this again replaces the handlers from the previous call.
    """
    config = config or LoggingConfig()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, config.level.upper(), logging.INFO))
    logger.handlers.clear()
    logger.propagate = False

    if config.console_output:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(ConsoleFormatter())
        logger.addHandler(console)

    if config.file_output:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        log_file = logging.handlers.RotatingFileHandler(
            config.log_dir / LOG_FILE_NAME,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8"
        )
        log_file.setFormatter(JSONFormatter())
        logger.addHandler(log_file)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger below the ``pdf_archiver`` namespace.

    Args:
        name: Module name, usually ``__name__``.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
