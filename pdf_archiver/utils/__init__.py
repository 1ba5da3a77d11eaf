"""Utilities module for PDF Archiver."""

from .logging_config import setup_logging, get_logger, LoggingConfig
from .exceptions import (
    ErrorCode,
    ArchiverError,
    ConfigurationError,
    DocumentError,
    MissingDescriptionError,
    MissingTagsError,
    AlreadyArchivedError,
    AlreadyExistsError,
    DirectoryCreationError,
    MoveError,
    TrashError,
)
from .notifications import DesktopNotifier, NotificationConfig, Severity, UserNotifier

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggingConfig",
    "ErrorCode",
    "ArchiverError",
    "ConfigurationError",
    "DocumentError",
    "MissingDescriptionError",
    "MissingTagsError",
    "AlreadyArchivedError",
    "AlreadyExistsError",
    "DirectoryCreationError",
    "MoveError",
    "TrashError",
    "DesktopNotifier",
    "NotificationConfig",
    "Severity",
    "UserNotifier",
]
