"""
Custom Exceptions
=================

Defines custom exception classes for the PDF Archiver.
All exceptions include error codes for programmatic handling.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Error codes for programmatic error handling."""

    # General errors (1000-1099)
    UNKNOWN_ERROR = 1000
    CONFIGURATION_ERROR = 1001
    FILE_NOT_FOUND = 1002
    PERMISSION_DENIED = 1003

    # Document field errors (1100-1199)
    MISSING_DESCRIPTION = 1100
    MISSING_TAGS = 1101
    ALREADY_ARCHIVED = 1102

    # Archive errors (1200-1299)
    ALREADY_EXISTS = 1200
    DIRECTORY_CREATION_FAILED = 1201
    MOVE_FAILED = 1202
    TRASH_FAILED = 1203


class ArchiverError(Exception):
    """Base exception for all PDF Archiver errors.

    Attributes:
        message: Human-readable error message.
        error_code: Programmatic error code.
        details: Additional error context.
        cause: Original exception that caused this error.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[dict] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Programmatic error code.
            details: Additional context as key-value pairs.
            cause: Original exception if wrapping another error.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return a formatted error string."""
        result = f"[{self.error_code.name}] {self.message}"
        if self.details:
            result += f" | Details: {self.details}"
        if self.cause:
            result += f" | Caused by: {type(self.cause).__name__}: {self.cause}"
        return result

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "error_name": self.error_code.name,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None,
        }


class ConfigurationError(ArchiverError):
    """Raised when there's a configuration problem.

    Examples:
        - Invalid configuration file format
        - No archive path configured
    """

    message_key = "no_archive"
    info_key = "select_preferences"

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        if expected_type:
            details["expected_type"] = expected_type
        super().__init__(
            message,
            error_code=ErrorCode.CONFIGURATION_ERROR,
            details=details,
            **kwargs
        )


class DocumentError(ArchiverError):
    """Raised when a document cannot be archived.

    Subclasses fix the error code; ``message_key`` and ``info_key`` name
    the user-facing message pair a notifier should show.
    """

    error_code_default = ErrorCode.UNKNOWN_ERROR
    message_key = "renaming_failed"
    info_key = "check_document_fields"

    def __init__(
        self,
        message: str,
        file_path: Optional[str] = None,
        **kwargs
    ):
        details = kwargs.pop("details", {})
        if file_path:
            details["file_path"] = file_path
        kwargs.setdefault("error_code", self.error_code_default)
        super().__init__(message, details=details, **kwargs)


class MissingDescriptionError(DocumentError):
    """The document has no description."""

    error_code_default = ErrorCode.MISSING_DESCRIPTION
    info_key = "check_document_description"


class MissingTagsError(DocumentError):
    """The document has no tags."""

    error_code_default = ErrorCode.MISSING_TAGS
    info_key = "check_document_tags"


class AlreadyArchivedError(DocumentError):
    """The document was already moved into the archive."""

    error_code_default = ErrorCode.ALREADY_ARCHIVED
    info_key = "document_already_archived"


class AlreadyExistsError(DocumentError):
    """A file with the canonical name is already in the archive."""

    error_code_default = ErrorCode.ALREADY_EXISTS
    info_key = "file_already_exists"


class DirectoryCreationError(DocumentError):
    """The year directory could not be created."""

    error_code_default = ErrorCode.DIRECTORY_CREATION_FAILED
    info_key = "directory_creation_failed"


class MoveError(DocumentError):
    """The file could not be moved to its archive location."""

    error_code_default = ErrorCode.MOVE_FAILED
    info_key = "move_failed"


class TrashError(ArchiverError):
    """Raised when a document cannot be moved to the trash."""

    def __init__(self, message: str, file_path: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if file_path:
            details["file_path"] = file_path
        super().__init__(
            message,
            error_code=ErrorCode.TRASH_FAILED,
            details=details,
            **kwargs
        )
