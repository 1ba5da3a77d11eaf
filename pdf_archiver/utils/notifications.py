"""
Desktop Notifications
=====================

Surfaces archive errors and results to the user.
Uses libnotify (notify-send) on Linux for native notifications.
"""

import subprocess
from typing import Optional, Protocol
from enum import Enum
from dataclasses import dataclass

from pdf_archiver.utils.logging_config import get_logger

logger = get_logger(__name__)


class Severity(Enum):
    """Severity of a user notification."""
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"


# Titles and bodies keyed by message/info kind
MESSAGES = {
    "renaming_failed": "Renaming failed",
    "no_archive": "No archive selected",
    "document_archived": "Document archived",
    "check_document_description": "Please check the document description.",
    "check_document_tags": "Please add at least one tag to the document.",
    "check_document_fields": "Please check the document fields.",
    "document_already_archived": "This document is already in the archive.",
    "file_already_exists": "A document with this name already exists in the archive.",
    "directory_creation_failed": "The archive folder could not be created.",
    "move_failed": "The document could not be moved into the archive.",
    "select_preferences": "Choose an archive folder in the preferences.",
}


class UserNotifier(Protocol):
    """Anything able to show a message pair to the user."""

    def notify(self, message_kind: str, info_kind: str, severity: Severity) -> None:
        ...


@dataclass
class NotificationConfig:
    """Notification configuration."""
    enabled: bool = True
    show_on_archive: bool = True
    show_on_error: bool = True
    timeout_ms: int = 5000  # 5 seconds


class DesktopNotifier:
    """Sends desktop notifications for archive events.

    Uses notify-send on Linux for native notifications.
    """

    APP_NAME = "PDF Archiver"

    def __init__(self, config: Optional[NotificationConfig] = None):
        """Initialize the notifier.

        Args:
            config: Notification configuration.
        """
        self.config = config or NotificationConfig()
        self._available = self._check_availability()

        if self._available:
            logger.debug("Desktop notifications available")
        else:
            logger.debug("Desktop notifications not available (notify-send not found)")

    def _check_availability(self) -> bool:
        """Check if notification system is available."""
        try:
            result = subprocess.run(
                ["which", "notify-send"],
                capture_output=True,
                timeout=5
            )
            return result.returncode == 0
        except (OSError, subprocess.SubprocessError):
            return False

    @property
    def is_available(self) -> bool:
        """Check if notifications are available and enabled."""
        return self._available and self.config.enabled

    def _get_icon(self, severity: Severity) -> str:
        icons = {
            Severity.INFO: "dialog-information",
            Severity.WARNING: "dialog-warning",
            Severity.CRITICAL: "dialog-error",
        }
        return icons.get(severity, "folder")

    def _get_urgency(self, severity: Severity) -> str:
        urgencies = {
            Severity.INFO: "low",
            Severity.WARNING: "normal",
            Severity.CRITICAL: "critical",
        }
        return urgencies.get(severity, "normal")

    def send(
        self,
        title: str,
        message: str,
        severity: Severity = Severity.INFO
    ) -> bool:
        """Send a desktop notification.

        Args:
            title: Notification title.
            message: Notification body.
            severity: Severity of the notification.

        Returns:
            True if notification was sent successfully.
        """
        if not self.is_available:
            return False

        try:
            cmd = [
                "notify-send",
                "--app-name", self.APP_NAME,
                "--icon", self._get_icon(severity),
                "--urgency", self._get_urgency(severity),
                "--expire-time", str(self.config.timeout_ms),
                title,
                message
            ]

            subprocess.run(cmd, capture_output=True, timeout=5)
            logger.debug(f"Notification sent: {title}")
            return True

        except (OSError, subprocess.SubprocessError) as e:
            logger.error(f"Failed to send notification: {e}")
            return False

    def notify(self, message_kind: str, info_kind: str, severity: Severity) -> None:
        """Show a message pair looked up by kind.

        Args:
            message_kind: Key of the notification title.
            info_kind: Key of the notification body.
            severity: How prominently to show it.
        """
        if severity is Severity.INFO and not self.config.show_on_archive:
            return
        if severity is not Severity.INFO and not self.config.show_on_error:
            return

        title = MESSAGES.get(message_kind, message_kind)
        body = MESSAGES.get(info_kind, info_kind)
        logger.info(f"{title}: {body}")
        self.send(title, body, severity)
