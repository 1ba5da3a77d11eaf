"""
Configuration Management System
===============================

Provides dataclass-based configuration with YAML file loading support.
All settings have sensible defaults.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Any, Dict
import yaml
import logging

from pdf_archiver.utils.notifications import NotificationConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".pdf_archiver" / "config.yaml"


def _optional_path(value: Any) -> Optional[Path]:
    if value in (None, ""):
        return None
    return Path(str(value)).expanduser()


@dataclass
class ArchiveConfig:
    """Archive location settings.

    Attributes:
        archive_path: Root of the archive; year folders live below it.
        tag_file: JSON file holding the tag list between sessions.
        write_file_tags: Also store tags as native file metadata.
    """
    archive_path: Optional[Path] = None
    tag_file: Path = field(default_factory=lambda: Path.home() / ".pdf_archiver" / "tags.json")
    write_file_tags: bool = True

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArchiveConfig":
        """Create ArchiveConfig from dictionary."""
        if not data:
            return cls()
        return cls(
            archive_path=_optional_path(data.get("archive_path")),
            tag_file=_optional_path(data.get("tag_file")) or cls().tag_file,
            write_file_tags=bool(data.get("write_file_tags", cls.write_file_tags))
        )


def _notifications_from_dict(data: Dict[str, Any]) -> NotificationConfig:
    if not data:
        return NotificationConfig()
    defaults = NotificationConfig()
    return NotificationConfig(
        enabled=bool(data.get("enabled", defaults.enabled)),
        show_on_archive=bool(data.get("show_on_archive", defaults.show_on_archive)),
        show_on_error=bool(data.get("show_on_error", defaults.show_on_error)),
        timeout_ms=int(data.get("timeout_ms", defaults.timeout_ms))
    )


@dataclass
class Config:
    """Main configuration container.

    Aggregates all configuration sections and provides loading from YAML.
    """
    archive: ArchiveConfig = field(default_factory=ArchiveConfig)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    log_level: str = "INFO"

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """Load configuration from YAML file.

        Args:
            config_path: Path to the configuration file. If None, uses
                        ~/.pdf_archiver/config.yaml.

        Returns:
            Config instance with loaded settings.

        Raises:
            yaml.YAMLError: If config file is not valid YAML.
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        config_path = Path(config_path)

        if not config_path.exists():
            logger.warning(f"Config file not found at {config_path}, using defaults")
            return cls()

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}

            logger.info(f"Loaded configuration from {config_path}")
            return cls._from_dict(data)

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        return cls(
            archive=ArchiveConfig.from_dict(data.get("archive", {})),
            notifications=_notifications_from_dict(data.get("notifications", {})),
            log_level=str(data.get("log_level", "INFO"))
        )

    def save(self, config_path: Path) -> None:
        """Save configuration to YAML file.

        Args:
            config_path: Path where to save the configuration.
        """
        data = {
            "archive": {
                "archive_path": str(self.archive.archive_path) if self.archive.archive_path else None,
                "tag_file": str(self.archive.tag_file),
                "write_file_tags": self.archive.write_file_tags
            },
            "notifications": {
                "enabled": self.notifications.enabled,
                "show_on_archive": self.notifications.show_on_archive,
                "show_on_error": self.notifications.show_on_error,
                "timeout_ms": self.notifications.timeout_ms
            },
            "log_level": self.log_level
        }

        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Saved configuration to {config_path}")
