"""
Unit tests for configuration module.
"""

import pytest
from pathlib import Path
import tempfile
import yaml

from pdf_archiver.config.settings import Config, ArchiveConfig
from pdf_archiver.utils.notifications import NotificationConfig


class TestArchiveConfig:
    """Tests for ArchiveConfig."""

    def test_default_values(self):
        """Test default configuration values."""
        config = ArchiveConfig()

        assert config.archive_path is None
        assert config.tag_file.name == "tags.json"
        assert config.write_file_tags is True

    def test_from_dict(self):
        """Test creation from dictionary."""
        data = {
            "archive_path": "~/Archive",
            "write_file_tags": False
        }
        config = ArchiveConfig.from_dict(data)

        assert config.archive_path == Path.home() / "Archive"
        assert config.write_file_tags is False
        assert config.tag_file == ArchiveConfig().tag_file

    def test_empty_archive_path(self):
        """Test an empty archive path means 'not configured'."""
        config = ArchiveConfig.from_dict({"archive_path": ""})

        assert config.archive_path is None


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        """Test default configuration."""
        config = Config()

        assert isinstance(config.archive, ArchiveConfig)
        assert isinstance(config.notifications, NotificationConfig)
        assert config.log_level == "INFO"

    def test_load_from_file(self):
        """Test loading configuration from YAML file."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yaml"
            path.write_text(yaml.dump({
                "archive": {"archive_path": "/srv/archive"},
                "notifications": {"show_on_archive": False},
                "log_level": "DEBUG"
            }))

            config = Config.load(path)

            assert config.archive.archive_path == Path("/srv/archive")
            assert config.notifications.show_on_archive is False
            assert config.notifications.show_on_error is True
            assert config.log_level == "DEBUG"

    def test_load_missing_file(self):
        """Test loading from non-existent file returns defaults."""
        config = Config.load(Path("/nonexistent/config.yaml"))

        assert config.archive.archive_path is None

    def test_load_invalid_yaml(self):
        """Test broken YAML is reported, not ignored."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.yaml"
            path.write_text("archive: [unclosed")

            with pytest.raises(yaml.YAMLError):
                Config.load(path)

    def test_save_and_load(self):
        """Test a saved configuration loads back unchanged."""
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "config.yaml"
            config = Config(
                archive=ArchiveConfig(
                    archive_path=Path(tmp) / "archive",
                    tag_file=Path(tmp) / "tags.json",
                    write_file_tags=False
                ),
                notifications=NotificationConfig(timeout_ms=1000)
            )

            config.save(path)
            loaded = Config.load(path)

            assert loaded == config
