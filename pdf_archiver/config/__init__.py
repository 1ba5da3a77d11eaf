"""Configuration module for PDF Archiver."""

from .settings import Config, ArchiveConfig

__all__ = [
    "Config",
    "ArchiveConfig",
]
