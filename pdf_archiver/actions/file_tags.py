"""
Native File Tags
================

Writes tag names into the file system's own metadata so archived
documents can be found by tag outside the archiver:

- Linux: ``user.xdg.tags`` extended attribute (comma separated)
- macOS: Finder tags, a binary plist in
  ``com.apple.metadata:_kMDItemUserTags`` written with ``xattr``
"""

import os
import plistlib
import subprocess
import sys
from pathlib import Path
from typing import Iterable

from pdf_archiver.utils.logging_config import get_logger

logger = get_logger(__name__)

XDG_TAGS_ATTR = "user.xdg.tags"
FINDER_TAGS_ATTR = "com.apple.metadata:_kMDItemUserTags"


class FileTagWriter:
    """Stores tag names as native file metadata.

    Every failure surfaces as OSError so callers can treat the write as
    best-effort with a single except clause.
    """

    def __init__(self, platform: str = sys.platform):
        self.platform = platform

    def write(self, path: Path, tag_names: Iterable[str]) -> None:
        """Attach ``tag_names`` to the file at ``path``.

        Raises:
            OSError: If the platform has no tag store or the write fails.
        """
        tags = list(tag_names)
        if self.platform == "darwin":
            self._write_finder_tags(Path(path), tags)
        elif hasattr(os, "setxattr"):
            os.setxattr(str(path), XDG_TAGS_ATTR, ",".join(tags).encode("utf-8"))
        else:
            raise OSError(f"File tags are not supported on {self.platform}")
        logger.debug(f"Set file tags on {Path(path).name}: {tags}")

    def _write_finder_tags(self, path: Path, tags: list) -> None:
        payload = plistlib.dumps(tags, fmt=plistlib.FMT_BINARY).hex()
        try:
            subprocess.run(
                ["xattr", "-wx", FINDER_TAGS_ATTR, payload, str(path)],
                capture_output=True,
                check=True,
                timeout=5
            )
        except subprocess.SubprocessError as e:
            raise OSError(f"xattr failed: {e}") from e
