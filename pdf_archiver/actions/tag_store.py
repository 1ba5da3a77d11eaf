"""
Tag Store
=========

Persists the tag list between sessions in a JSON file.
"""

import json
from pathlib import Path
from typing import Optional, Set

from pdf_archiver.naming.tags import Tag
from pdf_archiver.utils.logging_config import get_logger

logger = get_logger(__name__)


class TagStore:
    """JSON backed TagListProvider.

    File layout::

        {"tags": [{"name": "home", "count": 3}, ...]}
    """

    DEFAULT_TAG_FILE = Path.home() / ".pdf_archiver" / "tags.json"

    def __init__(self, tag_file: Optional[Path] = None):
        """Initialize the store.

        Args:
            tag_file: Path to the JSON tag file.
        """
        self.tag_file = Path(tag_file) if tag_file else self.DEFAULT_TAG_FILE

    def get_tag_list(self) -> Set[Tag]:
        """Load the saved tags; an unreadable file yields an empty set."""
        if not self.tag_file.exists():
            return set()

        try:
            with open(self.tag_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"expected an object, got {type(data).__name__}")
            tags = {Tag.from_dict(entry) for entry in data.get("tags", [])}
        except (OSError, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning(f"Error loading tag list: {e}")
            return set()

        logger.debug(f"Loaded {len(tags)} tags from {self.tag_file}")
        return tags

    def set_tag_list(self, tags: Set[Tag]) -> None:
        """Replace the saved tags."""
        self.tag_file.parent.mkdir(parents=True, exist_ok=True)

        data = {
            "tags": [tag.to_dict() for tag in sorted(tags, key=lambda tag: tag.name)],
        }

        with open(self.tag_file, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        logger.debug(f"Saved {len(tags)} tags to {self.tag_file}")
