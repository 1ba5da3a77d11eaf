"""
Tag Registry
============

Keeps the set of known tags and how many documents reference each one.
The registry owns every Tag; documents only hold tag names.
"""

import re
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Protocol, Set

from pdf_archiver.utils.logging_config import get_logger

logger = get_logger(__name__)

_ARCHIVED_TAG_BLOCK = re.compile(r"__(?P<tags>[A-Za-z0-9_]+)\.pdf$", re.IGNORECASE)


@dataclass(eq=False)
class Tag:
    """A classification label with a registry-wide usage counter.

    Attributes:
        name: Normalized tag name, unique within a registry.
        count: Number of documents referencing the tag.
    """
    name: str
    count: int = 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def to_dict(self) -> dict:
        return {"name": self.name, "count": self.count}

    @classmethod
    def from_dict(cls, data: dict) -> "Tag":
        return cls(name=str(data["name"]), count=max(int(data.get("count", 0)), 0))


class TagListProvider(Protocol):
    """Persistence boundary of the tag registry."""

    def get_tag_list(self) -> Set[Tag]:
        ...

    def set_tag_list(self, tags: Set[Tag]) -> None:
        ...


class TagRegistry:
    """Deduplicated set of tags keyed by name.

    All mutating operations take an internal lock, so concurrent parses
    never create two Tag objects for one name nor lose an increment.
    """

    def __init__(self, tags: Optional[Iterable[Tag]] = None):
        self._tags: Dict[str, Tag] = {}
        self._lock = threading.Lock()
        for tag in tags or ():
            self.insert(tag)

    def lookup_or_create(self, name: str) -> Tag:
        """Return the tag called ``name``, counting one more reference.

        An existing tag has its count incremented and is returned as the
        same object; an unknown name is registered with a count of 1.
        """
        with self._lock:
            tag = self._tags.get(name)
            if tag is not None:
                tag.count += 1
                logger.debug(f"Tag '{name}' already known (count={tag.count})")
                return tag

            tag = Tag(name=name, count=1)
            self._tags[name] = tag
            logger.debug(f"Tag '{name}' created")
            return tag

    def insert(self, tag: Tag) -> bool:
        """Add a pre-built tag unless its name is already registered.

        Returns:
            True if the tag was added, False if the name was taken.
        """
        with self._lock:
            if tag.name in self._tags:
                return False
            self._tags[tag.name] = tag
            return True

    def filter_by_prefix(self, prefix: str) -> List[Tag]:
        """All tags whose name starts with ``prefix``, ordered by name."""
        with self._lock:
            matches = [tag for name, tag in self._tags.items() if name.startswith(prefix)]
        return sorted(matches, key=lambda tag: tag.name)

    def get(self, name: str) -> Optional[Tag]:
        return self._tags.get(name)

    def names(self) -> List[str]:
        return list(self._tags)

    def __contains__(self, name: object) -> bool:
        return name in self._tags

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[Tag]:
        with self._lock:
            tags = list(self._tags.values())
        return iter(tags)

    # Persistence

    @classmethod
    def load(cls, provider: TagListProvider) -> "TagRegistry":
        """Build a registry from a provider's tag list."""
        tags = sorted(provider.get_tag_list(), key=lambda tag: tag.name)
        return cls(tags)

    def save(self, provider: TagListProvider) -> None:
        """Hand the current tag list to a provider."""
        provider.set_tag_list(set(self))

    @classmethod
    def from_archive(cls, archive_root: Path) -> "TagRegistry":
        """Rebuild tag counts from the filenames already in the archive.

        Args:
            archive_root: Top-level archive directory.

        Returns:
            Registry with one count per archived document using a tag.
        """
        registry = cls()
        archive_root = Path(archive_root)
        if not archive_root.is_dir():
            logger.warning(f"Archive folder not found: {archive_root}")
            return registry

        documents = 0
        for path in sorted(archive_root.rglob("*")):
            if not path.is_file():
                continue
            match = _ARCHIVED_TAG_BLOCK.search(path.name)
            if match is None:
                continue
            documents += 1
            for name in match.group("tags").split("_"):
                if name:
                    registry.lookup_or_create(name)

        logger.info(f"Found {len(registry)} tags in {documents} archived documents")
        return registry
