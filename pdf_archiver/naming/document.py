"""
Document Model
==============

A PDF on disk together with the fields its archive name is built from.
"""

from dataclasses import dataclass, field
import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pdf_archiver.naming.slug import normalize, normalize_tag
from pdf_archiver.naming.tags import Tag, TagRegistry
from pdf_archiver.utils.logging_config import get_logger

logger = get_logger(__name__)


class DocumentState(Enum):
    """Where a document is in its archiving lifecycle."""

    DISCOVERED = "discovered"
    EDITABLE = "editable"
    ARCHIVED = "archived"


@dataclass
class Document:
    """A document and its archive fields.

    The description is normalized on every assignment. Tags are kept as
    names and resolved through the shared TagRegistry.

    Attributes:
        path: Current location on disk.
        date: Document date (day granularity).
        tag_names: Attached tag names, newest first for user-added tags.
        state: Lifecycle state.
    """

    path: Path
    date: datetime.date = field(default_factory=datetime.date.today)
    description: Optional[str] = None
    tag_names: List[str] = field(default_factory=list)
    state: DocumentState = DocumentState.DISCOVERED

    def __setattr__(self, name, value):
        if name == "description" and value is not None:
            value = normalize(value)
        elif name == "path":
            value = Path(value)
        super().__setattr__(name, value)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def archived(self) -> bool:
        return self.state is DocumentState.ARCHIVED

    def set_description(self, raw: str) -> None:
        """Store the normalized form of a user-entered description."""
        self.description = raw
        self._touch()

    def add_tag(self, raw_name: str, registry: TagRegistry) -> Optional[Tag]:
        """Attach a tag typed by the user.

        The name is slugified and looked up (or created) in the registry.
        Attaching a name the document already carries is a no-op.

        Returns:
            The attached tag, or None if nothing was attached.
        """
        name = normalize_tag(raw_name)
        if not name:
            logger.debug(f"Ignoring empty tag name: {raw_name!r}")
            return None
        if name in self.tag_names:
            logger.error(f"Tag '{name}' already found!")
            return None

        tag = registry.lookup_or_create(name)
        self.tag_names.insert(0, name)
        self._touch()
        return tag

    def remove_tag(self, name: str) -> bool:
        """Detach a tag; the registry count is left as it is."""
        if name not in self.tag_names:
            return False
        self.tag_names.remove(name)
        self._touch()
        return True

    def mark_archived(self, new_path: Path) -> None:
        self.path = new_path
        self.state = DocumentState.ARCHIVED

    def _touch(self) -> None:
        if self.state is DocumentState.DISCOVERED:
            self.state = DocumentState.EDITABLE
