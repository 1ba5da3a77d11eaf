"""
Filename Parser
===============

Reads the archive naming convention back out of a filename::

    2018-01-25--invoice-electricity__home_utilities.pdf
    <date>    --<description>      __<tag>_<tag>   .pdf

Each field has its own rule and its own fallback. Parsing never fails:
files that predate or ignore the convention get today's date, a
best-effort description and no tags.
"""

import os
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Callable, List, Optional, Union

from pdf_archiver.naming.document import Document
from pdf_archiver.naming.slug import normalize
from pdf_archiver.naming.tags import TagRegistry
from pdf_archiver.utils.logging_config import get_logger

logger = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d"

DATE_PATTERN = re.compile(r"^(?P<date>\d{4}-\d{2}-\d{2})--")
DESCRIPTION_PATTERN = re.compile(r"--(?P<description>[A-Za-z0-9-]+)__")
TAGS_PATTERN = re.compile(r"__(?P<tags>[A-Za-z0-9_]+)\.(?i:pdf)$")


@dataclass
class ParsedFields:
    """Fields recovered from a filename.

    Attributes:
        date: Document date, today if the filename had none.
        description: Normalized description, may be empty.
        tag_names: Tag names in filename order, repeats dropped.
        date_found: Whether the date came from the filename.
        tags_found: Whether the filename had a tag block.
    """
    date: date
    description: str = ""
    tag_names: List[str] = field(default_factory=list)
    date_found: bool = False
    tags_found: bool = False


class FilenameParser:
    """Ordered rule parser for archive filenames.

    Args:
        today: Callable returning the fallback date, ``date.today`` by default.
    """

    def __init__(self, today: Optional[Callable[[], date]] = None):
        self._today = today or date.today

    def parse(self, filename: str, registry: TagRegistry) -> ParsedFields:
        """Split a filename into date, description and tags.

        Every tag name found is looked up (or created) in ``registry``, so
        its usage count reflects this document.

        Args:
            filename: Bare filename (a full path is reduced to its name).
            registry: Shared tag registry.

        Returns:
            ParsedFields with fallbacks applied.
        """
        name = os.path.basename(filename)

        parsed_date = self._parse_date(name)
        fields = ParsedFields(
            date=parsed_date or self._today(),
            description=self._parse_description(name),
            date_found=parsed_date is not None,
        )

        tag_names = self._parse_tag_names(name)
        if tag_names is not None:
            fields.tags_found = True
            for tag_name in tag_names:
                fields.tag_names.append(registry.lookup_or_create(tag_name).name)

        logger.debug(
            f"Parsed {name}: date={fields.date} description={fields.description!r} "
            f"tags={fields.tag_names}"
        )
        return fields

    def parse_document(self, path: Union[str, Path], registry: TagRegistry) -> Document:
        """Create a Document for a discovered file."""
        path = Path(path)
        fields = self.parse(path.name, registry)
        return Document(
            path=path,
            date=fields.date,
            description=fields.description,
            tag_names=list(fields.tag_names),
        )

    # Rules

    def _parse_date(self, name: str) -> Optional[date]:
        match = DATE_PATTERN.match(name)
        if match is None:
            return None
        try:
            return datetime.strptime(match.group("date"), DATE_FORMAT).date()
        except ValueError:
            logger.debug(f"Invalid date prefix in {name}, using today")
            return None

    def _parse_description(self, name: str) -> str:
        match = DESCRIPTION_PATTERN.search(name)
        if match is not None:
            return normalize(match.group("description"))

        # Whatever comes before the tag block of the bare stem
        stem, _ = os.path.splitext(name)
        return normalize(stem.split("__")[0])

    def _parse_tag_names(self, name: str) -> Optional[List[str]]:
        match = TAGS_PATTERN.search(name)
        if match is None:
            return None
        names = []
        for tag in match.group("tags").split("_"):
            if tag and tag not in names:
                names.append(tag)
        return names


_default_parser = FilenameParser()


def parse(filename: str, registry: TagRegistry) -> ParsedFields:
    """Parse ``filename`` with the default parser."""
    return _default_parser.parse(filename, registry)
