"""Filename convention: slugs, tags, parsing and the document model."""

from .slug import normalize, normalize_tag
from .tags import Tag, TagRegistry, TagListProvider
from .document import Document, DocumentState
from .parser import FilenameParser, ParsedFields, parse

__all__ = [
    "normalize",
    "normalize_tag",
    "Tag",
    "TagRegistry",
    "TagListProvider",
    "Document",
    "DocumentState",
    "FilenameParser",
    "ParsedFields",
    "parse",
]
