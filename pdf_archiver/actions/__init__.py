"""Actions module for archive file operations."""

from .archiver import ArchivePlan, DocumentArchiver, FilenameComposer
from .file_operations import find_pdfs, trash_file
from .file_tags import FileTagWriter
from .tag_store import TagStore

__all__ = [
    "ArchivePlan",
    "DocumentArchiver",
    "FilenameComposer",
    "find_pdfs",
    "trash_file",
    "FileTagWriter",
    "TagStore",
]
