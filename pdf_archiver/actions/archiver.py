"""
Document Archiver
=================

Builds the canonical archive name of a document and moves it into the
year folder of the archive. Existing files are never overwritten.
"""

import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from pdf_archiver.actions.file_tags import FileTagWriter
from pdf_archiver.naming.document import Document
from pdf_archiver.naming.parser import DATE_FORMAT
from pdf_archiver.utils.exceptions import (
    AlreadyArchivedError,
    AlreadyExistsError,
    DirectoryCreationError,
    MissingDescriptionError,
    MissingTagsError,
    MoveError,
)
from pdf_archiver.utils.logging_config import get_logger

logger = get_logger(__name__)

ARCHIVE_EXTENSION = ".pdf"

# Shared by every archiver in the process, keyed by absolute year folder
_directory_locks: Dict[Path, threading.Lock] = {}
_directory_locks_guard = threading.Lock()


@dataclass(frozen=True)
class ArchivePlan:
    """Where a document will live in the archive.

    Attributes:
        directory: Year folder below the archive root.
        filename: Canonical filename.
    """
    directory: Path
    filename: str

    @property
    def destination(self) -> Path:
        return self.directory / self.filename


class FilenameComposer:
    """Derives canonical filenames and year folders."""

    def plan(self, document: Document, archive_root: Path) -> ArchivePlan:
        """Compute the archive location of a document.

        Tag names are sorted so the name does not depend on the order the
        tags were attached in.

        Args:
            document: Document to place.
            archive_root: Top-level archive directory.

        Returns:
            ArchivePlan for the document.

        Raises:
            MissingTagsError: If the document has no tags.
            MissingDescriptionError: If the description is empty.
        """
        if not document.tag_names:
            raise MissingTagsError(
                "Document has no tags",
                file_path=str(document.path)
            )
        if not document.description:
            raise MissingDescriptionError(
                "Document has no description",
                file_path=str(document.path)
            )

        date_str = document.date.strftime(DATE_FORMAT)
        tag_str = "_".join(sorted(document.tag_names))
        filename = f"{date_str}--{document.description}__{tag_str}{ARCHIVE_EXTENSION}"
        directory = Path(archive_root) / f"{document.date.year:04d}"

        return ArchivePlan(directory=directory, filename=filename)


class DocumentArchiver:
    """Moves documents into the archive.

    The existence check and the move run under a lock per year folder that
    every archiver in the process shares, so two documents with the same
    canonical name cannot both be moved.
    """

    def __init__(
        self,
        composer: Optional[FilenameComposer] = None,
        tag_writer: Optional[FileTagWriter] = None,
    ):
        """Initialize the archiver.

        Args:
            composer: Filename composer, a default one if omitted.
            tag_writer: Writer for native file tags; None disables them.
        """
        self.composer = composer or FilenameComposer()
        self.tag_writer = tag_writer

    def plan(self, document: Document, archive_root: Path) -> ArchivePlan:
        return self.composer.plan(document, archive_root)

    @staticmethod
    def _lock_for(directory: Path) -> threading.Lock:
        key = directory.absolute()
        with _directory_locks_guard:
            lock = _directory_locks.get(key)
            if lock is None:
                lock = threading.Lock()
                _directory_locks[key] = lock
            return lock

    def archive(self, document: Document, archive_root: Path) -> Path:
        """Move a document to its canonical archive location.

        On failure the document and its file are left as they were.

        Args:
            document: Document to archive.
            archive_root: Top-level archive directory.

        Returns:
            New path of the document.

        Raises:
            AlreadyArchivedError: If the document was archived before.
            MissingTagsError: If the document has no tags.
            MissingDescriptionError: If the description is empty.
            DirectoryCreationError: If the year folder cannot be created.
            AlreadyExistsError: If the destination file already exists.
            MoveError: If the file cannot be moved.
        """
        if document.archived:
            raise AlreadyArchivedError(
                "Document is already archived",
                file_path=str(document.path)
            )

        plan = self.plan(document, archive_root)
        source = document.path
        destination = plan.destination

        with self._lock_for(plan.directory):
            if not plan.directory.is_dir():
                try:
                    plan.directory.mkdir()
                except OSError as e:
                    raise DirectoryCreationError(
                        f"Failed to create archive folder: {e}",
                        file_path=str(source),
                        details={"directory": str(plan.directory)},
                        cause=e
                    )
                logger.info(f"Created archive folder: {plan.directory}")

            if destination.exists():
                logger.error(
                    f"File already exists: {destination}",
                    extra={"file_path": str(source), "operation": "archive"}
                )
                raise AlreadyExistsError(
                    "File already exists in archive",
                    file_path=str(source),
                    details={"destination": str(destination)}
                )

            try:
                source.rename(destination)
            except OSError as e:
                logger.error(
                    f"Error while moving file: {e}",
                    extra={"file_path": str(source), "operation": "archive"}
                )
                raise MoveError(
                    f"Failed to move file: {e}",
                    file_path=str(source),
                    details={"destination": str(destination)},
                    cause=e
                )

        document.mark_archived(destination)
        logger.info(
            f"Archived: {source.name} -> {destination}",
            extra={
                "file_path": str(source),
                "destination": str(destination),
                "operation": "archive",
                "tags": list(document.tag_names),
            }
        )

        self._write_file_tags(destination, sorted(document.tag_names))
        return destination

    def _write_file_tags(self, path: Path, tag_names) -> None:
        if self.tag_writer is None:
            return
        try:
            self.tag_writer.write(path, tag_names)
        except OSError as e:
            logger.error(
                f"Could not set file tags: {e}",
                extra={"file_path": str(path), "operation": "set_tags"}
            )
