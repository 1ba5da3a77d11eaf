"""
PDF Archiver - Main Application
===============================

Main entry point and session handling for the archiver.
Ties together discovery, parsing, tag bookkeeping and archiving.
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from pdf_archiver.config import Config
from pdf_archiver.actions import DocumentArchiver, FileTagWriter, TagStore, find_pdfs, trash_file
from pdf_archiver.naming import Document, FilenameParser, Tag, TagRegistry
from pdf_archiver.naming.parser import DATE_FORMAT
from pdf_archiver.utils.exceptions import ArchiverError, ConfigurationError, DocumentError
from pdf_archiver.utils.logging_config import setup_logging, get_logger, LoggingConfig
from pdf_archiver.utils.notifications import DesktopNotifier, Severity, UserNotifier

logger = get_logger(__name__)


class PDFArchiver:
    """A working session over a set of documents and the tag list.

    Documents are parsed once when added; callers then edit description and
    tags and save each document into the archive.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        notifier: Optional[UserNotifier] = None,
        tag_store: Optional[TagStore] = None,
    ):
        """Initialize the session.

        Args:
            config: Loaded configuration, defaults if omitted.
            notifier: Where user-facing errors go.
            tag_store: Tag list persistence.
        """
        self.config = config or Config()
        self.notifier = notifier or DesktopNotifier(self.config.notifications)
        self.tag_store = tag_store or TagStore(self.config.archive.tag_file)

        self.registry = TagRegistry.load(self.tag_store)
        self.parser = FilenameParser()
        self.archiver = DocumentArchiver(
            tag_writer=FileTagWriter() if self.config.archive.write_file_tags else None
        )
        self.documents: List[Document] = []

        logger.info(f"Session started with {len(self.registry)} known tags")

    @property
    def archive_path(self) -> Optional[Path]:
        return self.config.archive.archive_path

    @property
    def untagged_documents(self) -> List[Document]:
        return [doc for doc in self.documents if not doc.archived]

    def add_documents(self, paths) -> List[Document]:
        """Parse every PDF behind ``paths`` and add it to the session.

        Args:
            paths: Files or folders chosen by the user.

        Returns:
            The newly added documents.
        """
        added = []
        for selection in paths:
            for pdf in find_pdfs(selection):
                document = self.parser.parse_document(pdf, self.registry)
                self.documents.append(document)
                added.append(document)
        logger.info(f"Added {len(added)} documents")
        return added

    def filter_tags(self, prefix: str = "") -> List[Tag]:
        return self.registry.filter_by_prefix(prefix)

    def add_tag(self, document: Document, raw_name: str) -> Optional[Tag]:
        return document.add_tag(raw_name, self.registry)

    def save_document(self, document: Document) -> bool:
        """Archive a document, telling the user why if that fails.

        Returns:
            True if the document was moved into the archive.
        """
        if self.archive_path is None:
            error = ConfigurationError("No archive folder configured", config_key="archive.archive_path")
            logger.error(str(error))
            self.notifier.notify(error.message_key, error.info_key, Severity.CRITICAL)
            return False

        try:
            destination = self.archiver.archive(document, self.archive_path)
        except DocumentError as e:
            logger.warning(str(e), extra={"file_path": str(document.path), "operation": "archive"})
            self.notifier.notify(e.message_key, e.info_key, Severity.WARNING)
            return False

        self.notifier.notify("document_archived", destination.name, Severity.INFO)
        self.save_tags()
        return True

    def trash_document(self, document: Document) -> None:
        """Move a document to the trash and drop it from the session."""
        trash_file(document.path)
        if document in self.documents:
            self.documents.remove(document)

    def rescan_tags(self) -> TagRegistry:
        """Rebuild the tag list from the archive folder."""
        if self.archive_path is None:
            raise ConfigurationError("No archive folder configured", config_key="archive.archive_path")
        self.registry = TagRegistry.from_archive(self.archive_path)
        self.save_tags()
        return self.registry

    def save_tags(self) -> None:
        self.registry.save(self.tag_store)


def _print_document(document: Document) -> None:
    print(f"\n📄 {document.path}")
    print(f"  Date:        {document.date.strftime(DATE_FORMAT)}")
    print(f"  Description: {document.description or '-'}")
    print(f"  Tags:        {', '.join(document.tag_names) or '-'}")
    print(f"  State:       {document.state.value}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with CLI support."""
    import argparse

    parser = argparse.ArgumentParser(
        description="PDF Archiver - file documents by date, description and tags"
    )
    parser.add_argument(
        '--config', '-c',
        type=Path,
        help='Path to the configuration file'
    )
    parser.add_argument(
        '--inspect', '-i',
        metavar='PATH',
        help='Show the fields parsed from a PDF or every PDF in a folder'
    )
    parser.add_argument(
        '--archive', '-a',
        metavar='PATH',
        help='Move a PDF into the archive'
    )
    parser.add_argument(
        '--description', '-d',
        help='Description for --archive (normalized)'
    )
    parser.add_argument(
        '--tag', '-t',
        action='append',
        default=[],
        help='Tag for --archive, may be repeated'
    )
    parser.add_argument(
        '--date',
        help='Document date for --archive (YYYY-MM-DD)'
    )
    parser.add_argument(
        '--tags', '-T',
        nargs='?',
        const='',
        metavar='PREFIX',
        help='List known tags, optionally only those starting with PREFIX'
    )
    parser.add_argument(
        '--rescan',
        action='store_true',
        help='Rebuild the tag list from the archive folder'
    )
    parser.add_argument(
        '--trash',
        metavar='PATH',
        help='Move a PDF to the trash'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    config = Config.load(args.config)
    setup_logging(LoggingConfig(
        level="DEBUG" if args.verbose else config.log_level,
        file_output=False
    ))
    session = PDFArchiver(config)

    if args.inspect:
        documents = session.add_documents([args.inspect])
        if not documents:
            print("No PDF documents found.")
        for document in documents:
            _print_document(document)
        return 0

    if args.archive:
        documents = session.add_documents([args.archive])
        if len(documents) != 1:
            print(f"✗ Expected a single PDF file: {args.archive}")
            return 1
        document = documents[0]
        if args.description is not None:
            document.set_description(args.description)
        if args.date:
            try:
                document.date = datetime.strptime(args.date, DATE_FORMAT).date()
            except ValueError:
                print(f"✗ Invalid date: {args.date}")
                return 1
        for tag in args.tag:
            session.add_tag(document, tag)

        if session.save_document(document):
            print(f"✓ Archived: {document.path}")
            return 0
        print(f"✗ Could not archive: {document.path}")
        return 1

    if args.tags is not None:
        tags = session.filter_tags(args.tags)
        if tags:
            print(f"\n🏷️  Tags ({len(tags)}):\n")
            for tag in tags:
                print(f"  {tag.name:30} {tag.count}")
        else:
            print("No tags found.")
        return 0

    if args.rescan:
        try:
            registry = session.rescan_tags()
        except ConfigurationError as e:
            print(f"✗ {e.message}")
            return 1
        print(f"✓ Found {len(registry)} tags in the archive")
        return 0

    if args.trash:
        document = Document(path=Path(args.trash))
        try:
            session.trash_document(document)
        except ArchiverError as e:
            print(f"✗ {e.message}")
            return 1
        print(f"✓ Moved to trash: {document.name}")
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
