"""
File Operations
===============

Discovery of PDF documents and moving unwanted ones to the trash.
"""

from pathlib import Path
from typing import List, Union

from pdf_archiver.utils.logging_config import get_logger
from pdf_archiver.utils.exceptions import TrashError, ErrorCode

logger = get_logger(__name__)

# Lazy import
send2trash = None


def _import_send2trash():
    """Lazy import send2trash."""
    global send2trash
    if send2trash is None:
        import send2trash as _send2trash
        send2trash = _send2trash
    return send2trash


def is_pdf(path: Path) -> bool:
    return path.suffix.lower() == ".pdf"


def find_pdfs(path: Union[str, Path]) -> List[Path]:
    """Collect the PDF documents behind a user selection.

    Args:
        path: A PDF file or a folder to search recursively.

    Returns:
        Sorted list of PDF paths, empty if there are none.
    """
    path = Path(path).expanduser()

    if path.is_file():
        return [path] if is_pdf(path) else []

    if not path.is_dir():
        logger.warning(f"Path does not exist: {path}")
        return []

    pdfs = sorted(p for p in path.rglob("*") if p.is_file() and is_pdf(p))
    logger.debug(f"Found {len(pdfs)} PDF documents in {path}")
    return pdfs


def trash_file(file_path: Path) -> None:
    """Move a file to the system trash.

    Raises:
        TrashError: If the file is missing or cannot be trashed.
    """
    file_path = Path(file_path)
    if not file_path.exists():
        raise TrashError(
            "File does not exist",
            file_path=str(file_path),
            details={"reason": ErrorCode.FILE_NOT_FOUND.name}
        )

    try:
        _import_send2trash().send2trash(str(file_path))
    except OSError as e:
        raise TrashError(
            f"Failed to move file to trash: {e}",
            file_path=str(file_path),
            cause=e
        )
    logger.info(f"Moved to trash: {file_path.name}")
