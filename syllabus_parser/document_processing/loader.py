"""
Loads syllabus text from a file path or stdin for the parser.
"""
import sys
from pathlib import Path
from typing import Optional, TextIO
import logging

from docx.opc.exceptions import PackageNotFoundError

from .pdf_processor import ExtractedSyllabus, PDFTextExtractor
from .docx_processor import DocxTextExtractor

logger = logging.getLogger(__name__)


TEXT_SUFFIXES = {'.txt', '.md', '.text', ''}
STDIN_PATH = '-'


class DocumentLoadError(Exception):
    """Raised when a syllabus document cannot be read."""


def load_syllabus(path: str, stdin: Optional[TextIO] = None) -> ExtractedSyllabus:
    """
    Read a syllabus from ``path``.

    Args:
        path: .txt/.md, .pdf or .docx file, or "-" for stdin
        stdin: Stream used for "-" (defaults to sys.stdin)

    Raises:
        DocumentLoadError: If the file is missing, unsupported or unreadable
    """
    if path == STDIN_PATH:
        return ExtractedSyllabus(text=(stdin or sys.stdin).read(), source_type='text')

    file_path = Path(path)
    if not file_path.is_file():
        raise DocumentLoadError(f"File not found: {path}")

    suffix = file_path.suffix.lower()
    try:
        if suffix in TEXT_SUFFIXES:
            return ExtractedSyllabus(
                text=file_path.read_text(encoding='utf-8', errors='replace'),
                source_type='text'
            )
        if suffix == '.pdf':
            return PDFTextExtractor().extract(str(file_path))
        if suffix == '.docx':
            return DocxTextExtractor().extract(str(file_path))
    except (OSError, ValueError, ImportError, PackageNotFoundError) as e:
        raise DocumentLoadError(f"Could not read {path}: {e}") from e

    raise DocumentLoadError(
        f"Unsupported file type {suffix!r}; expected .txt, .md, .pdf or .docx"
    )


def load_syllabus_text(path: str, stdin: Optional[TextIO] = None) -> str:
    """Text content of the syllabus at ``path`` (see ``load_syllabus``)."""
    document = load_syllabus(path, stdin)
    logger.debug(f"Loaded {len(document.text)} characters ({document.source_type}) from {path}")
    return document.text
