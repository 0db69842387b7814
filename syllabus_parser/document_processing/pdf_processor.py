"""
PDF Processor - Extracts syllabus text from PDF documents.

Line structure is kept as pdfplumber lays it out, since block segmentation
depends on line breaks and indentation. Tables (the usual home of a course
schedule) become one line per row with cells joined by " | ".
"""
from pathlib import Path
from typing import List, Optional, Set
from dataclasses import dataclass
import logging

try:
    import pdfplumber
except ImportError:
    pdfplumber = None

logger = logging.getLogger(__name__)


CELL_SEPARATOR = " | "


@dataclass
class ExtractedSyllabus:
    """Plain text pulled from a syllabus document."""
    text: str
    source_type: str  # 'pdf', 'docx' or 'text'
    page_count: int = 1
    table_count: int = 0
    title: Optional[str] = None


def _squash(text) -> str:
    return " ".join(str(text).split())


def table_row_to_line(cells) -> str:
    """Join the non-empty cells of a table row into a single line."""
    parts = [str(cell or '').strip().replace('\n', ' ') for cell in cells]
    return CELL_SEPARATOR.join(part for part in parts if part)


class PDFTextExtractor:
    """
    Extracts text from syllabus PDFs.

    Per page, tables are extracted first and their cell and row text is
    remembered so the same content is not emitted twice from the page text.
    """

    def __init__(self):
        if pdfplumber is None:
            raise ImportError("pdfplumber is required. Install with: pip install pdfplumber")

    def extract(self, file_path: str) -> ExtractedSyllabus:
        """
        Extract the text of a PDF file.

        Args:
            file_path: Path to the PDF file

        Returns:
            ExtractedSyllabus with pages separated by blank lines
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if not path.suffix.lower() == '.pdf':
            raise ValueError(f"Expected .pdf file, got: {path.suffix}")

        pages = []
        table_count = 0
        title = None

        with pdfplumber.open(file_path) as pdf:
            page_count = len(pdf.pages)

            for page_num, page in enumerate(pdf.pages, start=1):
                page_lines: List[str] = []
                table_text: Set[str] = set()

                for table in page.extract_tables():
                    rows = [row for row in table if any(cell for cell in row)]
                    if not rows:
                        continue
                    table_count += 1
                    for row in rows:
                        page_lines.append(table_row_to_line(row))
                        cells = [_squash(cell) for cell in row if cell]
                        table_text.update(cells)
                        # pdfplumber also lays the row out as one text line
                        table_text.add(" ".join(cells))

                text = page.extract_text() or ""
                if page_num == 1:
                    title = self._extract_title(text)
                for line in text.split('\n'):
                    squashed = _squash(line)
                    if squashed and squashed in table_text:
                        continue
                    page_lines.append(line.rstrip())

                logger.debug(f"Page {page_num}: {len(page_lines)} lines")
                pages.append("\n".join(page_lines))

        text = "\n\n".join(pages)
        logger.info(f"Extracted {len(text)} characters from {page_count} page(s) of {path.name}")

        return ExtractedSyllabus(
            text=text,
            source_type='pdf',
            page_count=page_count,
            table_count=table_count,
            title=title
        )

    def _extract_title(self, text: str) -> Optional[str]:
        """First non-empty line of the first page, if short enough to be a heading."""
        for line in text.split('\n'):
            line = line.strip()
            if line:
                return line if len(line) < 100 else None
        return None
