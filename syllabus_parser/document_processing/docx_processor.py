"""
DOCX Processor - Extracts syllabus text from Word documents.
"""
from pathlib import Path
from typing import Optional
from docx import Document
from docx.table import Table
from docx.text.paragraph import Paragraph
import logging

from .pdf_processor import ExtractedSyllabus, table_row_to_line

logger = logging.getLogger(__name__)


class DocxTextExtractor:
    """
    Extracts text from DOCX syllabi in document order.

    Word list paragraphs lose their bullet glyph in ``para.text``, so they
    are given a "- " prefix to keep them recognisable as list items.
    """

    LIST_STYLE_MARKERS = ('list',)

    def extract(self, file_path: str) -> ExtractedSyllabus:
        """Extract paragraphs and table rows from a DOCX file."""
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        if not path.suffix.lower() == '.docx':
            raise ValueError(f"Expected .docx file, got: {path.suffix}")

        doc = Document(file_path)

        lines = []
        table_count = 0

        for element in doc.element.body:
            if element.tag.endswith('}p'):
                para = Paragraph(element, doc)
                lines.append(self._paragraph_text(para))

            elif element.tag.endswith('}tbl'):
                table = Table(element, doc)
                table_count += 1
                for row in table.rows:
                    line = table_row_to_line(cell.text for cell in row.cells)
                    if line:
                        lines.append(line)

        text = "\n".join(lines)
        logger.info(f"Extracted {len(text)} characters ({table_count} table(s)) from {path.name}")

        return ExtractedSyllabus(
            text=text,
            source_type='docx',
            table_count=table_count,
            title=self._extract_title(doc)
        )

    def _paragraph_text(self, para: Paragraph) -> str:
        text = para.text.rstrip()
        if not text.strip():
            return ""
        style_name = (para.style.name if para.style else "").lower()
        if any(marker in style_name for marker in self.LIST_STYLE_MARKERS):
            return "- " + text.strip()
        return text

    def _extract_title(self, doc) -> Optional[str]:
        if doc.core_properties.title:
            return doc.core_properties.title

        for para in doc.paragraphs:
            style_name = (para.style.name if para.style else "").lower()
            if para.text.strip() and ('title' in style_name or 'heading 1' in style_name):
                return para.text.strip()

        return None
