"""
Document Processing Module - Reads syllabi from text, DOCX and PDF files.
"""
from .pdf_processor import PDFTextExtractor, ExtractedSyllabus
from .docx_processor import DocxTextExtractor
from .loader import DocumentLoadError, load_syllabus, load_syllabus_text

__all__ = [
    "PDFTextExtractor",
    "DocxTextExtractor",
    "ExtractedSyllabus",
    "DocumentLoadError",
    "load_syllabus",
    "load_syllabus_text"
]
