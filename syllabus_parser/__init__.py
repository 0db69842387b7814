"""
Syllabus Parser - Source Package

Converts pasted syllabus text into deduplicated, confidence-scored
assignment records for human review before they are committed.
"""
from .options import ParseOptions, ParseOptionsError
from .parser import SyllabusParser, parse_syllabus
from .assignments import ParsedAssignment, clean_title, deduplicate
from .classification import AssignmentType, Difficulty, detect_type, score_block
from .dates import CandidateDate, DateResolver, DateparserResolver, TBD
from .segmentation import Block, segment_blocks
from .validation import OutputValidator, ValidationResult
from .document_processing import load_syllabus_text, DocumentLoadError

__all__ = [
    # Entry points
    "parse_syllabus",
    "SyllabusParser",
    "ParseOptions",
    "ParseOptionsError",

    # Records
    "ParsedAssignment",
    "AssignmentType",
    "Difficulty",
    "TBD",

    # Stages
    "Block",
    "segment_blocks",
    "detect_type",
    "score_block",
    "clean_title",
    "deduplicate",

    # Date resolution
    "CandidateDate",
    "DateResolver",
    "DateparserResolver",

    # Review
    "OutputValidator",
    "ValidationResult",

    # Document input
    "load_syllabus_text",
    "DocumentLoadError",
]
