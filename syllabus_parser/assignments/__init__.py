from .records import ParsedAssignment
from .title_cleaner import clean_title
from .assembler import looks_like_assignment, assemble_assignment, CHAPTER_PATTERN
from .deduplicator import deduplicate

__all__ = [
    'ParsedAssignment',
    'clean_title',
    'looks_like_assignment',
    'assemble_assignment',
    'CHAPTER_PATTERN',
    'deduplicate'
]
