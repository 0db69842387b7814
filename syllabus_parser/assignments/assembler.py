"""
Assignment Assembler - Turns a segmented block into a ParsedAssignment.

A block is kept only when it looks like an assignment: a type keyword was
found, a due date was extracted, or it references a chapter.
"""
import re
from typing import Optional

from ..classification import DEFAULT_TYPE, AssignmentType, default_difficulty, score_block
from ..dates import TBD
from ..segmentation import Block
from .records import ParsedAssignment
from .title_cleaner import clean_title


CHAPTER_PATTERN = re.compile(r'\bchapter\b|\bchapter\s*\d+\b', re.IGNORECASE)


def looks_like_assignment(text: str, detected_type: Optional[AssignmentType],
                          due_date: Optional[str]) -> bool:
    return (
        detected_type is not None
        or due_date is not None
        or CHAPTER_PATTERN.search(text) is not None
    )


def assemble_assignment(block: Block, detected_type: Optional[AssignmentType],
                        due_date: Optional[str]) -> Optional[ParsedAssignment]:
    """Build the record for ``block``, or None when it is not assignment-like."""
    if not looks_like_assignment(block.text, detected_type, due_date):
        return None

    assignment_type = detected_type or DEFAULT_TYPE
    return ParsedAssignment(
        title=clean_title(block.text),
        due_date=due_date or TBD,
        type=assignment_type,
        difficulty=default_difficulty(assignment_type),
        confidence=score_block(block.text, due_date is not None, detected_type),
        source_lines=tuple(block.source_line_indices)
    )
