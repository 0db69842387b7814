"""
Confidence Scorer - Heuristic estimate that a block is a real, correctly dated assignment.
"""
import re
from typing import Optional

from .type_classifier import AssignmentType


TYPE_WEIGHT = 0.5
DATE_WEIGHT = 0.3
COURSEWORK_TERM_WEIGHT = 0.1
BULLET_WEIGHT = 0.05
TYPE_WORD_WEIGHT = 0.05

COURSEWORK_TERM_PATTERN = re.compile(r'\b(?:chapter|lab|assign(?:ment)?|unit)\b', re.IGNORECASE)
BULLET_PATTERN = re.compile(r'^[-*•]\s')
TYPE_WORD_PATTERN = re.compile(r'\b(?:quiz|exam|project|hw)\b', re.IGNORECASE)


def score_block(text: str, has_date: bool, detected_type: Optional[AssignmentType]) -> float:
    """
    Additive score clamped to [0, 1].

    ``detected_type`` must be the classifier's own result, not the homework
    default, so unclassified blocks earn nothing for type.
    """
    score = 0.0
    if detected_type is not None:
        score += TYPE_WEIGHT
    if has_date:
        score += DATE_WEIGHT
    if COURSEWORK_TERM_PATTERN.search(text):
        score += COURSEWORK_TERM_WEIGHT
    if BULLET_PATTERN.match(text):
        score += BULLET_WEIGHT
    if TYPE_WORD_PATTERN.search(text):
        score += TYPE_WORD_WEIGHT
    return round(max(0.0, min(1.0, score)), 2)
