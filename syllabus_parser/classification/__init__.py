"""
Classification Module - Assignment type detection and confidence scoring.
"""
from .type_classifier import (
    AssignmentType,
    Difficulty,
    KEYWORD_MAP,
    DEFAULT_TYPE,
    detect_type,
    default_difficulty
)
from .confidence import score_block

__all__ = [
    'AssignmentType',
    'Difficulty',
    'KEYWORD_MAP',
    'DEFAULT_TYPE',
    'detect_type',
    'default_difficulty',
    'score_block'
]
