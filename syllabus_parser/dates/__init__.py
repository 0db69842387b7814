"""
Dates Module - Natural-language date resolution and due date extraction.
"""
from .resolver import CandidateDate, DateResolver, DateparserResolver
from .extractor import DueDateExtractor, extract_due_date, TBD, ISO_FORMAT

__all__ = [
    'CandidateDate',
    'DateResolver',
    'DateparserResolver',
    'DueDateExtractor',
    'extract_due_date',
    'TBD',
    'ISO_FORMAT'
]
