"""
Preprocessing Module - Normalization, line splitting and header filtering.
"""
from .text_cleaner import (
    Line,
    STOP_HEADERS,
    normalize_text,
    split_lines,
    is_header_noise,
    filter_noise
)

__all__ = [
    'Line',
    'STOP_HEADERS',
    'normalize_text',
    'split_lines',
    'is_header_noise',
    'filter_noise'
]
