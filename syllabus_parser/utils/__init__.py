"""Utility modules for syllabus parsing."""
from .logger import ParserLogger, LogLevel, create_logger, PerformanceTimer

__all__ = [
    'ParserLogger',
    'LogLevel',
    'create_logger',
    'PerformanceTimer'
]
