"""Validation module for parsed assignment records."""
from .output_validator import OutputValidator, ValidationResult, validate_before_display

__all__ = ['OutputValidator', 'ValidationResult', 'validate_before_display']
