"""
Output Validator - Checks parsed assignment records before they reach a reviewer.

Records may arrive as ``ParsedAssignment`` objects or as the camelCase
dicts produced by ``to_dict`` (e.g. edited records posted back by a UI).
"""
from datetime import datetime
import re
from typing import Dict, Any, List, Optional, Sequence, Union
from dataclasses import dataclass, field
import logging

from config import ReviewConfig
from ..assignments import ParsedAssignment
from ..classification import AssignmentType, Difficulty
from ..dates import ISO_FORMAT, TBD

logger = logging.getLogger(__name__)

RecordLike = Union[ParsedAssignment, Dict[str, Any]]

_DUE_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}$')


@dataclass
class ValidationResult:
    """Result of record validation."""
    is_valid: bool
    confidence_score: float  # 0.0 to 1.0
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    suggested_action: str = 'flag_for_review'  # 'accept', 'flag_for_review', 'reject'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'is_valid': self.is_valid,
            'confidence_score': self.confidence_score,
            'warnings': self.warnings,
            'errors': self.errors,
            'suggested_action': self.suggested_action
        }


def _as_dict(record: RecordLike) -> Dict[str, Any]:
    if isinstance(record, ParsedAssignment):
        return record.to_dict()
    if isinstance(record, dict):
        return record
    raise TypeError(f"Expected ParsedAssignment or dict, got {type(record).__name__}")


class OutputValidator:
    """
    Validates assignment records against the output contract.

    Errors make a record invalid (suggested action 'reject'). Warnings mark
    things a reviewer should look at: a missing due date, low confidence, a
    title that fell back to raw text.
    """

    VALID_TYPES = {t.value for t in AssignmentType}
    VALID_DIFFICULTIES = {d.value for d in Difficulty}

    def __init__(self, review_threshold: float = ReviewConfig.REVIEW_THRESHOLD,
                 accept_threshold: float = ReviewConfig.ACCEPT_THRESHOLD):
        self.review_threshold = review_threshold
        self.accept_threshold = accept_threshold

    def validate_assignment(self, record: RecordLike) -> ValidationResult:
        """
        Validate a single record.

        Args:
            record: ParsedAssignment or its camelCase dict form

        Returns:
            ValidationResult with findings
        """
        data = _as_dict(record)
        warnings = []
        errors = []

        # Check 1: Title
        title = data.get('title')
        if not isinstance(title, str) or not title.strip():
            errors.append("Title is empty")
        elif len(title) >= 140:
            warnings.append("Title looks like unshortened block text")

        # Check 2: Due date is TBD or a real local date-time
        due_date = data.get('dueDate')
        has_date = False
        if due_date == TBD:
            warnings.append("No due date found (TBD)")
        elif not isinstance(due_date, str) or not _DUE_DATE_PATTERN.match(due_date):
            errors.append(f"Due date {due_date!r} is not 'YYYY-MM-DDTHH:mm' or 'TBD'")
        else:
            try:
                datetime.strptime(due_date, ISO_FORMAT)
                has_date = True
            except ValueError:
                errors.append(f"Due date {due_date!r} is not a real calendar date-time")

        # Check 3: Enum fields
        if data.get('type') not in self.VALID_TYPES:
            errors.append(f"Unknown assignment type {data.get('type')!r}")
        if data.get('difficulty') not in self.VALID_DIFFICULTIES:
            errors.append(f"Unknown difficulty {data.get('difficulty')!r}")

        # Check 4: Confidence range
        confidence = data.get('confidence')
        if isinstance(confidence, bool) or not isinstance(confidence, (int, float)):
            errors.append(f"Confidence {confidence!r} is not a number")
            confidence_score = 0.0
        elif not 0.0 <= confidence <= 1.0:
            errors.append(f"Confidence {confidence} outside [0, 1]")
            confidence_score = max(0.0, min(1.0, float(confidence)))
        else:
            confidence_score = float(confidence)
            if confidence_score < self.review_threshold:
                warnings.append(
                    f"Low confidence ({confidence_score:.2f}) - review required before saving"
                )

        # Check 5: Source lines non-empty and ascending
        source_lines = data.get('sourceLines')
        if not isinstance(source_lines, (list, tuple)) or not source_lines:
            errors.append("Source lines are missing")
        elif not all(isinstance(i, int) and not isinstance(i, bool) for i in source_lines):
            errors.append("Source lines must be integers")
        elif list(source_lines) != sorted(source_lines):
            errors.append(f"Source lines not ascending: {list(source_lines)}")

        # Determine suggested action
        if errors:
            suggested_action = 'reject'
        elif has_date and confidence_score >= self.accept_threshold:
            suggested_action = 'accept'
        else:
            suggested_action = 'flag_for_review'

        return ValidationResult(
            is_valid=not errors,
            confidence_score=confidence_score,
            warnings=warnings,
            errors=errors,
            suggested_action=suggested_action
        )

    def validate_batch(self, records: Sequence[RecordLike]) -> List[ValidationResult]:
        """
        Validate every record and flag repeated (title, due date) keys.

        A repeat is an error on the later record; the first occurrence is
        left as is.
        """
        results = []
        first_seen: Dict[str, int] = {}
        for position, record in enumerate(records):
            result = self.validate_assignment(record)
            data = _as_dict(record)
            title = data.get('title')
            if isinstance(title, str):
                key = f"{title.lower()}|{data.get('dueDate')}"
                if key in first_seen:
                    result.errors.append(f"Duplicate of record {first_seen[key] + 1}")
                    result.is_valid = False
                    result.suggested_action = 'reject'
                else:
                    first_seen[key] = position
            results.append(result)
        return results

    def generate_validation_report(
        self,
        records: Sequence[RecordLike],
        results: Optional[List[ValidationResult]] = None
    ) -> str:
        """
        Generate a human-readable validation report.

        Args:
            records: Records in parse order
            results: Precomputed results from ``validate_batch`` (computed if omitted)

        Returns:
            Markdown-formatted report
        """
        if results is None:
            results = self.validate_batch(records)

        lines = [
            "# Validation Report",
            "",
            "## Summary",
            ""
        ]

        total_warnings = sum(len(r.warnings) for r in results)
        total_errors = sum(len(r.errors) for r in results)
        accepted = [i for i, r in enumerate(results) if r.suggested_action == 'accept']
        flagged = [i for i, r in enumerate(results) if r.suggested_action == 'flag_for_review']
        rejected = [i for i, r in enumerate(results) if r.suggested_action == 'reject']

        lines.extend([
            "| Metric | Value |",
            "|--------|-------|",
            f"| Total Records | {len(results)} |",
            f"| Total Warnings | {total_warnings} |",
            f"| Total Errors | {total_errors} |",
            f"| Ready to Save | {len(accepted)} |",
            f"| Flagged for Review | {len(flagged)} |",
            f"| Rejected | {len(rejected)} |",
            ""
        ])

        def label(index: int) -> str:
            title = _as_dict(records[index]).get('title') or 'Untitled'
            return f"{index + 1}. {title}"

        if rejected:
            lines.extend([
                "## ⚠️ REJECTED RECORDS",
                "",
                "The following records break the output contract and must be fixed or dropped:",
                ""
            ])
            for index in rejected:
                lines.append(f"- **{label(index)}**")
            lines.append("")

        if flagged:
            lines.extend([
                "## 🔍 Flagged for Review",
                "",
                "The following records need a human check before saving:",
                ""
            ])
            for index in flagged:
                lines.append(f"- {label(index)}")
            lines.append("")

        if total_warnings > 0 or total_errors > 0:
            lines.extend([
                "## Detailed Findings",
                ""
            ])

            for index, result in enumerate(results):
                if not (result.warnings or result.errors):
                    continue
                lines.append(f"### {label(index)}")
                lines.append(f"Confidence: {result.confidence_score:.2f}")
                lines.append("")

                if result.errors:
                    lines.append("**Errors:**")
                    for error in result.errors:
                        lines.append(f"- ❌ {error}")
                    lines.append("")

                if result.warnings:
                    lines.append("**Warnings:**")
                    for warning in result.warnings:
                        lines.append(f"- ⚠️ {warning}")
                    lines.append("")

        return "\n".join(lines)


def validate_before_display(records: Sequence[RecordLike]) -> List[Dict[str, Any]]:
    """
    Convenience function to validate records before showing them for review.

    Args:
        records: Parsed (or reviewer-edited) records

    Returns:
        One dict per record: its camelCase fields plus a 'validation' key
    """
    validator = OutputValidator()
    results = validator.validate_batch(records)

    payload = []
    for record, validation in zip(records, results):
        item = dict(_as_dict(record))
        item['validation'] = validation.to_dict()

        if validation.errors:
            logger.error(f"Validation errors for {item.get('title')!r}: {validation.errors}")
        if validation.warnings:
            logger.warning(f"Validation warnings for {item.get('title')!r}: {validation.warnings}")
        payload.append(item)

    return payload
