"""
Parsed assignment records handed to the review UI and persistence API.
"""
from dataclasses import dataclass, replace
from typing import Any, Dict, Tuple

from config import ReviewConfig
from ..classification import AssignmentType, Difficulty
from ..dates import TBD


@dataclass(frozen=True)
class ParsedAssignment:
    """
    One assignment extracted from a syllabus block.

    Records are immutable. A reviewer's edit produces a new record through
    ``with_edits``; edits never flow back into the parser.
    """
    title: str
    due_date: str                    # "YYYY-MM-DDTHH:mm" or "TBD"
    type: AssignmentType
    difficulty: Difficulty
    confidence: float                # 0..1
    source_lines: Tuple[int, ...]    # original line indices, ascending

    @property
    def has_due_date(self) -> bool:
        return self.due_date != TBD

    @property
    def needs_review(self) -> bool:
        """Low confidence or missing date: a human must check before commit."""
        return self.confidence < ReviewConfig.REVIEW_THRESHOLD or not self.has_due_date

    @property
    def dedup_key(self) -> str:
        return f"{self.title.lower()}|{self.due_date}"

    def with_edits(self, **changes: Any) -> "ParsedAssignment":
        """Return a copy with reviewer edits applied. Enum fields accept their string values."""
        if isinstance(changes.get('type'), str):
            changes['type'] = AssignmentType(changes['type'])
        if isinstance(changes.get('difficulty'), str):
            changes['difficulty'] = Difficulty(changes['difficulty'])
        if 'source_lines' in changes:
            changes['source_lines'] = tuple(changes['source_lines'])
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'dueDate': self.due_date,
            'type': self.type.value,
            'difficulty': self.difficulty.value,
            'confidence': self.confidence,
            'sourceLines': list(self.source_lines)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParsedAssignment":
        """Inverse of ``to_dict``; raises ValueError/KeyError on malformed data."""
        return cls(
            title=data['title'],
            due_date=data['dueDate'],
            type=AssignmentType(data['type']),
            difficulty=Difficulty(data['difficulty']),
            confidence=float(data['confidence']),
            source_lines=tuple(data.get('sourceLines') or ())
        )

    def to_form_data(self, course_name: str, weight: int = 1) -> Dict[str, Any]:
        """Create-payload for the assignment persistence API."""
        return {
            'title': self.title,
            'description': '',
            'dueDate': self.due_date,
            'type': self.type.value,
            'difficulty': self.difficulty.value,
            'courseName': course_name,
            'weight': weight
        }
