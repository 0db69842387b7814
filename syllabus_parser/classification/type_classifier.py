"""
Type Classifier - Maps block text to an assignment type by keyword lookup.

The keyword table is ordered: quiz, project, exam, homework. The first type
with any keyword contained in the lowercased text wins, so "project quiz"
is a quiz and "final project" is a project.
"""
from enum import Enum
from typing import Dict, Optional, Tuple


class AssignmentType(Enum):
    HOMEWORK = "homework"
    QUIZ = "quiz"
    PROJECT = "project"
    EXAM = "exam"


class Difficulty(Enum):
    EASY = "easy"
    MODERATE = "moderate"
    CRUSHING = "crushing"
    BRUTAL = "brutal"


# Insertion order is the match priority.
KEYWORD_MAP: Dict[AssignmentType, Tuple[str, ...]] = {
    AssignmentType.QUIZ: ("quiz", "content quiz", "practice quiz"),
    AssignmentType.PROJECT: (
        "project", "programming project", "research assignment",
        "speech", "presentation", "slides",
    ),
    AssignmentType.EXAM: ("exam", "midterm", "final", "test"),
    AssignmentType.HOMEWORK: (
        "assignment", "hw", "lab", "lab assignment",
        "webassign", "reading", "chapter", "participation", "challenge questions",
        "attendance", "worksheet",
    ),
}

DEFAULT_TYPE = AssignmentType.HOMEWORK

# Placeholder until a reviewer sets a real difficulty
_DIFFICULTY_BY_TYPE = {
    AssignmentType.EXAM: Difficulty.CRUSHING,
    AssignmentType.PROJECT: Difficulty.BRUTAL,
}


def detect_type(text: str) -> Optional[AssignmentType]:
    """Return the first type whose keywords appear in ``text``, else None."""
    lower = text.lower()
    for assignment_type, keywords in KEYWORD_MAP.items():
        if any(keyword in lower for keyword in keywords):
            return assignment_type
    return None


def default_difficulty(assignment_type: AssignmentType) -> Difficulty:
    return _DIFFICULTY_BY_TYPE.get(assignment_type, Difficulty.MODERATE)
