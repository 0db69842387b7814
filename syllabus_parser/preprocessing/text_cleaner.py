"""
Text Cleaner - Canonicalizes pasted syllabus text into indexed lines.

Covers the three leaf stages of the pipeline:
- normalize_text: line endings, dashes, NBSP, trailing whitespace
- split_lines: non-empty trimmed lines tagged with their original index
- filter_noise: drops section headers and policy lines that are never assignments
"""
import re
from typing import List, Iterable
from dataclasses import dataclass
import logging

logger = logging.getLogger(__name__)


# Lowercase substrings marking syllabus sections that are not assignments.
# Order is irrelevant to matching but kept stable for logging.
STOP_HEADERS = (
    "due date calendar",
    "assignment opens",
    "alert:",
    "policies",
    "policy",
    "late work",
    "grading",
    "rubric",
    "schedule (tentative)",
)

_DASHES = re.compile(r'[–—]')
_TRAILING_WS = re.compile(r"[ \t\f\v]+\n")


@dataclass(frozen=True)
class Line:
    """A non-empty trimmed source line."""
    text: str
    original_index: int
    indent: int = 0  # leading whitespace width before trimming


def normalize_text(raw: str) -> str:
    """
    Canonicalize raw pasted text.

    CRLF/CR become LF, en/em dashes become hyphens, NBSP becomes a plain
    space, and whitespace at the end of every line is removed. Leading
    indentation is preserved for the segmenter.
    """
    if not raw:
        return ""
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = _DASHES.sub("-", text)
    text = text.replace("\u00a0", " ")
    text = _TRAILING_WS.sub("\n", text)
    return text.rstrip(" \t")


def split_lines(text: str) -> List[Line]:
    """Split normalized text into trimmed lines, dropping empty ones."""
    lines = []
    for index, raw in enumerate(text.split("\n")):
        stripped = raw.strip()
        if not stripped:
            continue
        expanded = raw.expandtabs(4)
        indent = len(expanded) - len(expanded.lstrip())
        lines.append(Line(text=stripped, original_index=index, indent=indent))
    return lines


def is_header_noise(text: str) -> bool:
    """True if the line contains any known header/policy phrase."""
    lower = text.lower()
    return any(header in lower for header in STOP_HEADERS)


def filter_noise(lines: Iterable[Line]) -> List[Line]:
    """Drop header/policy lines. A dropped line is never recovered."""
    kept = []
    for line in lines:
        if is_header_noise(line.text):
            logger.debug(f"Dropping header line {line.original_index}: {line.text[:60]!r}")
            continue
        kept.append(line)
    return kept
