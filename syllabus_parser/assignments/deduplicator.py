"""
Deduplicator - Keeps the first record per (lowercase title, due date).
"""
from typing import Iterable, List, Set

from .records import ParsedAssignment
import logging

logger = logging.getLogger(__name__)


def deduplicate(records: Iterable[ParsedAssignment]) -> List[ParsedAssignment]:
    """
    Drop later records whose key was already seen, preserving order.

    Dropped duplicates are discarded whole; their source lines are not merged
    into the surviving record.
    """
    seen: Set[str] = set()
    unique: List[ParsedAssignment] = []
    for record in records:
        key = record.dedup_key
        if key in seen:
            logger.debug(f"Dropping duplicate {record.title!r} (lines {list(record.source_lines)})")
            continue
        seen.add(key)
        unique.append(record)
    return unique
