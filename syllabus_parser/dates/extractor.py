"""
Due Date Extractor - Turns a block of text into a local ISO due date or nothing.

Policy, in order:
1. Resolve every date expression in the block (forward-biased from the
   reference date). If none is found, retry on the phrase after a "due:" or
   "by" marker.
2. The last expression wins: syllabi often read "opens X, due Y".
3. A calendar date without a stated year takes the academic year, plus one
   when its month falls before the semester start month.
4. A date without a time of day takes the default due time.
5. With past dates disallowed, anything before "now" is discarded.
"""
import re
from datetime import datetime
from typing import Optional

from ..options import ParseOptions
from .resolver import CALENDAR, CandidateDate, DateResolver, DateparserResolver
import logging

logger = logging.getLogger(__name__)


TBD = "TBD"
ISO_FORMAT = "%Y-%m-%dT%H:%M"

DUE_MARKER_PATTERN = re.compile(r'(?:due|by)[:\s]+([^.;]+)[.;]?', re.IGNORECASE)

_default_resolver = DateparserResolver()


class DueDateExtractor:
    """
    Extracts due dates from block text.

    ``options`` must already be resolved (see ``ParseOptions.resolve``).
    """

    def __init__(self, options: ParseOptions, resolver: Optional[DateResolver] = None):
        self.options = options
        self.resolver = resolver or _default_resolver
        self.default_hour, self.default_minute = options.due_time

    def extract(self, text: str) -> Optional[str]:
        """Return "YYYY-MM-DDTHH:mm" for the block, or None."""
        due = self._extract_once(text)
        if due is None:
            marker = DUE_MARKER_PATTERN.search(text)
            if marker:
                due = self._extract_once(marker.group(1))
        return due

    def _extract_once(self, text: str) -> Optional[str]:
        candidates = self.resolver.resolve(
            text, self.options.reference_date, forward_bias=True
        )
        if not candidates:
            return None

        due = self._to_datetime(candidates[-1])
        if due is None:
            return None

        if not self.options.accept_past_dates and due < self.options.now():
            logger.debug(f"Discarding past due date {due:%Y-%m-%d %H:%M} from {text[:60]!r}")
            return None
        return due.strftime(ISO_FORMAT)

    def _to_datetime(self, candidate: CandidateDate) -> Optional[datetime]:
        value = candidate.value
        if candidate.kind == CALENDAR and not candidate.year_explicit:
            year = self.options.assume_academic_year
            if value.month < self.options.semester_start_month:
                year += 1
            try:
                value = value.replace(year=year)
            except ValueError:
                # Feb 29 in a non-leap academic year
                logger.debug(f"{candidate.text!r} does not exist in {year}")
                return None

        if candidate.has_time:
            hour, minute = candidate.hour, candidate.minute or 0
        else:
            hour, minute = self.default_hour, self.default_minute
        return datetime(value.year, value.month, value.day, hour, minute)


def extract_due_date(text: str, options: ParseOptions,
                     resolver: Optional[DateResolver] = None) -> Optional[str]:
    """Convenience wrapper that resolves ``options`` before extracting."""
    return DueDateExtractor(options.resolve(), resolver).extract(text)
