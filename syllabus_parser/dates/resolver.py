"""
Date Resolver - Finds natural-language date expressions in syllabus text.

Resolution happens in two steps:
1. Candidate spans are located with anchored regular expressions that use no
   nested quantifiers, so scanning stays linear in the input length.
2. Each span is resolved against an anchor datetime: calendar and relative
   expressions ("Sept 2", "9/2/24", "tomorrow", "in 3 days") through
   dateparser, weekday expressions ("next Wed", "Friday") through
   dateutil's relativedelta so forward bias is exact.

A nearby clock time ("at 11:59pm", "5pm on") is attached to its date.

Anything implementing ``DateResolver`` can replace the default, which keeps
the extractor testable with stub resolvers.
"""
import calendar
import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from functools import lru_cache
from typing import List, Optional, Protocol, Tuple

import dateparser
from dateutil.relativedelta import relativedelta, MO, TU, WE, TH, FR, SA, SU

logger = logging.getLogger(__name__)


CALENDAR = "calendar"
RELATIVE = "relative"
WEEKDAY = "weekday"


@dataclass(frozen=True)
class CandidateDate:
    """A resolved date expression found in text."""
    text: str
    start: int
    end: int
    value: date
    kind: str                       # calendar, relative or weekday
    year_explicit: bool = False
    hour: Optional[int] = None      # None when no time of day was stated
    minute: Optional[int] = None

    @property
    def has_time(self) -> bool:
        return self.hour is not None


class DateResolver(Protocol):
    def resolve(self, text: str, anchor: datetime, forward_bias: bool = True) -> List[CandidateDate]:
        """Return every date expression in ``text``, ordered by position."""
        ...


MONTHS = (
    "january", "february", "march", "april", "may", "june",
    "july", "august", "september", "october", "november", "december",
)

_MONTH = (
    r'(?P<month>jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?'
    r'|aug(?:ust)?|sept?(?:ember)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?'
)
_ORDINAL = r'(?:st|nd|rd|th)?'
_YEAR = r'(?:,?\s+(?P<year>\d{4}))?'

_WEEKDAY_FULL = r'monday|tuesday|wednesday|thursday|friday|saturday|sunday'
# Abbreviations only count when capitalized: "sat", "sun", "wed" are also words.
_WEEKDAY_ABBR = (
    r'Mon|Tues?|Wed|Thu(?:rs?)?|Fri|Sat|Sun'
    r'|MON|TUES?|WED|THU(?:RS?)?|FRI|SAT|SUN'
)
_WEEKDAY = r'(?:(?i:' + _WEEKDAY_FULL + r')|(?:' + _WEEKDAY_ABBR + r'))\.?'
# After next/this/coming/last any casing is a weekday ("next wed").
_WEEKDAY_ANY_CASE = r'(?i:' + _WEEKDAY_FULL + r'|mon|tues?|wed|thu(?:rs?)?|fri|sat|sun)\.?'
_WEEKDAY_PREFIX = r'(?:\b' + _WEEKDAY + r',?\s+)?'
_WEEKDAY_SUFFIX = r'(?:,?\s*\(?' + _WEEKDAY + r'\)?)?'

# Ordered by priority: a span already claimed by an earlier pattern blocks
# overlapping matches from later ones ("Homework 2 Sept 9" is Sept 9, not 2 Sept).
_ISO_PATTERN = re.compile(
    r'\b(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})\b'
)
_NUMERIC_PATTERN = re.compile(
    _WEEKDAY_PREFIX
    + r'\b(?P<month>\d{1,2})/(?P<day>\d{1,2})(?:/(?P<year>\d{4}|\d{2}))?\b(?!/)'
    + _WEEKDAY_SUFFIX
)
_MONTH_DAY_PATTERN = re.compile(
    _WEEKDAY_PREFIX
    + r'(?i:\b' + _MONTH + r'\s+(?P<day>\d{1,2})' + _ORDINAL + r'\b' + _YEAR + r')'
    + _WEEKDAY_SUFFIX
)
_DAY_MONTH_PATTERN = re.compile(
    _WEEKDAY_PREFIX
    + r'(?i:\b(?P<day>\d{1,2})' + _ORDINAL + r'\s+(?:of\s+)?' + _MONTH + r'(?![a-z])' + _YEAR + r')'
)
_RELATIVE_PATTERN = re.compile(
    r'\b(?P<phrase>today|tonight|tomorrow|yesterday|in\s+\d{1,3}\s+(?:days?|weeks?))\b',
    re.IGNORECASE
)
_WEEKDAY_PATTERN = re.compile(
    r'(?:\b(?P<modifier>(?i:next|this|coming|last))\s+(?P<modified>' + _WEEKDAY_ANY_CASE + r')'
    r'|\b(?P<weekday>' + _WEEKDAY + r'))(?![A-Za-z])'
)

_TIME = (
    r'(?:(?P<hour12>\d{1,2})(?::(?P<minute12>[0-5]\d))?\s*(?P<meridiem>[ap])\.?m\.?(?![a-z])'
    r'|(?P<hour24>[01]?\d|2[0-3]):(?P<minute24>[0-5]\d)\b'
    r'|\b(?P<word>noon|midnight)\b)'
)
_TIME_AFTER = re.compile(r'^(?:\s*,)?(?:\s*(?:at|@|by|-))?\s*T?' + _TIME, re.IGNORECASE)
_TIME_BEFORE = re.compile(_TIME + r'\s*(?:,\s*)?(?:on\s+)?$', re.IGNORECASE)
_TIME_WINDOW = 24

_WEEKDAYS = {
    "mon": MO, "tue": TU, "wed": WE, "thu": TH, "fri": FR, "sat": SA, "sun": SU,
}


def _month_number(token: str) -> int:
    if token.isdigit():
        return int(token)
    prefix = token.lower()[:3]
    for number, name in enumerate(MONTHS, start=1):
        if name.startswith(prefix):
            return number
    raise ValueError(f"Unknown month: {token}")


def _full_year(token: str) -> int:
    year = int(token)
    return 2000 + year if len(token) == 2 else year


@lru_cache(maxsize=4096)
def _dateparser_date(phrase: str, anchor: datetime, prefer: Optional[str]) -> Optional[date]:
    """
    Memoized dateparser lookup.

    Syllabi repeat the same few hundred date phrases and are re-parsed on
    every edit, so each (phrase, anchor, preference) is resolved once.
    """
    settings = {'RELATIVE_BASE': anchor, 'RETURN_AS_TIMEZONE_AWARE': False}
    if prefer is not None:
        settings.update({'PREFER_DATES_FROM': prefer, 'REQUIRE_PARTS': ['day', 'month']})
    parsed = dateparser.parse(phrase, languages=DateparserResolver.LANGUAGES, settings=settings)
    return parsed.date() if parsed is not None else None


def _time_from_match(match) -> Tuple[int, int]:
    if match.group('word'):
        # "midnight" on a due date means the end of that day
        return (12, 0) if match.group('word').lower() == 'noon' else (23, 59)
    if match.group('hour24') is not None:
        return int(match.group('hour24')), int(match.group('minute24'))
    hour = int(match.group('hour12'))
    minute = int(match.group('minute12') or 0)
    if hour < 1 or hour > 12:
        raise ValueError(f"Invalid 12-hour clock value: {hour}")
    hour = hour % 12
    if match.group('meridiem').lower() == 'p':
        hour += 12
    return hour, minute


class DateparserResolver:
    """
    Default resolver backed by dateparser and dateutil.

    Calendar spans are canonicalized to "<Month> <day>[ <year>]" before
    being handed to dateparser, so abbreviations ("Sept.") and numeric
    forms ("9/2/24") resolve identically.
    """

    LANGUAGES = ['en']

    def resolve(self, text: str, anchor: datetime, forward_bias: bool = True) -> List[CandidateDate]:
        if not text:
            return []

        claimed: List[Tuple[int, int]] = []
        candidates: List[CandidateDate] = []

        def claim(match) -> bool:
            start, end = match.span()
            if any(start < c_end and c_start < end for c_start, c_end in claimed):
                return False
            claimed.append((start, end))
            return True

        for pattern in (_ISO_PATTERN, _NUMERIC_PATTERN, _MONTH_DAY_PATTERN, _DAY_MONTH_PATTERN):
            for match in pattern.finditer(text):
                candidate = self._resolve_calendar(match, text, anchor, forward_bias)
                if candidate is not None and claim(match):
                    candidates.append(candidate)

        for match in _RELATIVE_PATTERN.finditer(text):
            candidate = self._resolve_relative(match, text, anchor)
            if candidate is not None and claim(match):
                candidates.append(candidate)

        for match in _WEEKDAY_PATTERN.finditer(text):
            if not claim(match):
                continue
            candidates.append(self._resolve_weekday(match, text, anchor, forward_bias))

        candidates.sort(key=lambda c: c.start)
        return candidates

    def _resolve_calendar(self, match, text: str, anchor: datetime,
                          forward_bias: bool) -> Optional[CandidateDate]:
        try:
            month = _month_number(match.group('month'))
            day = int(match.group('day'))
            year_token = match.group('year')
            year = _full_year(year_token) if year_token else None
        except ValueError:
            return None
        if not 1 <= month <= 12:
            return None
        # leap year 2000 when the year is implicit so Feb 29 survives to year inference
        if not 1 <= day <= calendar.monthrange(year or 2000, month)[1]:
            return None

        canonical = f"{MONTHS[month - 1].capitalize()} {day}"
        if year is not None:
            canonical += f" {year}"
        parsed = _dateparser_date(canonical, anchor, 'future' if forward_bias else 'current_period')
        if parsed is None:
            logger.debug(f"dateparser could not resolve {canonical!r}")
            return None

        return self._build(match, text, parsed, CALENDAR, year is not None)

    def _resolve_relative(self, match, text: str, anchor: datetime) -> Optional[CandidateDate]:
        phrase = match.group('phrase').lower()
        if phrase == 'tonight':
            phrase = 'today'
        parsed = _dateparser_date(phrase, anchor, None)
        if parsed is None:
            logger.debug(f"dateparser could not resolve {phrase!r}")
            return None
        return self._build(match, text, parsed, RELATIVE, False)

    def _resolve_weekday(self, match, text: str, anchor: datetime,
                         forward_bias: bool) -> CandidateDate:
        name = match.group('modified') or match.group('weekday')
        weekday = _WEEKDAYS[name.lower()[:3]]
        modifier = (match.group('modifier') or '').lower()
        base = anchor.date()

        if modifier == 'next':
            value = base + relativedelta(days=+1, weekday=weekday(+1))
        elif modifier == 'last':
            value = base + relativedelta(days=-1, weekday=weekday(-1))
        elif modifier in ('this', 'coming') or forward_bias:
            value = base + relativedelta(weekday=weekday(+1))
        else:
            value = base + relativedelta(weekday=weekday(-1))

        return self._build(match, text, value, WEEKDAY, False)

    def _build(self, match, text: str, value: date, kind: str,
               year_explicit: bool) -> CandidateDate:
        start, end = match.span()
        hour = minute = None
        clock = self._find_time(text, start, end)
        if clock is not None:
            hour, minute = clock
        return CandidateDate(
            text=match.group(0),
            start=start,
            end=end,
            value=value,
            kind=kind,
            year_explicit=year_explicit,
            hour=hour,
            minute=minute
        )

    def _find_time(self, text: str, start: int, end: int) -> Optional[Tuple[int, int]]:
        for found in (
            _TIME_AFTER.match(text[end:end + _TIME_WINDOW]),
            _TIME_BEFORE.search(text[max(0, start - _TIME_WINDOW):start]),
        ):
            if found is None:
                continue
            try:
                return _time_from_match(found)
            except ValueError:
                continue
        return None
