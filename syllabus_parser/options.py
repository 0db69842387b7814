"""
Parse options and their validation.

Every field is optional. ``resolve()`` fills the call-time defaults
(reference date, academic year) and validates eagerly so a bad option fails
before any text is processed instead of silently producing wrong dates.
"""
import re
from dataclasses import dataclass, fields, replace
from datetime import date, datetime, time
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from config import ParserConfig


_DUE_TIME_PATTERN = re.compile(r'^([01]?\d|2[0-3]):([0-5]\d)$')

# External (camelCase) option names accepted alongside the field names
_ALIASES = {
    'referenceDate': 'reference_date',
    'defaultDueTime': 'default_due_time',
    'semesterStartMonth': 'semester_start_month',
    'assumeAcademicYear': 'assume_academic_year',
    'acceptPastDates': 'accept_past_dates',
}


class ParseOptionsError(ValueError):
    """Raised for a malformed or unsupported parse option."""


def parse_due_time(value: Any) -> Tuple[int, int]:
    """Parse an 'HH:mm' 24-hour time into (hour, minute)."""
    match = _DUE_TIME_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ParseOptionsError(f"default_due_time must be 'HH:mm' (24h), got {value!r}")
    return int(match.group(1)), int(match.group(2))


@dataclass(frozen=True)
class ParseOptions:
    timezone: str = ParserConfig.DEFAULT_TIMEZONE
    reference_date: Optional[Union[datetime, date]] = None
    default_due_time: str = ParserConfig.DEFAULT_DUE_TIME
    semester_start_month: int = ParserConfig.SEMESTER_START_MONTH
    assume_academic_year: Optional[int] = None
    accept_past_dates: bool = ParserConfig.ACCEPT_PAST_DATES

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "ParseOptions":
        """Build options from a partial mapping; unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in values.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise ParseOptionsError(f"Unknown parse option: {key!r}")
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)

    @classmethod
    def coerce(cls, options: Union["ParseOptions", Mapping[str, Any], None] = None,
               **overrides: Any) -> "ParseOptions":
        if options is None:
            base = cls()
        elif isinstance(options, ParseOptions):
            base = options
        elif isinstance(options, Mapping):
            base = cls.from_mapping(options)
        else:
            raise ParseOptionsError(
                f"options must be ParseOptions, a mapping or None, got {type(options).__name__}"
            )
        if overrides:
            merged = {f.name: getattr(base, f.name) for f in fields(base)}
            merged.update({_ALIASES.get(k, k): v for k, v in overrides.items()})
            base = cls.from_mapping(merged)
        return base

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def due_time(self) -> Tuple[int, int]:
        """``default_due_time`` as (hour, minute)."""
        return parse_due_time(self.default_due_time)

    def now(self) -> datetime:
        """Current wall-clock time in the configured timezone, without offset."""
        return datetime.now(self.zone).replace(tzinfo=None)

    def resolve(self) -> "ParseOptions":
        """
        Validate every field and fill call-time defaults.

        The returned options carry a naive local ``reference_date`` and a
        concrete ``assume_academic_year``: the academic year containing the
        reference date, i.e. its calendar year once the semester start month
        is reached and the previous year before it.
        """
        if not isinstance(self.timezone, str) or not self.timezone:
            raise ParseOptionsError(f"timezone must be an IANA name, got {self.timezone!r}")
        try:
            zone = ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ParseOptionsError(f"Unknown timezone {self.timezone!r}") from e

        parse_due_time(self.default_due_time)

        month = self.semester_start_month
        if isinstance(month, bool) or not isinstance(month, int) or not 1 <= month <= 12:
            raise ParseOptionsError(f"semester_start_month must be an int in 1-12, got {month!r}")

        if not isinstance(self.accept_past_dates, bool):
            raise ParseOptionsError(
                f"accept_past_dates must be a bool, got {self.accept_past_dates!r}"
            )

        reference = self.reference_date
        if reference is None:
            reference = datetime.now(zone).replace(tzinfo=None)
        elif isinstance(reference, datetime):
            if reference.tzinfo is not None:
                reference = reference.astimezone(zone).replace(tzinfo=None)
        elif isinstance(reference, date):
            reference = datetime.combine(reference, time())
        else:
            raise ParseOptionsError(
                f"reference_date must be a datetime or date, got {type(reference).__name__}"
            )

        year = self.assume_academic_year
        if year is None:
            year = reference.year if reference.month >= month else reference.year - 1
        elif isinstance(year, bool) or not isinstance(year, int) or not 1 <= year <= 9998:
            raise ParseOptionsError(f"assume_academic_year must be an int year, got {year!r}")

        return replace(self, reference_date=reference, assume_academic_year=year)
