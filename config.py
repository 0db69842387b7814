"""
Configuration settings for the Syllabus Parser.

Defaults can be overridden through environment variables so a host app can
pin the campus timezone or due time without touching code.
"""
import os


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Logging verbosity: "minimal", "standard" or "verbose"
LOG_LEVEL = os.getenv("LOG_LEVEL", "standard")


class ParserConfig:
    """Defaults applied when a ParseOptions field is left unset."""
    DEFAULT_TIMEZONE = os.getenv("SYLLABUS_TIMEZONE", "America/New_York")
    DEFAULT_DUE_TIME = os.getenv("SYLLABUS_DEFAULT_DUE_TIME", "23:59")
    SEMESTER_START_MONTH = int(os.getenv("SYLLABUS_SEMESTER_START_MONTH", "8"))
    ACCEPT_PAST_DATES = _env_bool("SYLLABUS_ACCEPT_PAST_DATES", True)

    # Pasted text beyond this is cut at the last line break before the cap
    MAX_INPUT_CHARS = int(os.getenv("SYLLABUS_MAX_INPUT_CHARS", "50000"))
    SLOW_PARSE_MS = 1500

    TITLE_FALLBACK_CHARS = 140


class ReviewConfig:
    """Thresholds used when handing parsed records to a human reviewer."""
    REVIEW_THRESHOLD = 0.5   # below this a record must be reviewed
    ACCEPT_THRESHOLD = 0.8
