"""
Tests for ParseOptions coercion and validation.
"""
import pytest
from datetime import date, datetime, timezone
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


class TestCoerce:
    """Building options from the accepted input shapes."""

    def test_defaults(self):
        from syllabus_parser.options import ParseOptions

        options = ParseOptions.coerce(None)

        assert options.timezone == "America/New_York"
        assert options.default_due_time == "23:59"
        assert options.semester_start_month == 8
        assert options.accept_past_dates is True

    def test_camel_case_mapping(self):
        from syllabus_parser.options import ParseOptions

        options = ParseOptions.coerce({
            "referenceDate": datetime(2024, 8, 20),
            "defaultDueTime": "17:00",
            "acceptPastDates": False,
        })

        assert options.reference_date == datetime(2024, 8, 20)
        assert options.default_due_time == "17:00"
        assert options.accept_past_dates is False

    def test_none_values_keep_defaults(self):
        from syllabus_parser.options import ParseOptions

        options = ParseOptions.coerce({"timezone": None})

        assert options.timezone == "America/New_York"

    def test_overrides_win(self):
        from syllabus_parser.options import ParseOptions

        base = ParseOptions(default_due_time="17:00")
        options = ParseOptions.coerce(base, default_due_time="09:00", semesterStartMonth=1)

        assert options.default_due_time == "09:00"
        assert options.semester_start_month == 1
        assert base.default_due_time == "17:00"

    def test_unknown_key(self):
        from syllabus_parser.options import ParseOptions, ParseOptionsError

        with pytest.raises(ParseOptionsError, match="Unknown parse option"):
            ParseOptions.coerce({"due": "23:59"})

    def test_wrong_container(self):
        from syllabus_parser.options import ParseOptions, ParseOptionsError

        with pytest.raises(ParseOptionsError):
            ParseOptions.coerce(["23:59"])


class TestResolve:
    """Validation and call-time defaults."""

    @pytest.mark.parametrize("field,value", [
        ("default_due_time", "25:00"),
        ("default_due_time", "11:59pm"),
        ("default_due_time", 2359),
        ("timezone", "Mars/Olympus_Mons"),
        ("timezone", ""),
        ("semester_start_month", 13),
        ("semester_start_month", 0),
        ("semester_start_month", True),
        ("assume_academic_year", "2024"),
        ("accept_past_dates", "yes"),
        ("reference_date", "2024-08-20"),
    ])
    def test_invalid_values_fail_fast(self, field, value):
        from syllabus_parser.options import ParseOptions, ParseOptionsError

        with pytest.raises(ParseOptionsError):
            ParseOptions(**{field: value}).resolve()

    def test_error_is_value_error(self):
        from syllabus_parser.options import ParseOptionsError

        assert issubclass(ParseOptionsError, ValueError)

    def test_academic_year_from_fall_reference(self):
        from syllabus_parser.options import ParseOptions

        options = ParseOptions(reference_date=datetime(2024, 8, 20)).resolve()

        assert options.assume_academic_year == 2024

    def test_academic_year_from_spring_reference(self):
        from syllabus_parser.options import ParseOptions

        options = ParseOptions(reference_date=datetime(2025, 1, 10)).resolve()

        assert options.assume_academic_year == 2024

    def test_explicit_academic_year_kept(self):
        from syllabus_parser.options import ParseOptions

        options = ParseOptions(reference_date=datetime(2025, 1, 10), assume_academic_year=2030).resolve()

        assert options.assume_academic_year == 2030

    def test_date_reference_becomes_midnight(self):
        from syllabus_parser.options import ParseOptions

        options = ParseOptions(reference_date=date(2024, 8, 20)).resolve()

        assert options.reference_date == datetime(2024, 8, 20, 0, 0)

    def test_aware_reference_converted_to_local(self):
        from syllabus_parser.options import ParseOptions

        utc = datetime(2024, 8, 20, 4, 0, tzinfo=timezone.utc)
        options = ParseOptions(reference_date=utc, timezone="America/New_York").resolve()

        assert options.reference_date == datetime(2024, 8, 20, 0, 0)
        assert options.reference_date.tzinfo is None

    def test_missing_reference_defaults_to_now(self):
        from syllabus_parser.options import ParseOptions

        options = ParseOptions().resolve()

        assert isinstance(options.reference_date, datetime)
        assert options.reference_date.tzinfo is None

    def test_resolve_is_stable(self):
        from syllabus_parser.options import ParseOptions

        once = ParseOptions(reference_date=datetime(2024, 8, 20)).resolve()

        assert once.resolve() == once


class TestParseDueTime:
    """Tests for parse_due_time."""

    @pytest.mark.parametrize("value,expected", [
        ("23:59", (23, 59)),
        ("00:00", (0, 0)),
        ("7:05", (7, 5)),
        (" 09:30 ", (9, 30)),
    ])
    def test_valid(self, value, expected):
        from syllabus_parser.options import parse_due_time

        assert parse_due_time(value) == expected

    @pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "", None])
    def test_invalid(self, value):
        from syllabus_parser.options import parse_due_time, ParseOptionsError

        with pytest.raises(ParseOptionsError):
            parse_due_time(value)
