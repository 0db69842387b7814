"""
Tests for text normalization, line splitting and header filtering.
"""
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_line_endings(self):
        from syllabus_parser.preprocessing import normalize_text

        assert normalize_text("a\r\nb\rc") == "a\nb\nc"

    def test_dashes_become_hyphens(self):
        from syllabus_parser.preprocessing import normalize_text

        assert normalize_text("Quiz 1 – Sept 2 — online") == "Quiz 1 - Sept 2 - online"

    def test_nbsp_becomes_space(self):
        from syllabus_parser.preprocessing import normalize_text

        assert normalize_text("Quiz\u00a01") == "Quiz 1"

    def test_trailing_whitespace_removed_indent_kept(self):
        from syllabus_parser.preprocessing import normalize_text

        assert normalize_text("abc   \n  xyz\t") == "abc\n  xyz"

    def test_empty(self):
        from syllabus_parser.preprocessing import normalize_text

        assert normalize_text("") == ""


class TestSplitLines:
    """Tests for split_lines."""

    def test_empty_lines_dropped_indices_kept(self):
        from syllabus_parser.preprocessing import split_lines

        lines = split_lines("Quiz 1\n\n  Lab 2")

        assert [(l.text, l.original_index) for l in lines] == [("Quiz 1", 0), ("Lab 2", 2)]

    def test_indent_measured_before_trim(self):
        from syllabus_parser.preprocessing import split_lines

        lines = split_lines("a\n   b\n\tc")

        assert [l.indent for l in lines] == [0, 3, 4]
        assert lines[2].text == "c"


class TestNoiseFilter:
    """Tests for header/policy filtering."""

    @pytest.mark.parametrize("text", [
        "Grading Breakdown",
        "Late Work Policy: 10% per day",
        "ALERT: room change",
        "Schedule (Tentative)",
        "Due Date Calendar",
    ])
    def test_header_noise(self, text):
        from syllabus_parser.preprocessing import is_header_noise

        assert is_header_noise(text)

    def test_assignment_line_is_not_noise(self):
        from syllabus_parser.preprocessing import is_header_noise

        assert not is_header_noise("Homework 3 due Sept 9")

    def test_filter_keeps_order(self):
        from syllabus_parser.preprocessing import split_lines, filter_noise

        lines = filter_noise(split_lines("Quiz 1\nCourse Policies\nQuiz 2"))

        assert [l.original_index for l in lines] == [0, 2]

    def test_assignment_mentioning_policy_phrase_is_dropped(self):
        # substring matching also removes real items that quote a policy phrase
        from syllabus_parser.preprocessing import split_lines, filter_noise

        lines = filter_noise(split_lines("Essay 1 (late work accepted) due Oct 2"))

        assert lines == []
