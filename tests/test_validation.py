"""
Tests for record validation before review/commit.
"""
import pytest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


def record_dict(**changes):
    data = {
        "title": "Quiz 1",
        "dueDate": "2024-09-02T23:59",
        "type": "quiz",
        "difficulty": "moderate",
        "confidence": 0.85,
        "sourceLines": [2],
    }
    data.update(changes)
    return data


@pytest.fixture
def validator():
    from syllabus_parser.validation import OutputValidator
    return OutputValidator()


class TestValidateAssignment:
    """Tests for OutputValidator.validate_assignment."""

    def test_confident_dated_record_accepted(self, validator):
        result = validator.validate_assignment(record_dict())

        assert result.is_valid
        assert result.suggested_action == "accept"
        assert result.errors == []
        assert result.confidence_score == 0.85

    def test_accepts_parsed_assignment(self, validator):
        from syllabus_parser.assignments import ParsedAssignment

        result = validator.validate_assignment(ParsedAssignment.from_dict(record_dict()))

        assert result.suggested_action == "accept"

    def test_tbd_flagged(self, validator):
        result = validator.validate_assignment(record_dict(dueDate="TBD"))

        assert result.is_valid
        assert result.suggested_action == "flag_for_review"
        assert any("TBD" in w for w in result.warnings)

    def test_low_confidence_flagged(self, validator):
        result = validator.validate_assignment(record_dict(confidence=0.35))

        assert result.is_valid
        assert result.suggested_action == "flag_for_review"
        assert any("Low confidence" in w for w in result.warnings)

    @pytest.mark.parametrize("changes", [
        {"title": ""},
        {"title": "   "},
        {"dueDate": "2024-02-30T23:59"},
        {"dueDate": "Sept 2"},
        {"dueDate": "2024-09-02T25:00"},
        {"type": "essay"},
        {"difficulty": "hard"},
        {"confidence": 1.5},
        {"confidence": -0.1},
        {"confidence": "high"},
        {"sourceLines": []},
        {"sourceLines": [4, 2]},
        {"sourceLines": ["2"]},
    ])
    def test_contract_violations_rejected(self, validator, changes):
        result = validator.validate_assignment(record_dict(**changes))

        assert not result.is_valid
        assert result.suggested_action == "reject"
        assert result.errors

    def test_rejects_other_objects(self, validator):
        with pytest.raises(TypeError):
            validator.validate_assignment("Quiz 1")


class TestValidateBatch:
    """Tests for OutputValidator.validate_batch."""

    def test_duplicate_rejected(self, validator):
        records = [record_dict(), record_dict(title="QUIZ 1"), record_dict(title="Quiz 2")]

        results = validator.validate_batch(records)

        assert [r.suggested_action for r in results] == ["accept", "reject", "accept"]
        assert "Duplicate of record 1" in results[1].errors

    def test_parser_output_is_valid(self, validator):
        from datetime import datetime
        from syllabus_parser import parse_syllabus

        records = parse_syllabus(
            "- Homework 1: Limits (due Aug 28)\nQuiz 1 Sept 2\nProject kickoff",
            reference_date=datetime(2024, 8, 20)
        )

        assert all(r.is_valid for r in validator.validate_batch(records))


class TestReport:
    """Tests for generate_validation_report and validate_before_display."""

    def test_report_summary(self, validator):
        records = [record_dict(), record_dict(title="Quiz 2", dueDate="TBD"), record_dict(title="")]

        report = validator.generate_validation_report(records)

        assert report.startswith("# Validation Report")
        assert "| Total Records | 3 |" in report
        assert "| Ready to Save | 1 |" in report
        assert "| Flagged for Review | 1 |" in report
        assert "| Rejected | 1 |" in report
        assert "Title is empty" in report

    def test_clean_report_has_no_findings(self, validator):
        report = validator.generate_validation_report([record_dict()])

        assert "Detailed Findings" not in report

    def test_validate_before_display(self):
        from syllabus_parser.validation import validate_before_display

        payload = validate_before_display([record_dict(), record_dict(dueDate="TBD", title="Quiz 2")])

        assert payload[0]["title"] == "Quiz 1"
        assert payload[0]["validation"]["suggested_action"] == "accept"
        assert payload[1]["validation"]["suggested_action"] == "flag_for_review"
