#!/usr/bin/env python3
"""
Syllabus Parser - Main Entry Point

Command-line interface for turning a syllabus into reviewable assignment
records, and for validating records before they are saved.

Usage:
    # Parse a syllabus and print a review table
    python main.py parse --input syllabus.pdf

    # Parse pasted text from stdin, write JSON
    pbpaste | python main.py parse -i - -o assignments.json

    # Validate (possibly hand-edited) records
    python main.py validate assignments.json
"""
import argparse
import sys
import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_reference_date(value: str) -> datetime:
    """argparse type for --reference-date: ISO date or date-time."""
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid reference date {value!r}; expected YYYY-MM-DD or YYYY-MM-DDTHH:MM"
        )


def build_options(args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the parse options given on the command line; unset ones keep their defaults."""
    options = {
        'timezone': args.timezone,
        'reference_date': args.reference_date,
        'default_due_time': args.default_due_time,
        'semester_start_month': args.semester_start_month,
        'assume_academic_year': args.academic_year,
    }
    if args.reject_past_dates:
        options['accept_past_dates'] = False
    return {key: value for key, value in options.items() if value is not None}


def format_review_table(records) -> str:
    """Plain-text table of records for a terminal review."""
    if not records:
        return "No assignments found."

    lines = [
        f"{'#':>3}  {'Due':<16}  {'Type':<8}  {'Conf':>4}  Title",
        "-" * 72
    ]
    for index, record in enumerate(records, start=1):
        flag = " *" if record.needs_review else ""
        lines.append(
            f"{index:>3}  {record.due_date:<16}  {record.type.value:<8}  "
            f"{record.confidence:>4.2f}  {record.title}{flag}"
        )
    lines.append("")
    lines.append("* needs review before saving (low confidence or no due date)")
    return "\n".join(lines)


def run_parse(
    input_path: str,
    output_path: Optional[str] = None,
    options: Optional[Dict[str, Any]] = None,
    min_confidence: float = 0.0,
    verbose: bool = False,
    course_name: Optional[str] = None
):
    """
    Parse a syllabus document.

    Args:
        input_path: Path to a .txt/.md/.pdf/.docx syllabus, or "-" for stdin
        output_path: Optional path for output JSON
        options: Parse options (see ParseOptions)
        min_confidence: Drop records scoring below this
        verbose: Enable verbose logging
        course_name: Course the records belong to (default: the document title)
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    from syllabus_parser import SyllabusParser
    from syllabus_parser.document_processing import load_syllabus
    from syllabus_parser.validation import validate_before_display

    logger.info(f"Reading syllabus: {input_path}")
    document = load_syllabus(input_path)
    course_name = course_name or document.title

    parser = SyllabusParser(verbose=verbose)
    records = parser.parse(document.text, options or {})

    if min_confidence > 0:
        kept = [r for r in records if r.confidence >= min_confidence]
        logger.info(f"Dropped {len(records) - len(kept)} record(s) below confidence {min_confidence}")
        records = kept

    if output_path:
        payload = validate_before_display(records)
        if course_name:
            for item in payload:
                item['courseName'] = course_name
        with open(output_path, 'w') as f:
            json.dump(payload, f, indent=2)
        logger.info(f"Results saved to: {output_path}")
    else:
        print("\n" + "=" * 72)
        print("PARSED ASSIGNMENTS" + (f": {course_name}" if course_name else ""))
        print("=" * 72)
        print(format_review_table(records))

    return records


def run_validate(records_path: str) -> bool:
    """
    Validate a JSON list of records and print the report.

    Returns:
        True if no record was rejected
    """
    from syllabus_parser import OutputValidator

    with open(records_path) as f:
        records: List[Dict[str, Any]] = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"{records_path} must contain a JSON list of records")

    validator = OutputValidator()
    results = validator.validate_batch(records)
    print(validator.generate_validation_report(records, results))

    return all(r.is_valid for r in results)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Syllabus Parser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Parse a syllabus
    python main.py parse --input syllabus.docx

    # Pin the reference date and timezone
    python main.py parse -i syllabus.txt --reference-date 2024-08-20 --timezone America/Chicago

    # Save output to file, then validate it
    python main.py parse -i syllabus.pdf --output assignments.json
    python main.py validate assignments.json
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Parse command
    parse_parser = subparsers.add_parser('parse', help='Extract assignments from a syllabus')
    parse_parser.add_argument(
        '--input', '-i',
        required=True,
        help='Path to syllabus (.txt, .md, .pdf, .docx) or - for stdin'
    )
    parse_parser.add_argument(
        '--output', '-o',
        help='Path for output JSON file (optional)'
    )
    parse_parser.add_argument('--course', help='Course name for the records (default: document title)')
    parse_parser.add_argument('--timezone', help='IANA timezone, e.g. America/New_York')
    parse_parser.add_argument(
        '--reference-date',
        type=parse_reference_date,
        help='Anchor for relative dates (ISO, default: now)'
    )
    parse_parser.add_argument('--default-due-time', help='Due time when none is stated (HH:mm)')
    parse_parser.add_argument('--semester-start-month', type=int, help='Month the academic year starts (1-12)')
    parse_parser.add_argument('--academic-year', type=int, help='Year the academic year starts in')
    parse_parser.add_argument(
        '--reject-past-dates',
        action='store_true',
        help='Treat due dates before now as missing'
    )
    parse_parser.add_argument(
        '--min-confidence',
        type=float,
        default=0.0,
        help='Drop records scoring below this (0-1)'
    )
    parse_parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    # Validate command
    validate_parser = subparsers.add_parser('validate', help='Validate a JSON list of records')
    validate_parser.add_argument('records', help='Path to JSON file of records')

    args = parser.parse_args(argv)

    from syllabus_parser import ParseOptionsError, DocumentLoadError

    try:
        if args.command == 'parse':
            run_parse(
                input_path=args.input,
                output_path=args.output,
                options=build_options(args),
                min_confidence=args.min_confidence,
                verbose=args.verbose,
                course_name=args.course
            )
            return 0
        elif args.command == 'validate':
            return 0 if run_validate(args.records) else 1
        else:
            parser.print_help()
            return 1
    except (ParseOptionsError, DocumentLoadError) as e:
        logger.error(str(e))
        return 2
    except (OSError, ValueError) as e:
        logger.error(f"{args.command} failed: {e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
