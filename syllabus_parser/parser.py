"""
Syllabus Parser - Pipeline from pasted syllabus text to reviewable assignment records.

Stages:
1. normalize -> split -> filter header noise
2. segment lines into blocks
3. per block: classify type, extract due date, clean title, score, assemble
4. deduplicate by (title, due date)

The pipeline is a pure function of (text, options): no I/O, no shared state,
identical input always yields identical output.
"""
import logging
from typing import Any, List, Mapping, Optional, Union

from config import LOG_LEVEL, ParserConfig
from .assignments import ParsedAssignment, assemble_assignment, deduplicate
from .classification import detect_type
from .dates import DateResolver, DueDateExtractor
from .options import ParseOptions
from .preprocessing import filter_noise, normalize_text, split_lines
from .segmentation import segment_blocks
from .utils import LogLevel, create_logger

logger = logging.getLogger(__name__)


def cap_input(text: str, max_chars: int = ParserConfig.MAX_INPUT_CHARS) -> str:
    """
    Bound input size so date scanning stays fast.

    Oversized text is cut at the last line break before ``max_chars`` (or
    hard at ``max_chars`` when there is none).
    """
    if len(text) <= max_chars:
        return text
    cut = text.rfind("\n", 0, max_chars)
    truncated = text[:cut] if cut > 0 else text[:max_chars]
    logger.warning(
        f"Syllabus text truncated from {len(text)} to {len(truncated)} characters "
        f"(limit: {max_chars})"
    )
    return truncated


class SyllabusParser:
    """
    Parses syllabus text into deduplicated ``ParsedAssignment`` records.

    A parser holds no per-run state and can be shared between callers; the
    resolver is injectable so date handling can be stubbed in tests.
    """

    def __init__(self, resolver: Optional[DateResolver] = None, verbose: bool = False,
                 max_input_chars: int = ParserConfig.MAX_INPUT_CHARS):
        self.resolver = resolver
        self.verbose = verbose
        self.max_input_chars = max_input_chars

    def parse(self, raw_text: Optional[str],
              options: Union[ParseOptions, Mapping[str, Any], None] = None,
              **overrides: Any) -> List[ParsedAssignment]:
        # Options are validated before the text is looked at
        resolved = ParseOptions.coerce(options, **overrides).resolve()
        run_log = create_logger("syllabus", LogLevel.from_name(LOG_LEVEL), self.verbose)

        if not raw_text:
            run_log.debug("Empty input, nothing to parse")
            return []

        with run_log.timer("parse_syllabus", ParserConfig.SLOW_PARSE_MS):
            text = normalize_text(cap_input(raw_text, self.max_input_chars))

            run_log.phase("Stage 1: normalize and filter lines")
            lines = split_lines(text)
            kept_lines = filter_noise(lines)
            run_log.metric("lines", len(lines))
            run_log.metric("noise_lines_dropped", len(lines) - len(kept_lines))

            run_log.phase("Stage 2: segment blocks")
            blocks = segment_blocks(kept_lines)
            run_log.metric("blocks", len(blocks))

            run_log.phase("Stage 3: build records")
            extractor = DueDateExtractor(resolved, self.resolver)
            records = []
            for block in blocks:
                detected_type = detect_type(block.text)
                due_date = extractor.extract(block.text)
                record = assemble_assignment(block, detected_type, due_date)
                run_log.block_decision(
                    block.source_line_indices,
                    kept=record is not None,
                    type_name=detected_type.value if detected_type else None,
                    due_date=record.due_date if record else due_date,
                    confidence=record.confidence if record else None
                )
                if record is not None:
                    records.append(record)

            run_log.phase("Stage 4: deduplicate")
            unique = deduplicate(records)
            run_log.metric("records", len(unique))
            run_log.metric("duplicates_dropped", len(records) - len(unique))

        run_log.success(
            f"Parsed {len(unique)} assignment(s) from {len(blocks)} block(s), "
            f"{sum(1 for r in unique if r.needs_review)} need review"
        )
        return unique


_default_parser = SyllabusParser()


def parse_syllabus(raw_text: Optional[str],
                   options: Union[ParseOptions, Mapping[str, Any], None] = None,
                   **overrides: Any) -> List[ParsedAssignment]:
    """
    Parse pasted syllabus text into assignment records.

    Args:
        raw_text: Syllabus text; empty or None yields an empty list
        options: ParseOptions, a partial mapping (snake_case or camelCase
            keys), or None for defaults
        **overrides: Individual option fields, applied over ``options``

    Returns:
        Records in source order, first occurrence kept per (title, due date)

    Raises:
        ParseOptionsError: If any option is malformed
    """
    return _default_parser.parse(raw_text, options, **overrides)
