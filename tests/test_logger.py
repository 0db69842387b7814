"""
Tests for the parse-run logger.
"""
import logging
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).parent.parent))


class TestLogLevel:
    """Tests for LogLevel.from_name."""

    def test_known_names(self):
        from syllabus_parser.utils import LogLevel

        assert LogLevel.from_name("verbose") == LogLevel.VERBOSE
        assert LogLevel.from_name(" MINIMAL ") == LogLevel.MINIMAL

    def test_unknown_falls_back_to_standard(self):
        from syllabus_parser.utils import LogLevel

        assert LogLevel.from_name("loud") == LogLevel.STANDARD
        assert LogLevel.from_name(None) == LogLevel.STANDARD


class TestParserLogger:
    """Tests for ParserLogger."""

    def test_metrics_in_summary(self):
        from syllabus_parser.utils import create_logger

        run_log = create_logger("test", verbose=True)
        run_log.metric("blocks", 4)

        summary = run_log.get_summary()
        assert "blocks: 4" in summary
        assert "Parse Metrics: test" in summary

    def test_phase_hidden_below_verbose(self, caplog):
        from syllabus_parser.utils import create_logger, LogLevel

        run_log = create_logger("test", LogLevel.STANDARD)
        with caplog.at_level(logging.INFO):
            run_log.phase("Stage 1")
            run_log.success("done")

        assert "Stage 1" not in caplog.text
        assert "done" in caplog.text

    def test_timer_recorded(self):
        from syllabus_parser.utils import create_logger

        run_log = create_logger("test")
        with run_log.timer("work", warn_threshold_ms=10_000):
            pass

        assert "work" in run_log.timers
        assert run_log.timers["work"].elapsed_ms() >= 0

    def test_slow_operation_warns(self, caplog):
        from syllabus_parser.utils import PerformanceTimer

        with caplog.at_level(logging.WARNING):
            with PerformanceTimer("parse", warn_threshold_ms=-1):
                pass

        assert "Slow operation: parse" in caplog.text

    def test_low_confidence_block_warned_in_verbose(self, caplog):
        from syllabus_parser.utils import create_logger

        run_log = create_logger("test", verbose=True)
        with caplog.at_level(logging.DEBUG):
            run_log.block_decision((1,), kept=True, type_name=None, due_date="TBD", confidence=0.1)

        assert "Low-confidence record from lines [1]" in caplog.text
