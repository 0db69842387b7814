"""
Run logger for syllabus parsing.

One ParserLogger is created per parse run. It gates messages by verbosity,
records stage metrics (line, block and record counts) and times the run so
that slow parses show up as warnings.
"""
import time
import logging
from typing import Optional, Dict, Any, Iterable
from enum import Enum
from contextlib import contextmanager

from config import ReviewConfig

logger = logging.getLogger(__name__)


class LogLevel(Enum):
    """Verbosity of a parse run."""
    MINIMAL = 0     # warnings only
    STANDARD = 1    # run summary line
    VERBOSE = 2     # stages, metrics and every block decision

    @classmethod
    def from_name(cls, name: Optional[str]) -> "LogLevel":
        return cls.__members__.get((name or "").strip().upper(), cls.STANDARD)


class PerformanceTimer:
    """Context manager measuring one operation; warns when over threshold."""

    def __init__(self, operation: str, warn_threshold_ms: float = 1500):
        self.operation = operation
        self.warn_threshold_ms = warn_threshold_ms
        self._started: Optional[float] = None
        self._stopped: Optional[float] = None

    def __enter__(self):
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._stopped = time.perf_counter()
        if self.is_slow:
            logger.warning(
                f"Slow operation: {self.operation} took {self.elapsed_ms():.0f}ms "
                f"(threshold: {self.warn_threshold_ms:.0f}ms)"
            )

    @property
    def is_slow(self) -> bool:
        return self.elapsed_ms() > self.warn_threshold_ms

    def elapsed_ms(self) -> float:
        if self._started is None:
            return 0.0
        end = self._stopped if self._stopped is not None else time.perf_counter()
        return (end - self._started) * 1000


class ParserLogger:
    """Levelled logger for a single parse run."""

    def __init__(self, name: str, level: LogLevel = LogLevel.STANDARD, verbose: bool = False):
        self.name = name
        self.level = LogLevel.VERBOSE if verbose else level
        self.metrics: Dict[str, Any] = {}
        self.timers: Dict[str, PerformanceTimer] = {}

    def _emit(self, log_level: int, message: str, required: LogLevel):
        if self.level.value >= required.value:
            logger.log(log_level, f"[{self.name}] {message}")

    def debug(self, message: str):
        self._emit(logging.DEBUG, message, LogLevel.VERBOSE)

    def phase(self, message: str):
        """Stage transitions, shown only when verbose."""
        self._emit(logging.INFO, message, LogLevel.VERBOSE)

    def success(self, message: str):
        self._emit(logging.INFO, message, LogLevel.STANDARD)

    def warning(self, message: str, required: LogLevel = LogLevel.MINIMAL):
        self._emit(logging.WARNING, message, required)

    def metric(self, key: str, value: Any):
        self.metrics[key] = value
        self.debug(f"{key}: {value}")

    @contextmanager
    def timer(self, operation: str, warn_threshold_ms: float = 1500):
        """Time a block of work under `operation`."""
        timer = PerformanceTimer(operation, warn_threshold_ms)
        self.timers[operation] = timer
        with timer:
            yield timer
        if not timer.is_slow:
            self.debug(f"{operation} completed in {timer.elapsed_ms():.0f}ms")

    def block_decision(self, line_indices: Iterable[int], kept: bool, type_name: Optional[str],
                       due_date: Optional[str], confidence: Optional[float] = None):
        """Record what happened to one segmented block."""
        lines = ",".join(str(i) for i in line_indices)
        if not kept:
            self.debug(f"  lines [{lines}] dropped: no type, date or chapter reference")
            return

        score = f"{confidence:.2f}" if confidence is not None else "n/a"
        self.debug(f"  lines [{lines}] -> {type_name or 'homework (default)'}, due {due_date}, confidence {score}")
        if confidence is not None and confidence < ReviewConfig.REVIEW_THRESHOLD:
            self.warning(f"Low-confidence record from lines [{lines}]", LogLevel.VERBOSE)

    def get_summary(self) -> str:
        """Metrics and timings of the run as a printable block."""
        rule = "=" * 60
        out = ["", rule, f"Parse Metrics: {self.name}", rule]
        out.extend(f"  {key}: {value}" for key, value in self.metrics.items())
        if self.timers:
            out.append("\nOperation Timings:")
            out.extend(f"  {op}: {t.elapsed_ms():.0f}ms" for op, t in self.timers.items())
        out.append(rule)
        return "\n".join(out)


def create_logger(name: str, level: LogLevel = LogLevel.STANDARD,
                  verbose: bool = False) -> ParserLogger:
    return ParserLogger(name, level, verbose)
