"""
Opt-in hot-path profiling for the parser and serializer.

Enabled by setting ``TINYJSON_PROFILE`` in the environment of a non-optimized
interpreter. When disabled ``ProfileContext`` is a no-op and no statistics
are kept.
"""

import logging
import os
import time
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

PROFILE_HOT_PATHS = __debug__ and "TINYJSON_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Accumulated timings for one instrumented parser or serializer step."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    symbols_processed: int = 0

    def record_call(self, duration_ns: int, symbols: int = 0) -> None:
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.symbols_processed += symbols

    @property
    def mean_time_ns(self) -> float:
        return self.total_time_ns / self.call_count if self.call_count else 0.0

    @property
    def symbols_per_second(self) -> float:
        """Throughput over the recorded calls; 0.0 before any time elapsed."""
        if not self.total_time_ns:
            return 0.0
        return self.symbols_processed * 1e9 / self.total_time_ns


_hot_path_stats: dict[str, HotPathStats] = {}


if PROFILE_HOT_PATHS:

    class ProfileContext:
        """Times the enclosed block under ``step``."""

        def __init__(self, step: str, symbols: int = 0) -> None:
            self.step = step
            self.symbols = symbols
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            stats = _hot_path_stats.get(self.step)
            if stats is None:
                stats = _hot_path_stats[self.step] = HotPathStats(self.step)
            stats.record_call(duration, self.symbols)

else:

    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, step: str, symbols: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the statistics gathered so far."""
    return _hot_path_stats.copy()


def clear_hot_path_stats() -> None:
    _hot_path_stats.clear()


def log_hot_path_stats(level: int = logging.INFO) -> None:
    """Logs one line per instrumented step, slowest total first."""
    ranked = sorted(
        _hot_path_stats.values(), key=lambda s: s.total_time_ns, reverse=True
    )
    for stats in ranked:
        logger.log(
            level,
            "%s: %d calls, %.0f ns mean, %d symbols",
            stats.function_name,
            stats.call_count,
            stats.mean_time_ns,
            stats.symbols_processed,
        )
