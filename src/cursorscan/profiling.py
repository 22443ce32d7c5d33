"""cursorscan ScanAccumulator — opt-in profiling for scanning primitives.

This module provides accumulated metrics while scanning:
- Number of primitive calls (total and per primitive)
- How many of those calls advanced the cursor
- Elements skipped by scan_while_excluding

Near-zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from cursorscan import scan_while_excluding, bind, scan
    from cursorscan.profiling import profiled_scan

    with profiled_scan() as metrics:
        scan_while_excluding("a, b; c", bind(scan, ";"))

    print(metrics.summary())
    # {"total_ms": 0.03, "calls": 6, "advances": 2, "steps": 4, ...}

"""

from collections import Counter
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics for scanning primitive calls.

    Attributes:
        start_time: Profiling start timestamp.
        calls: Number of primitive calls recorded.
        advances: Number of calls that returned an advanced cursor.
        steps: Elements skipped by scan_while_excluding loops.
        by_name: Call count per primitive name.

    """

    start_time: float = field(default_factory=perf_counter)
    calls: int = 0
    advances: int = 0
    steps: int = 0
    by_name: Counter[str] = field(default_factory=Counter)

    def record_call(self, name: str, advanced: bool) -> None:
        """Record one primitive call.

        Args:
            name: Primitive name (e.g., "scan_if").
            advanced: Whether the returned cursor differs from the input.

        """
        self.calls += 1
        self.by_name[name] += 1
        if advanced:
            self.advances += 1

    def record_steps(self, steps: int) -> None:
        """Record elements skipped by a looping primitive."""
        self.steps += steps

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, calls, advances, steps, by_name.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "calls": self.calls,
            "advances": self.advances,
            "steps": self.steps,
            "by_name": dict(self.by_name),
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated by primitive calls.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)


__all__ = [
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
