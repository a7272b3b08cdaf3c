"""Timing spans for outbound calls."""

import time
from contextlib import contextmanager
from typing import Iterator

from recipe_finder.logging import get_logger

logger = get_logger(__name__)

# Prefix for all timing logs so they are easy to grep
_TIMING_PREFIX = "[TIMING]"


def _format_duration(ms: int) -> str:
    """Return human-readable duration: e.g. 12500 -> '12.5s', 750 -> '750ms'."""
    if ms >= 1000:
        return f"{ms / 1000:.1f}s"
    return f"{ms}ms"


class Span:
    """Elapsed-time holder yielded by time_span; `ok` can be cleared by the caller."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.ok = True
        self._start = time.perf_counter()
        self.elapsed_ms: int | None = None

    def finish(self) -> int:
        self.elapsed_ms = int((time.perf_counter() - self._start) * 1000)
        return self.elapsed_ms


@contextmanager
def time_span(name: str, **extra: object) -> Iterator[Span]:
    """Time a block and log it with optional key=value fields."""
    span = Span(name)
    try:
        yield span
    except BaseException:
        span.ok = False
        raise
    finally:
        elapsed = span.finish()
        parts = [f"elapsed_ms={elapsed}", f"({_format_duration(elapsed)})", f"ok={span.ok}"] + [
            f"{k}={v}" for k, v in extra.items()
        ]
        logger.info("%s %s %s", _TIMING_PREFIX, name, " ".join(parts))
