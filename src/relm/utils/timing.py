"""src/relm/utils/timing.py
Wall-clock measurement kept outside the numerical core.

Models accept an optional ``timing_hook(event, seconds)``; the Stopwatch below
is what drives it. Callers that want their own deadlines wrap calls themselves.
"""
from __future__ import annotations

import time
from typing import Optional

from relm.core.types import TimingHook


class Stopwatch:
    """Context manager measuring elapsed seconds and reporting them to a hook."""

    def __init__(self, event: str, hook: Optional[TimingHook] = None) -> None:
        self.event = event
        self.hook = hook
        self.elapsed: Optional[float] = None
        self._start: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self._start
        # failed calls are not reported
        if exc_type is None and self.hook is not None:
            self.hook(self.event, self.elapsed)


class TimingRecorder:
    """Collects hook events, e.g. ``RegularizedELM(..., timing_hook=recorder)``."""

    def __init__(self) -> None:
        self.events: list[tuple[str, float]] = []

    def __call__(self, event: str, seconds: float) -> None:
        self.events.append((event, float(seconds)))

    def last(self, event: str) -> Optional[float]:
        for name, seconds in reversed(self.events):
            if name == event:
                return seconds
        return None


__all__ = ["Stopwatch", "TimingRecorder"]
