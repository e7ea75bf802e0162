"""Reporter interface for wadkit commands.

A reporter receives three kinds of events: messages routed from the
``wadkit`` logger, per-lump events while lumps are extracted, and one
summary per command. The base class keeps the extraction tally and renders
nothing, so it doubles as the quiet reporter; backends override the
``on_*`` hooks and the message methods they display.
"""

from __future__ import annotations

import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional

__all__ = [
    "ExtractTally",
    "Reporter",
    "SilentReporter",
    "extraction",
    "get_reporter",
    "get_verbosity",
    "set_reporter",
    "set_verbosity",
    "summary_line",
]


@dataclass(slots=True)
class ExtractTally:
    wad: str
    total: int
    files: int = 0
    bytes: int = 0
    markers: int = 0
    failed: bool = False
    started: float = field(default_factory=time.monotonic)
    finished: Optional[float] = None

    @property
    def done(self) -> int:
        return self.files + self.markers

    @property
    def seconds(self) -> float:
        return (self.finished or time.monotonic()) - self.started


def summary_line(command: str, counts: Dict[str, Any]) -> str:
    """``"Extract summary: files=3 bytes=120"`` style line for text backends."""
    pairs = " ".join(f"{k}={v}" for k, v in counts.items())
    return f"{command.capitalize()} summary: {pairs}"


_VERBOSITY: int = 0  # set by the CLI (-v repeats)


def set_verbosity(level: int) -> None:
    global _VERBOSITY
    _VERBOSITY = max(0, level)


def get_verbosity() -> int:
    return _VERBOSITY


class Reporter:
    def __init__(self) -> None:
        self.tally: Optional[ExtractTally] = None

    def status(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def verbose(self, message: str, *, level: int = 1) -> None:
        pass

    def section(self, title: str) -> None:
        pass

    def summary(self, command: str, **counts: Any) -> None:
        pass

    def flush(self) -> None:
        pass

    def begin_extract(self, wad: str, total: int) -> None:
        self.tally = ExtractTally(wad, total)
        self.on_extract_begin(self.tally)

    def lump_extracted(self, name: str, file_name: str, size: int) -> None:
        if self.tally is None:
            return
        self.tally.files += 1
        self.tally.bytes += size
        self.on_lump(self.tally, name, file_name)

    def marker_skipped(self, name: str) -> None:
        if self.tally is None:
            return
        self.tally.markers += 1
        self.on_lump(self.tally, name, None)

    def end_extract(self, failed: bool = False) -> None:
        tally, self.tally = self.tally, None
        if tally is None:
            return
        tally.failed = failed
        tally.finished = time.monotonic()
        self.on_extract_end(tally)

    def on_extract_begin(self, tally: ExtractTally) -> None:
        pass

    def on_lump(
        self, tally: ExtractTally, name: str, file_name: Optional[str]
    ) -> None:
        """``file_name`` is None for a skipped marker."""

    def on_extract_end(self, tally: ExtractTally) -> None:
        pass


class SilentReporter(Reporter):
    """Quiet mode."""


_ACTIVE_REPORTER: Reporter | None = None


def set_reporter(rep: Reporter) -> None:
    global _ACTIVE_REPORTER
    _ACTIVE_REPORTER = rep


def get_reporter() -> Reporter:
    global _ACTIVE_REPORTER
    if _ACTIVE_REPORTER is None:
        from .plain import PlainReporter  # local import to avoid cycle

        _ACTIVE_REPORTER = PlainReporter(stream=sys.stderr)
    return _ACTIVE_REPORTER


@contextmanager
def extraction(wad: str, total: int) -> Iterator[Reporter]:
    rep = get_reporter()
    rep.begin_extract(wad, total)
    try:
        yield rep
    except Exception:
        rep.end_extract(failed=True)
        raise
    rep.end_extract()
