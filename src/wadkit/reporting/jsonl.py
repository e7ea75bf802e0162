from __future__ import annotations

import json
import sys
from typing import Any, Optional

from .base import ExtractTally, Reporter, get_verbosity


class JsonLinesReporter(Reporter):
    """One JSON object per line; every object carries an ``event`` key.

    Events: ``status`` (logger messages, with ``level``), ``section``,
    ``extract_start``, ``lump``, ``extract_end`` and ``summary``.
    """

    def __init__(self, stream=None):
        super().__init__()
        self.stream = stream or sys.stdout

    def _emit(self, event: str, **fields: Any) -> None:
        self.stream.write(json.dumps({"event": event, **fields}, sort_keys=True) + "\n")

    def status(self, message: str) -> None:
        self._emit("status", level="info", message=message)

    def warning(self, message: str) -> None:
        self._emit("status", level="warning", message=message)

    def error(self, message: str) -> None:
        self._emit("status", level="error", message=message)

    def verbose(self, message: str, *, level: int = 1) -> None:
        if get_verbosity() >= level:
            self._emit("status", level=f"verbose{level}", message=message)

    def section(self, title: str) -> None:
        self._emit("section", title=title)

    def summary(self, command: str, **counts: Any) -> None:
        self._emit("summary", summary_type=command, **counts)

    def on_extract_begin(self, tally: ExtractTally) -> None:
        self._emit("extract_start", wad=tally.wad, total=tally.total)

    def on_lump(
        self, tally: ExtractTally, name: str, file_name: Optional[str]
    ) -> None:
        self._emit(
            "lump",
            name=name,
            file=file_name,
            marker=file_name is None,
            done=tally.done,
            total=tally.total,
        )

    def on_extract_end(self, tally: ExtractTally) -> None:
        self._emit(
            "extract_end",
            status="failed" if tally.failed else "ok",
            files=tally.files,
            bytes=tally.bytes,
            markers=tally.markers,
            total=tally.total,
            duration_seconds=tally.seconds,
        )
