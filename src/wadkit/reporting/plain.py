from __future__ import annotations

import sys
from typing import Any, Optional

from .base import ExtractTally, Reporter, get_verbosity, summary_line


class PlainReporter(Reporter):
    """Line-oriented reporter; ANSI color only when the stream is a TTY."""

    def __init__(self, stream=None, use_color: bool | None = None):
        super().__init__()
        self.stream = stream or sys.stderr
        if use_color is None:
            use_color = getattr(self.stream, "isatty", lambda: False)()
        self.use_color = use_color

    def _write(self, label: str, color: str, message: str) -> None:
        if self.use_color:
            label = f"\x1b[{color}m{label}\x1b[0m"
        self.stream.write(f"{label}: {message}\n")

    def status(self, message: str) -> None:
        self._write("INFO", "32", message)

    def warning(self, message: str) -> None:
        self._write("WARN", "33", message)

    def error(self, message: str) -> None:
        self._write("ERROR", "31", message)

    def verbose(self, message: str, *, level: int = 1) -> None:
        if get_verbosity() >= level:
            self._write(f"VERB{level}", "36", message)

    def section(self, title: str) -> None:
        self.stream.write(f"\n[{title}]\n")

    def summary(self, command: str, **counts: Any) -> None:
        self.status(summary_line(command, counts))

    def on_lump(
        self, tally: ExtractTally, name: str, file_name: Optional[str]
    ) -> None:
        # one line per lump only at -v
        if get_verbosity() < 1:
            return
        target = f"-> {file_name}" if file_name else "(marker, skipped)"
        self.stream.write(f"   · {name} {target} ({tally.done}/{tally.total})\n")

    def on_extract_end(self, tally: ExtractTally) -> None:
        icon = "✖" if tally.failed else "✔"
        self.stream.write(
            f" {icon} Extract {tally.wad} {tally.done}/{tally.total} "
            f"({tally.seconds:.2f}s) [bytes={tally.bytes} markers={tally.markers}]\n"
        )
