from __future__ import annotations

import os
from typing import Any, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

from .base import ExtractTally, Reporter, get_verbosity, summary_line


def _transient_from_env() -> bool:
    return os.getenv("WADKIT_PROGRESS_TRANSIENT", "0").lower() in (
        "1",
        "true",
        "yes",
    )


class RichReporter(Reporter):
    """Console reporter with a progress bar while lumps are extracted.

    With ``WADKIT_PROGRESS_TRANSIENT`` set the bar is cleared when extraction
    ends and the completion line is printed on ``flush``.
    """

    def __init__(self, console: Console | None = None):
        super().__init__()
        self.console = console or Console(
            stderr=True, highlight=False, soft_wrap=False
        )
        self._transient = _transient_from_env()
        self._progress: Progress | None = None
        self._bar: TaskID | None = None
        self._deferred: List[str] = []

    def status(self, message: str) -> None:
        self.console.print(f"[green]INFO[/]: {escape(message)}")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]WARN[/]: {escape(message)}")

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]ERROR[/]: {escape(message)}")

    def verbose(self, message: str, *, level: int = 1) -> None:
        if get_verbosity() >= level:
            self.console.print(f"[cyan]VERB{level}[/]: {escape(message)}")

    def section(self, title: str) -> None:
        self.console.rule(escape(title))

    def summary(self, command: str, **counts: Any) -> None:
        self.status(summary_line(command, counts))

    def on_extract_begin(self, tally: ExtractTally) -> None:
        self._progress = Progress(
            SpinnerColumn(spinner_name="dots"),
            TextColumn("{task.description}", justify="left"),
            BarColumn(bar_width=None),
            TextColumn("{task.completed}/{task.total}"),
            TimeElapsedColumn(),
            transient=self._transient,
            console=self.console,
            expand=True,
        )
        self._progress.start()
        self._bar = self._progress.add_task(
            f"Extract {escape(tally.wad)}", total=tally.total
        )

    def on_lump(
        self, tally: ExtractTally, name: str, file_name: Optional[str]
    ) -> None:
        if self._progress is None or self._bar is None:
            return
        self._progress.update(
            self._bar,
            completed=tally.done,
            description=f"Extract {escape(tally.wad)} ↳ {escape(name)}",
        )

    def on_extract_end(self, tally: ExtractTally) -> None:
        icon = "[red]✖[/]" if tally.failed else "[green]✔[/]"
        line = (
            f"{icon} Extract {escape(tally.wad)} {tally.done}/{tally.total} "
            f"({tally.seconds:.2f}s) "
            + escape(f"[bytes={tally.bytes} markers={tally.markers}]")
        )
        self._stop_progress()
        if self._transient:
            self._deferred.append(line)
        else:
            self.console.print(line)

    def _stop_progress(self) -> None:
        if self._progress is not None:
            try:
                self._progress.stop()
            finally:
                self._progress = None
                self._bar = None

    def flush(self) -> None:
        self._stop_progress()
        if self._deferred:
            self.console.print("\n".join(self._deferred))
            self._deferred.clear()
