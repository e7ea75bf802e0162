"""Console, JSON-lines and quiet reporters for wadkit commands."""

from .base import (
    Reporter,
    SilentReporter,
    extraction,
    get_reporter,
    get_verbosity,
    set_reporter,
    set_verbosity,
)
from .jsonl import JsonLinesReporter
from .plain import PlainReporter
from .rich_reporter import RichReporter

__all__ = [
    "Reporter",
    "SilentReporter",
    "PlainReporter",
    "JsonLinesReporter",
    "RichReporter",
    "extraction",
    "get_reporter",
    "set_reporter",
    "get_verbosity",
    "set_verbosity",
]
