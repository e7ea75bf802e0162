"""Path utilities (safe resolution)."""

from __future__ import annotations
from pathlib import Path

__all__ = ["safe_file_path", "lump_file_name"]

_UNSAFE = set('<>:"/\\|?*')


def safe_file_path(base_dir: Path, file_path: str) -> Path:
    base_dir = base_dir.resolve()
    resolved = (base_dir / file_path).resolve()
    resolved.relative_to(base_dir)  # raises ValueError if escapes
    return resolved


def lump_file_name(name: str, index: int, suffix: str = ".lmp") -> str:
    """File name for an extracted lump, with path-hostile characters replaced."""
    cleaned = "".join("_" if c in _UNSAFE or ord(c) < 32 else c for c in name)
    if not cleaned or cleaned in (".", ".."):
        cleaned = f"lump{index}"
    return f"{cleaned}{suffix}"
