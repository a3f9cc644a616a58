"""File helpers shared by CLI commands."""

from pathlib import Path


def read_source(path: Path) -> str:
    """Read a source file without newline translation, so CRLF survives."""
    with path.open("r", encoding="utf-8", newline="") as handle:
        return handle.read()


def write_source(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as handle:
        handle.write(text)
