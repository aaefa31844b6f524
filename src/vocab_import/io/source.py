"""File source helpers that buffer a vocabulary file fully into memory."""

from __future__ import annotations

from pathlib import Path

from vocab_import.errors import UnreadableSourceError


def read_source(path: Path) -> bytes:
    """Read a source file completely.

    Args:
        path: File to read.

    Returns:
        Entire file content.

    Raises:
        UnreadableSourceError: If the file cannot be opened or read.
    """

    try:
        return path.read_bytes()
    except OSError as exc:
        raise UnreadableSourceError(f"Cannot read {path}: {exc}") from exc
