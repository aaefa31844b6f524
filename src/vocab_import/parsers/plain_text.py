"""Line-oriented plain text parser.

Each line holds a headword and a meaning separated by a tab or by a run of at
least two whitespace characters, full-width spaces included, for example
``abandon    v. 放弃``.
"""

from __future__ import annotations

import re
from typing import Iterator

from vocab_import.io.charset import decode_bytes
from vocab_import.models import RawPair

LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
COLUMN_SPLIT_RE = re.compile(r"\s{2,}|\t")


def split_line(line: str) -> RawPair | None:
    """Split one text line into a headword/meaning pair.

    Only the first separator is honored, so the meaning may itself contain
    wide gaps or tabs.

    Args:
        line: One decoded source line.

    Returns:
        Trimmed ``RawPair``, or ``None`` for blank or single-column lines.
    """

    if not line.strip():
        return None
    parts = COLUMN_SPLIT_RE.split(line, maxsplit=1)
    if len(parts) < 2:
        return None
    headword = parts[0].strip()
    meaning = parts[1].strip()
    if not headword or not meaning:
        return None
    return RawPair(headword, meaning)


def parse_plain_text(data: bytes) -> Iterator[RawPair]:
    """Yield headword/meaning pairs from a plain text buffer.

    Args:
        data: Raw file content of unknown encoding.

    Yields:
        Pairs in source order; malformed lines are skipped silently.
    """

    for line in LINE_BREAK_RE.split(decode_bytes(data)):
        pair = split_line(line)
        if pair is not None:
            yield pair
