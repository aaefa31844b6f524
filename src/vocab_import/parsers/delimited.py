"""Delimiter-separated table parser (CSV, TSV and similar)."""

from __future__ import annotations

import csv
import io
from typing import Iterator

from vocab_import.errors import EmptyFileError
from vocab_import.io.charset import decode_bytes
from vocab_import.models import RawPair

HEADWORD_COLUMN = 0
MEANING_COLUMN = 1


def parse_delimited(data: bytes, delimiter: str = ",") -> Iterator[RawPair]:
    """Yield headword/meaning pairs from a delimited text buffer.

    Column 0 holds the headword and column 1 the meaning; further columns are
    ignored. Quoted fields may contain delimiters and line breaks.

    Args:
        data: Raw file content of unknown encoding.
        delimiter: Single field separator character.

    Yields:
        Pairs in source order; short rows and rows with a blank cell are
        skipped silently.

    Raises:
        ValueError: If ``delimiter`` is not a single character.
        EmptyFileError: If the buffer contains no rows at all.
    """

    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")

    reader = csv.reader(io.StringIO(decode_bytes(data), newline=""), delimiter=delimiter)
    rows = [row for row in reader if row]
    if not rows:
        raise EmptyFileError("File is empty")

    for row in rows:
        if len(row) < 2:
            continue
        headword = row[HEADWORD_COLUMN].strip()
        meaning = row[MEANING_COLUMN].strip()
        if not headword or not meaning:
            continue
        yield RawPair(headword, meaning)
