"""Spreadsheet workbook parser for ``.xlsx`` and legacy ``.xls`` files.

The reader is chosen from the content signature, so workbooks with a
mismatched extension still open. Only the first worksheet is read. Rows need
at least two non-empty physical cells; cells 0 and 1 are taken as headword
and meaning.
"""

from __future__ import annotations

import io
from typing import Iterable, Iterator, Sequence

import openpyxl
import xlrd

from vocab_import.models import RawPair

OOXML_SIGNATURE = b"PK\x03\x04"
BIFF_SIGNATURE = b"\xd0\xcf\x11\xe0"


def cell_text(value: object) -> str:
    """Render a cell value as trimmed text.

    Numeric cells arrive as floats from ``xlrd`` and sometimes from
    ``openpyxl``; integral values are rendered without a fractional part so a
    headword like ``2024`` does not become ``2024.0``.

    Args:
        value: Raw cell value, possibly ``None``.

    Returns:
        Cell text with surrounding whitespace removed.
    """

    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _pairs_from_rows(rows: Iterable[Sequence[object]]) -> Iterator[RawPair]:
    """Turn positional row values into pairs, skipping malformed rows."""

    for row in rows:
        physical = [value for value in row if value is not None and value != ""]
        if len(physical) < 2 or len(row) < 2:
            continue
        headword = cell_text(row[0])
        meaning = cell_text(row[1])
        if not headword or not meaning:
            continue
        yield RawPair(headword, meaning)


def _xlsx_rows(data: bytes) -> list[tuple[object, ...]]:
    """Read first-sheet row values from an Office Open XML workbook."""

    workbook = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        return [tuple(row) for row in sheet.iter_rows(values_only=True)]
    finally:
        workbook.close()


def _xls_rows(data: bytes) -> list[tuple[object, ...]]:
    """Read first-sheet row values from a legacy BIFF workbook."""

    book = xlrd.open_workbook(file_contents=data)
    try:
        sheet = book.sheet_by_index(0)
        rows: list[tuple[object, ...]] = []
        for row_idx in range(sheet.nrows):
            rows.append(
                tuple(
                    None if cell.ctype in (xlrd.XL_CELL_EMPTY, xlrd.XL_CELL_BLANK) else cell.value
                    for cell in sheet.row(row_idx)
                )
            )
        return rows
    finally:
        book.release_resources()


def is_legacy_workbook(data: bytes, legacy_hint: bool = False) -> bool:
    """Decide which reader a workbook needs from its leading bytes.

    Zip containers are OOXML and OLE2 compound files are BIFF, whatever the
    file extension says. Unknown signatures fall back to ``legacy_hint``.

    Args:
        data: Raw workbook bytes.
        legacy_hint: Whether the file extension was ``.xls``.

    Returns:
        ``True`` when the workbook should be read with ``xlrd``.
    """

    if data.startswith(OOXML_SIGNATURE):
        return False
    if data.startswith(BIFF_SIGNATURE):
        return True
    return legacy_hint


def parse_spreadsheet(data: bytes, legacy: bool = False) -> Iterator[RawPair]:
    """Yield headword/meaning pairs from the first sheet of a workbook.

    Args:
        data: Raw workbook bytes.
        legacy: Extension hint, ``True`` for ``.xls``. Only consulted when the
            content signature is neither OOXML nor BIFF.

    Yields:
        Pairs in row order.
    """

    rows = _xls_rows(data) if is_legacy_workbook(data, legacy) else _xlsx_rows(data)
    yield from _pairs_from_rows(rows)
