"""Stage 1: Select a format parser and extract raw headword/meaning pairs.

Dispatch is driven by the declared file extension or format hint. Each parser
decodes the buffer on its own and yields trimmed ``RawPair`` values in source
order.
"""

from __future__ import annotations

from enum import Enum
import logging

from vocab_import.errors import EmptyFileError, UnsupportedFormatError
from vocab_import.models import RawPair
from vocab_import.parsers.delimited import parse_delimited
from vocab_import.parsers.plain_text import parse_plain_text
from vocab_import.parsers.spreadsheet import parse_spreadsheet

logger = logging.getLogger(__name__)


class SourceFormat(str, Enum):
    """Source file formats understood by the pipeline."""

    PLAIN_TEXT = "txt"
    CSV = "csv"
    TSV = "tsv"
    XLS = "xls"
    XLSX = "xlsx"


def resolve_format(file_name_or_hint: str) -> SourceFormat:
    """Resolve a file name, extension or bare format name to a format.

    ``words.TXT``, ``.txt`` and ``txt`` all resolve to plain text.

    Args:
        file_name_or_hint: File name or format hint supplied by the caller.

    Returns:
        Matching ``SourceFormat``.

    Raises:
        UnsupportedFormatError: If nothing matches.
    """

    hint = file_name_or_hint.strip().lower()
    suffix = hint.rsplit(".", 1)[-1]
    try:
        return SourceFormat(suffix)
    except ValueError:
        raise UnsupportedFormatError(f"Unsupported file type: {file_name_or_hint!r}") from None


def extract_raw_pairs(
    data: bytes,
    file_name_or_hint: str,
    delimiter: str = ",",
) -> list[RawPair]:
    """Extract raw pairs from a buffered source file.

    Args:
        data: Entire source content.
        file_name_or_hint: File name or format hint used for dispatch.
        delimiter: Field separator for CSV sources; TSV always uses a tab.

    Returns:
        Pairs in source order with malformed rows already dropped.

    Raises:
        UnsupportedFormatError: If the format cannot be resolved.
        EmptyFileError: If ``data`` is empty or no usable rows were found.
    """

    source_format = resolve_format(file_name_or_hint)
    logger.debug("Dispatching %r as %s", file_name_or_hint, source_format.value)
    if not data:
        raise EmptyFileError("File is empty")

    if source_format is SourceFormat.PLAIN_TEXT:
        pairs = list(parse_plain_text(data))
    elif source_format is SourceFormat.CSV:
        pairs = list(parse_delimited(data, delimiter=delimiter))
    elif source_format is SourceFormat.TSV:
        pairs = list(parse_delimited(data, delimiter="\t"))
    else:
        pairs = list(parse_spreadsheet(data, legacy=source_format is SourceFormat.XLS))

    if not pairs:
        raise EmptyFileError("No usable rows found")
    return pairs
