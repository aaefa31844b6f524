"""TSV write helpers for imported entry artifacts."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from vocab_import.models import Entry

TSV_HEADER = [
    "group_index",
    "original_form",
    "display_form",
    "part_of_speech",
    "meaning",
    "is_non_latin_script",
]


def _escape(value: str) -> str:
    """Keep multi-sense meanings on one TSV line."""

    return value.replace("\t", " ").replace("\n", "\\n")


def write_tsv(entries: Sequence[Entry], output_path: Path, include_header: bool = True) -> None:
    """Write entries to a TSV file using the canonical column order.

    Args:
        entries: Imported entries to serialize.
        output_path: Destination TSV file path.
        include_header: Whether to include a header row.
    """

    with output_path.open("w", encoding="utf-8") as handle:
        if include_header:
            handle.write("\t".join(TSV_HEADER))
            handle.write("\n")
        for entry in entries:
            handle.write(
                "\t".join(
                    [
                        str(entry.group_index),
                        _escape(entry.original_form),
                        _escape(entry.display_form),
                        entry.part_of_speech,
                        _escape(entry.meaning),
                        "1" if entry.is_non_latin_script else "0",
                    ]
                )
            )
            handle.write("\n")
