"""Top-level orchestration for the single-shot vocabulary import pipeline."""

from __future__ import annotations

import logging
from pathlib import Path

from vocab_import.errors import EmptyFileError, VocabImportError
from vocab_import.io.source import read_source
from vocab_import.models import (
    FailureKind,
    ImportFailure,
    ImportOutcome,
    ImportSuccess,
    Library,
)
from vocab_import.stages.stage1_extract import extract_raw_pairs
from vocab_import.stages.stage2_classify import classify_pairs
from vocab_import.stages.stage3_partition import partition_entries
from vocab_import.validation import validate_entries, validate_partition

logger = logging.getLogger(__name__)


def run_pipeline(
    data: bytes,
    file_name_or_hint: str,
    library_name: str,
    delimiter: str = ",",
) -> ImportSuccess:
    """Execute all pipeline stages from raw bytes to a partitioned corpus.

    Args:
        data: Entire source content.
        file_name_or_hint: File name or format hint used for dispatch.
        library_name: Display name of the resulting library.
        delimiter: Field separator for CSV sources.

    Returns:
        ``ImportSuccess`` with entries, groups, chapters and counters.

    Raises:
        VocabImportError: For unsupported formats and empty sources.
        Exception: Any decode or parse error from the underlying readers.
    """

    raw_pairs = extract_raw_pairs(data, file_name_or_hint, delimiter=delimiter)
    entries, skipped_count = classify_pairs(raw_pairs)
    if not entries:
        raise EmptyFileError("No usable rows found")

    result = partition_entries(entries)
    validate_entries(result.entries)
    validate_partition(result)

    library = Library(
        name=library_name,
        word_count=len(result.entries),
        group_count=len(result.groups),
        chapter_count=len(result.chapters),
    )
    logger.info(
        "Imported %d entries into %r (%d groups, %d chapters, %d duplicates skipped)",
        library.word_count,
        library_name,
        library.group_count,
        library.chapter_count,
        skipped_count,
    )
    return ImportSuccess(
        library=library,
        entries=result.entries,
        groups=result.groups,
        chapters=result.chapters,
        imported_count=len(result.entries),
        skipped_count=skipped_count,
    )


def import_from_bytes(
    data: bytes,
    file_name_or_hint: str,
    library_name: str,
    delimiter: str = ",",
) -> ImportOutcome:
    """Import a buffered vocabulary file without raising.

    Args:
        data: Entire source content; may be empty.
        file_name_or_hint: File name (``words.csv``), extension (``.csv``) or
            format name (``csv``).
        library_name: Display name of the resulting library.
        delimiter: Field separator, only consulted for CSV sources.

    Returns:
        ``ImportSuccess`` or ``ImportFailure``; never a partial corpus.
    """

    try:
        return run_pipeline(data, file_name_or_hint, library_name, delimiter=delimiter)
    except VocabImportError as exc:
        logger.warning("Import of %r failed: %s", file_name_or_hint, exc)
        return ImportFailure(kind=exc.kind, message=str(exc))
    except Exception as exc:
        logger.warning("Import of %r failed while parsing: %s", file_name_or_hint, exc)
        return ImportFailure(kind=FailureKind.PARSE_ERROR, message=f"Import failed: {exc}")


def import_from_path(
    path: Path,
    library_name: str | None = None,
    delimiter: str = ",",
) -> ImportOutcome:
    """Read a vocabulary file from disk and import it.

    Args:
        path: Source file; its name drives format dispatch.
        library_name: Display name; defaults to the file stem.
        delimiter: Field separator, only consulted for CSV sources.

    Returns:
        ``ImportSuccess`` or ``ImportFailure``.
    """

    name = library_name if library_name is not None else path.stem
    try:
        data = read_source(path)
    except VocabImportError as exc:
        logger.warning("Import of %s failed: %s", path, exc)
        return ImportFailure(kind=exc.kind, message=str(exc))
    return import_from_bytes(data, path.name, name, delimiter=delimiter)
