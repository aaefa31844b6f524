"""Data models used across import pipeline stages.

This module defines explicit immutable contracts between stages so each stage
has a narrow, testable interface and downstream code can rely on stable fields.
The final outcome of a run is a two-variant union: ``ImportSuccess`` or
``ImportFailure``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

WORDS_PER_GROUP = 50
GROUPS_PER_CHAPTER = 10


@dataclass(frozen=True)
class RawPair:
    """Stage 1 pair extracted from a source file before any classification.

    Both fields are already trimmed by the format parser that produced them.
    """

    headword_raw: str
    meaning_raw: str


@dataclass(frozen=True)
class ClassifiedEntry:
    """Stage 2 entry after deduplication, script and meaning classification.

    The entry carries everything a final ``Entry`` needs except its group.
    """

    display_form: str
    original_form: str
    meaning: str
    part_of_speech: str
    is_non_latin_script: bool


@dataclass(frozen=True)
class Entry:
    """Stage 3 entry with group membership assigned.

    ``original_form`` keeps the source headword verbatim, while
    ``display_form`` holds the kana reading for Japanese headwords and equals
    ``original_form`` otherwise.
    """

    display_form: str
    original_form: str
    meaning: str
    part_of_speech: str
    is_non_latin_script: bool
    group_index: int


@dataclass(frozen=True)
class Group:
    """Fixed-size study unit identified by its 0-based index."""

    group_index: int
    entry_count: int


@dataclass(frozen=True)
class Chapter:
    """Run of consecutive groups, numbered from 1.

    ``group_range`` holds the inclusive 0-based ``(first, last)`` group indexes.
    """

    chapter_number: int
    title: str
    group_range: tuple[int, int]

    @property
    def group_count(self) -> int:
        """Return the number of groups covered by the chapter."""

        return self.group_range[1] - self.group_range[0] + 1


@dataclass(frozen=True)
class Library:
    """Aggregate counters describing one imported corpus."""

    name: str
    word_count: int
    group_count: int
    chapter_count: int


@dataclass(frozen=True)
class PartitionResult:
    """Stage 3 output bundle of partitioned entries, groups and chapters."""

    entries: tuple[Entry, ...]
    groups: tuple[Group, ...]
    chapters: tuple[Chapter, ...]


class FailureKind(str, Enum):
    """Categories of pipeline-fatal conditions."""

    UNSUPPORTED_FORMAT = "unsupported_format"
    EMPTY_FILE = "empty_file"
    UNREADABLE_SOURCE = "unreadable_source"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True)
class ImportSuccess:
    """Successful import carrying the full partitioned corpus.

    Attributes:
        library: Aggregate library counters.
        entries: Entries in first-appearance order.
        groups: Groups in ``group_index`` order.
        chapters: Chapters in ``chapter_number`` order.
        imported_count: Number of entries kept.
        skipped_count: Number of duplicate headwords dropped.
    """

    library: Library
    entries: tuple[Entry, ...]
    groups: tuple[Group, ...]
    chapters: tuple[Chapter, ...]
    imported_count: int
    skipped_count: int

    @property
    def library_name(self) -> str:
        """Return the display name of the imported library."""

        return self.library.name


@dataclass(frozen=True)
class ImportFailure:
    """Failed import; no partial corpus is ever attached."""

    kind: FailureKind
    message: str


ImportOutcome = Union[ImportSuccess, ImportFailure]
