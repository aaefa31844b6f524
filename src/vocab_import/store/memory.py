"""In-memory library store that assigns identifiers to imported corpora.

The store is the consumer of ``ImportSuccess`` values: it numbers the library,
its chapters, groups and entries, and links every group to its chapter with
``group_index // GROUPS_PER_CHAPTER``.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import count
import logging
from pathlib import Path
from typing import Iterable, Protocol, Sequence

from vocab_import.models import (
    GROUPS_PER_CHAPTER,
    Chapter,
    Entry,
    Group,
    ImportFailure,
    ImportSuccess,
    Library,
)
from vocab_import.pipeline import import_from_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredLibrary:
    """Library with its assigned identifier."""

    library_id: int
    library: Library


@dataclass(frozen=True)
class StoredChapter:
    """Chapter with assigned identifiers."""

    chapter_id: int
    library_id: int
    chapter: Chapter


@dataclass(frozen=True)
class StoredGroup:
    """Group with assigned identifiers and its owning chapter."""

    group_id: int
    library_id: int
    chapter_id: int
    group: Group


@dataclass(frozen=True)
class StoredEntry:
    """Entry with assigned identifiers."""

    entry_id: int
    library_id: int
    entry: Entry


class LibraryStore(Protocol):
    """Contract for stores that persist successful imports."""

    def save(self, success: ImportSuccess) -> int:
        """Persist an import and return the new library identifier."""


class InMemoryLibraryStore:
    """Library store keeping all records in process memory."""

    def __init__(self) -> None:
        self._ids = count(1)
        self._libraries: dict[int, StoredLibrary] = {}
        self._chapters: dict[int, list[StoredChapter]] = {}
        self._groups: dict[int, list[StoredGroup]] = {}
        self._entries: dict[int, list[StoredEntry]] = {}
        self._bootstrapped = False

    def save(self, success: ImportSuccess) -> int:
        """Persist one import result.

        Args:
            success: Outcome of a successful pipeline run.

        Returns:
            Identifier assigned to the new library.

        Raises:
            ValueError: If a group refers to a chapter that was not supplied.
        """

        library_id = next(self._ids)
        chapters = [
            StoredChapter(next(self._ids), library_id, chapter) for chapter in success.chapters
        ]

        groups: list[StoredGroup] = []
        for group in success.groups:
            chapter_index = group.group_index // GROUPS_PER_CHAPTER
            if chapter_index >= len(chapters):
                raise ValueError(
                    f"Group {group.group_index} maps to missing chapter index {chapter_index}"
                )
            chapter_id = chapters[chapter_index].chapter_id
            groups.append(StoredGroup(next(self._ids), library_id, chapter_id, group))

        self._libraries[library_id] = StoredLibrary(library_id, success.library)
        self._chapters[library_id] = chapters
        self._groups[library_id] = groups
        self._entries[library_id] = [
            StoredEntry(next(self._ids), library_id, entry) for entry in success.entries
        ]
        return library_id

    def bootstrap(self, sources: Sequence[tuple[Path, str]]) -> list[int]:
        """Import bundled default corpora once.

        Failed sources are logged and skipped. Once the loop completes, a
        repeated call does nothing.

        Args:
            sources: ``(path, library_name)`` pairs to import in order.

        Returns:
            Identifiers of the libraries created by this call.
        """

        if self._bootstrapped:
            return []

        created: list[int] = []
        for path, library_name in sources:
            outcome = import_from_path(path, library_name)
            if isinstance(outcome, ImportFailure):
                logger.warning("Skipping bundled library %r: %s", library_name, outcome.message)
                continue
            try:
                created.append(self.save(outcome))
            except ValueError as exc:
                logger.warning("Skipping bundled library %r: %s", library_name, exc)
                continue
            logger.info(
                "Bundled library %r stored with %d entries", library_name, outcome.imported_count
            )
        self._bootstrapped = True
        return created

    def libraries(self) -> list[StoredLibrary]:
        """Return stored libraries in creation order."""

        return list(self._libraries.values())

    def chapters_for(self, library_id: int) -> list[StoredChapter]:
        return list(self._chapters.get(library_id, []))

    def groups_for(self, library_id: int) -> list[StoredGroup]:
        return list(self._groups.get(library_id, []))

    def entries_for(
        self, library_id: int, group_indexes: Iterable[int] | None = None
    ) -> list[StoredEntry]:
        """Return stored entries of a library, optionally limited to groups.

        Args:
            library_id: Library identifier returned by :meth:`save`.
            group_indexes: 0-based group indexes to keep; ``None`` keeps all.

        Returns:
            Entries in their original order.
        """

        entries = self._entries.get(library_id, [])
        if group_indexes is None:
            return list(entries)
        wanted = set(group_indexes)
        return [item for item in entries if item.entry.group_index in wanted]
