"""Stage 3: Partition classified entries into groups and chapters."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from vocab_import.models import (
    GROUPS_PER_CHAPTER,
    WORDS_PER_GROUP,
    Chapter,
    ClassifiedEntry,
    Entry,
    Group,
    PartitionResult,
)


def chapter_title(chapter_number: int, first_group: int, last_group: int) -> str:
    """Build a chapter title such as ``第 1 章 (1-10组)``.

    Args:
        chapter_number: 1-based chapter number.
        first_group: 0-based index of the first covered group.
        last_group: 0-based index of the last covered group.

    Returns:
        Title with 1-based group numbers.
    """

    return f"第 {chapter_number} 章 ({first_group + 1}-{last_group + 1}组)"


def build_groups(entries: Sequence[Entry]) -> list[Group]:
    """Derive one group record per distinct group index.

    Args:
        entries: Entries with ``group_index`` assigned, in order.

    Returns:
        Groups in ascending index order.
    """

    counts = Counter(entry.group_index for entry in entries)
    return [Group(group_index=index, entry_count=counts[index]) for index in sorted(counts)]


def build_chapters(
    groups: Sequence[Group],
    groups_per_chapter: int = GROUPS_PER_CHAPTER,
) -> list[Chapter]:
    """Derive one chapter record per run of ``groups_per_chapter`` groups.

    Args:
        groups: Groups in ascending index order.
        groups_per_chapter: Maximum groups in one chapter.

    Returns:
        Chapters in ascending number order; only the last may be partial.
    """

    covered: dict[int, list[int]] = {}
    for group in groups:
        covered.setdefault(group.group_index // groups_per_chapter, []).append(group.group_index)

    chapters: list[Chapter] = []
    for chapter_index in sorted(covered):
        first, last = min(covered[chapter_index]), max(covered[chapter_index])
        chapters.append(
            Chapter(
                chapter_number=chapter_index + 1,
                title=chapter_title(chapter_index + 1, first, last),
                group_range=(first, last),
            )
        )
    return chapters


def partition_entries(
    entries: Sequence[ClassifiedEntry],
    words_per_group: int = WORDS_PER_GROUP,
    groups_per_chapter: int = GROUPS_PER_CHAPTER,
) -> PartitionResult:
    """Assign sequential group indexes and derive groups and chapters.

    ``group_index = position // words_per_group`` and
    ``chapter_index = group_index // groups_per_chapter``.

    Args:
        entries: Deduplicated entries in first-appearance order.
        words_per_group: Maximum entries in one group.
        groups_per_chapter: Maximum groups in one chapter.

    Returns:
        ``PartitionResult`` with entries, groups and chapters.
    """

    partitioned = tuple(
        Entry(
            display_form=entry.display_form,
            original_form=entry.original_form,
            meaning=entry.meaning,
            part_of_speech=entry.part_of_speech,
            is_non_latin_script=entry.is_non_latin_script,
            group_index=position // words_per_group,
        )
        for position, entry in enumerate(entries)
    )
    groups = build_groups(partitioned)
    chapters = build_chapters(groups, groups_per_chapter=groups_per_chapter)
    return PartitionResult(entries=partitioned, groups=tuple(groups), chapters=tuple(chapters))
