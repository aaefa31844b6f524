"""Validation helpers for partitioned output integrity."""

from __future__ import annotations

from collections import Counter
from typing import Sequence

from vocab_import.models import GROUPS_PER_CHAPTER, WORDS_PER_GROUP, Entry, PartitionResult

MAX_REPORTED_ERRORS = 25


def _raise_if_errors(label: str, errors: list[str]) -> None:
    """Raise ``ValueError`` with a bounded preview of collected problems."""

    if not errors:
        return
    preview = "\n".join(f"- {item}" for item in errors[:MAX_REPORTED_ERRORS])
    rest = len(errors) - min(MAX_REPORTED_ERRORS, len(errors))
    more = f"\n- ... and {rest} more" if rest > 0 else ""
    raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_entries(entries: Sequence[Entry]) -> None:
    """Validate entry uniqueness and group ordering.

    Args:
        entries: Partitioned entries.

    Raises:
        ValueError: If an ``original_form`` repeats or group indexes decrease.
    """

    errors: list[str] = []
    seen: set[str] = set()
    previous_group = 0
    for idx, entry in enumerate(entries, start=1):
        if entry.original_form in seen:
            errors.append(f"Entry {idx}: duplicate original_form '{entry.original_form}'")
        seen.add(entry.original_form)
        if entry.group_index < previous_group:
            errors.append(f"Entry {idx}: group_index {entry.group_index} after {previous_group}")
        previous_group = entry.group_index
        if not entry.meaning.strip():
            errors.append(f"Entry {idx}: empty meaning")

    _raise_if_errors("Entry", errors)


def validate_partition(
    result: PartitionResult,
    words_per_group: int = WORDS_PER_GROUP,
    groups_per_chapter: int = GROUPS_PER_CHAPTER,
) -> None:
    """Validate group and chapter size limits.

    Only the final group and the final chapter may be under-full.

    Args:
        result: Stage 3 partition output.
        words_per_group: Maximum entries in one group.
        groups_per_chapter: Maximum groups in one chapter.

    Raises:
        ValueError: If any size or coverage rule is broken.
    """

    errors: list[str] = []
    last_group = len(result.groups) - 1
    for position, group in enumerate(result.groups):
        if group.group_index != position:
            errors.append(f"Group {position}: unexpected group_index {group.group_index}")
        if group.entry_count > words_per_group:
            errors.append(
                f"Group {group.group_index}: {group.entry_count} entries exceeds {words_per_group}"
            )
        if position != last_group and group.entry_count != words_per_group:
            errors.append(f"Group {group.group_index}: under-full group before the last one")

    last_chapter = len(result.chapters) - 1
    for position, chapter in enumerate(result.chapters):
        if chapter.group_count > groups_per_chapter:
            errors.append(
                f"Chapter {chapter.chapter_number}: "
                f"{chapter.group_count} groups exceeds {groups_per_chapter}"
            )
        if position != last_chapter and chapter.group_count != groups_per_chapter:
            errors.append(f"Chapter {chapter.chapter_number}: under-full chapter before the last one")

    if sum(group.entry_count for group in result.groups) != len(result.entries):
        errors.append("Group entry counts do not add up to the number of entries")

    _raise_if_errors("Partition", errors)


def collect_pos_counts(entries: Sequence[Entry]) -> dict[str, int]:
    """Count entries by part-of-speech tag, ignoring untagged entries.

    Args:
        entries: Partitioned entries.

    Returns:
        Dictionary of tag to entry count.
    """

    counter: Counter[str] = Counter()
    for entry in entries:
        if entry.part_of_speech.strip():
            counter[entry.part_of_speech] += 1
    return dict(counter)
