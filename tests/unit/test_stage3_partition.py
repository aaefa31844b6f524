"""Unit tests for Stage 3 group and chapter partitioning."""

from __future__ import annotations

import pytest

from vocab_import.models import Chapter, ClassifiedEntry, Group
from vocab_import.stages.stage3_partition import chapter_title, partition_entries
from vocab_import.validation import validate_partition


def _entries(count: int) -> list[ClassifiedEntry]:
    return [ClassifiedEntry(f"w{idx}", f"w{idx}", "m", "", False) for idx in range(count)]


def test_partition_120_entries_into_three_groups_and_one_chapter() -> None:
    result = partition_entries(_entries(120))

    assert result.groups == (Group(0, 50), Group(1, 50), Group(2, 20))
    assert result.chapters == (Chapter(1, "第 1 章 (1-3组)", (0, 2)),)
    assert [entry.group_index for entry in result.entries[48:52]] == [0, 0, 1, 1]


def test_partition_exact_chapter_boundary_has_no_empty_chapter() -> None:
    result = partition_entries(_entries(500))

    assert len(result.groups) == 10
    assert result.chapters == (Chapter(1, "第 1 章 (1-10组)", (0, 9)),)


def test_partition_partial_second_chapter() -> None:
    result = partition_entries(_entries(501))

    assert result.groups[-1] == Group(10, 1)
    assert result.chapters[-1] == Chapter(2, "第 2 章 (11-11组)", (10, 10))


def test_partition_empty_sequence() -> None:
    result = partition_entries([])

    assert result.entries == ()
    assert result.groups == ()
    assert result.chapters == ()


@pytest.mark.parametrize("count", [1, 49, 50, 51, 499, 1234, 5000])
def test_partition_respects_size_limits(count: int) -> None:
    result = partition_entries(_entries(count))

    validate_partition(result)
    assert sum(group.entry_count for group in result.groups) == count
    assert all(chapter.group_count <= 10 for chapter in result.chapters)


def test_chapter_title_uses_one_based_groups() -> None:
    assert chapter_title(3, 20, 29) == "第 3 章 (21-30组)"
