"""Unit tests for the in-memory library store."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from vocab_import.models import ImportSuccess
from vocab_import.pipeline import import_from_bytes
from vocab_import.store.memory import InMemoryLibraryStore


def _success(count: int, name: str = "lib") -> ImportSuccess:
    data = "\n".join(f"word{idx}  meaning {idx}" for idx in range(count)).encode("ascii")
    outcome = import_from_bytes(data, "words.txt", name)
    assert isinstance(outcome, ImportSuccess)
    return outcome


def test_save_links_groups_to_chapters() -> None:
    store = InMemoryLibraryStore()

    library_id = store.save(_success(1100))

    chapters = store.chapters_for(library_id)
    groups = store.groups_for(library_id)
    assert [item.chapter.chapter_number for item in chapters] == [1, 2, 3]
    assert len(groups) == 22
    assert {item.chapter_id for item in groups[:10]} == {chapters[0].chapter_id}
    assert groups[10].chapter_id == chapters[1].chapter_id
    assert groups[21].chapter_id == chapters[2].chapter_id


def test_save_assigns_distinct_library_ids_and_filters_entries() -> None:
    store = InMemoryLibraryStore()

    first = store.save(_success(120, "first"))
    second = store.save(_success(10, "second"))

    assert first != second
    assert [item.library.name for item in store.libraries()] == ["first", "second"]
    assert len(store.entries_for(first)) == 120
    assert [item.entry.original_form for item in store.entries_for(first, group_indexes=[2])][:2] == [
        "word100",
        "word101",
    ]
    assert store.entries_for(999) == []


def test_bootstrap_imports_once_and_skips_failures(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    english = tmp_path / "english.txt"
    english.write_text("apple  n. 苹果\nbanana  n. 香蕉\n", encoding="utf-8")
    broken = tmp_path / "missing.csv"
    store = InMemoryLibraryStore()

    with caplog.at_level(logging.WARNING, logger="vocab_import.store.memory"):
        created = store.bootstrap([(english, "内置-英语"), (broken, "内置-缺失")])

    assert len(created) == 1
    assert store.libraries()[0].library.name == "内置-英语"
    assert "内置-缺失" in caplog.text
    assert store.bootstrap([(english, "内置-英语")]) == []
    assert len(store.libraries()) == 1


def test_bootstrap_logs_rejected_save_and_completes(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    first = tmp_path / "first.txt"
    first.write_bytes(b"apple  fruit\n")
    second = tmp_path / "second.txt"
    second.write_bytes(b"run  move fast\n")
    store = InMemoryLibraryStore()
    original_save = store.save

    def save_rejecting_second(success: ImportSuccess) -> int:
        if success.library_name == "second":
            raise ValueError("Group 0 maps to missing chapter index 0")
        return original_save(success)

    monkeypatch.setattr(store, "save", save_rejecting_second)

    with caplog.at_level(logging.WARNING, logger="vocab_import.store.memory"):
        created = store.bootstrap([(first, "first"), (second, "second")])

    assert len(created) == 1
    assert "missing chapter index" in caplog.text
    assert [item.library.name for item in store.libraries()] == ["first"]
    assert store.bootstrap([(first, "first")]) == []


def test_bootstrap_can_be_retried_after_unexpected_error(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    source = tmp_path / "words.txt"
    source.write_bytes(b"apple  fruit\n")
    store = InMemoryLibraryStore()
    original_save = store.save
    calls: list[str] = []

    def save_failing_once(success: ImportSuccess) -> int:
        calls.append(success.library_name)
        if len(calls) == 1:
            raise RuntimeError("disk full")
        return original_save(success)

    monkeypatch.setattr(store, "save", save_failing_once)

    with pytest.raises(RuntimeError):
        store.bootstrap([(source, "words")])

    assert len(store.bootstrap([(source, "words")])) == 1
    assert len(store.libraries()) == 1
