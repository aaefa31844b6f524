"""Markdown report generation for import run summaries."""

from __future__ import annotations

from typing import Iterable, Sequence

from vocab_import.models import ImportSuccess
from vocab_import.text.pos_labels import describe_part_of_speech
from vocab_import.validation import collect_pos_counts


def _markdown_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render a deterministic GitHub-flavored markdown table.

    Args:
        headers: Table header labels.
        rows: Table body rows as string sequences.

    Returns:
        Markdown table text.
    """

    line_header = "| " + " | ".join(headers) + " |"
    line_sep = "| " + " | ".join("---" for _ in headers) + " |"
    body = ["| " + " | ".join(row) + " |" for row in rows]
    return "\n".join([line_header, line_sep, *body])


def build_report_md(success: ImportSuccess) -> str:
    """Build the import markdown report for one pipeline run.

    Args:
        success: Successful import outcome.

    Returns:
        Full markdown content with summary tables.
    """

    summary_rows = [
        ("library", success.library_name),
        ("imported", str(success.imported_count)),
        ("skipped_duplicates", str(success.skipped_count)),
        ("groups", str(success.library.group_count)),
        ("chapters", str(success.library.chapter_count)),
        ("non_latin_entries", str(sum(1 for entry in success.entries if entry.is_non_latin_script))),
    ]

    groups_by_index = {group.group_index: group for group in success.groups}
    chapter_rows = []
    for chapter in success.chapters:
        first, last = chapter.group_range
        entry_total = sum(groups_by_index[index].entry_count for index in range(first, last + 1))
        chapter_rows.append(
            (str(chapter.chapter_number), chapter.title, str(chapter.group_count), str(entry_total))
        )

    pos_counts = collect_pos_counts(success.entries)
    pos_rows = [
        (token, describe_part_of_speech(token), str(pos_counts[token]))
        for token in sorted(pos_counts, key=lambda item: (-pos_counts[item], item))
    ]

    sections = [
        "# Import Report",
        "",
        "## Summary",
        _markdown_table(["metric", "value"], summary_rows),
        "",
        "## Chapters",
        _markdown_table(["chapter", "title", "group_count", "entry_count"], chapter_rows),
        "",
        "## Part-of-Speech Tags Present",
        _markdown_table(["part_of_speech", "label", "count"], pos_rows),
    ]

    return "\n".join(sections) + "\n"
