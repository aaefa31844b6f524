"""CLI entrypoint for the vocabulary import pipeline."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from vocab_import.io.tsv_io import write_tsv
from vocab_import.models import ImportFailure, ImportSuccess
from vocab_import.pipeline import import_from_path
from vocab_import.reporting.report_md import build_report_md


def _format_table(headers: Sequence[str], data_rows: Sequence[Sequence[str]]) -> str:
    """Format rows as an ASCII table for terminal output.

    Args:
        headers: Table headers.
        data_rows: Row values.

    Returns:
        Monospace table string.
    """

    widths = [len(header) for header in headers]
    for row in data_rows:
        for idx, value in enumerate(row):
            widths[idx] = max(widths[idx], len(value))

    header_line = " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers))
    separator_line = "-+-".join("-" * width for width in widths)
    body_lines = [
        " | ".join(value.ljust(widths[idx]) for idx, value in enumerate(row)) for row in data_rows
    ]
    return "\n".join([header_line, separator_line, *body_lines])


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct CLI argument parser.

    Returns:
        Configured parser for the import command.
    """

    parser = argparse.ArgumentParser(
        description="Import a vocabulary list (.txt, .csv, .tsv, .xls, .xlsx) into grouped TSV."
    )
    parser.add_argument("input", type=Path, help="Path to the vocabulary file.")
    parser.add_argument("--output", required=True, type=Path, help="Destination TSV output path.")
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Markdown report output path (default: report.md next to TSV).",
    )
    parser.add_argument("--name", default=None, help="Library name (default: input file stem).")
    parser.add_argument("--delimiter", default=",", help="Field delimiter for CSV input.")
    parser.add_argument("--no-header", action="store_true", help="Do not write TSV header.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def _print_chapter_summary(result: ImportSuccess) -> None:
    """Print one table row per chapter."""

    rows = [
        [str(chapter.chapter_number), chapter.title, str(chapter.group_count)]
        for chapter in result.chapters
    ]
    print("\nChapters:")
    print(_format_table(["chapter", "title", "groups"], rows))


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI workflow from arguments through artifact generation.

    Returns:
        Zero exit status on success, one when the import failed.
    """

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    outcome = import_from_path(args.input, library_name=args.name, delimiter=args.delimiter)
    if isinstance(outcome, ImportFailure):
        print(f"Import failed ({outcome.kind.value}): {outcome.message}")
        return 1

    report_path = args.report if args.report is not None else args.output.parent / "report.md"
    write_tsv(outcome.entries, output_path=args.output, include_header=not args.no_header)
    report_path.write_text(build_report_md(outcome), encoding="utf-8")

    print(f"Wrote {outcome.imported_count} entries to {args.output}")
    print(f"Wrote report to {report_path}")
    print(f"Skipped duplicates: {outcome.skipped_count}")
    _print_chapter_summary(outcome)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
