"""Unit tests for the line-oriented plain text parser."""

from __future__ import annotations

from vocab_import.models import RawPair
from vocab_import.parsers.plain_text import parse_plain_text, split_line


def test_split_line_on_wide_gap_and_tab() -> None:
    assert split_line("abandon    v. 放弃") == RawPair("abandon", "v. 放弃")
    assert split_line("apple\tn. 苹果") == RawPair("apple", "n. 苹果")


def test_split_line_only_splits_once() -> None:
    assert split_line("run  v. 跑  n. 跑步") == RawPair("run", "v. 跑  n. 跑步")


def test_split_line_drops_malformed_lines() -> None:
    assert split_line("") is None
    assert split_line("   ") is None
    assert split_line("apple n. 苹果") is None
    assert split_line("  apple  苹果") is None


def test_split_line_on_full_width_spaces() -> None:
    assert split_line("りんご\u3000\u3000apple") == RawPair("りんご", "apple")


def test_parse_plain_text_accepts_full_width_separated_lines() -> None:
    data = "word\u3000\u3000意味\n".encode("utf-8-sig")

    assert list(parse_plain_text(data)) == [RawPair("word", "意味")]


def test_parse_plain_text_preserves_order_across_line_endings() -> None:
    data = "apple  苹果\r\nbanana  香蕉\rcherry\t樱桃\n\nbroken line\n".encode("utf-8-sig")

    assert list(parse_plain_text(data)) == [
        RawPair("apple", "苹果"),
        RawPair("banana", "香蕉"),
        RawPair("cherry", "樱桃"),
    ]
