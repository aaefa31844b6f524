"""Japanese script detection and kana reading extraction."""

from __future__ import annotations

import re

JAPANESE_CHAR_RE = re.compile(r"[\u3040-\u309F\u30A0-\u30FF\u4E00-\u9FFF]+")
LATIN_WORD_RE = re.compile(r"[a-zA-Z]+(?:[-'][a-zA-Z]+)*")
KANA_READING_RE = re.compile(r"^([\u3040-\u309F\u30A0-\u30FF\u30FC]+)(?:【.+】|\s+[\u4E00-\u9FFF]+)?")


def is_japanese_word(word: str) -> bool:
    """Return whether a headword needs a kana reading.

    A headword qualifies when it contains at least one Hiragana, Katakana or
    CJK ideograph character and is not a plain Latin word made of letters
    joined by hyphens or apostrophes.
    """

    return bool(JAPANESE_CHAR_RE.search(word)) and not LATIN_WORD_RE.fullmatch(word)


def extract_kana(word: str) -> str:
    """Extract the leading kana reading of a Japanese headword.

    Supported shapes include ``あいさつ挨拶``, ``あいさつ【挨拶】`` and
    ``あいさつ 挨拶``. Headwords that do not start with kana are returned
    unchanged, never partially extracted.

    Args:
        word: Headword as read from the source.

    Returns:
        The leading kana run, or ``word`` itself when there is none.
    """

    match = KANA_READING_RE.match(word.strip())
    if match is None:
        return word
    return match.group(1)


def display_form(word: str) -> tuple[str, bool]:
    """Compute the display form and script flag for a headword.

    Returns:
        ``(display_form, is_non_latin_script)``.
    """

    if is_japanese_word(word):
        return extract_kana(word), True
    return word, False
