"""Meaning text cleanup and part-of-speech extraction.

Source meanings mix an optional part-of-speech abbreviation with one or more
senses, for example ``n. 名词；noun sense`` or ``v. to run n. a sprint``. This
module separates a leading tag from the meaning, keeps multi-sense entries as
newline-joined segments, and normalizes sense separators.
"""

from __future__ import annotations

import re

POS_FINDER_RE = re.compile(
    r"\b(adv|adj|art|aux|conj|int|n|num|prep|pron|v|vi|vt)\b\.?",
    re.IGNORECASE,
)
BRACKET_ANNOTATION_RE = re.compile(r"\[(.*?)\]")
SENSE_SEPARATOR_RE = re.compile(r"[;；。]")
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")

SENSE_DELIMITER = "；"
SENSE_JOINER = "； "

# A lone tag starting before this offset is the entry's own tag rather than
# one embedded mid-sentence.
LEADING_TAG_MAX_OFFSET = 2


def _strip_surrounding_quotes(text: str) -> str:
    """Remove one pair of enclosing double quotes, if both are present."""

    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        return text[1:-1]
    return text


def _clean_line(line: str) -> str:
    """Normalize separators within one line and drop empty senses."""

    fragments = SENSE_SEPARATOR_RE.sub(SENSE_DELIMITER, line).split(SENSE_DELIMITER)
    return SENSE_JOINER.join(part.strip() for part in fragments if part.strip())


def clean_meaning(meaning: str, preserve_newlines: bool = False) -> str:
    """Normalize sense separators in a meaning string.

    ``;``, ``；`` and ``。`` all become ``；``; fragments are trimmed, empty ones
    dropped, and the rest joined with ``"； "``. The transformation is
    idempotent.

    Args:
        meaning: Meaning text to clean.
        preserve_newlines: When ``True``, each line is cleaned on its own and
            lines are re-joined with ``\\n``.

    Returns:
        Cleaned meaning text.
    """

    if not preserve_newlines:
        return _clean_line(meaning).strip()
    return "\n".join(_clean_line(line) for line in LINE_BREAK_RE.split(meaning)).strip()


def normalize_meaning_text(raw_text: str) -> str:
    """Apply the pre-scan normalization to raw meaning text.

    Trims, removes one layer of surrounding quotes, folds embedded line breaks
    into spaces and deletes bracketed annotations such as ``[交]``.

    Args:
        raw_text: Meaning cell as read from the source.

    Returns:
        Normalized text ready for part-of-speech scanning.
    """

    text = _strip_surrounding_quotes(raw_text.strip())
    text = text.replace("\r\n", " ").replace("\n", " ")
    return BRACKET_ANNOTATION_RE.sub("", text).strip()


def parse_meaning_and_pos(raw_text: str) -> tuple[str, str]:
    """Split raw meaning text into a part-of-speech tag and cleaned meaning.

    Three shapes are recognized:

    - No tag anywhere: the whole text is the meaning and the tag is empty.
    - Exactly one tag starting at offset 0 or 1: that tag (with a trailing
      period) becomes the part of speech and the remainder the meaning.
    - Anything else: the text is cut at every tag start and the non-blank
      segments are joined with ``\\n``. Each segment keeps its own tag text
      and the overall tag is empty. Text preceding the first tag is dropped.

    Args:
        raw_text: Meaning cell as read from the source.

    Returns:
        ``(part_of_speech, meaning)``; ``part_of_speech`` may be empty.
    """

    text = normalize_meaning_text(raw_text)
    matches = list(POS_FINDER_RE.finditer(text))

    if not matches:
        return "", clean_meaning(text)

    if len(matches) == 1 and matches[0].start() < LEADING_TAG_MAX_OFFSET:
        match = matches[0]
        part_of_speech = match.group(0)
        if not part_of_speech.endswith("."):
            part_of_speech += "."
        return part_of_speech, clean_meaning(text[match.end():])

    starts = [match.start() for match in matches]
    ends = starts[1:] + [len(text)]
    segments = [text[start:end].strip() for start, end in zip(starts, ends)]
    joined = "\n".join(segment for segment in segments if segment)
    return "", clean_meaning(joined, preserve_newlines=True)
