"""Stage 2: Deduplicate raw pairs and classify script and part of speech."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from vocab_import.models import ClassifiedEntry, RawPair
from vocab_import.text.meaning import parse_meaning_and_pos
from vocab_import.text.script import display_form


@dataclass
class ClassificationRun:
    """Per-call state for one classification pass.

    Instances are created fresh for every import and discarded afterwards.
    """

    seen_headwords: set[str] = field(default_factory=set)
    entries: list[ClassifiedEntry] = field(default_factory=list)
    skipped_count: int = 0

    def accept(self, pair: RawPair) -> None:
        """Classify one pair, dropping blanks silently and counting duplicates.

        Args:
            pair: Pair emitted by a stage 1 parser.
        """

        headword = pair.headword_raw.strip()
        if not headword or not pair.meaning_raw.strip():
            return

        part_of_speech, meaning = parse_meaning_and_pos(pair.meaning_raw)
        if not meaning.strip():
            return

        if headword in self.seen_headwords:
            self.skipped_count += 1
            return
        self.seen_headwords.add(headword)

        shown, is_non_latin = display_form(headword)
        self.entries.append(
            ClassifiedEntry(
                display_form=shown,
                original_form=headword,
                meaning=meaning,
                part_of_speech=part_of_speech,
                is_non_latin_script=is_non_latin,
            )
        )


def classify_pairs(pairs: Iterable[RawPair]) -> tuple[list[ClassifiedEntry], int]:
    """Deduplicate and classify raw pairs in order.

    The first occurrence of each trimmed headword wins; later occurrences are
    counted as skipped. Pairs with a blank headword or a meaning that is blank
    after cleanup are dropped without being counted.

    Args:
        pairs: Stage 1 pairs in source order.

    Returns:
        Tuple of ``(entries, skipped_count)``.
    """

    run = ClassificationRun()
    for pair in pairs:
        run.accept(pair)
    return run.entries, run.skipped_count
