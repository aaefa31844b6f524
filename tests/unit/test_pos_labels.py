"""Unit tests for part-of-speech label lookup."""

from __future__ import annotations

from vocab_import.text.pos_labels import describe_part_of_speech


def test_describe_part_of_speech_known_tags() -> None:
    assert describe_part_of_speech("n.") == "名词"
    assert describe_part_of_speech(" vt. ") == "及物动词"
    assert describe_part_of_speech("自五") == "自动词（五段）"


def test_describe_part_of_speech_unknown_and_blank() -> None:
    assert describe_part_of_speech("aux.") == "aux."
    assert describe_part_of_speech("") == ""
    assert describe_part_of_speech(None) == ""
