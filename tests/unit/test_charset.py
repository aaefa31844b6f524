"""Unit tests for charset detection and decoding."""

from __future__ import annotations

import pytest

from vocab_import.io import charset
from vocab_import.io.charset import DEFAULT_ENCODING, decode_bytes, detect_encoding


def test_detect_encoding_falls_back_to_utf8_without_guess(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(charset.chardet, "detect", lambda data: {"encoding": None, "confidence": 0.0})

    assert detect_encoding(b"\xff\xfe\xfd") == DEFAULT_ENCODING


def test_detect_encoding_falls_back_for_unknown_codec(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(charset.chardet, "detect", lambda data: {"encoding": "x-no-such-codec"})

    assert detect_encoding(b"abc") == DEFAULT_ENCODING


def test_detect_encoding_empty_buffer_uses_default() -> None:
    assert detect_encoding(b"") == DEFAULT_ENCODING


def test_decode_bytes_handles_utf8_with_bom() -> None:
    data = "apple  苹果\n".encode("utf-8-sig")

    assert decode_bytes(data) == "apple  苹果\n"


def test_decode_bytes_handles_gb2312_text() -> None:
    text = "你好世界，这是一个用于检测编码的中文句子。我们需要足够长的文本来让检测器有信心。\n" * 4

    assert decode_bytes(text.encode("gb2312")) == text


def test_decode_bytes_replaces_malformed_sequences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(charset.chardet, "detect", lambda data: {"encoding": "utf-8"})

    assert decode_bytes(b"ab\xffcd") == "ab\ufffdcd"
