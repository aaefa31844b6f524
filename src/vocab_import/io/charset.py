"""Charset detection for raw vocabulary file buffers."""

from __future__ import annotations

import codecs
import logging

import chardet

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


def detect_encoding(data: bytes) -> str:
    """Guess the text encoding of a complete byte buffer.

    The whole buffer is handed to ``chardet`` at once. Any guess that Python
    cannot decode with falls back to UTF-8, as does the absence of a guess.

    Args:
        data: Full source content.

    Returns:
        A codec name accepted by :meth:`bytes.decode`.
    """

    guess = chardet.detect(data).get("encoding") if data else None
    if guess:
        try:
            codecs.lookup(guess)
        except LookupError:
            logger.debug("Detected encoding %r is not supported; using %s", guess, DEFAULT_ENCODING)
        else:
            logger.debug("Detected encoding %s", guess)
            return guess
    logger.debug("No usable encoding guess; using %s", DEFAULT_ENCODING)
    return DEFAULT_ENCODING


def decode_bytes(data: bytes) -> str:
    """Decode a byte buffer with its detected encoding.

    Malformed sequences are replaced with U+FFFD instead of failing the run.

    Args:
        data: Full source content.

    Returns:
        Decoded text.
    """

    return data.decode(detect_encoding(data), errors="replace")
