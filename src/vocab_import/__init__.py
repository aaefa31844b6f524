"""Vocabulary list import and segmentation pipeline package."""

from .models import (
    Chapter,
    Entry,
    FailureKind,
    Group,
    ImportFailure,
    ImportOutcome,
    ImportSuccess,
    Library,
)
from .pipeline import import_from_bytes, import_from_path

__all__ = [
    "Chapter",
    "Entry",
    "FailureKind",
    "Group",
    "ImportFailure",
    "ImportOutcome",
    "ImportSuccess",
    "Library",
    "import_from_bytes",
    "import_from_path",
]
