"""Exception types raised by pipeline stages.

Stages raise these; only :mod:`vocab_import.pipeline` turns them into
``ImportFailure`` values.
"""

from __future__ import annotations

from vocab_import.models import FailureKind


class VocabImportError(ValueError):
    """Base class for pipeline-fatal import conditions."""

    kind = FailureKind.PARSE_ERROR


class UnsupportedFormatError(VocabImportError):
    """Raised when no parser is registered for a file name or format hint."""

    kind = FailureKind.UNSUPPORTED_FORMAT


class EmptyFileError(VocabImportError):
    """Raised when a source decodes but yields no usable rows."""

    kind = FailureKind.EMPTY_FILE


class UnreadableSourceError(VocabImportError):
    """Raised when the underlying byte source cannot be read."""

    kind = FailureKind.UNREADABLE_SOURCE
