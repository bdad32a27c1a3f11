"""Loader exception hierarchy.

Provides distinct exception types so callers can tell "this source is not
text" apart from "the source could not be fetched or read".
"""

from __future__ import annotations


class LoaderError(Exception):
    """Base exception for all loader errors."""

    def __init__(self, message: str, source: str | None = None, cause: Exception | None = None):
        super().__init__(message)
        self.source = source
        self.cause = cause


class DocumentTooLargeError(LoaderError):
    """Raised when a source exceeds the configured maximum size."""

    def __init__(self, size: int, max_size: int, source: str | None = None) -> None:
        super().__init__(f"Document size {size} exceeds maximum {max_size}", source=source)
        self.size = size
        self.max_size = max_size


class UnsupportedFormatError(LoaderError):
    """Raised when content looks binary and cannot be loaded as text.

    Example:
        raise UnsupportedFormatError("TextLoader cannot decode binary content")
    """


class ExtractionFailedError(LoaderError):
    """Raised when reading or decoding fails for reasons other than format support.

    Example:
        raise ExtractionFailedError("Failed to decode content: ...", cause=exc)
    """
