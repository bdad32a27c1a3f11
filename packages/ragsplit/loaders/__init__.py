"""Document loaders."""

from .base import BaseLoader, LoaderOptions
from .exceptions import DocumentTooLargeError, ExtractionFailedError, LoaderError, UnsupportedFormatError
from .text import TextLoader

__all__ = [
    "BaseLoader",
    "LoaderOptions",
    "TextLoader",
    "LoaderError",
    "DocumentTooLargeError",
    "UnsupportedFormatError",
    "ExtractionFailedError",
]
