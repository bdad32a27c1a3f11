"""ragsplit: recursive character text splitting for retrieval pipelines."""

from ragsplit.chunking import (
    ChunkingDomainError,
    InvalidConfigurationError,
    OperationCancelledError,
    OverlapConfigurationError,
    RecursiveCharacterSplitter,
    SplitterConfig,
    TextSplitter,
)
from ragsplit.dtos import Document, DocumentMetadata
from ragsplit.version import __version__

__all__ = [
    "Document",
    "DocumentMetadata",
    "TextSplitter",
    "RecursiveCharacterSplitter",
    "SplitterConfig",
    "ChunkingDomainError",
    "InvalidConfigurationError",
    "OverlapConfigurationError",
    "OperationCancelledError",
    "__version__",
]
