#!/usr/bin/env python3
"""
Domain-specific exceptions for splitting operations.

These exceptions represent configuration violations and cancellation,
not infrastructure failures. The splitter itself is total over valid input.
"""

from typing import Any


class ChunkingDomainError(Exception):
    """Base exception for all splitting domain errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error with message and optional details."""
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "error_code": self.__class__.__name__,
            "detail": self.message,
            "details": dict(self.details),
        }


class InvalidConfigurationError(ChunkingDomainError):
    """Raised when splitter configuration violates business rules."""


class OverlapConfigurationError(InvalidConfigurationError):
    """Raised when overlap is not smaller than the chunk size.

    A non-positive stride would stop the fixed-size fallback from advancing.
    """

    def __init__(self, overlap: int, chunk_size: int) -> None:
        """Initialize with overlap information."""
        super().__init__(
            f"Overlap {overlap} must be less than chunk size {chunk_size}",
            {"overlap": overlap, "chunk_size": chunk_size},
        )
        self.overlap = overlap
        self.chunk_size = chunk_size


class OperationCancelledError(ChunkingDomainError):
    """Raised when a batch split is cancelled between documents."""

    def __init__(self, completed_documents: int = 0, total_documents: int | None = None) -> None:
        """Initialize with batch progress at the time of cancellation."""
        super().__init__(
            "Split operation cancelled",
            {"completed_documents": completed_documents, "total_documents": total_documents},
        )
        self.completed_documents = completed_documents
        self.total_documents = total_documents
