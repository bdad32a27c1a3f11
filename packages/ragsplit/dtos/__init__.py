"""Data transfer objects."""

from .document import Document, DocumentMetadata, MetadataValue, chunk_id

__all__ = ["Document", "DocumentMetadata", "MetadataValue", "chunk_id"]
