"""Document data transfer objects shared by loaders, splitters and embedders.

A ``Document`` is either a source document produced by a loader or a chunk
produced by a splitter. Chunks carry their position in ``metadata`` and point
back to the source through ``metadata.parent_id``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeAliasType

MetadataValue = TypeAliasType(
    "MetadataValue",
    Union[str, bool, int, float, dict[str, "MetadataValue"]],
)


def chunk_id(parent_id: str, index: int) -> str:
    """Return the deterministic id of the ``index``-th chunk of ``parent_id``."""
    return f"{parent_id}_chunk_{index}"


class DocumentMetadata(BaseModel):
    """Descriptive and positional metadata for a document or chunk.

    Attributes:
        source: Where the document came from (file path, URL, ...)
        title: Human readable title
        author: Author, when known
        created_at: Creation or modification time of the source
        chunk_index: 0-based position of a chunk within its parent
        total_chunks: Number of chunks produced from the parent
        parent_id: Id of the source document for chunks, empty otherwise
        extra: Arbitrary extra fields restricted to primitive values and nested mappings
    """

    model_config = ConfigDict(frozen=True)

    source: str = ""
    title: str = ""
    author: str = ""
    created_at: datetime | None = None
    chunk_index: int = Field(default=0, ge=0)
    total_chunks: int = Field(default=0, ge=0)
    parent_id: str = ""
    extra: dict[str, MetadataValue] = Field(default_factory=dict)


class Document(BaseModel):
    """Unit of text flowing through the ingestion pipeline."""

    model_config = ConfigDict(frozen=True)

    id: str
    content: str
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)
    embedding: list[float] | None = None

    @property
    def is_chunk(self) -> bool:
        return bool(self.metadata.parent_id)

    def with_source(self, source: str) -> Document:
        return self.model_copy(update={"metadata": self.metadata.model_copy(update={"source": source})})

    def with_title(self, title: str) -> Document:
        return self.model_copy(update={"metadata": self.metadata.model_copy(update={"title": title})})

    def with_metadata(self, metadata: DocumentMetadata) -> Document:
        return self.model_copy(update={"metadata": metadata})

    def with_extra(self, key: str, value: MetadataValue) -> Document:
        """Return a copy with ``key`` set in the extra metadata bag.

        The value is validated against the allowed metadata value kinds.
        """
        extra = dict(self.metadata.extra)
        extra[key] = value
        metadata = DocumentMetadata.model_validate({**self.metadata.model_dump(), "extra": extra})
        return self.with_metadata(metadata)

    def get_extra(self, key: str, default: MetadataValue | None = None) -> MetadataValue | None:
        return self.metadata.extra.get(key, default)

    def with_embedding(self, embedding: list[float]) -> Document:
        return self.model_copy(update={"embedding": list(embedding)})

    def clone(self) -> Document:
        """Deep copy, including the extra bag and the embedding."""
        return self.model_copy(deep=True)
