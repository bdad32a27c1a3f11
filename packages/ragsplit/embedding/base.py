"""Base abstraction for embedding providers."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from ragsplit.dtos.document import Document


class BaseEmbedder(ABC):
    """Abstract base class for embedding providers.

    This defines the minimal interface that all embedders must implement.
    """

    @abstractmethod
    async def embed_texts(self, texts: Sequence[str]) -> NDArray[np.float32]:
        """Generate embeddings for multiple texts.

        Args:
            texts: Texts to embed

        Returns:
            numpy array of shape (n_texts, embedding_dim); (0, embedding_dim) for no texts

        Raises:
            EmbeddingError: If embedding generation fails
        """

    @abstractmethod
    async def embed_query(self, query: str) -> NDArray[np.float32]:
        """Generate the embedding of a single search query.

        Returns:
            numpy array of shape (embedding_dim,)
        """

    @abstractmethod
    def get_dimension(self) -> int:
        """Get the dimension of embeddings produced by this provider."""

    async def embed_documents(self, documents: Sequence[Document]) -> list[Document]:
        """Embed document contents and return copies carrying their embedding."""
        if not documents:
            return []

        vectors = await self.embed_texts([document.content for document in documents])
        return [
            document.with_embedding(vector.tolist())
            for document, vector in zip(documents, vectors, strict=True)
        ]
