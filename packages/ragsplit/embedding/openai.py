"""OpenAI-compatible embedding provider.

HTTP client for the ``/embeddings`` endpoint of OpenAI or any server exposing
the same API shape.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

import httpx
import numpy as np
from numpy.typing import NDArray

from .base import BaseEmbedder
from .exceptions import EmbeddingProviderError, EmbeddingTimeoutError

if TYPE_CHECKING:
    from ragsplit.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openai.com/v1"

MODEL_TEXT_EMBEDDING_3_SMALL = "text-embedding-3-small"
MODEL_TEXT_EMBEDDING_3_LARGE = "text-embedding-3-large"
MODEL_TEXT_EMBEDDING_ADA_002 = "text-embedding-ada-002"

DEFAULT_MODEL = MODEL_TEXT_EMBEDDING_3_SMALL
DEFAULT_DIMENSION = 1536
DEFAULT_BATCH_SIZE = 100

MODEL_DIMENSIONS: dict[str, int] = {
    MODEL_TEXT_EMBEDDING_3_SMALL: 1536,
    MODEL_TEXT_EMBEDDING_3_LARGE: 3072,
    MODEL_TEXT_EMBEDDING_ADA_002: 1536,
}

# Models that accept a custom output dimension
_CUSTOM_DIMENSION_MODELS = frozenset({MODEL_TEXT_EMBEDDING_3_SMALL, MODEL_TEXT_EMBEDDING_3_LARGE})


class OpenAIEmbedder(BaseEmbedder):
    """Embedder backed by an OpenAI-compatible HTTP API.

    Example:
        embedder = OpenAIEmbedder(api_key="sk-...", model="text-embedding-3-small")
        vectors = await embedder.embed_texts(["first chunk", "second chunk"])
    """

    PROVIDER_NAME = "openai"
    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        model: str | None = None,
        dimensions: int | None = None,
        batch_size: int | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the embedder.

        Args:
            api_key: API key sent as a bearer token (required)
            base_url: API base URL, defaults to the official OpenAI API
            model: Model name, defaults to text-embedding-3-small
            dimensions: Output dimension, defaults to the model's native dimension
            batch_size: Maximum texts per request
            timeout: Request timeout in seconds
            http_client: Optional client; a short-lived one is created per request otherwise

        Raises:
            ValueError: If the API key is missing or a numeric option is not positive
        """
        if not api_key:
            raise ValueError("API key is required")

        if dimensions is not None and dimensions <= 0:
            raise ValueError(f"dimensions must be positive, got {dimensions}")

        self._api_key = api_key
        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._model = model or DEFAULT_MODEL
        # Unknown models without an explicit dimension adopt the first response's width
        self._dimension_known = dimensions is not None or self._model in MODEL_DIMENSIONS
        self._dimensions = dimensions or MODEL_DIMENSIONS.get(self._model, DEFAULT_DIMENSION)
        self._batch_size = batch_size if batch_size and batch_size > 0 else DEFAULT_BATCH_SIZE
        self._timeout = timeout or self.DEFAULT_TIMEOUT
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: Settings, http_client: httpx.AsyncClient | None = None) -> OpenAIEmbedder:
        return cls(
            api_key=settings.OPENAI_API_KEY or "",
            base_url=settings.OPENAI_BASE_URL,
            model=settings.EMBEDDING_MODEL,
            dimensions=settings.EMBEDDING_DIMENSIONS,
            batch_size=settings.EMBEDDING_BATCH_SIZE,
            timeout=settings.EMBEDDING_TIMEOUT,
            http_client=http_client,
        )

    @property
    def model(self) -> str:
        return self._model

    @property
    def batch_size(self) -> int:
        return self._batch_size

    def get_dimension(self) -> int:
        return self._dimensions

    async def embed_texts(self, texts: Sequence[str]) -> NDArray[np.float32]:
        """Embed texts in batches of ``batch_size``.

        Raises:
            EmbeddingProviderError: If a batch fails; the message names the batch range
            EmbeddingTimeoutError: If a request times out; ``batch`` holds the range
        """
        if not texts:
            return np.empty((0, self._dimensions), dtype=np.float32)

        batches: list[NDArray[np.float32]] = []
        for start in range(0, len(texts), self._batch_size):
            end = min(start + self._batch_size, len(texts))
            try:
                batches.append(await self._embed_batch(list(texts[start:end])))
            except EmbeddingProviderError as e:
                raise EmbeddingProviderError(
                    self.PROVIDER_NAME, f"failed to embed batch {start}-{end}: {e.detail}", e.status_code
                ) from e
            except EmbeddingTimeoutError as e:
                raise EmbeddingTimeoutError(self.PROVIDER_NAME, e.timeout, batch=(start, end)) from e

        return np.vstack(batches)

    async def embed_query(self, query: str) -> NDArray[np.float32]:
        embeddings = await self._embed_batch([query])
        return embeddings[0]

    async def _embed_batch(self, texts: list[str]) -> NDArray[np.float32]:
        """Send one request and return its embeddings ordered by input index."""
        payload: dict[str, Any] = {"model": self._model, "input": texts}
        if self._model in _CUSTOM_DIMENSION_MODELS:
            payload["dimensions"] = self._dimensions

        url = f"{self._base_url}/embeddings"
        headers = {"Authorization": f"Bearer {self._api_key}"}

        try:
            if self._http_client is not None:
                response = await self._http_client.post(url, json=payload, headers=headers, timeout=self._timeout)
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(url, json=payload, headers=headers)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise EmbeddingTimeoutError(self.PROVIDER_NAME, self._timeout) from e
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise EmbeddingProviderError(
                self.PROVIDER_NAME, f"API error: status {status}, body: {e.response.text}", status
            ) from e
        except httpx.RequestError as e:
            raise EmbeddingProviderError(self.PROVIDER_NAME, f"Connection error: {e}") from e

        try:
            data = response.json()["data"]
        except (ValueError, KeyError, TypeError) as e:
            raise EmbeddingProviderError(self.PROVIDER_NAME, f"Malformed response: {e}") from e

        vectors: list[list[float] | None] = [None] * len(texts)
        for item in data:
            index = item.get("index")
            if isinstance(index, int) and 0 <= index < len(vectors):
                vectors[index] = item.get("embedding")

        missing = sum(1 for vector in vectors if vector is None)
        if missing:
            raise EmbeddingProviderError(self.PROVIDER_NAME, f"Response is missing {missing} embedding(s)")

        try:
            embeddings = np.asarray(vectors, dtype=np.float32)
        except (ValueError, TypeError) as e:
            raise EmbeddingProviderError(self.PROVIDER_NAME, f"Malformed embeddings: {e}") from e

        self._check_dimension(embeddings)
        return embeddings

    def _check_dimension(self, embeddings: NDArray[np.float32]) -> None:
        if embeddings.ndim != 2:
            raise EmbeddingProviderError(self.PROVIDER_NAME, "Embeddings have inconsistent lengths")

        width = int(embeddings.shape[1])
        if width == self._dimensions:
            return

        if not self._dimension_known:
            logger.info("Model %s returned %d-dimensional embeddings", self._model, width)
            self._dimensions = width
            self._dimension_known = True
            return

        raise EmbeddingProviderError(
            self.PROVIDER_NAME, f"Expected {self._dimensions}-dimensional embeddings, got {width}"
        )
