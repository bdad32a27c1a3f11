"""Embedding providers."""

from .base import BaseEmbedder
from .exceptions import EmbeddingError, EmbeddingProviderError, EmbeddingTimeoutError
from .openai import OpenAIEmbedder

__all__ = [
    "BaseEmbedder",
    "OpenAIEmbedder",
    "EmbeddingError",
    "EmbeddingProviderError",
    "EmbeddingTimeoutError",
]
