# ragsplit/config/embedding.py

from .base import BaseConfig


class EmbeddingConfig(BaseConfig):
    """
    Embedding-specific configuration.
    Contains settings for the OpenAI-compatible embedding endpoint.
    """

    # Provider Configuration
    OPENAI_API_KEY: str | None = None
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"

    # Model Configuration
    EMBEDDING_MODEL: str = "text-embedding-3-small"
    EMBEDDING_DIMENSIONS: int | None = None  # None uses the model's native dimension
    EMBEDDING_BATCH_SIZE: int = 100
    EMBEDDING_TIMEOUT: float = 30.0
