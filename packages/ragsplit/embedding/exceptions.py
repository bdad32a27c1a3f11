"""Embedding-specific exceptions."""


class EmbeddingError(Exception):
    """Base exception for all embedding errors."""


class EmbeddingProviderError(EmbeddingError):
    """General provider error (API error, network issue, malformed response)."""

    def __init__(self, provider: str, message: str, status_code: int | None = None) -> None:
        self.provider = provider
        self.detail = message
        self.status_code = status_code
        super().__init__(f"{provider} error: {message}")


class EmbeddingTimeoutError(EmbeddingError):
    """Request timed out."""

    def __init__(self, provider: str, timeout: float, batch: tuple[int, int] | None = None) -> None:
        self.provider = provider
        self.timeout = timeout
        self.batch = batch
        request = "request" if batch is None else f"request for batch {batch[0]}-{batch[1]}"
        super().__init__(f"{provider} {request} timed out after {timeout}s")


__all__ = [
    "EmbeddingError",
    "EmbeddingProviderError",
    "EmbeddingTimeoutError",
]
