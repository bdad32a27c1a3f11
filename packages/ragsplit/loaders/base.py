"""Base abstraction for document loaders."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ragsplit.dtos.document import Document, MetadataValue

if TYPE_CHECKING:
    from ragsplit.config import Settings


@dataclass
class LoaderOptions:
    """Options shared by loaders.

    Attributes:
        encoding: Text encoding used when the content has no BOM
        errors: Decode error handling ("strict", "replace" or "ignore")
        max_size: Maximum source size in bytes, 0 means unlimited
        metadata: Extra metadata added to every loaded document
    """

    encoding: str = "utf-8"
    errors: str = "strict"
    max_size: int = 0
    metadata: dict[str, MetadataValue] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.max_size < 0:
            raise ValueError(f"max_size cannot be negative, got {self.max_size}")
        if self.errors not in ("strict", "replace", "ignore"):
            raise ValueError(f"errors must be 'strict', 'replace' or 'ignore', got {self.errors!r}")

    @classmethod
    def from_settings(cls, settings: Settings) -> LoaderOptions:
        return cls(encoding=settings.LOADER_ENCODING, max_size=settings.LOADER_MAX_SIZE)


class BaseLoader(ABC):
    """Abstract base class for document loaders.

    Loaders turn a source (a file path or a URL) into a ``Document``.
    """

    def __init__(self, options: LoaderOptions | None = None) -> None:
        self.options = options or LoaderOptions()

    @abstractmethod
    async def load(self, source: str) -> Document:
        """Load a single document from a local source.

        Raises:
            LoaderError: If the source cannot be loaded
        """

    @abstractmethod
    async def load_url(self, url: str) -> Document:
        """Load a single document from a URL.

        Raises:
            LoaderError: If the URL cannot be fetched
        """

    @abstractmethod
    async def load_multiple(self, sources: list[str]) -> list[Document]:
        """Load several local sources, failing the batch on the first error.

        Raises:
            LoaderError: If any source cannot be loaded
        """
