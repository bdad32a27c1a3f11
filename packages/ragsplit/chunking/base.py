#!/usr/bin/env python3
"""
Text splitter base class.

This module provides the abstract base class for splitters together with the
document assembly shared by every splitter: chunk ids, positional metadata and
cooperative cancellation between documents.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence, Sized
from typing import Protocol

from ragsplit.chunking.exceptions import OperationCancelledError
from ragsplit.chunking.metrics import SplitPerformanceMonitor
from ragsplit.chunking.value_objects.splitter_config import SplitterConfig
from ragsplit.dtos.document import Document, chunk_id

logger = logging.getLogger(__name__)


class CancellationSignal(Protocol):
    """Anything exposing ``is_set()``, e.g. ``threading.Event`` or ``asyncio.Event``."""

    def is_set(self) -> bool: ...


class TextSplitter(ABC):
    """
    Abstract base class for document splitters.

    Subclasses implement ``split_text``; this class turns the resulting chunk
    strings into chunk documents.
    """

    def __init__(
        self,
        name: str,
        config: SplitterConfig | None = None,
        monitor: SplitPerformanceMonitor | None = None,
    ) -> None:
        """
        Initialize the splitter.

        Args:
            name: The name of the splitter
            config: Validated splitter configuration, defaults to SplitterConfig()
            monitor: Performance monitor, a private one is created if omitted
        """
        self._name = name
        self._config = config or SplitterConfig()
        self._monitor = monitor or SplitPerformanceMonitor()

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> SplitterConfig:
        return self._config

    @property
    def monitor(self) -> SplitPerformanceMonitor:
        return self._monitor

    @abstractmethod
    def split_text(self, text: str, separators: Sequence[str] | None = None) -> list[str]:
        """
        Split raw text into ordered chunk strings.

        Args:
            text: The text to split
            separators: Separators to use, defaults to the configured ones

        Returns:
            Ordered chunk strings
        """

    def split_document(self, document: Document) -> list[Document]:
        """
        Split one document into chunk documents.

        Chunk ids are ``{parent_id}_chunk_{index}`` and each chunk's metadata is
        a copy of the parent's with the positional fields overwritten. Empty
        chunk strings are dropped before indexing.

        Args:
            document: Source document

        Returns:
            Chunk documents in reading order
        """
        with self._monitor.measure(document.id, len(document.content)) as metrics:
            pieces = [piece for piece in self.split_text(document.content) if piece]
            metrics.output_chunks = len(pieces)

        total_chunks = len(pieces)
        chunks: list[Document] = []
        for index, piece in enumerate(pieces):
            metadata = document.metadata.model_copy(
                update={
                    "chunk_index": index,
                    "total_chunks": total_chunks,
                    "parent_id": document.id,
                },
                deep=True,
            )
            chunks.append(Document(id=chunk_id(document.id, index), content=piece, metadata=metadata))

        return chunks

    def iter_split(
        self,
        documents: Iterable[Document],
        cancel_event: CancellationSignal | None = None,
    ) -> Iterator[list[Document]]:
        """
        Split documents one at a time, yielding each document's chunks.

        Every yielded list is complete. Cancellation is checked before each
        document; a document already being split runs to completion.

        Args:
            documents: Source documents
            cancel_event: Optional cooperative cancellation signal

        Yields:
            The chunk documents of one source document

        Raises:
            OperationCancelledError: If cancel_event is set between documents
        """
        total = len(documents) if isinstance(documents, Sized) else None

        for completed, document in enumerate(documents):
            self._raise_if_cancelled(cancel_event, completed, total)
            yield self.split_document(document)

    def split(
        self,
        documents: Iterable[Document],
        cancel_event: CancellationSignal | None = None,
    ) -> list[Document]:
        """
        Split a batch of documents into chunk documents.

        The batch is atomic: on cancellation no chunks are returned.

        Args:
            documents: Source documents
            cancel_event: Optional cooperative cancellation signal

        Returns:
            Chunk documents of every source document, in order

        Raises:
            OperationCancelledError: If cancel_event is set between documents
        """
        result: list[Document] = []
        for chunks in self.iter_split(documents, cancel_event):
            result.extend(chunks)

        logger.debug("%s produced %d chunks", self._name, len(result))
        return result

    async def split_async(
        self,
        documents: Iterable[Document],
        cancel_event: CancellationSignal | None = None,
    ) -> list[Document]:
        """
        Asynchronous batch split.

        Each document is split in the default executor so the event loop is
        not blocked. Same atomicity and cancellation rules as ``split``.
        """
        loop = asyncio.get_running_loop()
        total = len(documents) if isinstance(documents, Sized) else None

        result: list[Document] = []
        for completed, document in enumerate(documents):
            self._raise_if_cancelled(cancel_event, completed, total)
            chunks = await loop.run_in_executor(None, self.split_document, document)
            result.extend(chunks)

        return result

    def _raise_if_cancelled(
        self,
        cancel_event: CancellationSignal | None,
        completed: int,
        total: int | None,
    ) -> None:
        if cancel_event is not None and cancel_event.is_set():
            logger.info("Split cancelled after %d document(s)", completed)
            raise OperationCancelledError(completed, total)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self._name}', config={self._config!r})"
