#!/usr/bin/env python3
"""
Recursive character text splitter.

Splits text with a hierarchy of separators, preferring natural boundaries such
as paragraphs and sentences, merges the pieces back into size-bounded chunks
with overlap, and falls back to fixed-size windows when no separator is left.
"""

import logging
from collections.abc import Sequence

from ragsplit.chunking.base import TextSplitter
from ragsplit.chunking.exceptions import OverlapConfigurationError
from ragsplit.chunking.metrics import SplitPerformanceMonitor
from ragsplit.chunking.value_objects.splitter_config import SplitterConfig

logger = logging.getLogger(__name__)


class RecursiveCharacterSplitter(TextSplitter):
    """
    Recursive character text splitter.

    Text longer than ``chunk_size`` is split on the first separator. The
    pieces are accumulated into chunks; any piece that is still too long is
    split again with the remaining separators. When the separators run out
    the text is cut into overlapping fixed-size windows.
    """

    def __init__(
        self,
        config: SplitterConfig | None = None,
        monitor: SplitPerformanceMonitor | None = None,
    ) -> None:
        super().__init__("recursive", config, monitor)

    def split_text(self, text: str, separators: Sequence[str] | None = None) -> list[str]:
        """
        Recursively split text into chunks.

        Args:
            text: Text to split
            separators: Separators in priority order, defaults to the configured ones

        Returns:
            Stripped chunk strings in reading order
        """
        if separators is None:
            separators = self._config.separators

        if not text:
            return []

        if len(text) <= self._config.chunk_size:
            return [text.strip()]

        if not separators:
            return self.split_by_size(text)

        separator = separators[0]
        remaining = separators[1:]

        # Literal split; the empty separator means single characters
        pieces = list(text) if separator == "" else text.split(separator)

        return self._merge_splits(pieces, separator, remaining)

    def _merge_splits(
        self,
        pieces: Sequence[str],
        separator: str,
        remaining: Sequence[str],
    ) -> list[str]:
        """
        Merge same-level pieces into size-bounded chunks.

        Args:
            pieces: Pieces produced by splitting on ``separator``
            separator: Separator used to join pieces inside a chunk
            remaining: Separators left for oversized pieces

        Returns:
            Chunk strings; sub-chunks of oversized pieces appear in place
        """
        chunk_size = self._config.chunk_size
        chunks: list[str] = []
        buffer = ""

        for raw_piece in pieces:
            piece = raw_piece.strip()
            if not piece:
                continue

            if len(piece) > chunk_size:
                if buffer:
                    chunks.append(buffer.strip())
                    buffer = ""
                chunks.extend(self.split_text(piece, remaining))
                continue

            joiner = separator if buffer else ""
            if len(buffer) + len(joiner) + len(piece) > chunk_size:
                chunks.append(buffer.strip())
                # A non-empty seed already ends with the separator
                buffer = self._seed_overlap(chunks[-1], separator, chunk_size - len(piece))
                joiner = ""

            buffer += joiner + piece

        if buffer:
            chunks.append(buffer.strip())

        return chunks

    def _seed_overlap(self, last_chunk: str, separator: str, budget: int) -> str:
        """
        Build the start of the next buffer from the last flushed chunk.

        Args:
            last_chunk: Most recently flushed chunk
            separator: Separator of the current level, appended after the tail
            budget: Room left for the seed once the next piece is appended

        Returns:
            Tail of ``last_chunk`` followed by ``separator``, or "" when there is no room
        """
        overlap = self._config.chunk_overlap
        if overlap <= 0 or not last_chunk:
            return ""

        tail_length = min(overlap, len(last_chunk), budget - len(separator))
        if tail_length <= 0:
            return ""

        return last_chunk[-tail_length:] + separator

    def split_by_size(self, text: str) -> list[str]:
        """
        Cut text into overlapping fixed-size windows.

        Windows advance by ``chunk_size - chunk_overlap`` characters; the window
        that reaches the end of the text is the last one.

        Args:
            text: Text with no usable separator left

        Returns:
            Stripped, non-empty windows

        Raises:
            OverlapConfigurationError: If the stride is not positive
        """
        chunk_size = self._config.chunk_size
        stride = chunk_size - self._config.chunk_overlap
        if stride <= 0:
            raise OverlapConfigurationError(self._config.chunk_overlap, chunk_size)

        logger.debug("Falling back to fixed-size windows for %d characters", len(text))

        chunks: list[str] = []
        length = len(text)
        start = 0
        while start < length:
            end = min(start + chunk_size, length)
            window = text[start:end].strip()
            if window:
                chunks.append(window)
            if end == length:
                break
            start += stride

        return chunks
