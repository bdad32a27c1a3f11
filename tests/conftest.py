"""Shared pytest fixtures for the ragsplit test suite."""

from collections.abc import Callable, Sequence

import pytest

from ragsplit.chunking import RecursiveCharacterSplitter, SplitterConfig
from ragsplit.dtos import Document, DocumentMetadata


@pytest.fixture()
def make_splitter() -> Callable[..., RecursiveCharacterSplitter]:
    """Factory for splitters with an explicit configuration."""

    def _make(
        chunk_size: int,
        chunk_overlap: int = 0,
        separators: Sequence[str] | None = None,
    ) -> RecursiveCharacterSplitter:
        return RecursiveCharacterSplitter(SplitterConfig(chunk_size, chunk_overlap, separators))

    return _make


@pytest.fixture()
def sample_document() -> Document:
    return Document(
        id="doc1",
        content="alpha beta gamma delta epsilon",
        metadata=DocumentMetadata(
            source="/data/greek.txt",
            title="greek.txt",
            author="Tester",
            extra={"lang": "en", "nested": {"section": 1}},
        ),
    )
