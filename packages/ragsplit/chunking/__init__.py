#!/usr/bin/env python3
"""
Chunking package for text processing.

This package provides the recursive character splitter that turns documents
into bounded-size, overlapping chunks.
"""

from ragsplit.chunking.base import CancellationSignal, TextSplitter
from ragsplit.chunking.exceptions import (
    ChunkingDomainError,
    InvalidConfigurationError,
    OperationCancelledError,
    OverlapConfigurationError,
)
from ragsplit.chunking.metrics import SplitMetrics, SplitPerformanceMonitor
from ragsplit.chunking.recursive import RecursiveCharacterSplitter
from ragsplit.chunking.value_objects.splitter_config import DEFAULT_SEPARATORS, SplitterConfig

__all__ = [
    # Splitters
    "TextSplitter",
    "RecursiveCharacterSplitter",
    "CancellationSignal",
    # Value Objects
    "SplitterConfig",
    "DEFAULT_SEPARATORS",
    # Metrics
    "SplitMetrics",
    "SplitPerformanceMonitor",
    # Exceptions
    "ChunkingDomainError",
    "InvalidConfigurationError",
    "OverlapConfigurationError",
    "OperationCancelledError",
]
