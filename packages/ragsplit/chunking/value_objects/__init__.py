#!/usr/bin/env python3
"""
Value objects for the splitting domain.

Value objects are immutable objects that represent concepts in the domain
without identity.
"""

from ragsplit.chunking.value_objects.splitter_config import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_SEPARATORS,
    SplitterConfig,
)

__all__ = ["DEFAULT_CHUNK_OVERLAP", "DEFAULT_CHUNK_SIZE", "DEFAULT_SEPARATORS", "SplitterConfig"]
