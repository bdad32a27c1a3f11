#!/usr/bin/env python3
"""
Immutable splitter configuration value object.

This module defines the configuration for recursive character splitting with
built-in validation of the size, overlap and separator rules.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ragsplit.chunking.exceptions import InvalidConfigurationError, OverlapConfigurationError

if TYPE_CHECKING:
    from ragsplit.config import Settings

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200

# Coarsest to finest; the empty string splits into single characters
DEFAULT_SEPARATORS: tuple[str, ...] = (
    "\n\n",  # Paragraphs
    "\n",  # Line breaks
    "。",  # CJK full stop
    ".",  # Full stop
    "！",  # CJK exclamation mark
    "!",  # Exclamation mark
    "？",  # CJK question mark
    "?",  # Question mark
    "；",  # CJK semicolon
    ";",  # Semicolon
    "，",  # CJK comma
    ",",  # Comma
    " ",  # Words
    "",  # Characters (last resort)
)


class SplitterConfig:
    """
    Immutable configuration for recursive character splitting.

    All sizes are counted in characters (Unicode code points), never bytes
    or model tokens.
    """

    __slots__ = ("_chunk_size", "_chunk_overlap", "_separators")

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
        separators: Iterable[str] | None = None,
    ) -> None:
        """Initialize configuration with validation.

        Args:
            chunk_size: Maximum desired chunk length in characters
            chunk_overlap: Trailing characters carried into the next chunk
            separators: Separators in priority order, defaults to DEFAULT_SEPARATORS

        Raises:
            InvalidConfigurationError: If any value violates the rules
            OverlapConfigurationError: If chunk_overlap >= chunk_size
        """
        object.__setattr__(self, "_chunk_size", chunk_size)
        object.__setattr__(self, "_chunk_overlap", chunk_overlap)
        object.__setattr__(
            self,
            "_separators",
            DEFAULT_SEPARATORS if separators is None else tuple(separators),
        )
        self._validate()

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def chunk_size(self) -> int:
        return self._chunk_size

    @property
    def chunk_overlap(self) -> int:
        return self._chunk_overlap

    @property
    def separators(self) -> tuple[str, ...]:
        return self._separators

    @property
    def stride(self) -> int:
        """Advance between fixed-size fallback windows."""
        return self._chunk_size - self._chunk_overlap

    def _validate(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self._chunk_size, bool) or not isinstance(self._chunk_size, int):
            raise InvalidConfigurationError(
                "chunk_size must be an integer",
                {"chunk_size": self._chunk_size},
            )

        if isinstance(self._chunk_overlap, bool) or not isinstance(self._chunk_overlap, int):
            raise InvalidConfigurationError(
                "chunk_overlap must be an integer",
                {"chunk_overlap": self._chunk_overlap},
            )

        if self._chunk_size <= 0:
            raise InvalidConfigurationError(
                "chunk_size must be positive",
                {"chunk_size": self._chunk_size},
            )

        if self._chunk_overlap < 0:
            raise InvalidConfigurationError(
                "chunk_overlap cannot be negative",
                {"chunk_overlap": self._chunk_overlap},
            )

        if self._chunk_overlap >= self._chunk_size:
            raise OverlapConfigurationError(self._chunk_overlap, self._chunk_size)

        for separator in self._separators:
            if not isinstance(separator, str):
                raise InvalidConfigurationError(
                    f"Separators must be strings, got {type(separator).__name__}",
                    {"separator": repr(separator)},
                )

    @classmethod
    def from_settings(cls, settings: "Settings") -> "SplitterConfig":
        """Build a configuration from application settings.

        Args:
            settings: Loaded application settings

        Returns:
            Validated configuration
        """
        return cls(
            chunk_size=settings.CHUNK_SIZE,
            chunk_overlap=settings.CHUNK_OVERLAP,
            separators=settings.CHUNK_SEPARATORS,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "chunk_size": self._chunk_size,
            "chunk_overlap": self._chunk_overlap,
            "separators": list(self._separators),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SplitterConfig):
            return False

        return (
            self._chunk_size == other._chunk_size
            and self._chunk_overlap == other._chunk_overlap
            and self._separators == other._separators
        )

    def __hash__(self) -> int:
        return hash((self._chunk_size, self._chunk_overlap, self._separators))

    def __repr__(self) -> str:
        return (
            f"SplitterConfig(chunk_size={self._chunk_size}, "
            f"chunk_overlap={self._chunk_overlap}, separators={list(self._separators)!r})"
        )
