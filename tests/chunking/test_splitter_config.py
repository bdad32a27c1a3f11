#!/usr/bin/env python3

"""Tests for the splitter configuration value object and domain exceptions."""

import pytest

from ragsplit.chunking import (
    DEFAULT_SEPARATORS,
    ChunkingDomainError,
    InvalidConfigurationError,
    OperationCancelledError,
    OverlapConfigurationError,
    SplitterConfig,
)
from ragsplit.config import Settings


class TestSplitterConfig:
    """Test suite for SplitterConfig value object."""

    def test_defaults(self) -> None:
        """Test the default configuration."""
        # Act
        config = SplitterConfig()

        # Assert
        assert config.chunk_size == 1000
        assert config.chunk_overlap == 200
        assert config.separators == DEFAULT_SEPARATORS
        assert config.stride == 800

    def test_default_separators_run_coarse_to_fine(self) -> None:
        assert DEFAULT_SEPARATORS[:2] == ("\n\n", "\n")
        assert "。" in DEFAULT_SEPARATORS
        assert DEFAULT_SEPARATORS[-2:] == (" ", "")

    def test_custom_separators_are_stored_as_tuple(self) -> None:
        separators = ["\n", " "]

        config = SplitterConfig(100, 10, separators)
        separators.append("")

        assert config.separators == ("\n", " ")

    def test_empty_separator_list_is_allowed(self) -> None:
        config = SplitterConfig(100, 10, [])

        assert config.separators == ()

    def test_zero_overlap_is_allowed(self) -> None:
        assert SplitterConfig(chunk_size=1, chunk_overlap=0).stride == 1

    @pytest.mark.parametrize("chunk_size", [0, -10])
    def test_non_positive_chunk_size_rejected(self, chunk_size: int) -> None:
        with pytest.raises(InvalidConfigurationError, match="chunk_size must be positive"):
            SplitterConfig(chunk_size=chunk_size, chunk_overlap=0)

    def test_negative_overlap_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="chunk_overlap cannot be negative"):
            SplitterConfig(chunk_size=100, chunk_overlap=-1)

    @pytest.mark.parametrize(("chunk_size", "chunk_overlap"), [(100, 100), (500, 1000)])
    def test_overlap_not_below_chunk_size_rejected(self, chunk_size: int, chunk_overlap: int) -> None:
        # Act
        with pytest.raises(OverlapConfigurationError) as exc_info:
            SplitterConfig(chunk_size=chunk_size, chunk_overlap=chunk_overlap)

        # Assert
        assert exc_info.value.overlap == chunk_overlap
        assert exc_info.value.chunk_size == chunk_size
        assert f"Overlap {chunk_overlap} must be less than chunk size {chunk_size}" in str(exc_info.value)

    @pytest.mark.parametrize("value", [True, 10.5, "100", None])
    def test_non_integer_chunk_size_rejected(self, value: object) -> None:
        with pytest.raises(InvalidConfigurationError, match="chunk_size must be an integer"):
            SplitterConfig(chunk_size=value, chunk_overlap=0)  # type: ignore[arg-type]

    def test_non_integer_overlap_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="chunk_overlap must be an integer"):
            SplitterConfig(chunk_size=100, chunk_overlap=1.5)  # type: ignore[arg-type]

    def test_non_string_separator_rejected(self) -> None:
        with pytest.raises(InvalidConfigurationError, match="Separators must be strings, got int"):
            SplitterConfig(100, 10, ["\n", 3])  # type: ignore[list-item]

    def test_config_is_immutable(self) -> None:
        config = SplitterConfig()

        with pytest.raises(AttributeError):
            config.chunk_size = 10  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        first = SplitterConfig(100, 10, [" "])
        second = SplitterConfig(100, 10, (" ",))
        third = SplitterConfig(100, 20, [" "])

        assert first == second
        assert hash(first) == hash(second)
        assert first != third
        assert first != "not a config"
        assert len({first, second, third}) == 2

    def test_to_dict(self) -> None:
        config = SplitterConfig(100, 10, ["\n", ""])

        assert config.to_dict() == {"chunk_size": 100, "chunk_overlap": 10, "separators": ["\n", ""]}

    def test_repr(self) -> None:
        assert repr(SplitterConfig(100, 10, [" "])) == "SplitterConfig(chunk_size=100, chunk_overlap=10, separators=[' '])"

    def test_from_settings(self) -> None:
        # Arrange
        settings = Settings(_env_file=None, CHUNK_SIZE=500, CHUNK_OVERLAP=50, CHUNK_SEPARATORS=["\n", " "])

        # Act
        config = SplitterConfig.from_settings(settings)

        # Assert
        assert config == SplitterConfig(500, 50, ["\n", " "])

    def test_from_settings_validates(self) -> None:
        settings = Settings(_env_file=None, CHUNK_SIZE=100, CHUNK_OVERLAP=100)

        with pytest.raises(OverlapConfigurationError):
            SplitterConfig.from_settings(settings)


class TestDomainExceptions:
    """Test suite for splitting domain exceptions."""

    def test_hierarchy(self) -> None:
        assert issubclass(InvalidConfigurationError, ChunkingDomainError)
        assert issubclass(OverlapConfigurationError, InvalidConfigurationError)
        assert issubclass(OperationCancelledError, ChunkingDomainError)

    def test_domain_error_to_dict(self) -> None:
        error = InvalidConfigurationError("chunk_size must be positive", {"chunk_size": 0})

        assert error.to_dict() == {
            "error_code": "InvalidConfigurationError",
            "detail": "chunk_size must be positive",
            "details": {"chunk_size": 0},
        }

    def test_details_default_to_empty(self) -> None:
        error = ChunkingDomainError("boom")

        assert error.message == "boom"
        assert error.details == {}
        assert str(error) == "boom"

    def test_overlap_error_details(self) -> None:
        error = OverlapConfigurationError(overlap=10, chunk_size=5)

        assert error.details == {"overlap": 10, "chunk_size": 5}

    def test_cancelled_error_progress(self) -> None:
        error = OperationCancelledError(completed_documents=2, total_documents=5)

        assert str(error) == "Split operation cancelled"
        assert error.to_dict()["details"] == {"completed_documents": 2, "total_documents": 5}
