"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from ragsplit.chunking import DEFAULT_SEPARATORS
from ragsplit.config import Settings, settings
from ragsplit.loaders import LoaderOptions


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self) -> None:
        config = Settings(_env_file=None)

        assert config.LOG_LEVEL == "INFO"
        assert config.CHUNK_SIZE == 1000
        assert config.CHUNK_OVERLAP == 200
        assert config.CHUNK_SEPARATORS == list(DEFAULT_SEPARATORS)
        assert config.LOADER_ENCODING == "utf-8"
        assert config.LOADER_MAX_SIZE == 0
        assert config.OPENAI_API_KEY is None
        assert config.EMBEDDING_MODEL == "text-embedding-3-small"
        assert config.EMBEDDING_DIMENSIONS is None
        assert config.EMBEDDING_BATCH_SIZE == 100

    def test_module_level_instance(self) -> None:
        assert isinstance(settings, Settings)

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        # Arrange
        monkeypatch.setenv("CHUNK_SIZE", "500")
        monkeypatch.setenv("CHUNK_OVERLAP", "50")
        monkeypatch.setenv("CHUNK_SEPARATORS", '["\\n", " "]')
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("EMBEDDING_DIMENSIONS", "256")

        # Act
        config = Settings(_env_file=None)

        # Assert
        assert config.CHUNK_SIZE == 500
        assert config.CHUNK_OVERLAP == 50
        assert config.CHUNK_SEPARATORS == ["\n", " "]
        assert config.LOG_LEVEL == "DEBUG"
        assert config.EMBEDDING_DIMENSIONS == 256

    def test_env_file(self, tmp_path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("CHUNK_SIZE=300\nLOADER_MAX_SIZE=4096\nUNRELATED=ignored\n", encoding="utf-8")

        config = Settings(_env_file=env_file)

        assert config.CHUNK_SIZE == 300
        assert config.LOADER_MAX_SIZE == 4096

    def test_negative_max_size_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOADER_MAX_SIZE", "-1")

        with pytest.raises(ValidationError, match="LOADER_MAX_SIZE cannot be negative"):
            Settings(_env_file=None)

    def test_loader_options_from_settings(self) -> None:
        config = Settings(_env_file=None, LOADER_ENCODING="latin-1", LOADER_MAX_SIZE=1024)

        options = LoaderOptions.from_settings(config)

        assert options.encoding == "latin-1"
        assert options.max_size == 1024

    def test_unknown_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "verbose")

        with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
            Settings(_env_file=None)

    def test_only_consumed_settings_are_declared(self) -> None:
        assert "ENVIRONMENT" not in Settings.model_fields
