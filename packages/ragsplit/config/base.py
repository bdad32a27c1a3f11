# ragsplit/config/base.py

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ragsplit.chunking.value_objects.splitter_config import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_SEPARATORS,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseConfig(BaseSettings):
    """
    Base configuration shared by the splitter, loaders and embedders.
    Values come from the environment or a ``.env`` file.
    """

    # Logging Configuration
    LOG_LEVEL: str = "INFO"

    # Splitter Configuration
    CHUNK_SIZE: int = DEFAULT_CHUNK_SIZE
    CHUNK_OVERLAP: int = DEFAULT_CHUNK_OVERLAP
    # JSON list in the environment, e.g. CHUNK_SEPARATORS='["\n\n", " ", ""]'
    CHUNK_SEPARATORS: list[str] = Field(default_factory=lambda: list(DEFAULT_SEPARATORS))

    # Loader Configuration
    LOADER_ENCODING: str = "utf-8"
    LOADER_MAX_SIZE: int = 0  # Bytes, 0 means unlimited

    # Pydantic model config
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("LOADER_MAX_SIZE")
    @classmethod
    def _validate_max_size(cls, value: int) -> int:
        if value < 0:
            raise ValueError("LOADER_MAX_SIZE cannot be negative")
        return value
