# ragsplit/config/__init__.py
"""
Configuration module for shared settings.
Provides a default Settings object instantiated from the environment.
"""

from .base import BaseConfig
from .embedding import EmbeddingConfig


class Settings(EmbeddingConfig):
    """
    Unified settings class that includes all configuration options.
    """


# Instantiate settings once and export
settings = Settings()

__all__ = ["BaseConfig", "EmbeddingConfig", "Settings", "settings"]
