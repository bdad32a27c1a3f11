"""Version lookup for ragsplit."""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

logger = logging.getLogger(__name__)

# Source checkout: packages/ragsplit/version.py -> VERSION at the repository root
_VERSION_FILE = Path(__file__).resolve().parents[2] / "VERSION"


@lru_cache(maxsize=1)
def get_version() -> str:
    """Installed distribution version, else the checkout's VERSION file, else ``0.0.0``."""
    try:
        return version("ragsplit")
    except PackageNotFoundError:
        pass

    try:
        file_version = _VERSION_FILE.read_text(encoding="utf-8").strip()
    except OSError:
        file_version = ""

    if file_version:
        return file_version

    logger.warning("No installed metadata or VERSION file found for ragsplit")
    return "0.0.0"


__version__ = get_version()
