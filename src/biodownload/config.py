"""Configuration management for biodownload.

This module provides a global configuration system for controlling transfer behavior.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_cache_dir

PACKAGE_NAME = "biodownload"


@dataclass(frozen=True)
class Config:
    """Global configuration for biodownload package.

    Attributes:
        chunk_size: Number of bytes read from the source per copy cycle.
        timeout_seconds: Timeout for opening and reading remote streams.
        user_agent: User-Agent header for HTTP requests.
        download_dir: Default directory for catalog downloads.
    """

    chunk_size: int = 2048
    timeout_seconds: float = 60.0
    user_agent: str = "biodownload/0.1.0 (+https://github.com/monarch-initiative/biodownload)"
    download_dir: Path = Path(user_cache_dir(PACKAGE_NAME))

    def __post_init__(self) -> None:
        size = self.chunk_size
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise ValueError(f"chunk_size must be a positive integer, got {self.chunk_size!r}")


_CONFIG = Config()


def get_config() -> Config:
    """Get the current global configuration.

    Returns:
        The current Config instance.
    """
    return _CONFIG


def configure(**kwargs: object) -> Config:
    """Update the global configuration.

    Args:
        **kwargs: Configuration parameters to update (see Config attributes).

    Returns:
        The updated Config instance.

    Raises:
        ValueError: If ``chunk_size`` is not a positive integer.

    Example:
        >>> import biodownload as bd
        >>> bd.configure(chunk_size=8192)
    """
    global _CONFIG  # noqa: PLW0603
    _CONFIG = replace(_CONFIG, **kwargs)  # type: ignore[arg-type]
    return _CONFIG


def get_download_dir() -> Path:
    """Return the directory catalog downloads are written to by default."""
    override = os.getenv("BIODOWNLOAD_DIR")
    if override:
        return Path(override).expanduser()
    return get_config().download_dir
