"""Configuration module using Pydantic Settings.

Provides typed configuration for cloners with environment variable support.

Usage:
    from graphclone.config import CloneSettings

    settings = CloneSettings(deep=True, warn_on_lossy=True)
"""

from graphclone.config.settings import CloneSettings

__all__ = [
    "CloneSettings",
]
