"""Configuration settings using Pydantic Settings.

Provides typed defaults for configured cloners with environment variable support.

Usage:
    from graphclone.config import CloneSettings

    # Load from environment variables (GRAPHCLONE_*)
    settings = CloneSettings()

    # Or override with explicit values
    settings = CloneSettings(deep=False, include_symbols=True)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install graphclone"
    ) from e

from graphclone.core.tags.models import CloneFlags


class CloneSettings(BaseSettings):  # type: ignore[misc]
    """Default behavior of a `Cloner`.

    Attributes:
        deep: Recurse into children instead of sharing them.
        flatten: Copy inherited data attributes into plain namespaces.
        include_symbols: Also copy dunder attributes.
        warn_on_lossy: Emit a warning whenever a value has no faithful copy
            and is shared or replaced by an empty namespace.

    Environment Variables:
        GRAPHCLONE_DEEP
        GRAPHCLONE_FLATTEN
        GRAPHCLONE_INCLUDE_SYMBOLS
        GRAPHCLONE_WARN_ON_LOSSY
    """

    model_config = SettingsConfigDict(
        env_prefix="GRAPHCLONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    deep: bool = True
    flatten: bool = False
    include_symbols: bool = False
    warn_on_lossy: bool = False

    @property
    def flags(self) -> CloneFlags:
        """Clone flags equivalent to these settings."""
        flags = CloneFlags.NONE
        if self.deep:
            flags |= CloneFlags.DEEP
        if self.flatten:
            flags |= CloneFlags.FLAT
        if self.include_symbols:
            flags |= CloneFlags.SYMBOLS
        return flags
