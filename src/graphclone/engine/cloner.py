"""Configured cloner: flags and a customizer bound once, reused for many values.

Usage:
    cloner = Cloner.from_settings(CloneSettings(warn_on_lossy=True))
    snapshot = cloner(state)

    # Several roots, one registry: shared nodes are cloned once
    left, right = cloner.clone_many([left_tree, right_tree])
"""

from __future__ import annotations

import os
import warnings
from collections.abc import Iterable
from typing import Any

from graphclone.config import CloneSettings
from graphclone.core.registry import TraversalRegistry
from graphclone.core.tags import Category, CloneFlags, classify
from graphclone.core.types import CONTINUE, Customizer
from graphclone.engine.clone import base_clone

# Frames inside the package are skipped when attributing warnings
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep


class LossyCloneWarning(UserWarning):
    """Issued when a value has no faithful copy and is shared or emptied."""

    pass


class Cloner:
    """Reusable clone configuration.

    Args:
        flags: Clone flags. Defaults to the flags derived from `settings`.
        customizer: Optional hook consulted at every node.
        settings: Defaults for flags and lossy-value warnings. Loaded from
            the environment if omitted.
    """

    def __init__(
        self,
        flags: CloneFlags | None = None,
        customizer: Customizer | None = None,
        settings: CloneSettings | None = None,
    ):
        self._settings = settings if settings is not None else CloneSettings()
        self._flags = self._settings.flags if flags is None else flags
        self._customizer = customizer

    @classmethod
    def from_settings(
        cls, settings: CloneSettings, customizer: Customizer | None = None
    ) -> Cloner:
        """Build a cloner whose flags come entirely from `settings`."""
        return cls(customizer=customizer, settings=settings)

    @property
    def flags(self) -> CloneFlags:
        return self._flags

    @property
    def settings(self) -> CloneSettings:
        return self._settings

    def _customize(
        self,
        value: Any,
        key: Any = None,
        parent: Any = None,
        registry: TraversalRegistry | None = None,
    ) -> Any:
        """Run the user customizer, then warn about values that will be degraded."""
        if self._customizer is not None:
            if parent is None:
                result = self._customizer(value)
            else:
                result = self._customizer(value, key, parent, registry)
            if result is not CONTINUE:
                return result
        if classify(value, parent is not None) is Category.OPAQUE:
            fallback = "shared by reference" if parent is not None else "replaced by a namespace"
            warnings.warn(
                f"{type(value).__name__} at key {key!r} cannot be cloned and is {fallback}.",
                LossyCloneWarning,
                skip_file_prefixes=(_PACKAGE_DIR,),
            )
        return CONTINUE

    def _hook(self) -> Customizer | None:
        if self._settings.warn_on_lossy:
            return self._customize
        return self._customizer

    def __call__(self, value: Any, registry: TraversalRegistry | None = None) -> Any:
        """Clone one value.

        Args:
            value: Value to clone.
            registry: Optional registry shared with earlier calls.

        Returns:
            The clone.
        """
        return base_clone(value, self._flags, self._hook(), registry=registry)

    def clone_many(
        self, values: Iterable[Any], registry: TraversalRegistry | None = None
    ) -> list[Any]:
        """Clone several roots through one registry.

        Nodes reachable from more than one root are cloned once, so references
        between the roots survive in the clones.

        Args:
            values: Roots to clone, in order.
            registry: Registry to use. A new one is created if omitted.

        Returns:
            Clones in the order of `values`.
        """
        if registry is None:
            registry = TraversalRegistry()
        hook = self._hook()
        return [base_clone(value, self._flags, hook, registry=registry) for value in values]

    def __repr__(self) -> str:
        return f"Cloner(flags={self._flags!r}, customizer={self._customizer!r})"
