"""Traversal registry mapping originals to their clones by identity.

Usage:
    registry = TraversalRegistry()
    first = base_clone(a, CloneFlags.DEEP, registry=registry)
    second = base_clone(b, CloneFlags.DEEP, registry=registry)
    # Anything reachable from both a and b was cloned once
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class TraversalRegistry:
    """Identity-keyed map from already visited originals to their clones.

    Entries are keyed by `id()`. The registry keeps a reference to each
    original so an id cannot be reused by another object while the registry
    is alive. Not thread-safe: callers sharing one registry across threads
    must serialize access.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._entries: dict[int, tuple[Any, Any]] = {}

    def get(self, original: Any, default: Any = None) -> Any:
        """Get the clone registered for an original.

        Args:
            original: Value from the source graph.
            default: Returned if the original has not been visited.

        Returns:
            The registered clone, which may still be partially populated.
        """
        entry = self._entries.get(id(original))
        return default if entry is None else entry[1]

    def set(self, original: Any, clone: Any) -> None:
        """Register the clone of an original, replacing any previous entry."""
        self._entries[id(original)] = (original, clone)

    def has(self, original: Any) -> bool:
        """Check if an original has been visited."""
        return id(original) in self._entries

    def delete(self, original: Any) -> bool:
        """Forget an original.

        Returns:
            True if an entry was removed, False if none existed.
        """
        return self._entries.pop(id(original), None) is not None

    def clear(self) -> None:
        """Forget every original."""
        self._entries.clear()

    def originals(self) -> Iterator[Any]:
        """Iterate visited originals in registration order."""
        return (original for original, _ in self._entries.values())

    def __contains__(self, original: object) -> bool:
        return self.has(original)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TraversalRegistry(size={len(self._entries)})"
