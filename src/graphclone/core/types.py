"""Core type definitions for graphclone."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, Literal, Protocol

if TYPE_CHECKING:
    from graphclone.core.registry import TraversalRegistry

type Clone[T] = T
"""Type alias indicating a value is an independent clone of its input.

When you see `Clone[T]` in a return type, mutating the returned value never
affects the original graph, and mutating the original never affects it.
Values that cannot be faithfully copied are shared or replaced; see `base_clone`.
"""


class Decision(Enum):
    """Customizer answers that are not replacement values."""

    CONTINUE = "continue"
    """No opinion: clone this node with the default behavior."""

    def __repr__(self) -> str:
        return f"<{self.name}>"


CONTINUE: Final = Decision.CONTINUE


class Customizer(Protocol):
    """Hook invoked for every node of a clone traversal, the root included.

    The root is called as `customizer(value)`. Children are called with
    their key, the parent they were read from, and the traversal registry.
    Return `CONTINUE` to let the engine clone the node; any other return
    value, None included, replaces the node and its subtree verbatim.
    """

    def __call__(
        self,
        value: Any,
        key: Any = None,
        parent: Any = None,
        registry: TraversalRegistry | None = None,
    ) -> Any | Literal[Decision.CONTINUE]: ...
