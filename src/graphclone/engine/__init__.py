"""Engine: the recursive clone procedure and its configured facade."""

from graphclone.engine.clone import (
    base_clone,
    clone,
    clone_deep,
    clone_deep_flat,
    clone_deep_full,
    clone_deep_with,
    clone_flat,
    clone_full,
    clone_with,
)
from graphclone.engine.cloner import Cloner, LossyCloneWarning

__all__ = [
    # Procedure
    "base_clone",
    "clone",
    "clone_with",
    "clone_deep",
    "clone_deep_with",
    "clone_flat",
    "clone_deep_flat",
    "clone_full",
    "clone_deep_full",
    # Facade
    "Cloner",
    "LossyCloneWarning",
]
