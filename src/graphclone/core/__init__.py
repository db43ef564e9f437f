"""Core functionalities: stateless classification, keys, and shell allocation.

Architecture Note:
    core/ contains pure building blocks with no traversal state. The
    recursive, registry-threading clone procedure lives in engine/.
"""

from graphclone.core.keys import (
    all_keys,
    all_keys_in,
    assign_value,
    copy_properties,
    get_value,
    keys,
    keys_func,
    keys_in,
)
from graphclone.core.pattern import MatchResult, StatefulPattern
from graphclone.core.registry import TraversalRegistry
from graphclone.core.shell import init_clone_array, init_clone_by_tag, init_clone_object
from graphclone.core.tags import (
    CLONEABLE_TAGS,
    Category,
    CloneFlags,
    Tag,
    classify,
    get_tag,
    is_array_view,
    is_buffer,
    is_plain_object,
)
from graphclone.core.types import CONTINUE, Clone, Customizer, Decision

__all__ = [
    # Types
    "Clone",
    "Customizer",
    "Decision",
    "CONTINUE",
    # Tags
    "Tag",
    "Category",
    "CloneFlags",
    "CLONEABLE_TAGS",
    "get_tag",
    "classify",
    "is_buffer",
    "is_array_view",
    "is_plain_object",
    # Keys
    "keys",
    "keys_in",
    "all_keys",
    "all_keys_in",
    "keys_func",
    "get_value",
    "assign_value",
    "copy_properties",
    # Shells
    "init_clone_array",
    "init_clone_object",
    "init_clone_by_tag",
    # Registry
    "TraversalRegistry",
    # Patterns
    "MatchResult",
    "StatefulPattern",
]
