"""graphclone: cycle-safe cloning of arbitrary Python value graphs.

Usage:
    from dataclasses import dataclass, field
    from graphclone import clone, clone_deep, clone_deep_with, CONTINUE

    @dataclass
    class Node:
        name: str
        edges: list["Node"] = field(default_factory=list)

    root = Node("root")
    root.edges.append(root)

    copy = clone_deep(root)
    assert copy.edges[0] is copy
    assert copy is not root

    shallow = clone(root)
    assert shallow.edges is root.edges
"""

__version__ = "0.1.0"

# Core primitives
from graphclone.core import (
    CLONEABLE_TAGS,
    CONTINUE,
    Category,
    Clone,
    CloneFlags,
    Customizer,
    Decision,
    MatchResult,
    StatefulPattern,
    Tag,
    TraversalRegistry,
    classify,
    get_tag,
)

# Engine
from graphclone.engine import (
    Cloner,
    LossyCloneWarning,
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

__all__ = [
    # Version
    "__version__",
    # Core
    "Clone",
    "Customizer",
    "Decision",
    "CONTINUE",
    "CloneFlags",
    "Category",
    "Tag",
    "CLONEABLE_TAGS",
    "classify",
    "get_tag",
    "TraversalRegistry",
    "MatchResult",
    "StatefulPattern",
    # Engine
    "base_clone",
    "clone",
    "clone_with",
    "clone_deep",
    "clone_deep_with",
    "clone_flat",
    "clone_deep_flat",
    "clone_full",
    "clone_deep_full",
    "Cloner",
    "LossyCloneWarning",
]
