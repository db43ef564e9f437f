"""Tag functionality: runtime tags, categories, flags, and classification."""

from graphclone.core.tags.models import (
    CLONEABLE_TAGS,
    TAG_CATEGORIES,
    Category,
    CloneFlags,
    Tag,
)
from graphclone.core.tags.operations import (
    classify,
    get_tag,
    is_array_view,
    is_buffer,
    is_frozen,
    is_plain_object,
    is_primitive,
)

__all__ = [
    # Models
    "Tag",
    "Category",
    "CloneFlags",
    "CLONEABLE_TAGS",
    "TAG_CATEGORIES",
    # Operations
    "get_tag",
    "classify",
    "is_primitive",
    "is_buffer",
    "is_array_view",
    "is_plain_object",
    "is_frozen",
]
