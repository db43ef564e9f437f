"""Shell functionality: per-tag allocation of clone shells."""

from graphclone.core.shell.operations import (
    clone_array_buffer,
    clone_array_view,
    clone_buffer,
    clone_pattern,
    clone_reduced,
    clone_scalar,
    clone_symbol,
    copy_array,
    init_clone_array,
    init_clone_by_tag,
    init_clone_map,
    init_clone_object,
    init_clone_set,
    init_plain_object,
    rebuild_frozen,
)

__all__ = [
    "init_clone_array",
    "init_clone_object",
    "init_plain_object",
    "init_clone_by_tag",
    "init_clone_map",
    "init_clone_set",
    "copy_array",
    "clone_array_buffer",
    "clone_buffer",
    "clone_array_view",
    "clone_pattern",
    "clone_scalar",
    "clone_reduced",
    "clone_symbol",
    "rebuild_frozen",
]
