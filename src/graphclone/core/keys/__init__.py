"""Key functionality: attribute enumeration, reads, and writes."""

from graphclone.core.keys.operations import (
    KeysFunc,
    all_keys,
    all_keys_in,
    assign_value,
    copy_properties,
    get_value,
    is_symbol_key,
    keys,
    keys_func,
    keys_in,
    slot_names,
)

__all__ = [
    "KeysFunc",
    "keys",
    "keys_in",
    "all_keys",
    "all_keys_in",
    "keys_func",
    "is_symbol_key",
    "slot_names",
    "get_value",
    "assign_value",
    "copy_properties",
]
