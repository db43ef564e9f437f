"""Pure functions for enumerating, reading, and writing structure keys.

An object's own keys are its instance attributes (the `__dict__` entries and
set slots). Dunder names in `__dict__` are symbol-like keys and are only
reported by the `all_*` variants. Inherited keys add class-level data
attributes found along the MRO.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

from graphclone.core.tags.models import CloneFlags

KeysFunc = Callable[[Any], list[str]]
"""Signature: (structure) -> attribute names in enumeration order"""

_CLASS_MACHINERY: frozenset[str] = frozenset(
    {
        "__module__",
        "__qualname__",
        "__doc__",
        "__dict__",
        "__weakref__",
        "__slots__",
        "__annotations__",
        "__annotate__",
        "__firstlineno__",
        "__static_attributes__",
        "__orig_bases__",
        "__parameters__",
        "__type_params__",
    }
)


# Bounded so classes created at runtime can be collected
_CLASS_CACHE_SIZE = 1024


def is_symbol_key(name: str) -> bool:
    """Dunder names are the symbol-like keys of a structure."""
    return len(name) > 4 and name.startswith("__") and name.endswith("__")


@functools.lru_cache(maxsize=_CLASS_CACHE_SIZE)
def slot_names(cls: type) -> tuple[str, ...]:
    """Attribute names backed by `__slots__` anywhere in the MRO, base classes first.

    Private slot names are returned in their mangled form.
    """
    names: list[str] = []
    for base in reversed(cls.__mro__):
        slots = base.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{base.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return tuple(names)


def _instance_dict(obj: Any) -> dict[str, Any]:
    try:
        storage = vars(obj)
    except TypeError:
        return {}
    return storage if isinstance(storage, dict) else {}


def _own(obj: Any, symbols: bool) -> list[str]:
    result = [
        name
        for name in _instance_dict(obj)
        if isinstance(name, str) and (symbols or not is_symbol_key(name))
    ]
    for name in slot_names(type(obj)):
        # Unset slots have no value to copy
        if name not in result and hasattr(obj, name):
            result.append(name)
    return result


def _inherited(obj: Any, symbols: bool) -> list[str]:
    result = _own(obj, symbols)
    for base in type(obj).__mro__[:-1]:
        for name, attr in vars(base).items():
            if name in result or name in _CLASS_MACHINERY:
                continue
            if is_symbol_key(name) and not symbols:
                continue
            # Methods, properties, and slot descriptors are behavior, not data
            if callable(attr) or hasattr(type(attr), "__get__"):
                continue
            result.append(name)
    return result


def keys(obj: Any) -> list[str]:
    """Own attribute names, symbol-like names excluded."""
    return _own(obj, symbols=False)


def keys_in(obj: Any) -> list[str]:
    """Own and inherited data attribute names, symbol-like names excluded."""
    return _inherited(obj, symbols=False)


def all_keys(obj: Any) -> list[str]:
    """Own attribute names including symbol-like names."""
    return _own(obj, symbols=True)


def all_keys_in(obj: Any) -> list[str]:
    """Own and inherited data attribute names including symbol-like names."""
    return _inherited(obj, symbols=True)


def keys_func(flags: CloneFlags) -> KeysFunc:
    """Select the key enumeration routine for a set of clone flags.

    Args:
        flags: Clone flags. Only FLAT and SYMBOLS are consulted.

    Returns:
        One of `keys`, `keys_in`, `all_keys`, `all_keys_in`.
    """
    if flags & CloneFlags.SYMBOLS:
        return all_keys_in if flags & CloneFlags.FLAT else all_keys
    return keys_in if flags & CloneFlags.FLAT else keys


def get_value(obj: Any, key: str) -> Any:
    """Read an attribute, preferring instance storage over class lookup."""
    storage = _instance_dict(obj)
    if key in storage:
        return storage[key]
    return getattr(obj, key)


def assign_value(obj: Any, key: str, value: Any) -> None:
    """Write an attribute into a clone shell.

    Writes go straight to instance storage so that frozen dataclasses and
    models with validating `__setattr__` can be populated.

    Args:
        obj: Target structure.
        key: Attribute name.
        value: Value to store.
    """
    storage = getattr(obj, "__dict__", None)
    if isinstance(storage, dict) and key not in slot_names(type(obj)):
        storage[key] = value
    else:
        object.__setattr__(obj, key, value)


def copy_properties(source: Any, target: Any, names: list[str]) -> Any:
    """Copy the named attributes of `source` onto `target` by reference.

    Returns:
        The target, for chaining.
    """
    for name in names:
        assign_value(target, name, get_value(source, name))
    return target
