"""Pure functions that allocate clone shells.

A shell is the new container a clone starts from: the right kind, and for
immutable payloads already complete, but with no recursive children yet.
"""

from __future__ import annotations

import array
import re
import types
from collections import defaultdict
from collections.abc import Callable, Iterable
from typing import Any

from graphclone.core.pattern.models import StatefulPattern
from graphclone.core.tags.models import Tag

_SCALAR_BASES: tuple[type, ...] = (int, float, complex, str, bytes)

_HEAPTYPE = 1 << 9  # Py_TPFLAGS_HEAPTYPE

# Formats `memoryview.cast` accepts; anything else stays a byte view
_CAST_FORMATS: frozenset[str] = frozenset("cbB?hHiIlLqQnNfdeP")


def _native_base(cls: type) -> type:
    """Nearest C-implemented class in the MRO. Its `__new__` needs no arguments."""
    for base in cls.__mro__:
        if not base.__flags__ & _HEAPTYPE:
            return base
    return object


def init_clone_array(seq: list[Any]) -> list[Any]:
    """Allocate a list of the same kind and length as `seq`, filled with None.

    Match metadata (`index` and `input`, as set by `MatchResult`) is carried
    over when the first element is a string.

    Args:
        seq: List to clone.

    Returns:
        Shell of the same class and length.
    """
    cls = type(seq)
    result = list.__new__(cls)
    result.extend([None] * len(seq))

    extra = getattr(seq, "__dict__", None)
    if seq and isinstance(seq[0], str) and extra and "index" in extra:
        result.__dict__["index"] = extra["index"]
        result.__dict__["input"] = extra.get("input")
    return result


def copy_array(source: list[Any], target: list[Any]) -> list[Any]:
    """Fill `target` with the elements of `source` by reference."""
    target[:] = source
    return target


def init_clone_object(value: Any) -> Any:
    """Allocate an uninitialized instance of the value's own class.

    Neither `__new__` nor `__init__` of Python-level classes runs, so classes
    whose constructors require arguments can still be cloned.
    """
    cls = type(value)
    return _native_base(cls).__new__(cls)


def init_plain_object() -> types.SimpleNamespace:
    """Allocate a structure with no type identity of its own."""
    return types.SimpleNamespace()


def clone_array_buffer(buffer: bytearray | array.array[Any]) -> bytearray | array.array[Any]:
    """Duplicate raw byte storage into independent storage of the same kind."""
    if isinstance(buffer, array.array):
        return type(buffer)(buffer.typecode, buffer)
    return type(buffer)(buffer)


def clone_buffer(view: memoryview, deep: bool) -> memoryview:
    """Clone a buffer view.

    Args:
        view: View to clone.
        deep: Copy the viewed bytes into new storage. Otherwise the result is
            a new view sharing the original storage.

    Returns:
        A memoryview with the same format and shape as `view`. Deep clones of
        views whose format `memoryview.cast` rejects (non-native byte order,
        struct layouts) or whose shape has a zero extent are flat byte views
        over the copied data.
    """
    if not deep:
        return memoryview(view)
    result = memoryview(bytearray(view.tobytes()))
    if (view.format != "B" or view.ndim != 1) and _castable(view):
        result = result.cast(view.format, view.shape)
    return result.toreadonly() if view.readonly else result


def _castable(view: memoryview) -> bool:
    fmt = view.format[1:] if view.format.startswith("@") else view.format
    return fmt in _CAST_FORMATS and len(fmt) == 1 and 0 not in view.shape


def clone_array_view(arr: Any, deep: bool) -> Any:
    """Clone a numeric array view: duplicated data when deep, a shared-storage view otherwise."""
    return arr.copy(order="K") if deep else arr.view()


def clone_pattern(pattern: re.Pattern[Any] | StatefulPattern, deep: bool) -> Any:
    """Rebuild a pattern from its source and flags.

    The cursor of a `StatefulPattern` is copied only for deep clones. A
    compiled `re.Pattern` is immutable and `re.compile` serves it from the
    module cache, so the result is usually the original object.
    """
    if isinstance(pattern, StatefulPattern):
        return type(pattern)(pattern.source, pattern.flags, pattern.last_index if deep else 0)
    return re.compile(pattern.pattern, pattern.flags)


def clone_scalar(value: Any) -> Any:
    """Rebuild a boxed scalar from its primitive payload with the same class.

    The subclass constructor is bypassed. Instance attributes of the
    original are not carried over.
    """
    cls = type(value)
    for base in _SCALAR_BASES:
        if isinstance(value, base):
            return base.__new__(cls, base(value))
    return clone_reduced(value)


def clone_reduced(value: Any) -> Any:
    """Rebuild an immutable value from the constructor and arguments it reduces to."""
    factory, args = value.__reduce__()[:2]
    return factory(*args)


def clone_symbol(value: Any) -> Any:
    """Look an enum member up by value, which yields the member itself."""
    return type(value)(value.value)


def init_clone_map(value: dict[Any, Any]) -> dict[Any, Any]:
    """Allocate an empty mapping of the same kind. Entries are added by the caller."""
    cls = type(value)
    result = _native_base(cls).__new__(cls)
    if isinstance(value, defaultdict):
        result.default_factory = value.default_factory  # type: ignore[attr-defined]
    return result


def init_clone_set(value: set[Any]) -> set[Any]:
    """Allocate an empty set of the same kind. Members are added by the caller."""
    cls = type(value)
    return _native_base(cls).__new__(cls)


def rebuild_frozen(value: tuple[Any, ...] | frozenset[Any], items: Iterable[Any]) -> Any:
    """Build a tuple, named tuple, or frozenset of the same kind from `items`.

    Constructors of tuple subclasses are bypassed so named tuples accept a
    single iterable.
    """
    cls = type(value)
    if isinstance(value, frozenset):
        return frozenset.__new__(cls, items)
    return tuple.__new__(cls, items)


_TAG_INITIALIZERS: dict[Tag, Callable[[Any, bool], Any]] = {
    Tag.BYTE_BUFFER: lambda value, deep: clone_array_buffer(value),
    Tag.MEMORYVIEW: clone_buffer,
    Tag.ARRAY_VIEW: clone_array_view,
    Tag.NUMBER: lambda value, deep: clone_scalar(value),
    Tag.STRING: lambda value, deep: clone_scalar(value),
    Tag.DATE: lambda value, deep: clone_reduced(value),
    Tag.SYMBOL: lambda value, deep: clone_symbol(value),
    Tag.PATTERN: clone_pattern,
    Tag.MAP: lambda value, deep: init_clone_map(value),
    Tag.SET: lambda value, deep: init_clone_set(value),
}


def init_clone_by_tag(value: Any, tag: Tag, deep: bool) -> Any:
    """Allocate the clone shell for a value with an allowlisted tag.

    Args:
        value: Value to clone.
        tag: The value's runtime tag.
        deep: Whether the clone is deep. Affects buffers, array views, and
            pattern cursors.

    Returns:
        The shell, which is already the final clone for immutable payloads.

    Raises:
        KeyError: If the tag has no initializer (sequences, structures,
            frozen containers, and opaque tags are handled elsewhere).
    """
    return _TAG_INITIALIZERS[tag](value, deep)
