"""Pure functions for tagging and classifying values.

Classification order is significant: sequences and buffers are recognized
before the generic tag lookup, and functions before attribute-bearing objects.
"""

from __future__ import annotations

import array
import functools
import re
import types
import typing
import weakref
from datetime import date, time, timedelta
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any

from graphclone.core.pattern.models import StatefulPattern
from graphclone.core.tags.models import CLONEABLE_TAGS, TAG_CATEGORIES, Category, Tag

_HEAPTYPE = 1 << 9  # Py_TPFLAGS_HEAPTYPE: class was created by Python code

_PRIMITIVE_TYPES: frozenset[type] = frozenset(
    {
        type(None),
        bool,
        int,
        float,
        complex,
        str,
        bytes,
        range,
        slice,
        type(Ellipsis),
        type(NotImplemented),
    }
)

_WEAK_TYPES: tuple[type, ...] = (
    weakref.ref,
    weakref.ProxyType,
    weakref.CallableProxyType,
    weakref.WeakKeyDictionary,
    weakref.WeakValueDictionary,
    weakref.WeakSet,
)

_FUNCTION_TYPES: tuple[type, ...] = (
    types.FunctionType,
    types.MethodType,
    types.BuiltinFunctionType,
    types.BuiltinMethodType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    functools.partial,
)

# C methods and slot wrappers only appear in the namespace of native classes
_NATIVE_ATTRS: tuple[type, ...] = (types.MethodDescriptorType, types.WrapperDescriptorType)

_LAYOUT_NEUTRAL: frozenset[type] = frozenset({object, typing.Generic})

# Bounded so classes created at runtime can be collected
_CLASS_CACHE_SIZE = 1024


def _is_ndarray(value: Any) -> bool:
    """Check if value is a numpy array without importing numpy.

    Args:
        value: Value to check.

    Returns:
        True if the value's class inherits from numpy.ndarray, False otherwise.
    """
    for base in type(value).__mro__:
        if base.__module__ == "numpy" and base.__name__ == "ndarray":
            return True
    return False


def _is_native_class(cls: type) -> bool:
    """Check if a class is implemented in C (static or extension heap type)."""
    if not cls.__flags__ & _HEAPTYPE:
        return True
    return any(isinstance(attr, _NATIVE_ATTRS) for attr in vars(cls).values())


@functools.lru_cache(maxsize=_CLASS_CACHE_SIZE)
def _is_python_class(cls: type) -> bool:
    """Check if instances of `cls` keep all their state in attributes.

    True when every class in the MRO, apart from `object` and `Generic`, is
    defined in Python code.
    """
    return not any(
        _is_native_class(base) for base in cls.__mro__ if base not in _LAYOUT_NEUTRAL
    )


def get_tag(value: Any) -> Tag:
    """Report the runtime tag of any value. Never raises.

    Args:
        value: Value to inspect.

    Returns:
        The tag describing the value's runtime kind.
    """
    if type(value) in _PRIMITIVE_TYPES or isinstance(value, type):
        return Tag.PRIMITIVE
    if isinstance(value, BaseException):
        return Tag.ERROR
    if isinstance(value, _WEAK_TYPES):
        return Tag.WEAK
    if isinstance(value, Enum):
        return Tag.SYMBOL
    if isinstance(value, list):
        return Tag.LIST
    if isinstance(value, tuple):
        return Tag.TUPLE
    if isinstance(value, dict):
        return Tag.MAP
    if isinstance(value, frozenset):
        return Tag.FROZENSET
    if isinstance(value, set):
        return Tag.SET
    if isinstance(value, memoryview):
        return Tag.MEMORYVIEW
    if isinstance(value, (bytearray, array.array)):
        return Tag.BYTE_BUFFER
    if _is_ndarray(value):
        return Tag.ARRAY_VIEW
    if isinstance(value, (int, float, complex, Decimal, Fraction)):
        return Tag.NUMBER
    if isinstance(value, (str, bytes)):
        return Tag.STRING
    if isinstance(value, (date, time, timedelta)):
        return Tag.DATE
    if isinstance(value, (re.Pattern, StatefulPattern)):
        return Tag.PATTERN
    if isinstance(value, _FUNCTION_TYPES):
        return Tag.FUNCTION
    if type(value).__name__ == "Namespace" and type(value).__module__ == "argparse":
        return Tag.ARGUMENTS
    if isinstance(value, types.SimpleNamespace) or _is_python_class(type(value)):
        return Tag.OBJECT
    return Tag.OTHER


def is_primitive(value: Any) -> bool:
    """Immutable scalars and classes: shared, never copied."""
    return get_tag(value) is Tag.PRIMITIVE


def is_buffer(value: Any) -> bool:
    """Buffer views, which are cloned before any tag lookup."""
    return isinstance(value, memoryview)


def is_array_view(value: Any) -> bool:
    """Numeric array views whose clone is complete once initialized."""
    return _is_ndarray(value)


def is_plain_object(value: Any) -> bool:
    """Attribute-bearing objects and argument namespaces."""
    return get_tag(value) in (Tag.OBJECT, Tag.ARGUMENTS)


def is_frozen(value: Any) -> bool:
    """Immutable containers that must be populated before they exist."""
    return isinstance(value, (tuple, frozenset))


def classify(value: Any, has_parent: bool = False) -> Category:
    """Choose the cloning strategy for a value. Pure and total.

    Args:
        value: Value to classify.
        has_parent: Whether the value is a child of another value in the
            current traversal. Only callables are classified differently.

    Returns:
        The cloning category. Values whose tag is outside the allowlist,
        including errors and weak containers, are OPAQUE.
    """
    tag = get_tag(value)
    if tag is Tag.PRIMITIVE:
        return Category.PRIMITIVE
    if tag in (Tag.LIST, Tag.TUPLE):
        return Category.SEQUENCE
    if is_buffer(value):
        return Category.BUFFER
    if tag is Tag.FUNCTION:
        # A root callable keeps its attributes; a nested one is shared
        return Category.CALLABLE if has_parent else Category.STRUCTURE
    if tag in (Tag.OBJECT, Tag.ARGUMENTS):
        return Category.STRUCTURE
    if tag in CLONEABLE_TAGS:
        return TAG_CATEGORIES[tag]
    return Category.OPAQUE
