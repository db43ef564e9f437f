"""Cycle-tracked recursive cloning of arbitrary value graphs.

Usage:
    from graphclone import clone, clone_deep, clone_deep_with, CONTINUE

    node = {"name": "root", "children": []}
    node["children"].append(node)

    copy = clone_deep(node)
    assert copy["children"][0] is copy

    # Replace a subtree instead of cloning it
    def keep_handles(value, key=None, parent=None, registry=None):
        return value if key == "handle" else CONTINUE

    copy = clone_deep_with(state, keep_handles)

Lossy fallbacks:
    Values with no faithful copy (exceptions, weak references and weak
    containers, files, modules, anything outside the supported tags) are
    shared by reference when nested inside another value and replaced by an
    empty SimpleNamespace at the root. Callables nested inside another value
    are shared as-is; a root callable clones to a SimpleNamespace holding its
    attributes. Neither case raises.

    Subclasses of int, float, complex, str and bytes are rebuilt from their
    payload; instance attributes set on them are not copied. Deep clones of
    memoryviews whose format cannot be recreated by `memoryview.cast` are
    flat byte views over the copied data.
"""

from __future__ import annotations

import logging
from typing import Any

from graphclone.core.keys import assign_value, copy_properties, get_value, keys_func
from graphclone.core.registry import TraversalRegistry
from graphclone.core.shell import (
    clone_buffer,
    copy_array,
    init_clone_array,
    init_clone_by_tag,
    init_clone_object,
    init_plain_object,
    rebuild_frozen,
)
from graphclone.core.tags import Category, CloneFlags, Tag, classify, get_tag, is_buffer, is_frozen
from graphclone.core.types import CONTINUE, Clone, Customizer

logger = logging.getLogger(__name__)

_MISSING = object()


def _share_or_empty(value: Any, category: Category, has_parent: bool) -> Any:
    """Fallback for callables and opaque values."""
    if has_parent:
        return value
    logger.debug(
        "No faithful clone for root %s (%s); returning an empty namespace",
        type(value).__name__,
        category.name,
    )
    return init_plain_object()


def _copy_members(value: Any, result: Any, category: Category) -> Any:
    """Fill a collection shell with the original's entries or members by reference."""
    if category is Category.KEYED:
        for sub_key, sub_value in value.items():
            result[sub_key] = sub_value
    else:
        for member in value:
            result.add(member)
    return result


def _clone_frozen(
    value: tuple[Any, ...] | frozenset[Any],
    flags: CloneFlags,
    customizer: Customizer | None,
    registry: TraversalRegistry | None,
) -> Any:
    """Clone a tuple or frozenset, which can only be built after its children.

    The registry is checked again once the children are cloned: a cycle that
    passes through a mutable child re-enters this value and registers a clone
    for it, and every edge must converge on that one clone.
    """
    if not flags & CloneFlags.DEEP:
        return rebuild_frozen(value, value)

    if registry is None:
        registry = TraversalRegistry()
    stacked = registry.get(value, _MISSING)
    if stacked is not _MISSING:
        return stacked

    if isinstance(value, frozenset):
        items = [base_clone(item, flags, customizer, item, value, registry) for item in value]
    else:
        items = [
            base_clone(item, flags, customizer, index, value, registry)
            for index, item in enumerate(value)
        ]

    stacked = registry.get(value, _MISSING)
    if stacked is not _MISSING:
        return stacked
    result = rebuild_frozen(value, items)
    registry.set(value, result)
    return result


def base_clone(
    value: Any,
    flags: CloneFlags,
    customizer: Customizer | None = None,
    key: Any = None,
    parent: Any = None,
    registry: TraversalRegistry | None = None,
) -> Any:
    """Clone a value according to `flags`, tracking visited values.

    Args:
        value: Value to clone.
        flags: DEEP to recurse into children, FLAT to copy inherited data
            attributes into a SimpleNamespace, SYMBOLS to include dunder keys.
        customizer: Optional hook consulted for every node before cloning.
        key: Key, index, or member under which `value` was found.
        parent: Value `value` was read from. None for the root.
        registry: Visited originals and their clones. Created if omitted;
            pass one explicitly to share cycle tracking across several roots.

    Returns:
        The clone. Primitives are returned unchanged.

    Raises:
        RecursionError: If the graph's acyclic depth exceeds the stack.
        Exception: Anything raised by the customizer propagates unchanged.
    """
    deep = bool(flags & CloneFlags.DEEP)
    has_parent = parent is not None

    if customizer is not None:
        result = customizer(value, key, parent, registry) if has_parent else customizer(value)
        if result is not CONTINUE:
            return result

    tag = get_tag(value)
    if tag is Tag.PRIMITIVE:
        return value

    category = classify(value, has_parent)
    if category in (Category.SEQUENCE, Category.UNIQUE) and is_frozen(value):
        return _clone_frozen(value, flags, customizer, registry)

    if category is Category.SEQUENCE:
        result = init_clone_array(value)
        if not deep:
            return copy_array(value, result)
    elif category is Category.BUFFER and is_buffer(value):
        return clone_buffer(value, deep)
    elif category is Category.STRUCTURE:
        flat = bool(flags & CloneFlags.FLAT)
        result = init_plain_object() if flat or tag is Tag.FUNCTION else init_clone_object(value)
        if not deep:
            return copy_properties(value, result, keys_func(flags)(value))
    elif category in (Category.CALLABLE, Category.OPAQUE):
        return _share_or_empty(value, category, has_parent)
    else:
        result = init_clone_by_tag(value, tag, deep)
        if not deep and category in (Category.KEYED, Category.UNIQUE):
            return _copy_members(value, result, category)

    # Check for a back-edge before registering, so a cycle resolves to the
    # clone already in progress
    if registry is None:
        registry = TraversalRegistry()
    stacked = registry.get(value, _MISSING)
    if stacked is not _MISSING:
        logger.debug("Reusing registered clone of %s", type(value).__name__)
        return stacked
    registry.set(value, result)

    if category is Category.KEYED:
        for sub_key, sub_value in value.items():
            result[sub_key] = base_clone(sub_value, flags, customizer, sub_key, value, registry)
        return result

    if category is Category.UNIQUE:
        for member in value:
            result.add(base_clone(member, flags, customizer, member, value, registry))
        return result

    if category is Category.SEQUENCE:
        for index, item in enumerate(value):
            # Recursively populate clone (susceptible to call stack limits)
            result[index] = base_clone(item, flags, customizer, index, value, registry)
        return result

    if category is Category.STRUCTURE:
        for name in keys_func(flags)(value):
            sub_value = base_clone(get_value(value, name), flags, customizer, name, value, registry)
            assign_value(result, name, sub_value)
        return result

    # Buffers, wrappers, and patterns are complete once initialized
    return result


def clone[T](value: T) -> Clone[T]:
    """Shallow clone: one new container whose children are shared.

    Own, non-dunder attributes are copied for objects; entries and members
    are copied by reference for collections.
    """
    return base_clone(value, CloneFlags.NONE)


def clone_with[T](value: T, customizer: Customizer) -> Clone[T] | Any:
    """Shallow clone whose root is first offered to `customizer`."""
    return base_clone(value, CloneFlags.NONE, customizer)


def clone_deep[T](value: T) -> Clone[T]:
    """Deep clone: every reachable container is copied, cycles included.

    Values reachable along several paths are cloned once, and every path in
    the clone leads to that one copy.
    """
    return base_clone(value, CloneFlags.DEEP)


def clone_deep_with[T](value: T, customizer: Customizer) -> Clone[T] | Any:
    """Deep clone that consults `customizer` at every node.

    Args:
        value: Value to clone.
        customizer: Returns a replacement for a node, or `CONTINUE` to let
            the node be cloned normally. Replaced nodes' children are never
            visited.

    Returns:
        The customized deep clone.
    """
    return base_clone(value, CloneFlags.DEEP, customizer)


def clone_flat(value: Any) -> Any:
    """Shallow copy of own and inherited data attributes into a SimpleNamespace."""
    return base_clone(value, CloneFlags.FLAT)


def clone_deep_flat(value: Any) -> Any:
    """Deep clone in which every structure becomes a SimpleNamespace of its
    own and inherited data attributes."""
    return base_clone(value, CloneFlags.DEEP | CloneFlags.FLAT)


def clone_full[T](value: T) -> Clone[T]:
    """Shallow clone that also copies dunder attributes."""
    return base_clone(value, CloneFlags.SYMBOLS)


def clone_deep_full[T](value: T) -> Clone[T]:
    """Deep clone that also copies dunder attributes."""
    return base_clone(value, CloneFlags.DEEP | CloneFlags.SYMBOLS)
