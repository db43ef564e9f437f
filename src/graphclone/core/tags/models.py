"""Tag, category, and flag models for value classification.

A value's runtime tag is what `get_tag` reports for it. The category is the
cloning strategy chosen from the tag plus the position of the value in the
traversal (root or child).
"""

from __future__ import annotations

from enum import Enum, IntFlag, StrEnum, auto


class CloneFlags(IntFlag):
    """Composable bit-set controlling a clone traversal.

    The flags select the strategy variant and the key-enumeration routine.
    They never change how a value is classified.
    """

    NONE = 0
    DEEP = 1
    """Recurse into children instead of sharing them by reference."""

    FLAT = 2
    """Copy inherited data attributes into a plain namespace, dropping type identity."""

    SYMBOLS = 4
    """Also copy symbol-like (dunder) keys, not just plain attribute names."""


class Tag(StrEnum):
    """Runtime tag of a value."""

    PRIMITIVE = "primitive"
    LIST = "list"
    TUPLE = "tuple"
    OBJECT = "object"
    ARGUMENTS = "arguments"
    FUNCTION = "function"
    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    SYMBOL = "symbol"
    PATTERN = "pattern"
    MAP = "map"
    SET = "set"
    FROZENSET = "frozenset"
    BYTE_BUFFER = "byte_buffer"
    MEMORYVIEW = "memoryview"
    ARRAY_VIEW = "array_view"
    ERROR = "error"
    WEAK = "weak"
    OTHER = "other"


class Category(Enum):
    """Closed set of cloning strategies, one handler per member."""

    PRIMITIVE = auto()  # Returned unchanged
    SEQUENCE = auto()  # list and tuple families
    BUFFER = auto()  # Byte storage and numeric array views
    CALLABLE = auto()  # Child callables, shared as-is
    STRUCTURE = auto()  # Attribute-bearing objects and root callables
    WRAPPER = auto()  # Boxed scalars, dates, enum members
    PATTERN = auto()  # Compiled regular expressions
    KEYED = auto()  # dict family
    UNIQUE = auto()  # set family
    OPAQUE = auto()  # No faithful copy exists


CLONEABLE_TAGS: frozenset[Tag] = frozenset(
    {
        Tag.ARGUMENTS,
        Tag.LIST,
        Tag.TUPLE,
        Tag.BYTE_BUFFER,
        Tag.MEMORYVIEW,
        Tag.DATE,
        Tag.ARRAY_VIEW,
        Tag.MAP,
        Tag.NUMBER,
        Tag.OBJECT,
        Tag.PATTERN,
        Tag.SET,
        Tag.FROZENSET,
        Tag.STRING,
        Tag.SYMBOL,
    }
)
"""Tags supported by tag-based reconstruction. ERROR and WEAK are never cloned."""


TAG_CATEGORIES: dict[Tag, Category] = {
    Tag.NUMBER: Category.WRAPPER,
    Tag.STRING: Category.WRAPPER,
    Tag.DATE: Category.WRAPPER,
    Tag.SYMBOL: Category.WRAPPER,
    Tag.PATTERN: Category.PATTERN,
    Tag.MAP: Category.KEYED,
    Tag.SET: Category.UNIQUE,
    Tag.FROZENSET: Category.UNIQUE,
    Tag.BYTE_BUFFER: Category.BUFFER,
    Tag.MEMORYVIEW: Category.BUFFER,
    Tag.ARRAY_VIEW: Category.BUFFER,
}
