"""Tests for per-tag shell allocation."""

import array
import ctypes
import re
from collections import Counter, OrderedDict, defaultdict, namedtuple
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from fractions import Fraction

import pytest

from graphclone import MatchResult, StatefulPattern, Tag
from graphclone.core.shell import (
    clone_array_buffer,
    clone_buffer,
    clone_pattern,
    clone_scalar,
    clone_symbol,
    copy_array,
    init_clone_array,
    init_clone_by_tag,
    init_clone_map,
    init_clone_object,
    init_clone_set,
    rebuild_frozen,
)


class Tagged(list):
    pass


class Celsius(float):
    pass


class Name(str):
    pass


class Mode(Enum):
    FAST = 1
    SAFE = 2


class Account:
    def __init__(self, owner: str) -> None:
        self.owner = owner


class Money:
    """Constructor requires arguments."""

    def __new__(cls, amount: int, currency: str) -> "Money":
        obj = super().__new__(cls)
        obj.amount = amount
        obj.currency = currency
        return obj


class Ledger(dict):
    def __new__(cls, owner: str) -> "Ledger":
        return super().__new__(cls)

    def __init__(self, owner: str) -> None:
        super().__init__()
        self.owner = owner


class Roster(set):
    def __new__(cls, team: str) -> "Roster":
        return super().__new__(cls)

    def __init__(self, team: str) -> None:
        super().__init__()
        self.team = team


class Label(str):
    def __new__(cls, text: str, lang: str) -> "Label":
        obj = super().__new__(cls, text)
        obj.lang = lang
        return obj


Pair = namedtuple("Pair", ["left", "right"])


class Members(frozenset):
    pass


def test_init_clone_array_same_kind_and_length():
    shell = init_clone_array(Tagged([1, 2, 3]))
    assert type(shell) is Tagged
    assert shell == [None, None, None]


def test_init_clone_array_copies_match_metadata():
    match = re.search(r"(b)(c)?", "abd")
    result = MatchResult.from_match(match)
    shell = init_clone_array(result)
    assert type(shell) is MatchResult
    assert shell.index == 1
    assert shell.input == "abd"
    assert len(shell) == 3


def test_init_clone_array_skips_metadata_without_text_head():
    source = MatchResult([1, 2])
    source.index = 4
    source.input = "x"
    shell = init_clone_array(source)
    assert "index" not in shell.__dict__


def test_copy_array_fills_by_reference():
    inner = {"a": 1}
    source = [inner, 2]
    result = copy_array(source, init_clone_array(source))
    assert result == source
    assert result[0] is inner


def test_init_clone_object_has_class_but_no_state():
    shell = init_clone_object(Account("ann"))
    assert type(shell) is Account
    assert vars(shell) == {}


def test_clone_array_buffer_is_independent():
    original = bytearray(b"abc")
    copy = clone_array_buffer(original)
    original[0] = ord("z")
    assert copy == bytearray(b"abc")

    numbers = array.array("i", [1, 2, 3])
    copied = clone_array_buffer(numbers)
    numbers[0] = 9
    assert copied.typecode == "i"
    assert copied.tolist() == [1, 2, 3]


def test_clone_buffer_shallow_shares_storage():
    storage = bytearray(b"abc")
    view = memoryview(storage)
    shallow = clone_buffer(view, deep=False)
    assert shallow is not view
    storage[0] = ord("z")
    assert shallow.tobytes() == b"zbc"


def test_clone_buffer_deep_duplicates_storage():
    storage = array.array("i", [1, 2, 3])
    view = memoryview(storage)
    deep = clone_buffer(view, deep=True)
    storage[0] = 9
    assert deep.format == "i"
    assert deep.tolist() == [1, 2, 3]
    assert not deep.readonly


def test_clone_buffer_deep_keeps_readonly():
    deep = clone_buffer(memoryview(b"abc"), deep=True)
    assert deep.readonly
    assert deep.tobytes() == b"abc"


def test_clone_pattern_recompiles():
    pattern = re.compile(r"a+b", re.IGNORECASE)
    copy = clone_pattern(pattern, deep=True)
    assert copy.pattern == pattern.pattern
    assert copy.flags == pattern.flags


@pytest.mark.parametrize(("deep", "expected_cursor"), [(True, 2), (False, 0)])
def test_clone_pattern_cursor_only_when_deep(deep, expected_cursor):
    pattern = StatefulPattern(r"\w", re.ASCII)
    pattern.exec("ab")
    pattern.exec("ab")
    copy = clone_pattern(pattern, deep=deep)
    assert copy is not pattern
    assert copy.source == pattern.source
    assert copy.flags == pattern.flags
    assert copy.last_index == expected_cursor


@pytest.mark.parametrize(
    "value",
    [
        Celsius(21.5),
        Name("ann"),
        Decimal("1.25"),
        Fraction(2, 3),
    ],
    ids=["float-subclass", "str-subclass", "decimal", "fraction"],
)
def test_clone_scalar_preserves_kind(value):
    copy = clone_scalar(value)
    assert type(copy) is type(value)
    assert copy == value


def test_clone_symbol_returns_same_member():
    assert clone_symbol(Mode.SAFE) is Mode.SAFE


def test_dates_are_rebuilt_by_tag():
    moment = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
    copy = init_clone_by_tag(moment, Tag.DATE, deep=True)
    assert copy == moment
    assert copy.tzinfo == timezone.utc
    assert init_clone_by_tag(timedelta(hours=2), Tag.DATE, deep=False) == timedelta(hours=2)


def test_init_clone_map_same_kind_empty():
    for mapping in [OrderedDict(a=1), Counter("aab"), {"a": 1}]:
        shell = init_clone_map(mapping)
        assert type(shell) is type(mapping)
        assert len(shell) == 0


def test_init_clone_map_keeps_default_factory():
    shell = init_clone_map(defaultdict(list, a=[1]))
    assert shell.default_factory is list
    shell["missing"].append(1)
    assert shell == {"missing": [1]}


def test_init_clone_set_same_kind_empty():
    class Tags(set):
        pass

    shell = init_clone_set(Tags({1, 2}))
    assert type(shell) is Tags
    assert len(shell) == 0


def test_rebuild_frozen_keeps_kind():
    pair = rebuild_frozen(Pair(1, 2), [3, 4])
    assert type(pair) is Pair
    assert pair.left == 3

    members = rebuild_frozen(Members({1}), [2, 3])
    assert type(members) is Members
    assert members == {2, 3}

    assert rebuild_frozen((1, 2), [5, 6]) == (5, 6)


def test_init_clone_by_tag_rejects_unhandled_tags():
    with pytest.raises(KeyError):
        init_clone_by_tag(Account("ann"), Tag.OBJECT, deep=True)


def test_init_clone_object_skips_constructor_arguments():
    shell = init_clone_object(Money(5, "EUR"))
    assert type(shell) is Money
    assert vars(shell) == {}


def test_collection_shells_skip_constructor_arguments():
    ledger = init_clone_map(Ledger("ann"))
    assert type(ledger) is Ledger
    assert len(ledger) == 0

    roster = init_clone_set(Roster("red"))
    assert type(roster) is Roster
    assert len(roster) == 0


def test_clone_scalar_skips_constructor_and_drops_attributes():
    copy = clone_scalar(Label("hi", "en"))
    assert type(copy) is Label
    assert copy == "hi"
    assert not hasattr(copy, "lang")


def test_clone_buffer_deep_non_castable_format():
    storage = (ctypes.c_int * 3)(1, 2, 3)
    view = memoryview(storage)
    expected = view.tobytes()

    deep = clone_buffer(view, deep=True)
    storage[0] = 9

    assert deep.tobytes() == expected
    assert deep.nbytes == view.nbytes


def test_compiled_pattern_clone_is_equivalent():
    pattern = re.compile(r"a+b", re.IGNORECASE)
    copy = clone_pattern(pattern, deep=True)
    # Compiled patterns are immutable and served from the re cache
    assert copy == pattern
    assert copy.match("AAB")
