"""Pattern objects that remember where the last match ended.

Usage:
    pattern = StatefulPattern(r"\\d+")
    first = pattern.exec("a1 b22")   # ['1'], first.index == 1
    second = pattern.exec("a1 b22")  # ['22'], second.index == 4
    pattern.exec("a1 b22")           # None, cursor reset to 0
"""

from __future__ import annotations

import re
from typing import Any


class MatchResult(list[Any]):
    """Match groups with the position and subject of the match attached.

    Element 0 is the whole match, followed by each capture group
    (None for groups that did not participate).

    Attributes:
        index: Offset of the match within `input`.
        input: The string that was searched.
    """

    index: int
    input: str

    @classmethod
    def from_match(cls, match: re.Match[str]) -> MatchResult:
        """Build a result from a standard library match object.

        Args:
            match: Successful match produced by a compiled pattern.

        Returns:
            List of the match and its groups carrying `index` and `input`.
        """
        result = cls([match.group(0), *match.groups()])
        result.index = match.start()
        result.input = match.string
        return result


class StatefulPattern:
    """Compiled pattern with a cursor advanced by successive searches.

    Args:
        source: Pattern text, or an already compiled pattern.
        flags: `re` module flags. Ignored if `source` is compiled.
        last_index: Offset the next search starts from.

    Raises:
        ValueError: If `last_index` is negative.
    """

    __slots__ = ("_compiled", "last_index")

    def __init__(self, source: str | re.Pattern[str], flags: int = 0, last_index: int = 0):
        if last_index < 0:
            raise ValueError(f"last_index must be non-negative, got {last_index}")
        self._compiled = source if isinstance(source, re.Pattern) else re.compile(source, flags)
        self.last_index = last_index

    @property
    def pattern(self) -> re.Pattern[str]:
        """The underlying compiled pattern."""
        return self._compiled

    @property
    def source(self) -> str:
        return self._compiled.pattern

    @property
    def flags(self) -> int:
        return self._compiled.flags

    def exec(self, text: str) -> MatchResult | None:
        """Search `text` from the cursor and advance it past the match.

        Args:
            text: String to search.

        Returns:
            The match with its groups, or None. A miss resets the cursor to 0.
        """
        if self.last_index > len(text):
            self.last_index = 0
            return None
        match = self._compiled.search(text, self.last_index)
        if match is None:
            self.last_index = 0
            return None
        # Empty matches still have to move the cursor forward
        end = match.end()
        self.last_index = end + 1 if end == match.start() else end
        return MatchResult.from_match(match)

    def test(self, text: str) -> bool:
        """Whether `text` matches from the cursor. Advances it like `exec`."""
        return self.exec(text) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StatefulPattern):
            return NotImplemented
        return (
            self.source == other.source
            and self.flags == other.flags
            and self.last_index == other.last_index
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"StatefulPattern({self.source!r}, flags={self.flags}, last_index={self.last_index})"
