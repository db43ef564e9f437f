"""Pattern functionality: cursor-tracking patterns and match results."""

from graphclone.core.pattern.models import MatchResult, StatefulPattern

__all__ = [
    "MatchResult",
    "StatefulPattern",
]
