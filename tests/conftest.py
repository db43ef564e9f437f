"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from graphclone.config import CloneSettings


@dataclass
class FixtureNode:
    name: str
    children: list["FixtureNode"] = field(default_factory=list)
    parent: "FixtureNode | None" = None


@dataclass(slots=True)
class FixturePoint:
    x: float
    y: float


@pytest.fixture
def node_cls():
    return FixtureNode


@pytest.fixture
def point_cls():
    return FixturePoint


@pytest.fixture
def settings():
    """Settings isolated from GRAPHCLONE_* environment variables."""
    return CloneSettings(
        _env_file=None, deep=True, flatten=False, include_symbols=False, warn_on_lossy=False
    )
