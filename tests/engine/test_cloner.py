"""Tests for the configured Cloner."""

import warnings

import pytest

from graphclone import CONTINUE, Cloner, CloneFlags, LossyCloneWarning, TraversalRegistry
from graphclone.config import CloneSettings


def test_flags_come_from_settings(settings):
    assert Cloner(settings=settings).flags == CloneFlags.DEEP

    shallow = settings.model_copy(update={"deep": False, "include_symbols": True})
    assert Cloner.from_settings(shallow).flags == CloneFlags.SYMBOLS


def test_explicit_flags_override_settings(settings):
    cloner = Cloner(CloneFlags.NONE, settings=settings)
    original = {"items": [1]}
    copy = cloner(original)
    assert copy == original
    assert copy["items"] is original["items"]


def test_deep_cloner_isolates(settings):
    cloner = Cloner(settings=settings)
    original = {"items": [1]}
    copy = cloner(original)
    assert copy["items"] is not original["items"]


def test_customizer_is_honored(settings):
    def customizer(value, key=None, parent=None, registry=None):
        return "redacted" if key == "token" else CONTINUE

    cloner = Cloner(customizer=customizer, settings=settings)
    assert cloner({"token": "abc", "user": "ann"}) == {"token": "redacted", "user": "ann"}


def test_lossy_values_warn_when_enabled(settings):
    noisy = settings.model_copy(update={"warn_on_lossy": True})
    error = ValueError("boom")
    cloner = Cloner.from_settings(noisy)

    with pytest.warns(LossyCloneWarning, match="ValueError"):
        copy = cloner({"error": error})
    assert copy["error"] is error


def test_lossy_warning_points_at_caller(settings):
    noisy = settings.model_copy(update={"warn_on_lossy": True})
    cloner = Cloner.from_settings(noisy)

    with pytest.warns(LossyCloneWarning) as record:
        cloner([[ValueError("deep")]])
    assert record[0].filename == __file__


def test_lossy_warning_still_runs_customizer(settings):
    noisy = settings.model_copy(update={"warn_on_lossy": True})

    def customizer(value, key=None, parent=None, registry=None):
        return None if isinstance(value, ValueError) else CONTINUE

    cloner = Cloner(customizer=customizer, settings=noisy)
    with warnings.catch_warnings():
        warnings.simplefilter("error", LossyCloneWarning)
        assert cloner({"error": ValueError()}) == {"error": None}


def test_no_warning_by_default(settings):
    cloner = Cloner(settings=settings)
    with warnings.catch_warnings():
        warnings.simplefilter("error", LossyCloneWarning)
        cloner({"error": ValueError()})


def test_clone_many_shares_registry(settings):
    shared = {"config": [1, 2]}
    left, right = Cloner(settings=settings).clone_many([[shared], {"ref": shared}])
    assert left[0] is right["ref"]
    assert left[0] is not shared


def test_call_with_external_registry(settings):
    cloner = Cloner(settings=settings)
    registry = TraversalRegistry()
    shared = [1]
    first = cloner({"a": shared}, registry=registry)
    second = cloner([shared], registry=registry)
    assert first["a"] is second[0]


def test_default_settings_loaded_from_environment(monkeypatch):
    monkeypatch.setenv("GRAPHCLONE_DEEP", "false")
    monkeypatch.setenv("GRAPHCLONE_FLATTEN", "true")
    assert Cloner().flags == CloneFlags.FLAT


def test_repr_mentions_flags(settings):
    assert "flags=" in repr(Cloner(settings=settings))


def test_settings_type_is_exposed(settings):
    assert isinstance(Cloner(settings=settings).settings, CloneSettings)
