"""Tests for fuse options."""

import pytest
from pydantic import ValidationError

from classfuse import FuseOptions, fuse


def test_defaults():
    options = FuseOptions()

    assert options.defaults is True
    assert options.prefix == ""
    assert all(options.enabled(c) for c in ("mixin", "merge", "emits"))


def test_defaults_switch_disables_everything():
    options = FuseOptions(defaults=False, mixin=True)

    assert not any(options.enabled(c) for c in ("mixin", "merge", "emits"))


def test_individual_switch():
    options = FuseOptions(mixin=False)

    assert not options.enabled("mixin")
    assert options.enabled("merge")
    assert options.enabled("emits")


def test_unknown_keys_are_ignored():
    options = FuseOptions.coerce({"mixin": False, "unknown": 1})

    assert options.mixin is False
    assert not hasattr(options, "unknown")


def test_coerce_passes_instances_through():
    options = FuseOptions(prefix="x::")

    assert FuseOptions.coerce(options) is options
    assert FuseOptions.coerce(None) == FuseOptions()


def test_options_are_frozen():
    options = FuseOptions()

    with pytest.raises(ValidationError):
        options.prefix = "x::"


def test_environment_overrides_defaults(monkeypatch, base_cls):
    monkeypatch.setenv("CLASSFUSE_DEFAULTS", "false")
    monkeypatch.setenv("CLASSFUSE_PREFIX", "env::")

    options = FuseOptions()
    assert options.defaults is False
    assert options.prefix == "env::"

    fuse(base_cls)
    assert not hasattr(base_cls, "mixin")


def test_explicit_values_beat_environment(monkeypatch):
    monkeypatch.setenv("CLASSFUSE_MIXIN", "false")

    assert FuseOptions(mixin=True).mixin is True
    assert FuseOptions.coerce({"mixin": True}).mixin is True
