"""Tests for the resolve factory."""

import os
from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

from classfuse import fuse
from classfuse.core import resolve


def test_rewrites_string_values(base_cls):
    fuse(base_cls)
    stack = {"x": "c.txt", "y": 42}

    resolver = base_cls.resolve("/a/b", stack)
    resolver("x")
    resolver("y")

    assert stack == {"x": os.path.join("/a/b", "c.txt"), "y": 42}


def test_available_on_instances(base_cls):
    fuse(base_cls, {"defaults": False})
    stack = {"x": "c.txt"}

    base_cls().resolve("/a/b", stack)("x")

    assert stack["x"] == os.path.join("/a/b", "c.txt")


def test_missing_key_is_ignored():
    stack = {}

    assert resolve("/a/b", stack)("missing") is None
    assert stack == {}


def test_accepts_path_objects():
    stack = {"x": "c.txt"}

    resolve(Path("/a/b"), stack)("x")

    assert stack["x"] == os.path.join("/a/b", "c.txt")


@given(
    value=st.one_of(
        st.integers(),
        st.none(),
        st.booleans(),
        st.lists(st.text()),
        st.dictionaries(st.text(), st.integers()),
    )
)
def test_non_string_values_untouched(value):
    stack = {"key": value}

    resolve("/a/b", stack)("key")

    assert stack["key"] == value


@given(name=st.from_regex(r"[a-z0-9]+", fullmatch=True))
def test_relative_names_joined(name):
    stack = {"key": name}

    resolve("/root", stack)("key")

    assert stack["key"] == os.path.join("/root", name)
