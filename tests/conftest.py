"""Shared test fixtures."""

import sys
from collections import defaultdict

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from classfuse import Fusible


class EventEmitter:
    """Minimal Node-style emitter used as the trait in emits tests."""

    def __init__(self):
        self._events = defaultdict(list)

    def on(self, event, listener):
        self._events[event].append(listener)
        return self

    def once(self, event, listener):
        def wrapper(*args):
            self._events[event].remove(wrapper)
            return listener(*args)

        return self.on(event, wrapper)

    def listeners(self, event):
        return list(self._events.get(event, ()))

    def emit(self, event, *args):
        handlers = self.listeners(event)
        for handler in handlers:
            handler(*args)
        return bool(handlers)


@pytest.fixture
def base_cls():
    """Fresh fusible class, so fusing in one test never leaks into another."""

    class Base(Fusible):
        pass

    return Base


@pytest.fixture
def trait_cls():
    """Fresh plain trait class."""

    class Case:
        pass

    return Case


@pytest.fixture
def emitter_cls():
    return EventEmitter
