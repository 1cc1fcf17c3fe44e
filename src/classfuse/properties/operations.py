"""Pure functions for copying, merging and subclassing.

``mixin`` and ``merge`` operate on mappings, plain objects and classes alike;
``extend`` is the Backbone-style subclass factory installed on fused classes.
"""

from __future__ import annotations

import types
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any, TypeVar

from classfuse.properties.core import check_configurable

T = TypeVar("T")

_MISSING = object()


def _is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def _own_items(source: Any) -> Iterable[tuple[str, Any]]:
    """Attributes a source contributes: mapping items or its own namespace."""
    if isinstance(source, Mapping):
        return list(source.items())
    if isinstance(source, type):
        return [(k, v) for k, v in vars(source).items() if not _is_dunder(k)]
    return list(vars(source).items())


def _is_record(value: Any) -> bool:
    """Mappings and plain data objects merge key by key; anything else is a scalar."""
    if isinstance(value, Mapping):
        return True
    return hasattr(value, "__dict__") and not callable(value)


def _lookup(target: Any, key: str) -> Any:
    if isinstance(target, Mapping):
        return target.get(key, _MISSING)
    return vars(target).get(key, _MISSING)


def _assign(target: Any, key: str, value: Any) -> None:
    if isinstance(target, MutableMapping):
        target[key] = value
        return
    if isinstance(target, type) and check_configurable(target, key) is not None:
        raise TypeError(f"Cannot redefine property: {target.__name__}.{key}")
    setattr(target, key, value)


def mixin(target: T, *sources: Any) -> T:
    """Copy the own attributes of each source onto target, last source wins.

    Args:
        target: Mapping, object or class receiving the attributes.
        *sources: Mappings, objects or classes. Dunder names of classes are skipped.

    Returns:
        The target.

    Raises:
        TypeError: If a copied name is a non-configurable property of a class target.
    """
    for source in sources:
        for key, value in _own_items(source):
            _assign(target, key, value)
    return target


def merge(target: Any, additional: Any) -> Any:
    """Deep merge additional into target.

    Lists gain the items they do not already contain, mappings and plain
    objects are merged key by key (recursively where both sides have the key),
    and anything else is replaced by ``additional``.

    Args:
        target: Value to merge into, mutated in place where it is a container.
        additional: Value to merge from.

    Returns:
        The merged value: ``target`` for containers, ``additional`` for scalars.
    """
    if isinstance(target, list):
        if isinstance(additional, Mapping):
            values: Iterable[Any] = additional.values()
        elif isinstance(additional, (list, tuple)):
            values = additional
        else:
            return additional
        for value in values:
            if value not in target:
                target.append(value)
        return target

    if _is_record(target) and _is_record(additional):
        for key, value in _own_items(additional):
            current = _lookup(target, key)
            if current is _MISSING:
                _assign(target, key, value)
            else:
                _assign(target, key, merge(current, value))
        return target

    return additional


def extend(
    cls: type,
    attrs: Mapping[str, Any] | None = None,
    statics: Mapping[str, Any] | None = None,
    *,
    name: str | None = None,
) -> type:
    """Create a subclass of cls with extra class attributes.

    Installed on fused classes as a classmethod:

        Child = Base.extend({"greet": lambda self: "hi"}, name="Child")

    Args:
        cls: Parent class.
        attrs: Namespace of the new class.
        statics: Attributes set on the new class after creation.
        name: Class name, defaults to the parent's name.

    Returns:
        The new subclass. If the parent carries a ``constructor`` attribute the
        child's points at the child.
    """
    namespace = dict(attrs or {})
    namespace.setdefault("__module__", cls.__module__)

    child = types.new_class(name or cls.__name__, (cls,), exec_body=lambda ns: ns.update(namespace))

    if "constructor" not in namespace and hasattr(cls, "constructor"):
        child.constructor = child  # type: ignore[attr-defined]
    for key, value in (statics or {}).items():
        setattr(child, key, value)
    return child
