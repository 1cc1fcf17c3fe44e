"""Property definition on classes.

Usage:
    class Base:
        pass

    writable = predefine(Base, WRITABLE)
    readable = predefine(Base, READABLE)

    writable("retries", 3)       # Base().retries = 5 is fine
    readable("name", "base")     # Base().name = "x" raises AttributeError
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from classfuse.properties.models import WRITABLE, DefinedProperty, PropertyMode


def _same_value(a: Any, b: Any) -> bool:
    """Identity comparison that sees through staticmethod/classmethod wrappers."""
    if a is b:
        return True
    if type(a) is type(b) and isinstance(a, (staticmethod, classmethod)):
        return a.__func__ is b.__func__
    return False


def _require_class(target: Any) -> type:
    if not isinstance(target, type):
        raise TypeError(f"Properties can only be defined on classes, got {type(target).__name__}")
    return target


def check_configurable(target: type, name: str) -> DefinedProperty | None:
    """Return the non-configurable property ``name`` of target, if any.

    Only the class's own namespace is consulted; parents can always be
    shadowed.
    """
    existing = vars(target).get(name)
    if isinstance(existing, DefinedProperty) and not existing.mode.configurable:
        return existing
    return None


def define(
    target: type, name: str, value: Any, mode: PropertyMode | Mapping[str, Any] = WRITABLE
) -> type:
    """Define ``name`` on target with the given mutability.

    Args:
        target: Class receiving the property.
        name: Attribute name.
        value: Attribute value. Functions bind to instances as usual.
        mode: PropertyMode or mapping with ``writable``/``configurable`` keys.

    Returns:
        The target class.

    Raises:
        TypeError: If target is not a class, or ``name`` is a non-configurable
            property being redefined with a different value or mode.
    """
    cls = _require_class(target)
    mode = PropertyMode.coerce(mode)

    locked = check_configurable(cls, name)
    if locked is not None:
        if locked.mode == mode and _same_value(locked.value, value):
            return cls
        raise TypeError(f"Cannot redefine property: {cls.__name__}.{name}")

    if mode == WRITABLE:
        setattr(cls, name, value)
    else:
        setattr(cls, name, DefinedProperty(name, value, mode))
    return cls


def predefine(
    target: type, mode: PropertyMode | Mapping[str, Any] = WRITABLE
) -> Callable[[str, Any], type]:
    """Create a definer bound to a class and a mutability mode.

    Args:
        target: Class that receives every property defined through the result.
        mode: Mutability applied to every property.

    Returns:
        ``definer(name, value) -> target``.
    """
    cls = _require_class(target)
    resolved = PropertyMode.coerce(mode)

    def predefined(name: str, value: Any) -> type:
        return define(cls, name, value, resolved)

    predefined.__qualname__ = f"{cls.__qualname__}.predefined"
    return predefined
