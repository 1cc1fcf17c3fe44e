"""Property models: mutability modes and the descriptor that enforces them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class PropertyMode:
    """Mutability of a defined property.

    Attributes:
        writable: Instances may assign (and delete) their own value.
        configurable: The property may be redefined on the class.
    """

    writable: bool = True
    configurable: bool = True

    @classmethod
    def coerce(cls, mode: PropertyMode | Mapping[str, Any]) -> PropertyMode:
        """Accept a PropertyMode or a mapping with the same keys.

        Unknown keys (e.g. ``enumerable``) are ignored: class attributes never
        show up in an instance's ``__dict__``, so there is nothing to enforce.
        """
        if isinstance(mode, PropertyMode):
            return mode
        return cls(
            writable=bool(mode.get("writable", False)),
            configurable=bool(mode.get("configurable", False)),
        )


WRITABLE = PropertyMode(writable=True, configurable=True)
READABLE = PropertyMode(writable=False, configurable=False)


class DefinedProperty:
    """Data descriptor holding a class-level value under a PropertyMode.

    Functions and other descriptors stored here still bind as they would as a
    plain class attribute, so ``readable("emits", fn)`` yields a bound method
    on instances and ``readable("mixin", staticmethod(fn))`` stays static.
    """

    __slots__ = ("name", "value", "mode")

    def __init__(self, name: str, value: Any, mode: PropertyMode) -> None:
        self.name = name
        self.value = value
        self.mode = mode

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is not None and self.mode.writable:
            own = getattr(instance, "__dict__", None)
            if own is not None and self.name in own:
                return own[self.name]
        binder = getattr(type(self.value), "__get__", None)
        if binder is not None:
            return binder(self.value, instance, owner)
        return self.value

    def __set__(self, instance: Any, value: Any) -> None:
        if not self.mode.writable:
            raise AttributeError(
                f"Cannot assign to read only property '{self.name}' "
                f"of {type(instance).__name__}"
            )
        instance.__dict__[self.name] = value

    def __delete__(self, instance: Any) -> None:
        if not self.mode.writable:
            raise AttributeError(
                f"Cannot delete read only property '{self.name}' "
                f"of {type(instance).__name__}"
            )
        try:
            del instance.__dict__[self.name]
        except KeyError:
            raise AttributeError(self.name) from None

    def __repr__(self) -> str:
        return f"DefinedProperty({self.name!r}, {self.value!r}, {self.mode!r})"
