"""Fuse a trait into an already defined class.

Usage:
    class Socket(Fusible):
        def close(self):
            self.emit("close")

    fuse(Socket, EventEmitter, {"prefix": "socket::"})

    # Or as a decorator:
    @fused(EventEmitter, mixin=False)
    class Channel(Fusible):
        pass
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar, overload

from classfuse import properties
from classfuse.config import FuseOptions
from classfuse.core.models import Fusible
from classfuse.core.operations import make_emits, resolve
from classfuse.properties import READABLE, WRITABLE, extend, merge, mixin, predefine

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)

# Shared wrappers so repeated fusing finds the same values on read only slots
_MIXIN = staticmethod(mixin)
_MERGE = staticmethod(merge)
_RESOLVE = staticmethod(resolve)
_EXTEND = classmethod(extend)


def _link(base: type, inherits: type) -> None:
    """Make inherits the single parent of base.

    Raises:
        TypeError: From CPython when the layouts are incompatible, e.g. when
            base derives directly from ``object``.
    """
    if base.__bases__ == (inherits,):
        return
    base.__bases__ = (inherits,)
    logger.debug("Linked %s to %s", base.__qualname__, inherits.__qualname__)


@overload
def fuse(base: C, inherits: type | None = None, options: FuseOptions | Mapping[str, Any] | None = None) -> C: ...


@overload
def fuse(base: C, inherits: FuseOptions | Mapping[str, Any]) -> C: ...


def fuse(base: C, inherits: Any = None, options: FuseOptions | Mapping[str, Any] | None = None) -> C:
    """Fuse the trait ``inherits`` into ``base`` and install default capabilities.

    The class is augmented in place and returned. Installed on it:
        writable, readable: definers for properties on the class.
        constructor: points back at ``base``.
        resolve: factory of path resolvers.
        extend: classmethod subclass factory.
        predefine: the ``classfuse.properties`` module.
        mixin, merge, emits: unless disabled through options.

    Args:
        base: Class to augment.
        inherits: Trait class to inherit from. A mapping or FuseOptions in this
            position is taken as ``options``.
        options: Which default capabilities to install, and the event prefix.

    Returns:
        The same ``base`` class.

    Raises:
        TypeError: If base is not a class, the options are not a mapping, a
            read only capability is redefined with a different value, or
            CPython rejects the new parent.
        pydantic.ValidationError: If an option has the wrong type.
    """
    if not isinstance(base, type):
        raise TypeError(f"fuse() requires a class, got {type(base).__name__}")

    if inherits is not None and not isinstance(inherits, type):
        if options is not None:
            raise TypeError(f"fuse() trait must be a class, got {type(inherits).__name__}")
        inherits, options = None, inherits

    resolved = FuseOptions.coerce(options)

    if inherits is not None:
        if issubclass(base, Fusible) and "fuse" not in vars(base):
            base.fuse = vars(Fusible)["fuse"]  # type: ignore[attr-defined]
        _link(base, inherits)

    base.writable = staticmethod(predefine(base, WRITABLE))  # type: ignore[attr-defined]
    base.readable = staticmethod(predefine(base, READABLE))  # type: ignore[attr-defined]

    if resolved.enabled("mixin"):
        base.readable("mixin", _MIXIN)  # type: ignore[attr-defined]
    if resolved.enabled("merge"):
        base.readable("merge", _MERGE)  # type: ignore[attr-defined]

    base.writable("constructor", base)  # type: ignore[attr-defined]

    if resolved.enabled("emits"):
        base.readable("emits", make_emits(resolved.prefix))  # type: ignore[attr-defined]

    base.writable("resolve", _RESOLVE)  # type: ignore[attr-defined]

    base.extend = _EXTEND  # type: ignore[attr-defined]
    base.predefine = properties  # type: ignore[attr-defined]

    skipped = [c for c in ("mixin", "merge", "emits") if not resolved.enabled(c)]
    if skipped:
        logger.debug("Fused %s without %s", base.__qualname__, ", ".join(skipped))
    else:
        logger.debug("Fused %s", base.__qualname__)
    return base


@overload
def fused(inherits: type | None = None, **options: Any) -> Callable[[C], C]: ...


@overload
def fused(inherits: FuseOptions | Mapping[str, Any]) -> Callable[[C], C]: ...


def fused(inherits: Any = None, **options: Any) -> Callable[[C], C]:
    """Class decorator form of ``fuse``.

    Supports:
        @fused(EventEmitter)
        @fused(EventEmitter, prefix="socket::")
        @fused(defaults=False)

    Args:
        inherits: Trait class, or options in place of it.
        **options: FuseOptions fields.

    Returns:
        Decorator fusing the class and returning it.
    """

    def decorator(cls: C) -> C:
        if options:
            return fuse(cls, inherits, options)
        return fuse(cls, inherits)

    return decorator
