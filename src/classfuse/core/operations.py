"""Factories for the emits and resolve capabilities of fused classes."""

from __future__ import annotations

import os
from collections.abc import Callable, MutableMapping
from functools import lru_cache
from typing import Any, TypeAlias

from classfuse.core.models import EventSource

Emitter: TypeAlias = Callable[..., Any]


@lru_cache(maxsize=None)
def make_emits(prefix: str = "") -> Callable[..., Emitter]:
    """Build the ``emits`` method for classes fused with a given event prefix.

    Cached per prefix so fusing a class twice installs the same function and
    the read only ``emits`` property is not redefined. The cache is unbounded:
    one entry per distinct prefix ever fused.

    Args:
        prefix: Prepended to every event name.

    Returns:
        ``emits(self, event, *curried, parser=None) -> emit``.
    """

    def emits(
        self: EventSource,
        event: str,
        *curried: Any,
        parser: Callable[..., Any] | None = None,
    ) -> Emitter:
        """Return a function that emits ``event`` once it's called.

            sock.on("close", other.emits("close"))

        Args:
            event: Name of the event, prefixed with the class's prefix.
            *curried: Values emitted after the payload on every call. A trailing
                callable is used as the parser when ``parser`` is not given.
            parser: Transforms the call arguments into the payload. It is called
                as ``parser(*args, **kwargs)``; pass a bound method such as
                ``self.parse`` when the parser needs the instance.

        Returns:
            ``emit(*args, **kwargs)``; False when nobody listens, otherwise
            whatever ``self.emit`` returns.
        """
        if parser is None and curried and callable(curried[-1]):
            parser = curried[-1]
            curried = curried[:-1]
        name = f"{prefix}{event}"

        def emit(*args: Any, **kwargs: Any) -> Any:
            if not self.listeners(name):
                return False
            if parser is not None:
                payload = parser(*args, **kwargs)
            else:
                payload = args[0] if args else None
            return self.emit(name, payload, *curried)

        emit.__qualname__ = f"emits.<{name}>"
        return emit

    return emits


def resolve(directory: str | os.PathLike[str], stack: MutableMapping[str, Any]) -> Callable[[str], None]:
    """Compile a resolver that turns relative paths in ``stack`` into absolute ones.

        resolver = Base.resolve(__dirname, files)
        for key in files:
            resolver(key)

    Args:
        directory: Base directory joined in front of string values.
        stack: Collection rewritten in place.

    Returns:
        ``resolver(key)``; only string values are rewritten.
    """
    base = os.fspath(directory)

    def resolver(key: str) -> None:
        value = stack.get(key)
        if isinstance(value, str):
            stack[key] = os.path.join(base, value)

    return resolver
