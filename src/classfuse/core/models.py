"""Core models: the event capability protocol and the fusible root class."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol, Self, runtime_checkable

if TYPE_CHECKING:
    from classfuse.config import FuseOptions


@runtime_checkable
class EventSource(Protocol):
    """Listener lookup plus notification, as consumed by ``emits``.

    Any emitter with a Node-style surface satisfies it, typically the trait a
    class is fused with.
    """

    def listeners(self, event: str) -> Sequence[Any]: ...

    def emit(self, event: str, *args: Any) -> Any: ...


class Fusible:
    """Root for classes that get a trait fused in after definition.

    CPython refuses ``__bases__`` reassignment on classes whose only parent is
    ``object``; deriving from this empty class makes the base re-parentable.
    Fusing replaces the parent, so afterwards the trait takes Fusible's place
    in the MRO; ``fuse`` copies this classmethod onto the class so it stays
    callable.

    Usage:
        class Socket(Fusible):
            pass

        Socket.fuse(EventEmitter, prefix="socket::")
    """

    @classmethod
    def fuse(
        cls,
        inherits: type | None = None,
        options: FuseOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> type[Self]:
        """Fuse this class with an optional trait. See ``classfuse.fuse``."""
        # Late import to avoid circular dependency
        from classfuse.core.fuse import fuse

        if inherits is not None and not isinstance(inherits, type) and options is None:
            inherits, options = None, inherits
        if overrides:
            options = {**dict(options or {}), **overrides}
        return fuse(cls, inherits, options)
