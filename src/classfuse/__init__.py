"""classfuse: fuse a trait into a class after both were defined.

Usage:
    from classfuse import Fusible, fuse

    class EventEmitter:
        ...  # listeners(event), emit(event, *args), on(event, fn)

    class Socket(Fusible):
        pass

    fuse(Socket, EventEmitter, {"prefix": "socket::"})

    sock = Socket()
    sock.on("socket::close", print)
    close = sock.emits("close")
    close("bye")                      # prints "bye"

    Socket.readable("kind", "tcp")    # read only on instances
    Socket.writable("retries", 3)     # reassignable
"""

__version__ = "0.1.0"

# Composer
from classfuse.core import (
    EventSource,
    Fusible,
    fuse,
    fused,
)

# Options
from classfuse.config import FuseOptions

# Property definition
from classfuse.properties import (
    READABLE,
    WRITABLE,
    PropertyMode,
    extend,
    merge,
    mixin,
    predefine,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "fuse",
    "fused",
    "Fusible",
    "EventSource",
    # Config
    "FuseOptions",
    # Properties
    "predefine",
    "PropertyMode",
    "WRITABLE",
    "READABLE",
    "mixin",
    "merge",
    "extend",
]
