"""Core functionalities: the composer and the capabilities it installs.

Architecture Note:
    core/ holds the composer (``fuse``) and the stateless factories it wires
    onto classes. Property definition lives in properties/, options in config/.
"""

from classfuse.core.fuse import fuse, fused
from classfuse.core.models import EventSource, Fusible
from classfuse.core.operations import make_emits, resolve

__all__ = [
    # Models
    "EventSource",
    "Fusible",
    # Composer
    "fuse",
    "fused",
    # Capabilities
    "make_emits",
    "resolve",
]
