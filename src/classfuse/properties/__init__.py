"""Property-definition library: mutability modes, definers, mixin/merge/extend.

Fused classes expose this module as ``Base.predefine``.
"""

from classfuse.properties.core import check_configurable, define, predefine
from classfuse.properties.models import READABLE, WRITABLE, DefinedProperty, PropertyMode
from classfuse.properties.operations import extend, merge, mixin

__all__ = [
    # Models
    "PropertyMode",
    "DefinedProperty",
    "WRITABLE",
    "READABLE",
    # Core
    "define",
    "predefine",
    "check_configurable",
    # Operations
    "mixin",
    "merge",
    "extend",
]
