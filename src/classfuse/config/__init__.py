"""Configuration module using Pydantic Settings.

Usage:
    from classfuse.config import FuseOptions

    options = FuseOptions(defaults=False)
"""

from classfuse.config.settings import Capability, FuseOptions

__all__ = [
    "Capability",
    "FuseOptions",
]
