"""Fuse options using Pydantic Settings.

Provides typed options for ``fuse`` with environment variable support, so a
process can switch default capabilities off without touching call sites.

Usage:
    from classfuse.config import FuseOptions

    # Load from environment variables (CLASSFUSE_*)
    options = FuseOptions()

    # Or override with explicit values
    options = FuseOptions(prefix="socket::", mixin=False)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

Capability = Literal["mixin", "merge", "emits"]


class FuseOptions(BaseSettings):  # type: ignore[misc]
    """Options controlling which default capabilities ``fuse`` installs.

    Attributes:
        defaults: Master switch for mixin, merge and emits.
        mixin: Install ``mixin`` on the class.
        merge: Install ``merge`` on the class.
        emits: Install the ``emits`` factory on the class.
        prefix: Prepended to every event name created through ``emits``.

    Environment Variables:
        CLASSFUSE_DEFAULTS
        CLASSFUSE_MIXIN
        CLASSFUSE_MERGE
        CLASSFUSE_EMITS
        CLASSFUSE_PREFIX
    """

    model_config = SettingsConfigDict(
        env_prefix="CLASSFUSE_",
        extra="ignore",
        frozen=True,
    )

    defaults: bool = True
    mixin: bool = True
    merge: bool = True
    emits: bool = True
    prefix: str = ""

    def enabled(self, capability: Capability) -> bool:
        """Check whether a default capability should be installed.

        Args:
            capability: One of "mixin", "merge", "emits".

        Returns:
            True unless ``defaults`` or the capability's own flag is off.
        """
        return self.defaults and bool(getattr(self, capability))

    @classmethod
    def coerce(cls, options: FuseOptions | Mapping[str, Any] | None) -> FuseOptions:
        """Build options from an instance, a mapping, or nothing.

        Raises:
            TypeError: If options is neither a FuseOptions nor a mapping.
            pydantic.ValidationError: If a value has the wrong type.
        """
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            return cls(**dict(options))
        raise TypeError(f"Fuse options must be a mapping or FuseOptions, got {type(options).__name__}")
