"""Library settings — environment variables over code defaults.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the host program
  2. Env vars     — ``OPTVAL_*`` prefix
  3. Code defaults

The process-wide instance is built lazily by :func:`get_settings` and
cached until :func:`reset_settings` is called.
"""

from __future__ import annotations

import functools

from pydantic import Field
from pydantic_settings import BaseSettings

from optval.domain.types import CopyMode


class OptvalSettings(BaseSettings):
    """Frozen settings object for optval.

    Attributes:
        copy_mode: Default payload duplication for container copies.
        verbose: Enable DEBUG-level lifecycle events.
        log_json: Render log events as JSON lines.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "OPTVAL_",
    }

    copy_mode: CopyMode = Field(default=CopyMode.DEEP, description="deep or shallow")
    verbose: bool = False
    log_json: bool = False


@functools.cache
def get_settings() -> OptvalSettings:
    """Return the cached settings, reading the environment on first call."""
    return OptvalSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
