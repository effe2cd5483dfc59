"""Internal helper for development-time feature flags."""

from __future__ import annotations

import os

__all__ = ["dev_validate_enabled"]


def dev_validate_enabled() -> bool:
    """Return True when the environment variable ``AWESOME_VALIDATE`` is exactly ``"1"``."""
    return os.getenv("AWESOME_VALIDATE") == "1"
