"""Version identifier for overlay-boxes and dev-build detection."""
from __future__ import annotations

import os
import re
from typing import Optional

__all__ = ["__version__", "is_dev_build", "dev_mode_override", "DEV_MODE_ENV_VAR"]

__version__ = "0.3.1"
DEV_MODE_ENV_VAR = "OVERLAY_BOXES_DEV_MODE"

_TRUE_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_TOKENS = frozenset({"0", "false", "no", "off"})
_DEV_MARKER = re.compile(r"(?:^|[.\-+])dev\d*(?:$|[.\-+])")


def dev_mode_override() -> Optional[bool]:
    raw = os.getenv(DEV_MODE_ENV_VAR)
    if raw is None:
        return None
    token = raw.strip().lower()
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    return None


def is_dev_build(version: Optional[str] = None) -> bool:
    """Return True when logging should default to DEBUG.

    The environment variable wins over any ``dev`` marker in the version string.
    """

    override = dev_mode_override()
    if override is not None:
        return override
    identifier = (version if version is not None else __version__).strip().lower()
    return bool(_DEV_MARKER.search(identifier))
