"""Package logger configuration for overlay_boxes."""
from __future__ import annotations

import logging
import os
from typing import Optional

from overlay_boxes.version import is_dev_build

LOGGER_NAME = "OverlayBoxes"
PROPAGATE_ENV_VAR = "OVERLAY_BOXES_PROPAGATE_LOGS"

_PACKAGE_LOGGER = logging.getLogger(LOGGER_NAME)
_PACKAGE_LOGGER.setLevel(logging.DEBUG if is_dev_build() else logging.INFO)
_PACKAGE_LOGGER.propagate = False
# Opt-in propagation flag for hosts/tests that want box logs upstream.
if os.environ.get(PROPAGATE_ENV_VAR, "").lower() in {"1", "true", "yes", "on"}:
    _PACKAGE_LOGGER.propagate = True
if not _PACKAGE_LOGGER.handlers:
    _PACKAGE_LOGGER.addHandler(logging.NullHandler())

_LOG_LEVEL_HINT: Optional[int] = None
_LOG_LEVEL_HINT_SOURCE: Optional[str] = None

__all__ = ["LOGGER_NAME", "get_logger", "apply_log_level_hint", "current_log_level_hint"]


def get_logger(component: Optional[str] = None) -> logging.Logger:
    if not component:
        return _PACKAGE_LOGGER
    return logging.getLogger(f"{LOGGER_NAME}.{component}")


def apply_log_level_hint(level: Optional[int], *, source: Optional[str] = None) -> None:
    """Force the package logger level to match a level supplied by the host editor.

    Unknown or non-numeric levels are ignored.
    """

    global _LOG_LEVEL_HINT, _LOG_LEVEL_HINT_SOURCE
    if level is None:
        return
    try:
        numeric = int(level)
    except (TypeError, ValueError):
        return
    if numeric not in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
        _PACKAGE_LOGGER.debug("Ignoring unknown log level hint %r from %s", level, source or "unknown")
        return
    _LOG_LEVEL_HINT = numeric
    _LOG_LEVEL_HINT_SOURCE = source
    _PACKAGE_LOGGER.setLevel(numeric)
    _PACKAGE_LOGGER.debug(
        "Log level hint applied: level=%s source=%s",
        logging.getLevelName(numeric),
        source or "unknown",
    )


def current_log_level_hint() -> tuple[Optional[int], Optional[str]]:
    return _LOG_LEVEL_HINT, _LOG_LEVEL_HINT_SOURCE
