"""Exception types raised by overlay_boxes."""
from __future__ import annotations

__all__ = ["BoxError", "InvalidGeometry", "DeadHandle", "HostUnavailable"]


class BoxError(Exception):
    """Base class for overlay box failures."""


class InvalidGeometry(BoxError, ValueError):
    """A box was requested with a non-positive pixel width or height."""


class HostUnavailable(BoxError, RuntimeError):
    """The host could not report a parent surface or usable cell metrics."""


class DeadHandle(BoxError, LookupError):
    """A host primitive was asked to act on a surface that no longer exists.

    The adapter swallows this; callers of the public API never see it.
    """
