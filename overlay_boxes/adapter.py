"""Issues create/update/destroy calls against a host's child-surface primitives."""
from __future__ import annotations

import itertools
from dataclasses import dataclass
from typing import Any, Dict, Hashable, Mapping, Optional

from overlay_boxes.config import BoxSettings
from overlay_boxes.errors import DeadHandle
from overlay_boxes.host import BoxHandle, FaceOverride, HostSurface, SurfaceParams
from overlay_boxes.logging_setup import get_logger

_LOGGER = get_logger("Adapter")

# Process-wide so handles from different contexts never compare equal.
_HANDLE_IDS = itertools.count(1)


@dataclass
class _BoxEntry:
    surface: Any
    content: Any
    face_cookie: Optional[Hashable] = None


class HostSurfaceAdapter:
    """Owns the handle table; translates assembled parameters into host calls."""

    def __init__(self, host: HostSurface, settings: Optional[BoxSettings] = None) -> None:
        self._host = host
        self._settings = settings or BoxSettings()
        self._entries: Dict[BoxHandle, _BoxEntry] = {}

    @property
    def host(self) -> HostSurface:
        return self._host

    def create(self, params: SurfaceParams, face: FaceOverride) -> BoxHandle:
        parent = self._host.selected_surface()
        surface = self._host.create_child_surface(parent, params.as_host_keys(parent))
        try:
            content = self._host.create_content(surface)
            self._host.fill_content(content, self._settings.fill_text())
            self._host.configure_content(content)
            cookie = self._host.add_face_remap(content, face)
        except Exception:
            try:
                self._host.delete_surface(surface)
            except Exception as cleanup_exc:
                _LOGGER.debug(
                    "Failed to clean up half-built surface %r: %s", surface, cleanup_exc, exc_info=cleanup_exc
                )
            raise
        handle = BoxHandle(next(_HANDLE_IDS))
        self._entries[handle] = _BoxEntry(surface=surface, content=content, face_cookie=cookie)
        return handle

    def is_alive(self, handle: BoxHandle) -> bool:
        entry = self._entries.get(handle)
        if entry is None:
            return False
        if self._host.surface_live(entry.surface):
            return True
        # Closed behind our back; forget it so the handle stays dead.
        self._entries.pop(handle, None)
        return False

    def update(self, handle: BoxHandle, changes: Mapping[str, Any]) -> None:
        if not changes or not self.is_alive(handle):
            return
        try:
            self._host.modify_surface(self._entries[handle].surface, dict(changes))
        except DeadHandle as exc:
            _LOGGER.debug("Skipped update of %r: %s", handle, exc)

    def set_content_style(self, handle: BoxHandle, face: FaceOverride) -> None:
        if not self.is_alive(handle):
            return
        entry = self._entries[handle]
        try:
            self._host.remove_face_remap(entry.content, entry.face_cookie)
            entry.face_cookie = None
            entry.face_cookie = self._host.add_face_remap(entry.content, face)
        except DeadHandle as exc:
            _LOGGER.debug("Skipped face update of %r: %s", handle, exc)

    def destroy(self, handle: BoxHandle) -> None:
        entry = self._entries.pop(handle, None)
        if entry is None:
            return
        try:
            if self._host.surface_live(entry.surface):
                self._host.delete_surface(entry.surface)
        except DeadHandle as exc:
            _LOGGER.debug("Surface for %r already gone: %s", handle, exc)
