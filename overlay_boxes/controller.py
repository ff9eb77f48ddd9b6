"""Public API for creating and managing overlay boxes within one editing context."""
from __future__ import annotations

from typing import Optional, Tuple

from overlay_boxes.adapter import HostSurfaceAdapter
from overlay_boxes.config import BoxSettings
from overlay_boxes.geometry import CellSize, cells_for, require_positive_size
from overlay_boxes.host import (
    BoxHandle,
    FaceOverride,
    HostSurface,
    SurfaceParams,
    position_changes,
    size_changes,
    style_changes,
)
from overlay_boxes.logging_setup import get_logger
from overlay_boxes.registry import BoxRegistry
from overlay_boxes.style import StyleLike, StyleRecord, merge

_LOGGER = get_logger("Controller")


class BoxController:
    """Creates, moves, resizes, restyles and deletes boxes for one editing context.

    Operations on a deleted or externally closed handle are silent no-ops. Bad
    geometry and an unusable host are raised to the caller.
    """

    def __init__(
        self,
        host: HostSurface,
        *,
        settings: Optional[BoxSettings] = None,
        registry: Optional[BoxRegistry] = None,
        adapter: Optional[HostSurfaceAdapter] = None,
    ) -> None:
        self._settings = settings or BoxSettings()
        self._adapter = adapter or HostSurfaceAdapter(host, self._settings)
        self._registry = registry if registry is not None else BoxRegistry()

    @property
    def registry(self) -> BoxRegistry:
        return self._registry

    @property
    def adapter(self) -> HostSurfaceAdapter:
        return self._adapter

    def _resolve_style(self, style: Optional[StyleLike]) -> StyleRecord:
        return merge(
            self._settings.default_style,
            style,
            warn_unknown=self._settings.warn_unknown_style_keys,
        )

    def _cells(self, width_px: int, height_px: int) -> CellSize:
        width_px, height_px = require_positive_size(width_px, height_px)
        # Metrics are queried every time; a font change alters them between calls.
        return cells_for(width_px, height_px, self._adapter.host.cell_metrics())

    def create(
        self,
        x: int,
        y: int,
        width_px: int,
        height_px: int,
        style: Optional[StyleLike] = None,
    ) -> BoxHandle:
        resolved = self._resolve_style(style)
        cells = self._cells(width_px, height_px)
        params = SurfaceParams.build(x, y, cells.cols, cells.rows, resolved)
        handle = self._adapter.create(params, FaceOverride.from_style(resolved))
        self._registry.add(handle)
        _LOGGER.debug(
            "Created %r at (%d, %d) size=%dx%d cells style=%s",
            handle,
            params.left,
            params.top,
            cells.cols,
            cells.rows,
            resolved,
        )
        return handle

    def move(self, handle: BoxHandle, x: int, y: int) -> None:
        if not self._adapter.is_alive(handle):
            return
        self._adapter.update(handle, position_changes(x, y))

    def resize(self, handle: BoxHandle, width_px: int, height_px: int) -> None:
        require_positive_size(width_px, height_px)
        if not self._adapter.is_alive(handle):
            return
        cells = self._cells(width_px, height_px)
        self._adapter.update(handle, size_changes(cells.cols, cells.rows))

    def set_style(self, handle: BoxHandle, style: Optional[StyleLike]) -> None:
        if not self._adapter.is_alive(handle):
            return
        resolved = self._resolve_style(style)
        # Background lives on the content face as well as the surface, so both are sent.
        self._adapter.update(handle, style_changes(resolved))
        self._adapter.set_content_style(handle, FaceOverride.from_style(resolved))

    def delete(self, handle: BoxHandle) -> None:
        self._adapter.destroy(handle)
        self._registry.remove(handle)

    def delete_all(self) -> None:
        handles = self._registry.all()
        for handle in handles:
            try:
                self._adapter.destroy(handle)
            except Exception as exc:
                _LOGGER.warning("Failed to delete %r, continuing: %s", handle, exc, exc_info=exc)
        self._registry.clear()
        if handles:
            _LOGGER.debug("Deleted %d box(es)", len(handles))

    def handles(self) -> Tuple[BoxHandle, ...]:
        return self._registry.all()

    def close(self) -> None:
        self.delete_all()

    def __enter__(self) -> "BoxController":
        return self

    def __exit__(self, *_exc_info) -> None:
        self.close()
