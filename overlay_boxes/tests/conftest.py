from __future__ import annotations

import itertools
import os
from typing import Any, Dict, List, Mapping, Optional, Set, Tuple

import pytest

from overlay_boxes.errors import DeadHandle, HostUnavailable
from overlay_boxes.geometry import CellMetrics
from overlay_boxes.host import FaceOverride


class RecordingHost:
    """In-memory host that records every primitive call."""

    def __init__(self, cell_width: int = 10, cell_height: int = 20) -> None:
        self.metrics: Optional[CellMetrics] = CellMetrics(cell_width, cell_height)
        self.parent = "editor-surface"
        self.calls: List[Tuple[Any, ...]] = []
        self.live: Set[str] = set()
        self.surface_params: Dict[str, Dict[str, Any]] = {}
        self.contents: Dict[str, str] = {}
        self.remaps: Dict[str, List[Tuple[int, FaceOverride]]] = {}
        self._surface_ids = itertools.count(1)
        self._cookies = itertools.count(1)

    def cell_metrics(self) -> CellMetrics:
        self.calls.append(("cell_metrics",))
        if self.metrics is None:
            raise HostUnavailable("no metrics")
        return self.metrics

    def selected_surface(self) -> Any:
        return self.parent

    def create_child_surface(self, parent: Any, params: Mapping[str, Any]) -> str:
        surface = f"surface-{next(self._surface_ids)}"
        self.live.add(surface)
        self.surface_params[surface] = dict(params)
        self.calls.append(("create_child_surface", parent, dict(params)))
        return surface

    def create_content(self, surface: Any) -> str:
        if surface not in self.live:
            raise DeadHandle(surface)
        content = f"content-of-{surface}"
        self.calls.append(("create_content", surface))
        return content

    def fill_content(self, content: Any, text: str) -> None:
        self.contents[content] = text
        self.calls.append(("fill_content", content, len(text)))

    def configure_content(self, content: Any) -> None:
        self.calls.append(("configure_content", content))

    def add_face_remap(self, content: Any, face: FaceOverride) -> int:
        cookie = next(self._cookies)
        self.remaps.setdefault(content, []).append((cookie, face))
        self.calls.append(("add_face_remap", content, face))
        return cookie

    def remove_face_remap(self, content: Any, cookie: Optional[int]) -> None:
        self.calls.append(("remove_face_remap", content, cookie))
        if cookie is None:
            return
        stack = self.remaps.get(content, [])
        self.remaps[content] = [entry for entry in stack if entry[0] != cookie]

    def modify_surface(self, surface: Any, changes: Mapping[str, Any]) -> None:
        if surface not in self.live:
            raise DeadHandle(surface)
        self.surface_params[surface].update(changes)
        self.calls.append(("modify_surface", surface, dict(changes)))

    def surface_live(self, surface: Any) -> bool:
        return surface in self.live

    def delete_surface(self, surface: Any) -> None:
        if surface not in self.live:
            return
        self.live.discard(surface)
        self.calls.append(("delete_surface", surface))

    # Test helpers -------------------------------------------------------------

    def kill(self, surface: str) -> None:
        """Close a surface behind the library's back."""
        self.live.discard(surface)

    def calls_named(self, name: str) -> List[Tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == name]


@pytest.fixture()
def recording_host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture(scope="session")
def qapp():
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PyQt6.QtWidgets import QApplication
    except Exception as exc:  # pragma: no cover - environment guard
        pytest.skip(f"PyQt6 widgets unavailable: {exc}")
    app = QApplication.instance()
    if app is None:
        try:
            app = QApplication([])
        except Exception as exc:  # pragma: no cover - headless guard
            pytest.skip(f"QApplication unavailable: {exc}")
    yield app
