"""PyQt6 implementation of the host surface primitives.

Child surfaces are frameless ``QFrame`` children of the selected widget, raised
above their siblings. Each one displays a ``QPlainTextEdit`` filled with blanks
whose look is driven by a widget-local style sheet, so the application palette
and any theme sheet stay untouched.
"""
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Mapping, Optional, Tuple

from PyQt6 import sip
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFontMetrics, QSyntaxHighlighter
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGraphicsOpacityEffect,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from overlay_boxes.errors import DeadHandle, HostUnavailable
from overlay_boxes.geometry import CellMetrics
from overlay_boxes.host import FaceOverride
from overlay_boxes.logging_setup import get_logger
from overlay_boxes.style import coerce_border_width, coerce_percent

_LOGGER = get_logger("Qt")

SURFACE_OBJECT_NAME = "overlayBoxSurface"
CONTENT_OBJECT_NAME = "overlayBoxContent"


@dataclass
class _SurfaceState:
    left: int = 0
    top: int = 0
    cols: int = 1
    rows: int = 1
    border_width: int = 0
    border_color: str = "#ffffff"
    background_color: str = "#000000"
    alpha: int = 100
    metrics: Optional[CellMetrics] = None
    contents: List[QPlainTextEdit] = field(default_factory=list)


def _is_deleted(obj: Any) -> bool:
    try:
        return sip.isdeleted(obj)
    except TypeError:
        return True


def _measure(widget: QWidget) -> CellMetrics:
    metrics = QFontMetrics(widget.font())
    width = int(metrics.averageCharWidth())
    height = int(metrics.height())
    if width <= 0 or height <= 0:
        raise HostUnavailable(f"font metrics unavailable for {widget!r}: {width}x{height}")
    return CellMetrics(width=width, height=height)


def surface_style_sheet(state: _SurfaceState) -> str:
    if state.border_width > 0:
        border = f"{state.border_width}px solid {state.border_color}"
    else:
        border = "none"
    return (
        f"QFrame#{SURFACE_OBJECT_NAME} {{ background-color: {state.background_color}; "
        f"border: {border}; }}"
    )


def face_style_sheet(face: FaceOverride) -> str:
    return (
        f"QPlainTextEdit#{CONTENT_OBJECT_NAME} {{ background-color: {face.background}; "
        f"color: {face.foreground}; border: none; }}"
    )


class QtHost:
    """Host surface backed by Qt widgets; call only from the GUI thread."""

    def __init__(self, root: Optional[QWidget] = None) -> None:
        self._root = root
        self._surfaces: Dict[QFrame, _SurfaceState] = {}
        self._face_stacks: Dict[QPlainTextEdit, Tuple[str, List[Tuple[int, str]]]] = {}
        self._cookies = itertools.count(1)

    # Queries ------------------------------------------------------------------

    def selected_surface(self) -> QWidget:
        if self._root is not None and not _is_deleted(self._root):
            return self._root
        window = QApplication.activeWindow()
        if window is None:
            raise HostUnavailable("no active Qt window to parent overlay boxes")
        return window

    def cell_metrics(self) -> CellMetrics:
        return _measure(self.selected_surface())

    def surface_live(self, surface: Any) -> bool:
        return surface in self._surfaces and not _is_deleted(surface)

    # Surfaces -----------------------------------------------------------------

    def create_child_surface(self, parent: Any, params: Mapping[str, Any]) -> QFrame:
        if parent is None or _is_deleted(parent):
            raise HostUnavailable("parent surface is gone")
        frame = QFrame(parent)
        frame.setObjectName(SURFACE_OBJECT_NAME)
        frame.setFrameShape(QFrame.Shape.NoFrame)
        if params.get("no_accept_focus", True):
            frame.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        frame.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents, True)
        frame.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        layout = QVBoxLayout(frame)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        frame.setGraphicsEffect(QGraphicsOpacityEffect(frame))

        self._surfaces[frame] = _SurfaceState()
        frame.destroyed.connect(lambda *_args, key=frame: self._forget(key))
        self._apply(frame, params)
        if params.get("on_top", True):
            frame.raise_()
        if params.get("visibility", True):
            frame.show()
        return frame

    def modify_surface(self, surface: Any, changes: Mapping[str, Any]) -> None:
        if not self.surface_live(surface):
            raise DeadHandle(f"surface {surface!r} is not live")
        self._apply(surface, changes)

    def delete_surface(self, surface: Any) -> None:
        if not self.surface_live(surface):
            return
        self._forget(surface)
        surface.hide()
        surface.deleteLater()
        _LOGGER.debug("Child surface scheduled for deletion (%d remaining)", len(self._surfaces))

    def _forget(self, frame: QFrame) -> None:
        state = self._surfaces.pop(frame, None)
        if state is None:
            return
        for content in state.contents:
            self._face_stacks.pop(content, None)

    def _apply(self, frame: QFrame, changes: Mapping[str, Any]) -> None:
        state = self._surfaces[frame]
        initial = state.metrics is None
        if "left" in changes:
            state.left = int(changes["left"])
        if "top" in changes:
            state.top = int(changes["top"])
        if "width" in changes:
            state.cols = max(1, int(changes["width"]))
        if "height" in changes:
            state.rows = max(1, int(changes["height"]))
        if "border_width" in changes:
            state.border_width = coerce_border_width(changes["border_width"], state.border_width)
        if "border_color" in changes:
            state.border_color = str(changes["border_color"])
        if "background_color" in changes:
            state.background_color = str(changes["background_color"])
        if "alpha" in changes:
            state.alpha = coerce_percent(changes["alpha"], state.alpha)

        # Cells are measured against the parent's font, never the active window's.
        if initial or "width" in changes or "height" in changes:
            state.metrics = _measure(frame.parentWidget() or frame)
        if initial or any(key in changes for key in ("width", "height", "border_width")):
            border = state.border_width
            frame.setGeometry(
                state.left,
                state.top,
                state.cols * state.metrics.width + 2 * border,
                state.rows * state.metrics.height + 2 * border,
            )
            layout = frame.layout()
            if layout is not None:
                layout.setContentsMargins(border, border, border, border)
        elif "left" in changes or "top" in changes:
            frame.move(state.left, state.top)
        if initial or any(key in changes for key in ("border_width", "border_color", "background_color")):
            frame.setStyleSheet(surface_style_sheet(state))
        if initial or "alpha" in changes:
            effect = frame.graphicsEffect()
            if isinstance(effect, QGraphicsOpacityEffect):
                effect.setOpacity(state.alpha / 100.0)

    # Content ------------------------------------------------------------------

    def create_content(self, surface: Any) -> QPlainTextEdit:
        if not self.surface_live(surface):
            raise DeadHandle(f"surface {surface!r} is not live")
        content = QPlainTextEdit(surface)
        content.setObjectName(CONTENT_OBJECT_NAME)
        self._surfaces[surface].contents.append(content)
        layout = surface.layout()
        if layout is not None:
            layout.addWidget(content)
        return content

    def fill_content(self, content: Any, text: str) -> None:
        if _is_deleted(content):
            raise DeadHandle("content container is gone")
        content.setPlainText(text)

    def configure_content(self, content: Any) -> None:
        if _is_deleted(content):
            raise DeadHandle("content container is gone")
        for highlighter in content.document().findChildren(QSyntaxHighlighter):
            highlighter.setDocument(None)
        content.setUndoRedoEnabled(False)
        content.setReadOnly(True)
        content.setTextInteractionFlags(Qt.TextInteractionFlag.NoTextInteraction)
        content.setFocusPolicy(Qt.FocusPolicy.NoFocus)
        content.setFrameShape(QFrame.Shape.NoFrame)
        content.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        content.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        content.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        content.setCursorWidth(0)
        content.document().setDocumentMargin(0)

    def add_face_remap(self, content: Any, face: FaceOverride) -> Hashable:
        if _is_deleted(content):
            raise DeadHandle("content container is gone")
        _base, stack = self._face_stacks.setdefault(content, (content.styleSheet(), []))
        cookie = next(self._cookies)
        stack.append((cookie, face_style_sheet(face)))
        content.setStyleSheet(stack[-1][1])
        return cookie

    def remove_face_remap(self, content: Any, cookie: Optional[Hashable]) -> None:
        if cookie is None:
            return
        if _is_deleted(content):
            raise DeadHandle("content container is gone")
        entry = self._face_stacks.get(content)
        if entry is None:
            return
        base, stack = entry
        stack[:] = [item for item in stack if item[0] != cookie]
        content.setStyleSheet(stack[-1][1] if stack else base)
        if not stack:
            self._face_stacks.pop(content, None)

    def _face_remap_depth(self, content: Any) -> int:
        entry = self._face_stacks.get(content)
        return len(entry[1]) if entry else 0
