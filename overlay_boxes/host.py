"""Host contract: the child-surface and face-remap primitives a host editor provides."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Hashable, Mapping, Optional, Protocol

from overlay_boxes.geometry import CellMetrics
from overlay_boxes.style import StyleRecord

POSITION_KEYS = ("left", "top")
SIZE_KEYS = ("width", "height")
STYLE_PARAM_KEYS = ("border_width", "border_color", "alpha", "background_color")


@dataclass(frozen=True)
class BoxHandle:
    """Opaque reference to a box owned by the host surface layer."""

    ident: int

    def __repr__(self) -> str:
        return f"BoxHandle({self.ident})"


@dataclass(frozen=True)
class FaceOverride:
    background: str
    foreground: str

    @classmethod
    def from_style(cls, style: StyleRecord) -> "FaceOverride":
        return cls(background=style.background_color, foreground=style.foreground_color)


@dataclass(frozen=True)
class SurfaceParams:
    """Full parameter set for a child surface; widths and heights are in cells."""

    left: int
    top: int
    width: int
    height: int
    border_width: int = 0
    border_color: str = "#ffffff"
    alpha: int = 100
    background_color: str = "#000000"

    @classmethod
    def build(cls, left: int, top: int, cols: int, rows: int, style: StyleRecord) -> "SurfaceParams":
        return cls(
            left=int(left),
            top=int(top),
            width=int(cols),
            height=int(rows),
            border_width=style.border_width,
            border_color=style.border_color,
            alpha=style.opacity,
            background_color=style.background_color,
        )

    def as_host_keys(self, parent: Any = None) -> Dict[str, Any]:
        return {
            "left": self.left,
            "top": self.top,
            "width": self.width,
            "height": self.height,
            "minibuffer": False,
            "vertical_scroll_bars": False,
            "horizontal_scroll_bars": False,
            "menu_bar_lines": 0,
            "tool_bar_lines": 0,
            "tab_bar_lines": 0,
            "border_width": self.border_width,
            "border_color": self.border_color,
            "alpha": self.alpha,
            "parent": parent,
            "keep_ratio": True,
            "undecorated": True,
            "no_accept_focus": True,
            "no_focus_on_map": True,
            "on_top": True,
            "visibility": True,
            "background_color": self.background_color,
        }


def position_changes(left: int, top: int) -> Dict[str, Any]:
    return {"left": int(left), "top": int(top)}


def size_changes(cols: int, rows: int) -> Dict[str, Any]:
    return {"width": int(cols), "height": int(rows)}


def style_changes(style: StyleRecord) -> Dict[str, Any]:
    return {
        "border_width": style.border_width,
        "border_color": style.border_color,
        "alpha": style.opacity,
        "background_color": style.background_color,
    }


class HostSurface(Protocol):
    """Primitives a host editor must expose.

    Methods that receive a surface or content object that no longer exists raise
    ``DeadHandle``; ``cell_metrics`` and ``selected_surface`` raise
    ``HostUnavailable`` when nothing usable is active.
    """

    def cell_metrics(self) -> CellMetrics: ...

    def selected_surface(self) -> Any: ...

    def create_child_surface(self, parent: Any, params: Mapping[str, Any]) -> Any: ...

    def create_content(self, surface: Any) -> Any: ...

    def fill_content(self, content: Any, text: str) -> None: ...

    def configure_content(self, content: Any) -> None: ...

    def add_face_remap(self, content: Any, face: FaceOverride) -> Hashable: ...

    def remove_face_remap(self, content: Any, cookie: Optional[Hashable]) -> None: ...

    def modify_surface(self, surface: Any, changes: Mapping[str, Any]) -> None: ...

    def surface_live(self, surface: Any) -> bool: ...

    def delete_surface(self, surface: Any) -> None: ...
