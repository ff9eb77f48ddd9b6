"""Pixel to character-cell geometry conversion (pure calculations)."""
from __future__ import annotations

from dataclasses import dataclass

from overlay_boxes.errors import HostUnavailable, InvalidGeometry

MIN_CELLS = 1


@dataclass(frozen=True)
class CellMetrics:
    width: int
    height: int


@dataclass(frozen=True)
class CellSize:
    cols: int
    rows: int

    def as_tuple(self) -> tuple[int, int]:
        return self.cols, self.rows


def require_positive_size(width_px: int, height_px: int) -> tuple[int, int]:
    width_px = int(width_px)
    height_px = int(height_px)
    if width_px <= 0 or height_px <= 0:
        raise InvalidGeometry(f"box size must be positive, got {width_px}x{height_px} px")
    return width_px, height_px


def pixels_to_cells(width_px: int, height_px: int, cell_width_px: int, cell_height_px: int) -> CellSize:
    """Convert a pixel size to whole character cells.

    Division truncates; anything smaller than one cell still occupies one.
    """

    width_px, height_px = require_positive_size(width_px, height_px)
    cell_width_px = int(cell_width_px)
    cell_height_px = int(cell_height_px)
    if cell_width_px <= 0 or cell_height_px <= 0:
        raise HostUnavailable(f"host reported unusable cell metrics {cell_width_px}x{cell_height_px} px")
    cols = max(MIN_CELLS, width_px // cell_width_px)
    rows = max(MIN_CELLS, height_px // cell_height_px)
    return CellSize(cols=cols, rows=rows)


def cells_for(width_px: int, height_px: int, metrics: CellMetrics) -> CellSize:
    return pixels_to_cells(width_px, height_px, metrics.width, metrics.height)
