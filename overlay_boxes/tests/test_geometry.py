from __future__ import annotations

import pytest

from overlay_boxes.errors import HostUnavailable, InvalidGeometry
from overlay_boxes.geometry import CellMetrics, CellSize, cells_for, pixels_to_cells


def test_pixels_to_cells_divides_by_cell_size() -> None:
    assert pixels_to_cells(100, 100, 10, 20) == CellSize(cols=10, rows=5)


@pytest.mark.parametrize(
    "width, height, cell_w, cell_h",
    [
        (105, 47, 10, 20),
        (99, 99, 7, 13),
        (640, 480, 9, 18),
        (10, 20, 10, 20),
    ],
)
def test_pixels_to_cells_truncates(width, height, cell_w, cell_h) -> None:
    cells = pixels_to_cells(width, height, cell_w, cell_h)

    assert cells.cols * cell_w <= width
    assert cells.rows * cell_h <= height
    assert (cells.cols + 1) * cell_w > width
    assert (cells.rows + 1) * cell_h > height


def test_pixels_to_cells_floors_to_one_cell() -> None:
    assert pixels_to_cells(5, 3, 10, 20).as_tuple() == (1, 1)


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-5, 10), (10, -1)])
def test_pixels_to_cells_rejects_non_positive_size(width, height) -> None:
    with pytest.raises(InvalidGeometry):
        pixels_to_cells(width, height, 10, 20)


def test_invalid_geometry_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        pixels_to_cells(0, 0, 10, 20)


@pytest.mark.parametrize("cell_w, cell_h", [(0, 20), (10, 0), (-1, -1)])
def test_pixels_to_cells_rejects_unusable_metrics(cell_w, cell_h) -> None:
    with pytest.raises(HostUnavailable):
        pixels_to_cells(100, 100, cell_w, cell_h)


def test_cells_for_uses_metrics() -> None:
    assert cells_for(90, 60, CellMetrics(width=9, height=12)).as_tuple() == (10, 5)
