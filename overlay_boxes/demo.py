"""Small demo window that draws a few overlay boxes over a text editor."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QApplication, QMainWindow, QPlainTextEdit

from overlay_boxes.config import load_settings
from overlay_boxes.controller import BoxController
from overlay_boxes.host import BoxHandle
from overlay_boxes.logging_setup import apply_log_level_hint, get_logger
from overlay_boxes.qt_host import QtHost
from overlay_boxes.version import __version__

_LOGGER = get_logger()

DEMO_BOXES = (
    (40, 40, 160, 80, {"background_color": "#3366cc", "opacity": 80}),
    (240, 60, 120, 120, {"background_color": "#cc3333", "border_width": 2, "border_color": "#ffffff"}),
    (80, 200, 300, 40, {"background_color": "#33aa55", "opacity": 50}),
)


def _parse_level(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    attr = getattr(logging, value.strip().upper(), None)
    return attr if isinstance(attr, int) else None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"overlay-boxes demo ({__version__})")
    parser.add_argument("--settings", help="Path to a box settings JSON file")
    parser.add_argument("--log-level", help="Logging level name, e.g. DEBUG")
    parser.add_argument(
        "--drift",
        type=int,
        default=0,
        help="Move the first box this many pixels every 50ms to exercise move()",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    level = _parse_level(args.log_level)
    if level is not None:
        logging.basicConfig(level=level)
        _LOGGER.propagate = True
        apply_log_level_hint(level, source="cli")
    settings_path = Path(args.settings).expanduser() if args.settings else Path("overlay_boxes.json")
    settings = load_settings(settings_path)

    app = QApplication(sys.argv[:1])
    window = QMainWindow()
    window.setWindowTitle("overlay-boxes demo")
    editor = QPlainTextEdit()
    editor.setFont(QFont("Monospace", 11))
    editor.setPlainText("Overlay boxes are drawn above this editor.\n" * 20)
    window.setCentralWidget(editor)
    window.resize(640, 400)
    window.show()

    controller = BoxController(QtHost(root=editor), settings=settings)
    handles = [controller.create(x, y, w, h, style) for x, y, w, h, style in DEMO_BOXES]
    _LOGGER.info("Demo created %d boxes", len(handles))

    timer: Optional[QTimer] = None
    if args.drift and handles:
        first: BoxHandle = handles[0]
        position = {"x": DEMO_BOXES[0][0], "y": DEMO_BOXES[0][1]}

        def _drift() -> None:
            position["x"] = (position["x"] + args.drift) % max(1, editor.width())
            controller.move(first, position["x"], position["y"])

        timer = QTimer()
        timer.timeout.connect(_drift)
        timer.start(50)

    app.aboutToQuit.connect(controller.close)
    exit_code = app.exec()
    if timer is not None:
        timer.stop()
    _LOGGER.info("Demo exiting with code %s", exit_code)
    return int(exit_code)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
