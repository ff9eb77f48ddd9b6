"""Configuration helpers for overlay boxes."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping

from overlay_boxes.logging_setup import get_logger
from overlay_boxes.style import DEFAULT_STYLE, StyleRecord

_LOGGER = get_logger()

MAX_FILL_COLUMNS = 2000
MAX_FILL_ROWS = 1000


@dataclass
class BoxSettings:
    """Values that shape how boxes are built; defaults suit a single editor frame."""

    fill_columns: int = 400
    fill_rows: int = 200
    fill_char: str = " "
    default_style: StyleRecord = field(default_factory=lambda: DEFAULT_STYLE)
    warn_unknown_style_keys: bool = True

    def fill_text(self) -> str:
        line = self.fill_char * self.fill_columns
        return "\n".join(line for _ in range(self.fill_rows))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BoxSettings":
        defaults = cls()

        def _int(key: str, fallback: int, upper: int) -> int:
            try:
                value = int(data.get(key, fallback))
            except (TypeError, ValueError):
                value = fallback
            return max(1, min(value, upper))

        fill_char = data.get("fill_char", defaults.fill_char)
        if not isinstance(fill_char, str) or len(fill_char) != 1 or fill_char in "\r\n":
            fill_char = defaults.fill_char
        warn_unknown = bool(data.get("warn_unknown_style_keys", defaults.warn_unknown_style_keys))
        style_raw = data.get("default_style")
        if isinstance(style_raw, Mapping):
            default_style = StyleRecord.from_mapping(style_raw, warn_unknown=warn_unknown)
        else:
            default_style = defaults.default_style

        return cls(
            fill_columns=_int("fill_columns", defaults.fill_columns, MAX_FILL_COLUMNS),
            fill_rows=_int("fill_rows", defaults.fill_rows, MAX_FILL_ROWS),
            fill_char=fill_char,
            default_style=default_style,
            warn_unknown_style_keys=warn_unknown,
        )


def load_settings(settings_path: Path) -> BoxSettings:
    """Read settings from a JSON file, falling back to defaults when absent or unreadable."""
    try:
        raw = settings_path.read_text(encoding="utf-8")
    except (FileNotFoundError, OSError):
        return BoxSettings()

    try:
        data: Dict[str, Any] = json.loads(raw)
    except json.JSONDecodeError as exc:
        _LOGGER.warning("Failed to parse %s, using defaults: %s", settings_path, exc)
        return BoxSettings()
    if not isinstance(data, dict):
        _LOGGER.warning("Ignoring %s: expected a JSON object", settings_path)
        return BoxSettings()
    return BoxSettings.from_mapping(data)
