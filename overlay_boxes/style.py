"""Style records for overlay boxes and the merge rules applied to caller overrides."""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional, Union

from overlay_boxes.logging_setup import get_logger

_LOGGER = get_logger("Style")

STYLE_KEYS = ("background_color", "foreground_color", "border_color", "border_width", "opacity")


def coerce_percent(value: Any, default: int = 100) -> int:
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return default
    numeric = int(round(numeric))
    if numeric < 0:
        return 0
    if numeric > 100:
        return 100
    return numeric


def coerce_border_width(value: Any, default: int = 0) -> int:
    try:
        width = int(round(float(value)))
    except (TypeError, ValueError):
        width = default
    return max(0, width)


def coerce_color(value: Any, default: str) -> str:
    if value is None:
        return default
    try:
        text = str(value).strip()
    except Exception:
        return default
    return text or default


@dataclass(frozen=True)
class StyleRecord:
    """Visual description of a box: fill, foreground, border and opacity."""

    background_color: str = "#000000"
    foreground_color: str = "#ffffff"
    border_color: str = "#ffffff"
    border_width: int = 0
    opacity: int = 100

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, warn_unknown: bool = True) -> "StyleRecord":
        return merge(DEFAULT_STYLE, data, warn_unknown=warn_unknown)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_STYLE = StyleRecord()

StyleLike = Union[StyleRecord, Mapping[str, Any]]


def merge(
    base: Optional[StyleRecord],
    override: Optional[StyleLike],
    *,
    warn_unknown: bool = True,
) -> StyleRecord:
    """Return a new record with ``override`` layered over ``base``.

    Missing keys fall back to ``base`` and then to the defaults. Unknown keys in a
    mapping override are dropped (and logged when ``warn_unknown`` is set).
    """

    base = base if base is not None else DEFAULT_STYLE
    if override is None:
        return base
    if isinstance(override, StyleRecord):
        values: Mapping[str, Any] = override.as_dict()
    else:
        values = override
        unknown = sorted(str(key) for key in values if key not in STYLE_KEYS)
        if unknown and warn_unknown:
            _LOGGER.warning("Ignoring unrecognised style keys: %s", ", ".join(unknown))

    def _pick(key: str) -> Any:
        if key in values and values[key] is not None:
            return values[key]
        return getattr(base, key)

    defaults = {f.name: f.default for f in fields(StyleRecord)}
    return StyleRecord(
        background_color=coerce_color(_pick("background_color"), defaults["background_color"]),
        foreground_color=coerce_color(_pick("foreground_color"), defaults["foreground_color"]),
        border_color=coerce_color(_pick("border_color"), defaults["border_color"]),
        border_width=coerce_border_width(_pick("border_width"), base.border_width),
        opacity=coerce_percent(_pick("opacity"), base.opacity),
    )
