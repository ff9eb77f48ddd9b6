from __future__ import annotations

import dataclasses
import logging

import pytest

from overlay_boxes.style import (
    DEFAULT_STYLE,
    StyleRecord,
    coerce_border_width,
    coerce_percent,
    merge,
)


def test_merge_single_key_keeps_other_defaults() -> None:
    merged = merge(DEFAULT_STYLE, {"opacity": 50})

    assert merged.opacity == 50
    assert merged == dataclasses.replace(DEFAULT_STYLE, opacity=50)


def test_merge_without_override_returns_base() -> None:
    base = StyleRecord(background_color="#112233")

    assert merge(base, None) is base
    assert merge(None, None) is DEFAULT_STYLE


def test_merge_falls_back_to_base_for_missing_and_none_values() -> None:
    base = StyleRecord(background_color="#112233", border_width=3)

    merged = merge(base, {"border_color": "red", "background_color": None})

    assert merged.background_color == "#112233"
    assert merged.border_width == 3
    assert merged.border_color == "red"


def test_merge_with_record_replaces_every_field() -> None:
    override = StyleRecord(background_color="blue", opacity=10)

    merged = merge(StyleRecord(background_color="green", border_width=4), override)

    assert merged == override


def test_merge_coerces_values() -> None:
    merged = merge(DEFAULT_STYLE, {"opacity": "150", "border_width": "2.6", "border_color": "  "})

    assert merged.opacity == 100
    assert merged.border_width == 3
    assert merged.border_color == DEFAULT_STYLE.border_color


def test_coerce_helpers_clamp() -> None:
    assert coerce_percent(-5) == 0
    assert coerce_percent("75") == 75
    assert coerce_percent("abc", 40) == 40
    assert coerce_border_width(-3) == 0
    assert coerce_border_width(None, 2) == 2


def test_unknown_keys_are_dropped_with_warning(monkeypatch, caplog) -> None:
    monkeypatch.setattr(logging.getLogger("OverlayBoxes"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="OverlayBoxes.Style"):
        merged = merge(DEFAULT_STYLE, {"opacity": 20, "glow": True, "radius": 4})

    assert merged == dataclasses.replace(DEFAULT_STYLE, opacity=20)
    assert "glow, radius" in caplog.text


def test_unknown_keys_can_be_silenced(monkeypatch, caplog) -> None:
    monkeypatch.setattr(logging.getLogger("OverlayBoxes"), "propagate", True)

    with caplog.at_level(logging.WARNING, logger="OverlayBoxes.Style"):
        merge(DEFAULT_STYLE, {"glow": True}, warn_unknown=False)

    assert caplog.records == []


def test_style_record_is_immutable() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_STYLE.opacity = 10  # type: ignore[misc]


def test_from_mapping_round_trips_through_dict() -> None:
    record = StyleRecord.from_mapping({"background_color": "#010203", "border_width": 1})

    assert record.as_dict()["background_color"] == "#010203"
    assert record.as_dict()["foreground_color"] == "#ffffff"
    assert record.border_width == 1
