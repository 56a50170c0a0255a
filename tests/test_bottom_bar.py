"""Вспомогательные функции нижней панели: без окна."""

from __future__ import annotations

import pytest

pytest.importorskip("customtkinter")

from figures.ui.bottom_bar import (  # noqa: E402
    FIT_PRESET,
    format_view_info,
    on_screen_size,
    percent_to_preset,
    preset_to_percent,
)


@pytest.mark.parametrize("label,percent", [("1:2", 50), ("1:1", 100), ("2:1", 200), ("4:1", 400), ("8:1", 800)])
def test_preset_ratios(label, percent):
    assert preset_to_percent(label) == percent
    assert percent_to_preset(percent) == label


def test_fit_and_unknown_presets_have_no_percent():
    assert preset_to_percent(FIT_PRESET) is None
    assert preset_to_percent("3:1") is None


def test_arbitrary_zoom_has_no_preset():
    assert percent_to_preset(137) == ""


def test_one_to_one_is_pixel_for_pixel():
    assert on_screen_size((30, 20), 100) == (30, 20)
    assert on_screen_size((30, 20), 400) == (120, 80)


def test_on_screen_size_never_collapses():
    assert on_screen_size((3, 1), 10) == (1, 1)


def test_format_view_info():
    assert format_view_info((30, 20), 200) == "30 × 20 px → 60 × 40 на экране"
