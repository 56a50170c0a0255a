"""Контроллер с поддельными виджетами: без окна и дисплея."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple

import pytest
from PIL import Image

pytest.importorskip("customtkinter")

from figures.config import StudioConfig  # noqa: E402
from figures.controllers.app_controller import AppController  # noqa: E402
from figures.models.canvas_model import OutputFormat  # noqa: E402
from figures.models.shape_model import ShapeKind  # noqa: E402


class FakeSidebar:
    def __init__(self) -> None:
        self.size = (0, 0)
        self.color = (0, 0, 0)
        self.opacity = 0
        self.shape = ShapeKind.RECTANGLE
        self.status = ""
        self.info: Optional[Tuple[Tuple[int, int], Optional[float]]] = None
        self.cursor = None
        self.background: Optional[str] = None

    def set_figure_values(self, size, color, opacity, shape, output_format) -> None:
        self.size, self.color, self.opacity, self.shape = size, color, opacity, shape
        self.output_format = output_format

    def set_figure_info(self, size, coverage) -> None:
        self.info = (size, coverage)

    def set_status(self, message: str) -> None:
        self.status = message

    def update_cursor_info(self, x, y, rgba) -> None:
        self.cursor = (x, y, rgba)

    def set_background_info(self, description) -> None:
        self.background = description

    def get_size(self):
        return self.size

    def get_color(self):
        return self.color

    def get_opacity(self):
        return self.opacity

    def get_shape(self):
        return self.shape


class FakePreview:
    def __init__(self) -> None:
        self.rasters: List = []
        self.keep_views: List[bool] = []
        self.zoom = 100

    def set_raster(self, raster, keep_view: bool = True) -> None:
        self.rasters.append(raster)
        self.keep_views.append(keep_view)

    def set_zoom_percent(self, zoom_percent: int) -> None:
        self.zoom = zoom_percent

    def set_zoom_to_fit(self) -> None:
        self.zoom = 42

    def get_zoom_percent(self) -> int:
        return self.zoom


class FakeBottom:
    def __init__(self) -> None:
        self.zoom = None
        self.view = None

    def set_zoom_percent(self, percent: int) -> None:
        self.zoom = percent

    def set_view_info(self, raster_size, percent: int) -> None:
        self.view = (raster_size, percent)


def _controller(tmp_path: Path, **kwargs) -> AppController:
    config = StudioConfig(width=30, height=20, color=(0, 255, 0), output_dir=tmp_path)
    controller = AppController(
        preview=FakePreview(),
        sidebar=FakeSidebar(),
        bottom=FakeBottom(),
        window=None,
        config=config,
        **kwargs,
    )
    controller.bind_events()
    return controller


def test_bind_events_renders_initial_figure(tmp_path):
    c = _controller(tmp_path)
    assert c.sidebar.size == (30, 20)
    assert c.sidebar.color == (0, 255, 0)
    assert c.preview.rasters[-1].size == (30, 20)
    assert c.sidebar.info == ((30, 20), 1.0)


def test_figure_change_rebuilds(tmp_path):
    c = _controller(tmp_path)
    c.sidebar.size = (50, 40)
    c.sidebar.shape = ShapeKind.ELLIPSE
    c.sidebar.on_figure_change()
    raster = c.preview.rasters[-1]
    assert raster.size == (50, 40)
    assert raster.getpixel((0, 0))[3] == 0
    assert c.figure.shape_kind is ShapeKind.ELLIPSE


def test_invalid_size_keeps_previous(tmp_path):
    c = _controller(tmp_path)
    c.sidebar.size = (0, 99)
    c.sidebar.on_figure_change()
    assert c.figure.size == (30, 20)
    assert c.preview.rasters[-1].size == (30, 20)


def test_out_of_range_opacity_reports_status(tmp_path):
    c = _controller(tmp_path)
    before = len(c.preview.rasters)
    c.sidebar.opacity = 500
    c.sidebar.on_figure_change()
    assert "opacity" in c.sidebar.status
    assert len(c.preview.rasters) == before


def test_save_writes_file(tmp_path):
    target = tmp_path / "out" / "figure.gif"
    c = _controller(tmp_path, ask_save_path=lambda directory, ext: str(target))
    c.sidebar.on_format_change(OutputFormat.GIF)
    c.sidebar.on_save()
    assert target.is_file()
    assert c.sidebar.status == ""


def test_save_cancelled(tmp_path):
    c = _controller(tmp_path, ask_save_path=lambda directory, ext: "")
    c.sidebar.on_save()
    assert list(tmp_path.iterdir()) == []


def test_background_composition(tmp_path, blue_png):
    c = _controller(tmp_path, ask_open_path=lambda: str(blue_png))
    c.sidebar.size = (10, 10)
    c.sidebar.on_figure_change()
    c.sidebar.on_open_background()
    shown = c.shown.raster
    assert shown.size == (40, 30)
    assert shown.getpixel((0, 0)) == (0, 0, 255, 255)
    assert shown.getpixel((20, 15)) == (0, 255, 0, 255)
    assert c.sidebar.background == "blue.png (40 × 30, PNG)"
    assert c.bottom.view == ((40, 30), 100)

    c.sidebar.on_clear_background()
    assert c.shown.raster.size == (10, 10)
    assert c.sidebar.background is None


def test_background_keeps_source_format(tmp_path):
    photo = tmp_path / "photo.jpg"
    Image.new("RGB", (20, 20), (90, 90, 90)).save(photo)
    c = _controller(tmp_path, ask_open_path=lambda: str(photo))
    c.sidebar.on_open_background()
    assert c.sidebar.background == "photo.jpg (20 × 20, JPEG)"


def test_background_missing_file(tmp_path):
    c = _controller(tmp_path, ask_open_path=lambda: str(tmp_path / "missing.png"))
    c.sidebar.on_open_background()
    assert "missing.png" in c.sidebar.status


def test_zoom_sync(tmp_path):
    c = _controller(tmp_path)
    c.bottom.on_zoom_fit()
    assert c.bottom.zoom == 42
    c.bottom.on_zoom_change(200)
    assert c.preview.zoom == 200
    assert c.bottom.view == ((30, 20), 200)
    c.preview.zoom = 150
    c.preview.on_zoom_change(150)
    assert c.bottom.zoom == 150
    assert c.bottom.view == ((30, 20), 150)


def test_view_info_after_initial_render(tmp_path):
    c = _controller(tmp_path)
    assert c.bottom.zoom == 100
    assert c.bottom.view == ((30, 20), 100)


def test_figure_change_keeps_view_by_default(tmp_path):
    c = _controller(tmp_path)
    c.sidebar.size = (60, 40)
    c.sidebar.on_figure_change()
    assert c.preview.keep_views[-1] is True
    assert c.bottom.view == ((60, 40), 100)


def test_auto_fit_refits_on_figure_change(tmp_path):
    c = _controller(tmp_path)
    c.bottom.on_auto_fit_change(True)
    assert c.preview.zoom == 42
    assert c.bottom.zoom == 42

    c.sidebar.size = (60, 40)
    c.sidebar.on_figure_change()
    assert c.preview.keep_views[-1] is False

    c.bottom.on_auto_fit_change(False)
    c.sidebar.on_figure_change()
    assert c.preview.keep_views[-1] is True


def test_cursor_forwarded(tmp_path):
    c = _controller(tmp_path)
    c.preview.on_cursor_move(1, 2, (3, 4, 5, 6))
    assert c.sidebar.cursor == (1, 2, (3, 4, 5, 6))
