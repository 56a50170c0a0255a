"""Общие фикстуры."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from figures.models.figure_model import Figure
from figures.services.inspect_service import InspectService


@pytest.fixture()
def inspect() -> InspectService:
    return InspectService()


@pytest.fixture()
def red_ellipse() -> Figure:
    return Figure(100, 50).set_background_color(255, 0, 0).is_ellipse().create()


@pytest.fixture()
def blue_png(tmp_path: Path) -> Path:
    path = tmp_path / "blue.png"
    Image.new("RGBA", (40, 30), (0, 0, 255, 255)).save(path)
    return path
