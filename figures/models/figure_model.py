"""Фигура: прямоугольник или эллипс со сплошной заливкой RGBA.

Принципы:
- Композиция вместо наследования: фигура владеет `Canvas`, куда кладёт растр.
- Fluent-интерфейс: сеттеры возвращают `self` для цепочек вызовов.
- Отрисовка делегирована `RenderService`; здесь только конфигурация.
"""
from __future__ import annotations

import logging
from typing import Optional, Tuple

from PIL import Image

from figures.models.canvas_model import Canvas
from figures.models.color_model import RGBAColor
from figures.models.shape_model import ShapeKind
from figures.services.render_service import RenderService

logger = logging.getLogger(__name__)

_DEFAULT_RENDERER = RenderService()


class Figure:
    """Описание фигуры и её построение в растр по запросу.

    Размер меняется только парой и только если обе стороны положительны;
    иначе вызов молча игнорируется. Цвет хранится как передан, проверка
    диапазонов происходит в `create()`.
    """

    def __init__(self, width: int = 0, height: int = 0, renderer: Optional[RenderService] = None) -> None:
        self.width = 0
        self.height = 0
        self.red = 0
        self.green = 0
        self.blue = 0
        self.shape_kind = ShapeKind.RECTANGLE
        self.canvas = Canvas()
        self._renderer = renderer or _DEFAULT_RENDERER

        self.set_size(width, height)
        self.canvas.to_png()

    def __repr__(self) -> str:
        return (
            f"Figure({self.width}x{self.height}, {self.shape_kind.value}, "
            f"rgb=({self.red}, {self.green}, {self.blue}), opacity={self.opacity})"
        )

    # ---- Configuration ----
    def set_size(self, width: int, height: int) -> "Figure":
        """Задаёт размер фигуры и рамки холста (только если обе стороны > 0)."""
        if width > 0 and height > 0:
            self.width = self.canvas.box_width = width
            self.height = self.canvas.box_height = height
        else:
            logger.debug("set_size(%r, %r) ignored, keeping %dx%d", width, height, self.width, self.height)
        return self

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def is_rectangle(self) -> "Figure":
        self.shape_kind = ShapeKind.RECTANGLE
        return self

    def is_ellipse(self) -> "Figure":
        self.shape_kind = ShapeKind.ELLIPSE
        return self

    def set_shape(self, kind: ShapeKind) -> "Figure":
        if not isinstance(kind, ShapeKind):
            raise TypeError(f"Ожидался ShapeKind, получено {type(kind).__name__}")
        self.shape_kind = kind
        return self

    def set_background_color(self, red: int, green: int, blue: int) -> "Figure":
        self.red = red
        self.green = green
        self.blue = blue
        return self

    def get_background_color(self) -> Tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    @property
    def opacity(self) -> int:
        return self.canvas.opacity

    def set_opacity(self, opacity: int) -> "Figure":
        """Прозрачность заливки: 0 — непрозрачно, 127 — полностью прозрачно."""
        self.canvas.set_opacity(opacity)
        return self

    # ---- Rendering ----
    def create(self) -> "Figure":
        """Строит растр по текущей конфигурации и кладёт его на холст.

        Каждый вызов строит новый растр; предыдущий просто заменяется.

        Raises:
            EmptyFigureError: если у фигуры нет площади.
            ColorRangeError: если цвет или прозрачность вне диапазона.
        """
        color = RGBAColor.from_channels(self.red, self.green, self.blue, self.opacity)
        self.canvas.raster = self._renderer.render(self.width, self.height, color, self.shape_kind)
        return self

    @property
    def raster(self) -> Optional[Image.Image]:
        return self.canvas.raster
