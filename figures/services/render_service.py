"""Растеризация фигур средствами PIL.

Принципы:
- SRP: сервис знает только, как превратить размер, цвет и вид фигуры в растр.
- Все общие параметры (размер, прозрачность) приходят явными аргументами.
"""
from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image, ImageDraw

from figures.models.color_model import SEED_COLOR, RGBAColor
from figures.models.errors import EmptyFigureError
from figures.models.shape_model import ShapeKind

logger = logging.getLogger(__name__)

# Свежая true-color поверхность библиотеки: непрозрачный чёрный.
_SURFACE_FILL = (0, 0, 0, 255)


class RenderService:
    def render(self, width: int, height: int, color: RGBAColor, kind: ShapeKind) -> Image.Image:
        """Строит RGBA-растр фигуры размером `width × height`.

        Шаги:
        1) выделение true-color поверхности с альфа-каналом;
        2) затравка четырёх углов прозрачным цветом (форсирует учёт альфы,
           фон вне фигуры становится прозрачным);
        3) заливка фигуры цветом `color` на всю рамку.

        Raises:
            EmptyFigureError: если ширина или высота не больше нуля.
            TypeError: если `kind` не является `ShapeKind`.
        """
        if width <= 0 or height <= 0:
            raise EmptyFigureError(width, height)

        surface = Image.new("RGBA", (width, height), _SURFACE_FILL)
        self._seed_alpha(surface)

        draw = ImageDraw.Draw(surface)
        fill = color.to_pil()
        if kind is ShapeKind.RECTANGLE:
            draw.rectangle((0, 0, width - 1, height - 1), fill=fill)
        elif kind is ShapeKind.ELLIPSE:
            if width == 1 or height == 1:
                # вырожденный эллипс: отрезок по всей рамке
                draw.rectangle((0, 0, width - 1, height - 1), fill=fill)
            else:
                draw.ellipse(self._ellipse_box(width, height), fill=fill)
        else:
            raise TypeError(f"Неподдерживаемый вид фигуры: {kind!r}")

        logger.debug("rendered %s %dx%d fill=%s", kind.value, width, height, fill)
        return surface

    def _seed_alpha(self, surface: Image.Image) -> None:
        """Заливка от каждого угла прозрачным цветом (force alpha channel registration)."""
        w, h = surface.size
        seed = SEED_COLOR.to_pil()
        for corner in self.corners(w, h):
            ImageDraw.floodfill(surface, corner, seed)

    @staticmethod
    def corners(width: int, height: int) -> Tuple[Tuple[int, int], ...]:
        return ((0, 0), (width - 1, 0), (0, height - 1), (width - 1, height - 1))

    @staticmethod
    def _ellipse_box(width: int, height: int) -> Tuple[float, float, float, float]:
        # центр (w/2, h/2), диаметры w × h
        cx, cy = width / 2, height / 2
        return (cx - width / 2, cy - height / 2, cx + width / 2 - 1, cy + height / 2 - 1)
