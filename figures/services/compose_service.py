"""Наложение фигур и изображений на холст.

Принципы:
- Исходные холсты не мутируются: результат — новый `Canvas`.
- Слой кладётся в свою позицию (x, y); выходящие за границы части обрезаются.
"""
from __future__ import annotations

import logging
from typing import Iterable, Tuple

from PIL import Image

from figures.models.canvas_model import Canvas
from figures.models.errors import EmptyFigureError, NoRasterError

logger = logging.getLogger(__name__)


class ComposeService:
    def blank(self, width: int, height: int, rgba: Tuple[int, int, int, int] = (0, 0, 0, 0)) -> Canvas:
        """Создаёт холст, залитый одним цветом (по умолчанию прозрачный)."""
        if width <= 0 or height <= 0:
            raise EmptyFigureError(width, height)
        raster = Image.new("RGBA", (width, height), rgba)
        return Canvas(raster=raster).set_box(width, height)

    def compose(self, background: Canvas, layers: Iterable[Canvas]) -> Canvas:
        """Накладывает слои по порядку на копию фона с альфа-смешиванием.

        Raises:
            NoRasterError: если у фона или у одного из слоёв нет растра.
        """
        if background.raster is None:
            raise NoRasterError("У фона нет растра")

        result = background.raster.convert("RGBA")
        count = 0
        for layer in layers:
            if layer.raster is None:
                raise NoRasterError("У слоя нет растра: сначала вызовите create()")
            self._paste(result, layer.raster, layer.x, layer.y)
            count += 1

        logger.debug("composed %d layer(s) onto %dx%d", count, result.width, result.height)
        return Canvas(
            box_width=result.width,
            box_height=result.height,
            opacity=background.opacity,
            output_format=background.output_format,
            raster=result,
        )

    def centered(self, background: Canvas, layer: Canvas) -> Canvas:
        """Ставит слой в центр фона (только позиция, без наложения)."""
        if background.raster is None or layer.raster is None:
            raise NoRasterError("Для центрирования нужны оба растра")
        bw, bh = background.raster.size
        lw, lh = layer.raster.size
        return layer.set_position((bw - lw) // 2, (bh - lh) // 2)

    def _paste(self, target: Image.Image, source: Image.Image, x: int, y: int) -> None:
        # обрезаем источник по границам цели, alpha_composite не принимает отрицательные смещения
        tw, th = target.size
        sw, sh = source.size
        left, top = max(0, -x), max(0, -y)
        right, bottom = min(sw, tw - x), min(sh, th - y)
        if right <= left or bottom <= top:
            return
        src = source.convert("RGBA").crop((left, top, right, bottom))
        target.alpha_composite(src, dest=(x + left, y + top))
