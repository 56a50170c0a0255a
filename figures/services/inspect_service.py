"""Пиксельная статистика растров фигур на numpy.

Принципы:
- SRP: только чтение растра, без изменения пикселей.
- Изображения без альфа-канала считаются полностью непрозрачными.
"""
from __future__ import annotations

from typing import Optional, Tuple

import numpy as np
from PIL import Image


class InspectService:
    # ---------- Вспомогательные функции ----------
    def _alpha_np(self, image: Image.Image) -> np.ndarray:
        """
        Возвращает альфа-канал как numpy-массив uint8 (H, W).
        Изображения без альфы считаются полностью непрозрачными.
        """
        if image.mode == "RGBA":
            return np.asarray(image.getchannel("A"), dtype=np.uint8)
        return np.full((image.height, image.width), 255, dtype=np.uint8)

    def has_alpha(self, image: Image.Image) -> bool:
        """
        Есть ли у изображения альфа-канал и хотя бы один не полностью непрозрачный пиксель.
        """
        if "A" not in image.getbands():
            return False
        return bool((self._alpha_np(image) < 255).any())

    def alpha_coverage(self, image: Image.Image) -> float:
        """
        Доля пикселей с альфой > 0 (видимая площадь фигуры), в диапазоне [0, 1].
        """
        alpha = self._alpha_np(image)
        if alpha.size == 0:
            return 0.0
        return float(np.count_nonzero(alpha) / alpha.size)

    def pixel(self, image: Image.Image, x: int, y: int) -> Tuple[int, int, int, int]:
        """
        RGBA-значение пикселя (x, y).
        """
        rgba = image if image.mode == "RGBA" else image.convert("RGBA")
        r, g, b, a = rgba.getpixel((x, y))
        return (int(r), int(g), int(b), int(a))

    def bounding_box(self, image: Image.Image) -> Optional[Tuple[int, int, int, int]]:
        """
        Рамка непрозрачных пикселей (left, top, right, bottom) — правая/нижняя граница исключена.
        None, если видимых пикселей нет.
        """
        alpha = self._alpha_np(image)
        ys, xs = np.nonzero(alpha)
        if xs.size == 0:
            return None
        return (int(xs.min()), int(ys.min()), int(xs.max()) + 1, int(ys.max()) + 1)
