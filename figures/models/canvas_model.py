"""Модель холста: то, что потребляют сервисы вывода и композиции.

Принципы:
- SRP: только состояние холста (рамка, прозрачность, формат, растр, позиция).
- Фигура не наследует холст, а владеет им; общие поля передаются явно.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PIL import Image


class OutputFormat(Enum):
    PNG = "png"
    JPEG = "jpeg"
    GIF = "gif"

    @property
    def pil_format(self) -> str:
        return self.name

    @property
    def extension(self) -> str:
        return ".jpg" if self is OutputFormat.JPEG else f".{self.value}"


@dataclass
class Canvas:
    """Холст с растром и параметрами вывода.

    Fields:
        box_width: Ширина рамки, px.
        box_height: Высота рамки, px.
        opacity: Прозрачность 0 (непрозрачно) … 127 (прозрачно).
        output_format: Формат кодирования при сохранении.
        raster: Построенное изображение RGBA или None.
        x, y: Смещение при наложении на другой холст.
    """
    box_width: int = 0
    box_height: int = 0
    opacity: int = 0
    output_format: OutputFormat = OutputFormat.PNG
    raster: Optional[Image.Image] = None
    x: int = 0
    y: int = 0

    def set_box(self, width: int, height: int) -> "Canvas":
        self.box_width = width
        self.box_height = height
        return self

    def set_opacity(self, opacity: int) -> "Canvas":
        self.opacity = opacity
        return self

    def set_position(self, x: int, y: int) -> "Canvas":
        self.x = x
        self.y = y
        return self

    def to_png(self) -> "Canvas":
        self.output_format = OutputFormat.PNG
        return self

    def to_jpg(self) -> "Canvas":
        self.output_format = OutputFormat.JPEG
        return self

    def to_gif(self) -> "Canvas":
        self.output_format = OutputFormat.GIF
        return self

    def has_raster(self) -> bool:
        return self.raster is not None
