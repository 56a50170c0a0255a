"""Исходное изображение с диска, которое становится фоном для фигур.

Принципы:
- Формат источника сохраняется, чтобы фон по умолчанию сохранялся в том же формате.
- Файлы в форматах, которые студия не пишет (BMP, TIFF, ...), сохраняются как PNG.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image

from figures.models.canvas_model import Canvas, OutputFormat


@dataclass(frozen=True)
class SourceImage:
    """Загруженный фон.

    Fields:
        path: Путь к файлу.
        raster: Растр RGBA.
        source_format: Формат файла, если студия умеет в него писать, иначе None.
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    raster: Image.Image
    source_format: Optional[OutputFormat]
    size_bytes: Optional[int]

    @property
    def size(self) -> Tuple[int, int]:
        return self.raster.size

    @property
    def output_format(self) -> OutputFormat:
        return self.source_format or OutputFormat.PNG

    def to_canvas(self) -> Canvas:
        """Холст фона: рамка по размеру растра, формат вывода по источнику."""
        width, height = self.size
        return Canvas(raster=self.raster, output_format=self.output_format).set_box(width, height)

    def describe(self) -> str:
        """Короткая подпись для UI: имя, размеры, формат."""
        width, height = self.size
        fmt = self.source_format.name if self.source_format else "→ PNG"
        return f"{self.path.name} ({width} × {height}, {fmt})"
