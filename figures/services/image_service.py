"""Загрузка изображений с диска, кодирование и сохранение холстов.

Принципы:
- SRP: класс отвечает только за ввод-вывод растров.
- OCP: новые форматы добавляются в `OutputFormat` и `_FORMAT_NAMES`.
"""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from figures.models.canvas_model import Canvas, OutputFormat
from figures.models.errors import NoRasterError, UnsupportedFormatError
from figures.models.source_model import SourceImage

logger = logging.getLogger(__name__)

_FORMAT_NAMES = {
    "png": OutputFormat.PNG,
    "jpg": OutputFormat.JPEG,
    "jpeg": OutputFormat.JPEG,
    "gif": OutputFormat.GIF,
}

# JPEG не хранит альфу: прозрачные области заливаются белым.
_JPEG_MATTE = (255, 255, 255)


def format_from_name(name: str) -> OutputFormat:
    """Возвращает `OutputFormat` по имени или расширению ("png", ".JPG", ...).

    Raises:
        UnsupportedFormatError: если формат неизвестен.
    """
    key = name.strip().lower().lstrip(".")
    try:
        return _FORMAT_NAMES[key]
    except KeyError:
        raise UnsupportedFormatError(f"Неподдерживаемый формат: {name!r}") from None


class ImageService:
    def load_image(self, file_path: str | Path) -> SourceImage:
        """Загружает фон с диска, запоминая формат файла.

        Формат определяется по содержимому (PIL), а не по расширению.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            ValueError: если файл не распознан как изображение.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as opened:
                detected = opened.format or ""
                raster = opened.convert("RGBA")
        except UnidentifiedImageError as exc:
            raise ValueError(f"Файл не является изображением: {path}") from exc

        try:
            source_format: Optional[OutputFormat] = format_from_name(detected)
        except UnsupportedFormatError:
            logger.debug("%s: format %r is read-only, background will be written as PNG", path, detected)
            source_format = None

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return SourceImage(path=path, raster=raster, source_format=source_format, size_bytes=size_bytes)

    def load_canvas(self, file_path: str | Path) -> Canvas:
        """Загружает изображение сразу как холст фона."""
        return self.load_image(file_path).to_canvas()

    def encode(self, canvas: Canvas) -> bytes:
        """Кодирует растр холста в его формат вывода.

        Raises:
            NoRasterError: если растр ещё не построен.
        """
        if canvas.raster is None:
            raise NoRasterError("Холст пуст: сначала вызовите create()")

        image = canvas.raster
        if canvas.output_format is OutputFormat.JPEG:
            image = self._flatten(image)

        buf = io.BytesIO()
        image.save(buf, format=canvas.output_format.pil_format)
        return buf.getvalue()

    def save(self, canvas: Canvas, file_path: str | Path) -> Path:
        """Сохраняет холст в файл; недостающие каталоги создаются."""
        path = Path(file_path)
        data = self.encode(canvas)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info("saved %s (%d bytes, %s)", path, len(data), canvas.output_format.value)
        return path

    def _flatten(self, image: Image.Image) -> Image.Image:
        if image.mode != "RGBA":
            return image.convert("RGB")
        matte = Image.new("RGB", image.size, _JPEG_MATTE)
        matte.paste(image, mask=image.getchannel("A"))
        return matte
