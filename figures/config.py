"""Конфигурация студии фигур: значения по умолчанию и загрузка из YAML.

Пример файла (config/studio.yaml):

    figure:
      width: 240
      height: 160
      color: [255, 0, 0]
      opacity: 0
      shape: ellipse
    output:
      format: png
      directory: output
    logging:
      level: INFO
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from figures.models.canvas_model import OutputFormat
from figures.models.figure_model import Figure
from figures.models.shape_model import ShapeKind
from figures.services.image_service import format_from_name

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "studio.yaml"


@dataclass(frozen=True)
class StudioConfig:
    """Неизменяемые настройки приложения.

    Fields:
        width, height: Начальный размер фигуры, px.
        color: Начальный цвет заливки (R, G, B).
        opacity: Прозрачность 0 (непрозрачно) … 127.
        shape: Вид фигуры.
        output_format: Формат сохранения.
        output_dir: Каталог по умолчанию для «Сохранить…».
        log_level: Уровень логирования.
    """
    width: int = 240
    height: int = 160
    color: Tuple[int, int, int] = (255, 0, 0)
    opacity: int = 0
    shape: ShapeKind = ShapeKind.RECTANGLE
    output_format: OutputFormat = OutputFormat.PNG
    output_dir: Path = field(default_factory=lambda: Path("output"))
    log_level: str = "INFO"

    def build_figure(self) -> Figure:
        """Создаёт фигуру с настройками по умолчанию (без построения растра)."""
        figure = (
            Figure(self.width, self.height)
            .set_background_color(*self.color)
            .set_opacity(self.opacity)
            .set_shape(self.shape)
        )
        figure.canvas.output_format = self.output_format
        return figure


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Секция '{name}' должна быть словарём")
    return value


def _int(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"'{name}' должно быть целым числом, получено {value!r}")
    return value


def _color(value: Any) -> Tuple[int, int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"'figure.color' должен быть списком из трёх чисел, получено {value!r}")
    r, g, b = (_int(v, "figure.color") for v in value)
    return (r, g, b)


def config_from_dict(raw: Dict[str, Any], base: Optional[StudioConfig] = None) -> StudioConfig:
    """Накладывает значения из словаря на `base`; отсутствующие ключи сохраняют значения по умолчанию.

    Raises:
        ValueError: при неверном типе или значении.
    """
    cfg = base or StudioConfig()
    figure = _section(raw, "figure")
    output = _section(raw, "output")
    log = _section(raw, "logging")

    changes: Dict[str, Any] = {}
    if "width" in figure:
        changes["width"] = _int(figure["width"], "figure.width")
    if "height" in figure:
        changes["height"] = _int(figure["height"], "figure.height")
    if "color" in figure:
        changes["color"] = _color(figure["color"])
    if "opacity" in figure:
        changes["opacity"] = _int(figure["opacity"], "figure.opacity")
    if "shape" in figure:
        changes["shape"] = ShapeKind.from_name(str(figure["shape"]))
    if "format" in output:
        changes["output_format"] = format_from_name(str(output["format"]))
    if "directory" in output:
        changes["output_dir"] = Path(str(output["directory"]))
    if "level" in log:
        changes["log_level"] = str(log["level"]).upper()

    return replace(cfg, **changes)


def load_config(path: Optional[str | Path] = None) -> StudioConfig:
    """Загружает настройки из YAML.

    Без явного пути читается `config/studio.yaml`, если он существует,
    иначе возвращаются значения по умолчанию.

    Raises:
        FileNotFoundError: если явно указанный файл не существует.
        ValueError: при неверном содержимом файла.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.is_file():
            return StudioConfig()
        config_path = DEFAULT_CONFIG_PATH
    else:
        config_path = Path(path)
        if not config_path.is_file():
            raise FileNotFoundError(f"Файл конфигурации не найден: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Некорректный YAML в {config_path}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"Корень {config_path} должен быть словарём")
    logger.debug("loaded config from %s", config_path)
    return config_from_dict(raw)
