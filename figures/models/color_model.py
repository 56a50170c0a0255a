"""Цвет заливки фигуры.

Принципы:
- Каналы хранятся в соглашении растровой библиотеки фигур: 0–255 для RGB,
  прозрачность 0 (непрозрачно) … 127 (полностью прозрачно).
- Проверка диапазонов выполняется при построении цвета, а не в сеттерах фигуры.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from figures.models.errors import ColorRangeError

CHANNEL_MAX = 255
OPACITY_MAX = 127  # "alpha" растровой библиотеки: 127 = полностью прозрачно


def _check_range(name: str, value: object, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ColorRangeError(name, value, 0, high)
    if not 0 <= value <= high:
        raise ColorRangeError(name, value, 0, high)
    return value


def opacity_to_alpha(opacity: int) -> int:
    """Переводит прозрачность 0..127 в 8-битную альфу PIL (255..0)."""
    return CHANNEL_MAX - ((opacity << 1) + (opacity >> 6))


@dataclass(frozen=True)
class RGBAColor:
    """Неизменяемый цвет с прозрачностью.

    Fields:
        red, green, blue: Каналы 0–255.
        opacity: 0 — непрозрачный, 127 — полностью прозрачный.
    """
    red: int
    green: int
    blue: int
    opacity: int = 0

    @classmethod
    def from_channels(cls, red: int, green: int, blue: int, opacity: int = 0) -> "RGBAColor":
        """Создаёт цвет, проверяя каждый канал.

        Raises:
            ColorRangeError: если канал не целое число в допустимом диапазоне.
        """
        return cls(
            red=_check_range("red", red, CHANNEL_MAX),
            green=_check_range("green", green, CHANNEL_MAX),
            blue=_check_range("blue", blue, CHANNEL_MAX),
            opacity=_check_range("opacity", opacity, OPACITY_MAX),
        )

    @property
    def alpha(self) -> int:
        return opacity_to_alpha(self.opacity)

    def to_pil(self) -> Tuple[int, int, int, int]:
        """Кортеж RGBA для PIL (альфа 0–255)."""
        return (self.red, self.green, self.blue, self.alpha)


# Цвет затравки углов: белый, почти полностью прозрачный.
SEED_COLOR = RGBAColor(255, 255, 255, OPACITY_MAX)
