"""Исключения модели фигур.

Базовый `FigureError` позволяет UI ловить ошибки слоя одним `except`,
а дополнительные базы (`ValueError`, `RuntimeError`) сохраняют привычную семантику.
"""
from __future__ import annotations


class FigureError(Exception):
    """Базовая ошибка пакета `figures`."""


class EmptyFigureError(FigureError, ValueError):
    """Фигура без площади (ширина или высота не больше нуля)."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(f"Фигура не имеет площади: {width} × {height} px")
        self.width = width
        self.height = height


class ColorRangeError(FigureError, ValueError):
    """Канал цвета или прозрачность вне допустимого диапазона."""

    def __init__(self, name: str, value: object, low: int, high: int) -> None:
        super().__init__(f"{name}={value!r} вне диапазона [{low}, {high}]")
        self.name = name
        self.value = value


class UnsupportedFormatError(FigureError, ValueError):
    """Неизвестный формат вывода."""


class NoRasterError(FigureError, RuntimeError):
    """Растр ещё не построен: нужно вызвать `create()`."""
