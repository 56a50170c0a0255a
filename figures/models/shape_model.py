"""Виды фигур."""
from __future__ import annotations

from enum import Enum


class ShapeKind(Enum):
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"

    @classmethod
    def from_name(cls, name: str) -> "ShapeKind":
        """Ищет вид фигуры по имени без учёта регистра.

        Raises:
            ValueError: если имя не соответствует ни одному виду.
        """
        try:
            return cls(name.strip().lower())
        except ValueError as exc:
            known = ", ".join(kind.value for kind in cls)
            raise ValueError(f"Неизвестный вид фигуры: {name!r} (допустимо: {known})") from exc
