"""
Настройка логирования по умолчанию.

Модули получают логгер через `logging.getLogger(__name__)`; этот помощник
включает базовую конфигурацию, если приложение ещё не настроило логирование.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Однократная минимальная настройка логирования.

    - Ничего не делает, если у корневого логгера уже есть обработчики
    - Вызывается из точек входа (main)
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # приложение уже настроило логирование
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
