"""Точка входа в приложение."""
from __future__ import annotations

import argparse
from typing import Optional, Sequence

from figures.common.logging import setup_default_logging
from figures.config import load_config


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Читает конфигурацию, настраивает логирование и запускает главное окно."""
    parser = argparse.ArgumentParser(description="Figure Studio: предпросмотр и сохранение фигур")
    parser.add_argument("--config", default=None, help="путь к YAML-конфигурации (по умолчанию config/studio.yaml)")
    args = parser.parse_args(argv)

    config = load_config(args.config)
    setup_default_logging(config.log_level)

    # окно импортируется поздно: без дисплея ошибки конфигурации видны раньше
    from figures.app import FigureStudioApp

    app = FigureStudioApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
