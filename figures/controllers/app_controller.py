"""Контроллер приложения: оркестрация UI, фигуры и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики растеризации).
- DIP: диалоги выбора файлов внедряются как вызываемые объекты.
Clean Code:
- Обработчики компактны; тяжёлая логика вынесена в сервисы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from tkinter import filedialog, TclError
from typing import Callable, Optional, Tuple

import customtkinter as ctk

from figures.config import StudioConfig
from figures.models.canvas_model import Canvas, OutputFormat
from figures.models.errors import FigureError
from figures.models.figure_model import Figure
from figures.services.compose_service import ComposeService
from figures.services.image_service import ImageService
from figures.services.inspect_service import InspectService
from figures.ui.bottom_bar import BottomBar
from figures.ui.preview import FigurePreview
from figures.ui.sidebar import Sidebar

logger = logging.getLogger(__name__)


def _ask_save_path(initial_dir: Path, extension: str) -> str:
    try:
        return filedialog.asksaveasfilename(
            title="Сохранить фигуру",
            initialdir=str(initial_dir),
            defaultextension=extension,
            filetypes=(("Images", f"*{extension}"), ("All files", "*.*")),
        )
    except TclError:
        # Silent fail if dialog cannot open
        return ""


def _ask_open_path() -> str:
    try:
        return filedialog.askopenfilename(
            title="Выберите фон",
            filetypes=(
                ("Images", "*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp"),
                ("All files", "*.*"),
            ),
        )
    except TclError:
        return ""


@dataclass
class AppController:
    """Связывает элементы UI с фигурой и сервисами.

    Ответственности:
    - Инициализация и бинд событий (UI -> контроллер).
    - Перестроение фигуры при каждом изменении параметров.
    - Наложение фигуры на фон, сохранение результата через `ImageService`.
    - Синхронизация зума и подписи «растр → экран»; авто-вписывание при изменении фигуры.
    """
    preview: FigurePreview
    sidebar: Sidebar
    bottom: BottomBar
    window: ctk.CTk
    config: StudioConfig = field(default_factory=StudioConfig)

    ask_save_path: Callable[[Path, str], str] = _ask_save_path
    ask_open_path: Callable[[], str] = _ask_open_path

    _image_service: ImageService = ImageService()
    _compose_service: ComposeService = ComposeService()
    _inspect_service: InspectService = InspectService()
    _figure: Optional[Figure] = None
    _background: Optional[Canvas] = None
    _shown: Optional[Canvas] = None
    _auto_fit: bool = False

    def bind_events(self) -> None:
        """Регистрирует обработчики событий и строит начальную фигуру из конфигурации."""
        self.sidebar.on_figure_change = self._handle_figure_change
        self.sidebar.on_format_change = self._handle_format_change
        self.sidebar.on_save = self._handle_save
        self.sidebar.on_open_background = self._handle_open_background
        self.sidebar.on_clear_background = self._handle_clear_background

        self.preview.on_cursor_move = self._handle_cursor_move
        self.preview.on_zoom_change = self._handle_preview_zoom_changed

        self.bottom.on_zoom_change = self._handle_zoom_change
        self.bottom.on_zoom_preset = self._handle_zoom_change
        self.bottom.on_zoom_fit = self._handle_zoom_fit
        self.bottom.on_auto_fit_change = self._handle_auto_fit_change

        self._figure = self.config.build_figure()
        self.sidebar.set_figure_values(
            size=self._figure.size,
            color=self._figure.get_background_color(),
            opacity=self._figure.opacity,
            shape=self._figure.shape_kind,
            output_format=self._figure.canvas.output_format,
        )
        self._rebuild(keep_view=False)

    @property
    def figure(self) -> Optional[Figure]:
        return self._figure

    @property
    def shown(self) -> Optional[Canvas]:
        """Холст, который сейчас на экране (фигура или фигура поверх фона)."""
        return self._shown

    # ---- Handlers ----
    def _handle_figure_change(self) -> None:
        if self._figure is None:
            return
        width, height = self.sidebar.get_size()
        # невалидный размер фигура молча игнорирует
        self._figure.set_size(width, height)
        self._figure.set_background_color(*self.sidebar.get_color())
        self._figure.set_opacity(self.sidebar.get_opacity())
        self._figure.set_shape(self.sidebar.get_shape())
        self._rebuild(keep_view=not self._auto_fit)

    def _handle_format_change(self, output_format: OutputFormat) -> None:
        if self._figure is not None:
            self._figure.canvas.output_format = output_format
        if self._shown is not None:
            self._shown.output_format = output_format

    def _handle_save(self) -> None:
        if self._shown is None or self._figure is None:
            self.sidebar.set_status("Нечего сохранять")
            return
        fmt = self._figure.canvas.output_format
        file_path = self.ask_save_path(self.config.output_dir, fmt.extension)
        if not file_path:
            return
        try:
            saved = self._image_service.save(self._shown, file_path)
        except (FigureError, OSError) as exc:
            logger.warning("save failed: %s", exc)
            self.sidebar.set_status(str(exc))
            return
        self.sidebar.set_status("")
        logger.info("figure saved to %s", saved)

    def _handle_open_background(self) -> None:
        file_path = self.ask_open_path()
        if not file_path:
            return
        try:
            source = self._image_service.load_image(file_path)
        except (FileNotFoundError, ValueError) as exc:
            self.sidebar.set_status(str(exc))
            return
        self._background = source.to_canvas()
        self.sidebar.set_background_info(source.describe())
        self._rebuild(keep_view=False)

    def _handle_clear_background(self) -> None:
        if self._background is None:
            return
        self._background = None
        self.sidebar.set_background_info(None)
        self._rebuild(keep_view=False)

    def _handle_zoom_change(self, zoom_percent: int) -> None:
        self.preview.set_zoom_percent(zoom_percent)
        self._sync_zoom()

    def _handle_cursor_move(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        self.sidebar.update_cursor_info(x, y, rgba)

    def _handle_preview_zoom_changed(self, zoom_percent: int) -> None:
        self._sync_zoom()

    def _handle_zoom_fit(self) -> None:
        self.preview.set_zoom_to_fit()
        self._sync_zoom()

    def _handle_auto_fit_change(self, enabled: bool) -> None:
        self._auto_fit = enabled
        if enabled:
            self._handle_zoom_fit()

    # ---- Helpers ----
    def _rebuild(self, keep_view: bool) -> None:
        """Перестраивает фигуру, при наличии фона накладывает её по центру и обновляет предпросмотр."""
        if self._figure is None:
            return
        figure = self._figure
        try:
            figure.create()
            shown = figure.canvas
            if self._background is not None:
                self._compose_service.centered(self._background, figure.canvas)
                shown = self._compose_service.compose(self._background, [figure.canvas])
                shown.output_format = figure.canvas.output_format
        except FigureError as exc:
            logger.debug("figure not rendered: %s", exc)
            self.sidebar.set_status(str(exc))
            return

        self._shown = shown
        self.sidebar.set_status("")
        coverage = self._inspect_service.alpha_coverage(figure.raster) if figure.raster is not None else None
        self.sidebar.set_figure_info(figure.size, coverage)
        self.preview.set_raster(shown.raster, keep_view=keep_view)
        self._sync_zoom()

    def _sync_zoom(self) -> None:
        """Переносит масштаб предпросмотра в нижнюю панель вместе с размерами на экране."""
        percent = self.preview.get_zoom_percent()
        self.bottom.set_zoom_percent(percent)
        if self._shown is not None and self._shown.raster is not None:
            self.bottom.set_view_info(self._shown.raster.size, percent)
