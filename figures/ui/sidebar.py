"""Боковая панель: параметры фигуры, вывод, информация и курсор.

Принципы:
- SRP: управляет только UI параметров, не строит растр.
- ISP: выдаёт параметры через компактные методы `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Tuple

import customtkinter as ctk

from figures.models.canvas_model import OutputFormat
from figures.models.shape_model import ShapeKind

_SHAPE_LABELS = {
    ShapeKind.RECTANGLE: "Прямоугольник",
    ShapeKind.ELLIPSE: "Эллипс",
}
_FORMAT_LABELS = {
    OutputFormat.PNG: "PNG",
    OutputFormat.JPEG: "JPEG",
    OutputFormat.GIF: "GIF",
}


def _rgba_to_hex(rgba: Tuple[int, int, int, int]) -> str:
    """Преобразует RGBA в HEX (без альфа)."""
    r, g, b, _a = rgba
    return f"#{r:02X}{g:02X}{b:02X}"


def parse_dimension(text: str) -> int:
    """Разбирает значение размера из поля ввода; нечисловой ввод даёт 0 (игнорируется фигурой)."""
    try:
        return int(text.strip())
    except ValueError:
        return 0


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: фигура, цвет, вывод, информация, курсор."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_figure_change: Optional[Callable[[], None]] = None
        self.on_format_change: Optional[Callable[[OutputFormat], None]] = None
        self.on_save: Optional[Callable[[], None]] = None
        self.on_open_background: Optional[Callable[[], None]] = None
        self.on_clear_background: Optional[Callable[[], None]] = None

        bold = ctk.CTkFont(size=16, weight="bold")

        # Фигура
        self._shape_title = ctk.CTkLabel(self, text="Фигура", font=bold)
        self._shape_title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._shape_buttons = ctk.CTkSegmentedButton(
            self, values=list(_SHAPE_LABELS.values()), command=self._emit_figure_change
        )
        self._shape_buttons.set(_SHAPE_LABELS[ShapeKind.RECTANGLE])
        self._shape_buttons.grid(row=1, column=0, padx=8, pady=(0, 6), sticky="ew")

        size_row = ctk.CTkFrame(self, fg_color="transparent")
        size_row.grid(row=2, column=0, padx=8, pady=(0, 8), sticky="ew")
        self._width_val = ctk.StringVar(value="0")
        self._height_val = ctk.StringVar(value="0")
        ctk.CTkLabel(size_row, text="Ш:").grid(row=0, column=0, padx=(0, 4))
        self._width_entry = ctk.CTkEntry(size_row, textvariable=self._width_val, width=70)
        self._width_entry.grid(row=0, column=1, padx=(0, 10))
        ctk.CTkLabel(size_row, text="В:").grid(row=0, column=2, padx=(0, 4))
        self._height_entry = ctk.CTkEntry(size_row, textvariable=self._height_val, width=70)
        self._height_entry.grid(row=0, column=3)
        for entry in (self._width_entry, self._height_entry):
            entry.bind("<FocusOut>", self._on_size_commit)
            entry.bind("<Return>", self._on_size_commit)

        # Цвет
        self._color_title = ctk.CTkLabel(self, text="Цвет", font=bold)
        self._color_title.grid(row=3, column=0, padx=8, pady=(8, 4), sticky="w")

        self._channel_sliders = []
        self._channel_vals = []
        for i, name in enumerate(("R", "G", "B")):
            val = ctk.StringVar(value=f"{name}: 0")
            label = ctk.CTkLabel(self, textvariable=val, anchor="w")
            slider = ctk.CTkSlider(self, from_=0, to=255, number_of_steps=255, command=self._on_color_slider)
            slider.set(0)
            label.grid(row=4 + i * 2, column=0, padx=8, pady=(0, 0), sticky="w")
            slider.grid(row=5 + i * 2, column=0, padx=8, pady=(0, 4), sticky="ew")
            self._channel_vals.append(val)
            self._channel_sliders.append(slider)

        self._opacity_val = ctk.StringVar(value="Прозрачность: 0")
        self._opacity_label = ctk.CTkLabel(self, textvariable=self._opacity_val, anchor="w")
        self._opacity_slider = ctk.CTkSlider(self, from_=0, to=127, number_of_steps=127, command=self._on_color_slider)
        self._opacity_slider.set(0)
        self._opacity_label.grid(row=10, column=0, padx=8, pady=(0, 0), sticky="w")
        self._opacity_slider.grid(row=11, column=0, padx=8, pady=(0, 4), sticky="ew")

        self._swatch = ctk.CTkLabel(self, text="#000000", height=24, corner_radius=6, fg_color="#000000", text_color="#FFFFFF")
        self._swatch.grid(row=12, column=0, padx=8, pady=(2, 8), sticky="ew")

        # Вывод
        self._out_title = ctk.CTkLabel(self, text="Вывод", font=bold)
        self._out_title.grid(row=13, column=0, padx=8, pady=(8, 4), sticky="w")

        self._format_menu = ctk.CTkOptionMenu(self, values=list(_FORMAT_LABELS.values()), command=self._emit_format_change)
        self._format_menu.set(_FORMAT_LABELS[OutputFormat.PNG])
        self._format_menu.grid(row=14, column=0, padx=8, pady=(0, 4), sticky="ew")

        self._save_btn = ctk.CTkButton(self, text="Сохранить…", command=self._emit_save)
        self._save_btn.grid(row=15, column=0, padx=8, pady=(0, 4), sticky="ew")

        self._bg_open_btn = ctk.CTkButton(self, text="Открыть фон…", command=self._emit_open_background)
        self._bg_open_btn.grid(row=16, column=0, padx=8, pady=(0, 4), sticky="ew")
        self._bg_clear_btn = ctk.CTkButton(self, text="Убрать фон", command=self._emit_clear_background)
        self._bg_clear_btn.grid(row=17, column=0, padx=8, pady=(0, 8), sticky="ew")

        # Информация
        self._info_title = ctk.CTkLabel(self, text="Информация", font=bold)
        self._info_title.grid(row=18, column=0, padx=8, pady=(8, 4), sticky="w")

        self._dims_val = ctk.StringVar(value="—")
        self._coverage_val = ctk.StringVar(value="—")
        self._status_val = ctk.StringVar(value="")
        self._background_val = ctk.StringVar(value="Фон: нет")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")
        self._info_coverage = ctk.CTkLabel(self, textvariable=self._coverage_val, anchor="w", justify="left")
        self._info_status = ctk.CTkLabel(
            self, textvariable=self._status_val, wraplength=250, anchor="w", justify="left", text_color="#D9534F"
        )
        self._info_dims.grid(row=19, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_coverage.grid(row=20, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_background = ctk.CTkLabel(self, textvariable=self._background_val, wraplength=250, anchor="w", justify="left")
        self._info_background.grid(row=21, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_status.grid(row=22, column=0, padx=8, pady=(0, 10), sticky="ew")

        # Курсор
        self._cursor_title = ctk.CTkLabel(self, text="Курсор", font=bold)
        self._cursor_title.grid(row=23, column=0, padx=8, pady=(8, 4), sticky="w")

        self._cursor_xy_val = ctk.StringVar(value="—")
        self._cursor_rgba_val = ctk.StringVar(value="—")
        self._cursor_hex_val = ctk.StringVar(value="—")
        self._cursor_xy = ctk.CTkLabel(self, textvariable=self._cursor_xy_val, anchor="w", justify="left")
        self._cursor_rgba = ctk.CTkLabel(self, textvariable=self._cursor_rgba_val, anchor="w", justify="left")
        self._cursor_hex = ctk.CTkLabel(self, textvariable=self._cursor_hex_val, anchor="w", justify="left")
        self._cursor_xy.grid(row=24, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_rgba.grid(row=25, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._cursor_hex.grid(row=26, column=0, padx=8, pady=(0, 2), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

    # ---- Public API ----
    def set_figure_values(
        self,
        size: Tuple[int, int],
        color: Tuple[int, int, int],
        opacity: int,
        shape: ShapeKind,
        output_format: OutputFormat,
    ) -> None:
        """Выставляет значения контролов без генерации событий."""
        self._width_val.set(str(size[0]))
        self._height_val.set(str(size[1]))
        for slider, value in zip(self._channel_sliders, color):
            slider.set(value)
        self._opacity_slider.set(opacity)
        self._shape_buttons.set(_SHAPE_LABELS[shape])
        self._format_menu.set(_FORMAT_LABELS[output_format])
        self._refresh_color_labels()

    def set_figure_info(self, size: Tuple[int, int], coverage: Optional[float]) -> None:
        """Отображает размер построенной фигуры и долю видимых пикселей."""
        self._dims_val.set(f"{size[0]} × {size[1]} px")
        self._coverage_val.set("—" if coverage is None else f"Заливка: {coverage * 100:.1f}%")

    def set_background_info(self, description: Optional[str]) -> None:
        """Подпись текущего фона; None — фон не выбран."""
        self._background_val.set(f"Фон: {description}" if description else "Фон: нет")

    def set_status(self, message: str) -> None:
        """Строка состояния (ошибки построения/сохранения); пустая строка очищает."""
        self._status_val.set(message)

    def update_cursor_info(self, x: Optional[int], y: Optional[int], rgba: Optional[Tuple[int, int, int, int]]) -> None:
        """Обновляет информацию по курсору (координаты, RGBA, HEX)."""
        if x is None or y is None or rgba is None:
            self._cursor_xy_val.set("—")
            self._cursor_rgba_val.set("—")
            self._cursor_hex_val.set("—")
            return
        self._cursor_xy_val.set(f"({x}, {y})")
        r, g, b, a = rgba
        self._cursor_rgba_val.set(f"RGBA: {r}, {g}, {b}, {a}")
        self._cursor_hex_val.set(f"HEX: {_rgba_to_hex(rgba)}")

    # ---- Parameters ----
    def get_size(self) -> Tuple[int, int]:
        return parse_dimension(self._width_val.get()), parse_dimension(self._height_val.get())

    def get_color(self) -> Tuple[int, int, int]:
        r, g, b = (int(round(s.get())) for s in self._channel_sliders)
        return r, g, b

    def get_opacity(self) -> int:
        return int(round(self._opacity_slider.get()))

    def get_shape(self) -> ShapeKind:
        label = self._shape_buttons.get()
        for kind, text in _SHAPE_LABELS.items():
            if text == label:
                return kind
        return ShapeKind.RECTANGLE

    def get_format(self) -> OutputFormat:
        label = self._format_menu.get()
        for fmt, text in _FORMAT_LABELS.items():
            if text == label:
                return fmt
        return OutputFormat.PNG

    # ---- Events ----
    def _emit_figure_change(self, _value: object | None = None) -> None:
        if self.on_figure_change:
            self.on_figure_change()

    def _on_size_commit(self, _event: object) -> None:
        self._emit_figure_change()

    def _on_color_slider(self, _value: float) -> None:
        self._refresh_color_labels()
        self._emit_figure_change()

    def _emit_format_change(self, _value: str) -> None:
        if self.on_format_change:
            self.on_format_change(self.get_format())

    def _emit_save(self) -> None:
        if self.on_save:
            self.on_save()

    def _emit_open_background(self) -> None:
        if self.on_open_background:
            self.on_open_background()

    def _emit_clear_background(self) -> None:
        if self.on_clear_background:
            self.on_clear_background()

    # ---- Helpers ----
    def _refresh_color_labels(self) -> None:
        color = self.get_color()
        for val, name, value in zip(self._channel_vals, ("R", "G", "B"), color):
            val.set(f"{name}: {value}")
        self._opacity_val.set(f"Прозрачность: {self.get_opacity()}")
        hex_color = _rgba_to_hex((*color, 255))
        # контрастный текст на образце
        text = "#000000" if sum(color) > 382 else "#FFFFFF"
        self._swatch.configure(text=hex_color, fg_color=hex_color, text_color=text)
