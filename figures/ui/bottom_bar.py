"""Нижняя панель: масштаб предпросмотра в кратностях пикселя фигуры.

Принципы:
- Пресеты заданы как «экранных пикселей на пиксель растра»: 1:1 показывает фигуру пиксель в пиксель.
- Панель не знает о фигуре: размер растра и масштаб приходят из контроллера.
"""
from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

import customtkinter as ctk

FIT_PRESET = "Вписать"
PRESETS: Dict[str, int] = {"1:2": 50, "1:1": 100, "2:1": 200, "4:1": 400, "8:1": 800}


def preset_to_percent(label: str) -> Optional[int]:
    """Масштаб пресета в процентах; None для «Вписать» и неизвестных подписей."""
    return PRESETS.get(label)


def percent_to_preset(percent: int) -> str:
    """Подпись пресета для масштаба или пустая строка, если масштаб произвольный."""
    for label, value in PRESETS.items():
        if value == percent:
            return label
    return ""


def on_screen_size(raster_size: Tuple[int, int], percent: int) -> Tuple[int, int]:
    """Размер растра на экране при данном масштабе (не меньше 1×1)."""
    w, h = raster_size
    return max(1, int(w * percent / 100)), max(1, int(h * percent / 100))


def format_view_info(raster_size: Tuple[int, int], percent: int) -> str:
    w, h = raster_size
    sw, sh = on_screen_size(raster_size, percent)
    return f"{w} × {h} px → {sw} × {sh} на экране"


class BottomBar(ctk.CTkFrame):
    """Ползунок масштаба, пресеты кратности, авто-вписывание и подпись размеров."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=64, **kwargs)

        self.on_zoom_change: Optional[Callable[[int], None]] = None
        self.on_zoom_preset: Optional[Callable[[int], None]] = None
        self.on_zoom_fit: Optional[Callable[[], None]] = None
        self.on_auto_fit_change: Optional[Callable[[bool], None]] = None

        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(self, text="Масштаб").grid(row=0, column=0, padx=(10, 6), pady=8, sticky="w")

        self._zoom_value = ctk.StringVar(value="100%")
        self._zoom_slider = ctk.CTkSlider(self, from_=10, to=800, number_of_steps=790, command=self._on_slider_change)
        self._zoom_slider.set(100)
        self._zoom_slider.grid(row=0, column=1, padx=6, pady=8, sticky="ew")
        ctk.CTkLabel(self, textvariable=self._zoom_value, width=48, anchor="w").grid(
            row=0, column=2, padx=(6, 12), pady=8, sticky="w"
        )

        self._presets = ctk.CTkSegmentedButton(self, values=[FIT_PRESET, *PRESETS], command=self._on_preset_click)
        self._presets.set("1:1")
        self._presets.grid(row=0, column=3, padx=6, pady=8, sticky="w")

        self._auto_fit = ctk.CTkSwitch(self, text="Авто-вписывание", command=self._on_auto_fit_toggle)
        self._auto_fit.grid(row=0, column=4, padx=6, pady=8, sticky="w")

        self._view_info = ctk.StringVar(value="")
        ctk.CTkLabel(self, textvariable=self._view_info, anchor="e").grid(
            row=0, column=5, padx=(6, 12), pady=8, sticky="e"
        )

    # ---- Public API ----
    def set_zoom_percent(self, percent: int) -> None:
        self._zoom_slider.set(percent)
        self._zoom_value.set(f"{percent}%")
        if self._presets.get() != FIT_PRESET or percent_to_preset(percent):
            self._presets.set(percent_to_preset(percent))

    def set_view_info(self, raster_size: Tuple[int, int], percent: int) -> None:
        """Подпись «размер растра → размер на экране»."""
        self._view_info.set(format_view_info(raster_size, percent))

    # ---- Events ----
    def _on_slider_change(self, value: float) -> None:
        percent = int(round(value))
        self._zoom_value.set(f"{percent}%")
        if self.on_zoom_change:
            self.on_zoom_change(percent)

    def _on_preset_click(self, label: str) -> None:
        if label == FIT_PRESET:
            if self.on_zoom_fit:
                self.on_zoom_fit()
            return
        percent = preset_to_percent(label)
        if percent is not None and self.on_zoom_preset:
            self.on_zoom_preset(percent)

    def _on_auto_fit_toggle(self) -> None:
        if self.on_auto_fit_change:
            self.on_auto_fit_change(bool(self._auto_fit.get()))
