import customtkinter as ctk

from figures.config import StudioConfig
from figures.controllers.app_controller import AppController
from figures.ui.preview import FigurePreview
from figures.ui.sidebar import Sidebar
from figures.ui.bottom_bar import BottomBar


class FigureStudioApp(ctk.CTk):
    def __init__(self, config: StudioConfig | None = None) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Figure Studio")
        self.minsize(900, 600)

        # root layout: left preview, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=0)

        self._preview = FigurePreview(self)
        self._preview.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=(12, 6))

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=(12, 6))

        self._bottom = BottomBar(self)
        self._bottom.grid(row=1, column=0, columnspan=2, sticky="ew", padx=12, pady=(0, 12))

        self._controller = AppController(
            preview=self._preview,
            sidebar=self._sidebar,
            bottom=self._bottom,
            window=self,
            config=config or StudioConfig(),
        )
        self._controller.bind_events()
