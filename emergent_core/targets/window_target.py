from __future__ import annotations

from dataclasses import dataclass
import logging
import os
import sys
from typing import Any, Callable, Protocol

import torch

from emergent_core.errors import PlotInitError
from emergent_core.render.palette import hue_ramp, palette_index
from emergent_core.render.rasterizer import digital_line

from .base import BackendConfig, PlotBackend

LOGGER = logging.getLogger(__name__)

DISMISS_PROMPT = ">> Done. Click mouse on window to end program. <<"


@dataclass(frozen=True)
class DisplayFrame:
    revision: int
    width: int
    height: int
    rgba: torch.Tensor


class WindowPresenter(Protocol):
    def initialize(self, width: int, height: int, title: str) -> None:
        ...

    def present_rgba(self, rgba: torch.Tensor, revision: int) -> None:
        ...

    def wait_for_dismiss(self) -> None:
        ...

    def shutdown(self) -> None:
        ...


class TkPresenter:
    """Shows RGBA frames in a tkinter window; dismissed by a click or closing it."""

    def __init__(self) -> None:
        self._root: Any = None
        self._canvas: Any = None
        self._item: Any = None
        self._photo: Any = None
        self._done: Any = None

    def initialize(self, width: int, height: int, title: str) -> None:
        try:
            import tkinter as tk
        except ImportError as exc:
            raise PlotInitError("window plot: tkinter is not available") from exc
        try:
            root = tk.Tk()
        except tk.TclError as exc:
            display = os.environ.get("DISPLAY", "")
            LOGGER.error("could not open display %r: %s", display, exc)
            raise PlotInitError(f"window plot: could not open display {display!r}") from exc
        root.title(title)
        root.resizable(False, False)
        canvas = tk.Canvas(root, width=width, height=height, highlightthickness=0, borderwidth=0, bg="black")
        canvas.pack()
        self._item = canvas.create_image(0, 0, anchor="nw")
        self._done = tk.BooleanVar(master=root, value=False)
        canvas.bind("<Button>", lambda _event: self._done.set(True))
        root.protocol("WM_DELETE_WINDOW", lambda: self._done.set(True))
        self._root = root
        self._canvas = canvas
        root.update()

    def present_rgba(self, rgba: torch.Tensor, revision: int) -> None:
        if self._root is None:
            raise RuntimeError("TkPresenter must be initialized before presenting frames")
        from PIL import Image, ImageTk

        image = Image.fromarray(rgba.contiguous().numpy())
        # Tk only keeps a weak handle on the photo; hold the reference here.
        self._photo = ImageTk.PhotoImage(image, master=self._root)
        self._canvas.itemconfigure(self._item, image=self._photo)
        self._root.update_idletasks()
        self._root.update()

    def wait_for_dismiss(self) -> None:
        if self._root is None:
            return
        if not self._done.get():
            self._root.wait_variable(self._done)

    def shutdown(self) -> None:
        if self._root is None:
            return
        self._root.destroy()
        self._root = None
        self._canvas = None
        self._photo = None


class WindowBackend(PlotBackend):
    """Interactive terminal painting a torch RGBA frame through a palette."""

    native_lines = True

    def __init__(
        self,
        config: BackendConfig | None = None,
        *,
        palette: Callable[[int], torch.Tensor] = hue_ramp,
        presenter: WindowPresenter | None = None,
    ) -> None:
        super().__init__(config)
        self._palette_fn = palette
        self._presenter = presenter if presenter is not None else TkPresenter()
        self._palette: torch.Tensor | None = None
        self._rgba: torch.Tensor | None = None
        self._revision = 0

    @property
    def palette(self) -> torch.Tensor | None:
        return self._palette

    @property
    def frame(self) -> DisplayFrame:
        if self._rgba is None:
            raise RuntimeError("WindowBackend must be initialised before reading frames")
        return DisplayFrame(
            revision=self._revision,
            width=self._rgba.shape[1],
            height=self._rgba.shape[0],
            rgba=self._rgba,
        )

    def init(self, width: int, height: int, levels: int) -> None:
        self._store_geometry(width, height, levels)
        mag = self.config.mag
        self._palette = self._palette_fn(levels)
        self._rgba = torch.zeros((height * mag, width * mag, 4), dtype=torch.uint8)
        self._rgba[:, :, 3] = 255
        self._revision = 0
        self._presenter.initialize(width * mag, height * mag, self.config.title)

    def point(self, x: int, y: int, value: int) -> None:
        self._paint(x, y, value)
        if self.config.force_flush:
            self._present()

    def line(self, x1: int, y1: int, x2: int, y2: int, value: int) -> None:
        for x, y in digital_line(x1, y1, x2, y2):
            self._paint(x, y, value)
        if self.config.force_flush:
            self._present()

    def finish(self) -> None:
        if self._rgba is None:
            return
        self._present()
        print(DISMISS_PROMPT, file=sys.stderr)
        try:
            self._presenter.wait_for_dismiss()
        finally:
            self._presenter.shutdown()
            self._rgba = None

    def _paint(self, x: int, y: int, value: int) -> None:
        if self._rgba is None or self._palette is None:
            return
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return
        color = self._palette[palette_index(value, self.levels, self._palette.shape[0])]
        m = self.config.mag
        self._rgba[y * m : (y + 1) * m, x * m : (x + 1) * m] = color

    def _present(self) -> None:
        if self._rgba is None:
            return
        self._revision += 1
        self._presenter.present_rgba(self._rgba, revision=self._revision)
