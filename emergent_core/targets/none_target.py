from __future__ import annotations

from .base import PlotBackend


class NoneBackend(PlotBackend):
    """Discards everything; for benchmarks and statistics-only runs."""

    native_lines = True

    def init(self, width: int, height: int, levels: int) -> None:
        self._store_geometry(width, height, levels)

    def point(self, x: int, y: int, value: int) -> None:
        return

    def line(self, x1: int, y1: int, x2: int, y2: int, value: int) -> None:
        return

    def finish(self) -> None:
        return
