from __future__ import annotations

from abc import abstractmethod

from emergent_core.render.raster import GrayRaster

from .base import BackendConfig, StreamBackend


MAX_FILE_LEVELS = 256


class RasterFileBackend(StreamBackend):
    """Buffers pixels in memory and streams the whole image at `finish`."""

    def __init__(self, config: BackendConfig | None = None) -> None:
        super().__init__(config)
        self.raster: GrayRaster | None = None

    def init(self, width: int, height: int, levels: int) -> None:
        levels = min(levels, MAX_FILE_LEVELS)
        self._store_geometry(width, height, levels)
        self.raster = GrayRaster(width, height, mag=self.config.mag)
        self._open_stream()

    def point(self, x: int, y: int, value: int) -> None:
        if self.raster is None:
            return
        self.raster.set(x, y, min(value, self.levels - 1))

    def finish(self) -> None:
        if self.raster is None:
            return
        self._emit(self.raster)
        self._close_stream()
        self.raster = None

    @abstractmethod
    def _emit(self, raster: GrayRaster) -> None:
        raise NotImplementedError
