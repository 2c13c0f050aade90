from __future__ import annotations

from emergent_core.render.raster import GrayRaster

from .raster_target import RasterFileBackend


class PGMBackend(RasterFileBackend):
    """Binary portable graymap (`P5`) written to the output stream."""

    def _emit(self, raster: GrayRaster) -> None:
        self._write_text(f"P5\n{raster.pixel_width} {raster.pixel_height}\n{self.levels - 1}\n")
        self._write(raster.to_bytes())
