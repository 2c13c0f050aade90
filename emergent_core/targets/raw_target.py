from __future__ import annotations

from emergent_core.render.raster import GrayRaster

from .raster_target import RasterFileBackend


class RawBackend(RasterFileBackend):
    """One `x y value` line per pixel, row-major."""

    def _emit(self, raster: GrayRaster) -> None:
        pixels = raster.pixels
        lines = []
        for y in range(raster.pixel_height):
            row = pixels[y].tolist()
            lines.extend(f"{x} {y} {v}\n" for x, v in enumerate(row))
        self._write_text("".join(lines))
