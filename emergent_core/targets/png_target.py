from __future__ import annotations

from PIL import Image

from emergent_core.render.raster import GrayRaster

from .raster_target import RasterFileBackend


class PNGBackend(RasterFileBackend):
    """Grayscale PNG with levels stretched over the full 0..255 range."""

    def _emit(self, raster: GrayRaster) -> None:
        image = Image.fromarray(raster.stretched(self.levels))
        image.save(self._stream, format="PNG")
