from .palette import gray_ramp, hue_ramp, hue_to_rgb, palette_index
from .raster import GrayRaster
from .rasterizer import digital_line, rasterize_line

__all__ = [
    "GrayRaster",
    "digital_line",
    "gray_ramp",
    "hue_ramp",
    "hue_to_rgb",
    "palette_index",
    "rasterize_line",
]
