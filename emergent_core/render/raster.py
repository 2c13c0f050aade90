from __future__ import annotations

import numpy as np


class GrayRaster:
    """Row-major `uint8` pixel buffer with optional block magnification."""

    def __init__(self, width: int, height: int, mag: int = 1) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        if mag <= 0:
            raise ValueError("mag must be > 0")
        self.width = width
        self.height = height
        self.mag = mag
        self.pixels = np.zeros((height * mag, width * mag), dtype=np.uint8)

    @property
    def pixel_width(self) -> int:
        return self.width * self.mag

    @property
    def pixel_height(self) -> int:
        return self.height * self.mag

    def set(self, x: int, y: int, value: int) -> None:
        if x < 0 or x >= self.width or y < 0 or y >= self.height:
            return
        m = self.mag
        self.pixels[y * m : (y + 1) * m, x * m : (x + 1) * m] = value

    def to_bytes(self) -> bytes:
        return self.pixels.tobytes(order="C")

    def stretched(self, levels: int) -> np.ndarray:
        """Rescale `[0, levels - 1]` onto the full `[0, 255]` gray range."""
        top = max(1, levels - 1)
        scaled = np.rint(self.pixels.astype(np.float32) * (255.0 / top))
        return np.clip(scaled, 0, 255).astype(np.uint8)
