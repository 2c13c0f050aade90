from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LogicalRange:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @classmethod
    def identity(cls, width: int, height: int) -> "LogicalRange":
        # Pixel row 0 is the top of the surface.
        return cls(xmin=0.0, xmax=float(width - 1), ymin=float(height - 1), ymax=0.0)

    def is_degenerate_x(self) -> bool:
        return self.xmax == self.xmin

    def is_degenerate_y(self) -> bool:
        return self.ymax == self.ymin


class CoordinateMapper:
    """Maps a logical rectangle onto the integer pixel grid of one surface."""

    def __init__(self, width: int, height: int, logical: LogicalRange | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be > 0")
        self._width = width
        self._height = height
        self._range = logical if logical is not None else LogicalRange.identity(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def range(self) -> LogicalRange:
        return self._range

    def set_range(self, xmin: float, xmax: float, ymin: float, ymax: float) -> None:
        self._range = LogicalRange(xmin=float(xmin), xmax=float(xmax), ymin=float(ymin), ymax=float(ymax))

    def reset(self) -> None:
        self._range = LogicalRange.identity(self._width, self._height)

    def map_x(self, x: float) -> int:
        r = self._range
        if r.is_degenerate_x():
            return 0
        px = int(self._width * ((x - r.xmin) / (r.xmax - r.xmin)))
        return _clamp_upper(px, self._width)

    def map_y(self, y: float) -> int:
        r = self._range
        if r.is_degenerate_y():
            return self._height - 1
        py = int(self._height * ((r.ymin - y) / (r.ymax - r.ymin) + 1.0))
        return _clamp_upper(py, self._height)

    def map_point(self, x: float, y: float) -> tuple[int, int]:
        return (self.map_x(x), self.map_y(y))

    def contains(self, px: int, py: int) -> bool:
        return 0 <= px < self._width and 0 <= py < self._height


def _clamp_upper(value: int, limit: int) -> int:
    # Only the upper edge is pulled back; rounding can land the last logical
    # coordinate exactly on `limit`.
    if value == limit:
        return value - 1
    return value
