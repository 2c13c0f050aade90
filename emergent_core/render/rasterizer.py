from __future__ import annotations

import math
from typing import Callable, Iterator


PointFn = Callable[[int, int, int], None]


def digital_line(x1: int, y1: int, x2: int, y2: int) -> Iterator[tuple[int, int]]:
    """Yield the pixels of a parametric walk from (x1, y1) to (x2, y2), both ends included."""
    length = max(abs(x1 - x2), abs(y1 - y2))
    if length == 0:
        yield (x1, y1)
        return
    for i in range(length + 1):
        t = i / length
        tx = (1.0 - t) * x1 + t * x2
        ty = (1.0 - t) * y1 + t * y2
        yield (math.floor(tx + 0.5), math.floor(ty + 0.5))


def rasterize_line(point: PointFn, x1: int, y1: int, x2: int, y2: int, value: int) -> None:
    for x, y in digital_line(x1, y1, x2, y2):
        point(x, y, value)
