from __future__ import annotations

import math
from typing import Callable

from emergent_core.core.surface import PlotSurface


Scene = Callable[[PlotSurface], None]


def draw_clear(surface: PlotSurface) -> None:
    surface.set_all(0)


def draw_gradient(surface: PlotSurface) -> None:
    """Left-to-right ramp through every level on a unit logical square."""
    surface.set_range(0.0, 1.0, 0.0, 1.0)
    top = surface.levels - 1
    for col in range(surface.width):
        x = col / max(1, surface.width - 1)
        surface.line(x, 0.0, x, 1.0, int(round(x * top)))


def draw_box(surface: PlotSurface) -> None:
    surface.set_all(0)
    w, h = surface.width, surface.height
    surface.box(w * 0.25, h * 0.25, w * 0.75, h * 0.75, max(1, min(w, h) // 40))


def draw_lines(surface: PlotSurface, spokes: int = 24) -> None:
    """Spokes from the origin of a Cartesian [-1, 1] square, one level per spoke."""
    surface.set_all(0)
    surface.set_range(-1.0, 1.0, -1.0, 1.0)
    top = surface.levels - 1
    for i in range(spokes):
        angle = 2.0 * math.pi * i / spokes
        value = 1 + (i % top) if top > 1 else top
        surface.line(0.0, 0.0, math.cos(angle), math.sin(angle), value)


SCENES: dict[str, Scene] = {
    "clear": draw_clear,
    "gradient": draw_gradient,
    "box": draw_box,
    "lines": draw_lines,
}
