from __future__ import annotations

from dataclasses import replace
import logging
import sys

from emergent_core.core.config import PlotConfig
from emergent_core.core.registry import BackendRegistry
from emergent_core.core.surface import PlotSurface
from emergent_core.errors import PlotInitError, PlotStateError

LOGGER = logging.getLogger(__name__)

_ACTIVE: PlotSurface | None = None


def plot_init(
    width: int,
    height: int,
    levels: int,
    term: str | None = None,
    *,
    config: PlotConfig | None = None,
    registry: BackendRegistry | None = None,
) -> PlotSurface:
    """Open the process-wide surface; exits with status 1 if the terminal cannot be opened."""
    global _ACTIVE
    if _ACTIVE is not None and _ACTIVE.is_open:
        LOGGER.warning("plot_init called while a surface is open; finishing the previous one")
        _ACTIVE.finish()
    try:
        cfg = config if config is not None else PlotConfig.from_env()
        if term is not None:
            cfg = replace(cfg, term=term)
        _ACTIVE = PlotSurface.open(width, height, levels, cfg, registry=registry)
    except (PlotInitError, ValueError) as exc:
        print(f"plot_init: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    return _ACTIVE


def active_surface() -> PlotSurface:
    if _ACTIVE is None:
        raise PlotStateError("plot_init has not been called")
    return _ACTIVE


def plot_set_range(xmin: float, xmax: float, ymin: float, ymax: float) -> None:
    active_surface().set_range(xmin, xmax, ymin, ymax)


def plot_set_all(value: int) -> None:
    active_surface().set_all(value)


def plot_point(x: float, y: float, value: int) -> None:
    active_surface().point(x, y, value)


def plot_line(x1: float, y1: float, x2: float, y2: float, value: int) -> None:
    active_surface().line(x1, y1, x2, y2, value)


def plot_box(ulx: float, uly: float, lrx: float, lry: float, line_width: int = 1) -> None:
    active_surface().box(ulx, uly, lrx, lry, line_width)


def plot_finish() -> None:
    global _ACTIVE
    if _ACTIVE is None:
        return
    try:
        _ACTIVE.finish()
    finally:
        _ACTIVE = None
