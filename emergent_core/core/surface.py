from __future__ import annotations

from dataclasses import replace
import logging
from typing import TYPE_CHECKING

from emergent_core.errors import PlotInitError, PlotStateError
from emergent_core.targets.base import BackendConfig, PlotBackend

from .coordinates import CoordinateMapper, LogicalRange
from .registry import BackendRegistry, default_registry

if TYPE_CHECKING:
    from .config import PlotConfig

LOGGER = logging.getLogger(__name__)


class PlotSurface:
    """One open drawing surface bound to a single backend.

    Drawing calls take logical coordinates; the surface maps them to pixels,
    clamps colour values into `[0, levels - 1]`, applies inversion and hands
    the result to the backend.
    """

    def __init__(
        self,
        width: int,
        height: int,
        levels: int,
        term: str | None = None,
        *,
        mag: int = 1,
        inverse: bool = False,
        backend_config: BackendConfig | None = None,
        registry: BackendRegistry | None = None,
        backend: PlotBackend | None = None,
    ) -> None:
        if width < 1 or height < 1:
            raise PlotInitError(f"plot size must be at least 1x1, got {width}x{height}")
        if levels < 2:
            raise PlotInitError(f"plot needs at least 2 levels, got {levels}")
        if mag < 1:
            raise PlotInitError(f"magnification must be >= 1, got {mag}")
        config = backend_config if backend_config is not None else BackendConfig(mag=mag)
        if config.mag != mag:
            config = replace(config, mag=mag)

        if backend is not None:
            self._backend_name = term if term is not None else type(backend).__name__
            self._backend = backend
        else:
            reg = registry if registry is not None else default_registry()
            self._backend_name, self._backend = reg.create(term, config)

        self._width = width
        self._height = height
        self._levels = levels
        self._mag = mag
        self.inverse = inverse
        self._mapper = CoordinateMapper(width, height)
        self._backend.init(width, height, levels)
        self._open = True
        LOGGER.debug("plot surface %dx%d levels=%d term=%s mag=%d", width, height, levels, self._backend_name, mag)

    @classmethod
    def open(
        cls,
        width: int,
        height: int,
        levels: int,
        config: "PlotConfig",
        *,
        registry: BackendRegistry | None = None,
    ) -> "PlotSurface":
        return cls(
            width,
            height,
            levels,
            config.term,
            mag=config.mag,
            inverse=config.inverse,
            backend_config=config.backend_config(),
            registry=registry,
        )

    def __enter__(self) -> "PlotSurface":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def levels(self) -> int:
        return self._levels

    @property
    def mag(self) -> int:
        return self._mag

    @property
    def backend(self) -> PlotBackend:
        return self._backend

    @property
    def backend_name(self) -> str:
        return self._backend_name

    @property
    def range(self) -> LogicalRange:
        return self._mapper.range

    @property
    def is_open(self) -> bool:
        return self._open

    def set_range(self, xmin: float, xmax: float, ymin: float, ymax: float) -> None:
        self._mapper.set_range(xmin, xmax, ymin, ymax)

    def map_point(self, x: float, y: float) -> tuple[int, int]:
        return self._mapper.map_point(x, y)

    def color(self, value: int) -> int:
        value = max(0, min(self._levels - 1, int(value)))
        if self.inverse:
            return (self._levels - 1) - value
        return value

    def point(self, x: float, y: float, value: int) -> None:
        self._require_open()
        px, py = self._mapper.map_point(x, y)
        if not self._mapper.contains(px, py):
            return
        self._backend.point(px, py, self.color(value))

    def line(self, x1: float, y1: float, x2: float, y2: float, value: int) -> None:
        self._require_open()
        ax, ay = self._mapper.map_point(x1, y1)
        bx, by = self._mapper.map_point(x2, y2)
        self._backend.line(ax, ay, bx, by, self.color(value))

    def set_all(self, value: int) -> None:
        self._require_open()
        c = self.color(value)
        right = self._width - 1
        for row in range(self._height):
            self._backend.line(0, row, right, row, c)

    def box(self, ulx: float, uly: float, lrx: float, lry: float, line_width: int = 1) -> None:
        """Frame a region: a light outline on the box, `line_width` dark rings around it."""
        self._require_open()
        ax, ay = self._mapper.map_point(ulx, uly)
        bx, by = self._mapper.map_point(lrx, lry)
        x0, x1 = min(ax, bx), max(ax, bx)
        y0, y1 = min(ay, by), max(ay, by)
        self._rect(x0, y0, x1, y1, self.color(self._levels - 1))
        dark = self.color(0)
        for i in range(1, line_width + 1):
            self._rect(x0 - i, y0 - i, x1 + i, y1 + i, dark)

    def finish(self) -> None:
        if not self._open:
            return
        self._open = False
        self._backend.finish()
        LOGGER.debug("plot surface finished term=%s", self._backend_name)

    def _rect(self, x0: int, y0: int, x1: int, y1: int, value: int) -> None:
        line = self._backend.line
        line(x0, y0, x1, y0, value)
        line(x1, y0, x1, y1, value)
        line(x1, y1, x0, y1, value)
        line(x0, y1, x0, y0, value)

    def _require_open(self) -> None:
        if not self._open:
            raise PlotStateError(f"plot surface ({self._backend_name}) is already finished")
