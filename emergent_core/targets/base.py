from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from pathlib import Path
import sys
from typing import BinaryIO

from emergent_core.errors import PlotInitError
from emergent_core.render.rasterizer import rasterize_line

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class BackendConfig:
    output: BinaryIO | str | Path | None = None
    mag: int = 1
    force_flush: bool = False
    title: str = "emergent-plot"


class PlotBackend(ABC):
    """Four-primitive drawing contract shared by every terminal.

    Coordinates arrive already mapped to pixels and values already clamped and
    inverted. Backends that cannot draw lines natively leave `native_lines`
    false and inherit the parametric rasterizer.
    """

    native_lines: bool = False

    def __init__(self, config: BackendConfig | None = None) -> None:
        self.config = config if config is not None else BackendConfig()
        self.width = 0
        self.height = 0
        self.levels = 0

    @abstractmethod
    def init(self, width: int, height: int, levels: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def point(self, x: int, y: int, value: int) -> None:
        raise NotImplementedError

    def line(self, x1: int, y1: int, x2: int, y2: int, value: int) -> None:
        rasterize_line(self.point, x1, y1, x2, y2, value)

    @abstractmethod
    def finish(self) -> None:
        raise NotImplementedError

    def _store_geometry(self, width: int, height: int, levels: int) -> None:
        self.width = width
        self.height = height
        self.levels = levels


class StreamBackend(PlotBackend):
    """Backend that writes its result to a binary stream (stdout by default)."""

    def __init__(self, config: BackendConfig | None = None) -> None:
        super().__init__(config)
        self._stream: BinaryIO | None = None
        self._owns_stream = False

    def _open_stream(self) -> BinaryIO:
        output = self.config.output
        if output is None:
            self._stream = sys.stdout.buffer
            self._owns_stream = False
        elif isinstance(output, (str, Path)):
            try:
                self._stream = open(output, "wb")
            except OSError as exc:
                raise PlotInitError(f"{type(self).__name__}: could not open {output} for writing: {exc}") from exc
            self._owns_stream = True
            LOGGER.debug("opened plot output %s", output)
        else:
            self._stream = output
            self._owns_stream = False
        return self._stream

    def _write(self, data: bytes) -> None:
        if self._stream is None:
            raise RuntimeError(f"{type(self).__name__} must be initialised before writing")
        self._stream.write(data)

    def _write_text(self, text: str) -> None:
        self._write(text.encode("ascii"))

    def _close_stream(self) -> None:
        if self._stream is None:
            return
        self._stream.flush()
        if self._owns_stream:
            self._stream.close()
        self._stream = None
        self._owns_stream = False
