from .base import BackendConfig, PlotBackend, StreamBackend
from .none_target import NoneBackend
from .pgm_target import PGMBackend
from .png_target import PNGBackend
from .ps_target import PostScriptBackend
from .raster_target import RasterFileBackend
from .raw_target import RawBackend
from .window_target import DisplayFrame, TkPresenter, WindowBackend, WindowPresenter

__all__ = [
    "BackendConfig",
    "DisplayFrame",
    "NoneBackend",
    "PGMBackend",
    "PNGBackend",
    "PlotBackend",
    "PostScriptBackend",
    "RasterFileBackend",
    "RawBackend",
    "StreamBackend",
    "TkPresenter",
    "WindowBackend",
    "WindowPresenter",
]
