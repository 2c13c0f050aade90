from .config import ENV_INVERSE, ENV_MAG, ENV_TERM, PlotConfig, add_plot_arguments
from .coordinates import CoordinateMapper, LogicalRange
from .registry import (
    BackendRegistry,
    BackendSpec,
    build_default_registry,
    default_registry,
    detect_default_term,
)
from .surface import PlotSurface

__all__ = [
    "BackendRegistry",
    "BackendSpec",
    "CoordinateMapper",
    "ENV_INVERSE",
    "ENV_MAG",
    "ENV_TERM",
    "LogicalRange",
    "PlotConfig",
    "PlotSurface",
    "add_plot_arguments",
    "build_default_registry",
    "default_registry",
    "detect_default_term",
]
