from emergent_core.core import PlotConfig, PlotSurface, add_plot_arguments
from emergent_core.errors import EmergentPlotError, PlotInitError, PlotStateError
from emergent_plot.api import (
    active_surface,
    plot_box,
    plot_finish,
    plot_init,
    plot_line,
    plot_point,
    plot_set_all,
    plot_set_range,
)

__all__ = [
    "EmergentPlotError",
    "PlotConfig",
    "PlotInitError",
    "PlotStateError",
    "PlotSurface",
    "active_surface",
    "add_plot_arguments",
    "plot_box",
    "plot_finish",
    "plot_init",
    "plot_line",
    "plot_point",
    "plot_set_all",
    "plot_set_range",
]
