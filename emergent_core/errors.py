from __future__ import annotations


class EmergentPlotError(Exception):
    """Base class for plotting failures."""


class PlotInitError(EmergentPlotError):
    """A backend could not be opened (display, output file, bad geometry)."""


class PlotStateError(EmergentPlotError):
    """Drawing was attempted on a surface that is not open."""
