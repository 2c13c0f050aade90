from __future__ import annotations

import argparse
from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Mapping

from emergent_core.targets.base import BackendConfig


ENV_TERM = "EMERGENT_PLOT_TERM"
ENV_MAG = "EMERGENT_PLOT_MAG"
ENV_INVERSE = "EMERGENT_PLOT_INVERSE"

_TRUE_STRINGS = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class PlotConfig:
    term: str | None = None
    mag: int = 1
    inverse: bool = False
    output: Path | None = None
    force_flush: bool = False
    title: str = "emergent-plot"

    def __post_init__(self) -> None:
        if self.mag <= 0:
            raise ValueError("mag must be > 0")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "PlotConfig":
        env = os.environ if environ is None else environ
        mag_raw = env.get(ENV_MAG, "").strip()
        try:
            mag = int(mag_raw) if mag_raw else 1
        except ValueError as exc:
            raise ValueError(f"{ENV_MAG} must be an integer, got {mag_raw!r}") from exc
        return cls(
            term=env.get(ENV_TERM) or None,
            mag=mag,
            inverse=env.get(ENV_INVERSE, "").strip().lower() in _TRUE_STRINGS,
        )

    @classmethod
    def from_args(cls, args: argparse.Namespace, base: "PlotConfig | None" = None) -> "PlotConfig":
        """Overlay parsed command-line flags on `base` (environment defaults when omitted)."""
        config = base if base is not None else cls.from_env()
        updates: dict[str, object] = {}
        if getattr(args, "term", None) is not None:
            updates["term"] = args.term
        if getattr(args, "mag", None) is not None:
            updates["mag"] = args.mag
        if getattr(args, "inv", False):
            updates["inverse"] = not config.inverse
        if getattr(args, "output", None) is not None:
            updates["output"] = Path(args.output)
        if getattr(args, "force_flush", False):
            updates["force_flush"] = True
        return replace(config, **updates)

    def backend_config(self) -> BackendConfig:
        return BackendConfig(output=self.output, mag=self.mag, force_flush=self.force_flush, title=self.title)


def add_plot_arguments(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Install the `-term/-mag/-inv` flags every plotting program shares."""
    group = parser.add_argument_group("plotting")
    group.add_argument("-term", "--term", dest="term", default=None, help="How to plot points (terminal name).")
    group.add_argument("-mag", "--mag", dest="mag", type=_positive_int, default=None, help="Magnification factor.")
    group.add_argument("-inv", "--inv", dest="inv", action="store_true", help="Invert all colors?")
    group.add_argument("-o", "--output", dest="output", type=Path, default=None, help="Output file (default: stdout).")
    group.add_argument(
        "--force-flush",
        dest="force_flush",
        action="store_true",
        help="Repaint interactive windows after every drawing call.",
    )
    return parser


def _positive_int(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from exc
    if value <= 0:
        raise argparse.ArgumentTypeError("must be > 0")
    return value
