from __future__ import annotations

import argparse
import logging
import sys

from emergent_core.core.config import PlotConfig, add_plot_arguments
from emergent_core.core.registry import BackendRegistry, default_registry
from emergent_core.core.surface import PlotSurface
from emergent_core.errors import EmergentPlotError

from .scenes import SCENES

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="emergent-plot")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging threshold for diagnostics on stderr.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("terms", help="List the plot terminals available on this machine.")

    render = sub.add_parser("render", help="Render a calibration scene through a plot terminal.")
    render.add_argument("scene", choices=sorted(SCENES))
    render.add_argument("--width", type=int, default=256)
    render.add_argument("--height", type=int, default=256)
    render.add_argument("--levels", type=int, default=256)
    add_plot_arguments(render)
    return parser


def main(argv: list[str] | None = None, *, registry: BackendRegistry | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), stream=sys.stderr)
    reg = registry if registry is not None else default_registry()

    if args.command == "terms":
        default = reg.resolve(None)
        aliases = reg.aliases()
        for name in reg.names():
            marker = "*" if name == default else " "
            names = [name] + sorted(a for a, target in aliases.items() if target == name)
            spec = reg.spec(name)
            lines = "native" if spec.native_lines else "raster"
            print(f"{marker} {', '.join(names):<24} {lines:<7} {spec.description}")
        return 0

    if args.command == "render":
        try:
            config = PlotConfig.from_args(args)
            with PlotSurface.open(args.width, args.height, args.levels, config, registry=reg) as surface:
                SCENES[args.scene](surface)
        except (EmergentPlotError, ValueError) as exc:
            print(f"emergent-plot: {exc}", file=sys.stderr)
            return 1
        return 0

    raise RuntimeError(f"unsupported command: {args.command}")


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
