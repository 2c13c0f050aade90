from __future__ import annotations

from emergent_plot.cli import run


if __name__ == "__main__":
    run()
