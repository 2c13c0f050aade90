from __future__ import annotations

from dataclasses import dataclass
import importlib.util
import logging
import os
import platform
from typing import Callable

from emergent_core.errors import PlotInitError
from emergent_core.render.palette import gray_ramp, hue_ramp
from emergent_core.targets.base import BackendConfig, PlotBackend
from emergent_core.targets.none_target import NoneBackend
from emergent_core.targets.pgm_target import PGMBackend
from emergent_core.targets.png_target import PNGBackend
from emergent_core.targets.ps_target import PostScriptBackend
from emergent_core.targets.raw_target import RawBackend
from emergent_core.targets.window_target import WindowBackend

from .config import ENV_TERM

LOGGER = logging.getLogger(__name__)

FALLBACK_TERM = "pgm"
WINDOW_TERM = "Tk"

BackendFactory = Callable[[BackendConfig], PlotBackend]


@dataclass(frozen=True)
class BackendSpec:
    name: str
    factory: BackendFactory
    native_lines: bool
    description: str = ""


class BackendRegistry:
    """Name -> backend factory table with a default terminal."""

    def __init__(self, default: str | None = None) -> None:
        self._specs: dict[str, BackendSpec] = {}
        self._aliases: dict[str, str] = {}
        self._default = default

    def register(
        self,
        name: str,
        factory: BackendFactory,
        *,
        native_lines: bool,
        description: str = "",
    ) -> None:
        if not name or not isinstance(name, str):
            raise ValueError("backend name must be a non-empty string")
        if name in self._aliases:
            raise ValueError(f"`{name}` is already registered as an alias")
        self._specs[name] = BackendSpec(name=name, factory=factory, native_lines=native_lines, description=description)

    def alias(self, alias: str, name: str) -> None:
        if name not in self._specs:
            raise ValueError(f"cannot alias unknown backend: {name}")
        if alias in self._specs:
            raise ValueError(f"`{alias}` is already registered as a backend")
        self._aliases[alias] = name

    def names(self) -> list[str]:
        return sorted(self._specs.keys())

    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)

    def has(self, name: str) -> bool:
        return name in self._specs or name in self._aliases

    def spec(self, name: str) -> BackendSpec:
        return self._specs[self._aliases.get(name, name)]

    @property
    def default_name(self) -> str:
        if self._default is not None:
            return self._default
        return detect_default_term(self)

    def set_default(self, name: str | None) -> None:
        if name is not None and not self.has(name):
            raise ValueError(f"unknown backend: {name}")
        self._default = name

    def resolve(self, name: str | None) -> str:
        """Return the canonical backend name used for `name`, falling back to the default."""
        if name is not None and self.has(name):
            return self._aliases.get(name, name)
        default = self.default_name
        if name is not None:
            LOGGER.warning("unknown plot terminal %r, using %r", name, default)
        if not self.has(default):
            raise PlotInitError(f"no plot terminal available (default {default!r} is not registered)")
        return self._aliases.get(default, default)

    def create(self, name: str | None, config: BackendConfig | None = None) -> tuple[str, PlotBackend]:
        resolved = self.resolve(name)
        spec = self._specs[resolved]
        backend = spec.factory(config if config is not None else BackendConfig())
        if bool(backend.native_lines) != spec.native_lines:
            raise PlotInitError(
                f"plot terminal {resolved!r} registered with native_lines={spec.native_lines} "
                f"but {type(backend).__name__} reports native_lines={backend.native_lines}"
            )
        return resolved, backend


def tkinter_available() -> bool:
    return importlib.util.find_spec("tkinter") is not None


def display_available() -> bool:
    if platform.system() in ("Windows", "Darwin"):
        return True
    return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))


def detect_default_term(registry: BackendRegistry) -> str:
    override = os.environ.get(ENV_TERM)
    if override:
        if registry.has(override):
            return override
        LOGGER.warning("%s=%r is not a registered plot terminal", ENV_TERM, override)
    if registry.has(WINDOW_TERM) and display_available():
        return WINDOW_TERM
    return FALLBACK_TERM


def build_default_registry() -> BackendRegistry:
    registry = BackendRegistry()
    registry.register("pgm", PGMBackend, native_lines=False, description="binary PGM image on the output stream")
    registry.register("raw", RawBackend, native_lines=False, description="`x y value` text triplets")
    registry.register("png", PNGBackend, native_lines=False, description="grayscale PNG image")
    registry.register("ps", PostScriptBackend, native_lines=True, description="encapsulated PostScript")
    registry.register("none", NoneBackend, native_lines=True, description="discard all drawing")
    registry.alias("raster-file", "pgm")
    registry.alias("vector-file", "ps")
    if tkinter_available():
        registry.register(
            "tk",
            lambda config: WindowBackend(config, palette=gray_ramp),
            native_lines=True,
            description="gray-scale window",
        )
        registry.register(
            "Tk",
            lambda config: WindowBackend(config, palette=hue_ramp),
            native_lines=True,
            description="colour window",
        )
        registry.alias("window", "Tk")
    return registry


_DEFAULT_REGISTRY: BackendRegistry | None = None


def default_registry() -> BackendRegistry:
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = build_default_registry()
    return _DEFAULT_REGISTRY
