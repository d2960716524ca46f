from __future__ import annotations

from dataclasses import dataclass, fields, replace
import logging
from pathlib import Path
import tomllib

from manimate_core.errors import ColorParseError
from manimate_core.render import Color


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderConfig:
    width: int = 1920
    height: int = 1080
    background: str = "#000000"
    antialias: bool = True
    supersample: int = 4
    flatten_tolerance: float = 0.1
    svg_precision: int = 2

    def __post_init__(self) -> None:
        _require_int(self.width, "width", minimum=1)
        _require_int(self.height, "height", minimum=1)
        _require_int(self.supersample, "supersample", minimum=1)
        _require_int(self.svg_precision, "svg_precision", minimum=0)
        if not isinstance(self.antialias, bool):
            raise ValueError("antialias must be a boolean")
        if isinstance(self.flatten_tolerance, bool) or not isinstance(self.flatten_tolerance, (int, float)):
            raise ValueError("flatten_tolerance must be a number")
        if not self.flatten_tolerance > 0:
            raise ValueError("flatten_tolerance must be > 0")
        try:
            Color.from_hex(self.background)
        except ColorParseError as exc:
            raise ValueError(f"background must be a hex color: {exc}") from exc

    def background_color(self) -> Color:
        return Color.from_hex(self.background)

    def with_size(self, width: int, height: int) -> "RenderConfig":
        return replace(self, width=width, height=height)


def _require_int(value: object, name: str, *, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}")


def load_render_config(path: str | Path) -> RenderConfig:
    """Read the `[render]` table of a TOML file over the defaults."""
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"render config not found: {config_path}")
    with config_path.open("rb") as f:
        try:
            raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"invalid TOML in {config_path}: {exc}") from exc
    table = raw.get("render", {})
    if not isinstance(table, dict):
        raise ValueError("`render` must be a table")
    known = {f.name for f in fields(RenderConfig)}
    unknown = sorted(set(table) - known)
    if unknown:
        raise ValueError(f"unknown render config keys: {', '.join(unknown)}")
    config = RenderConfig(**table)
    LOGGER.debug("loaded render config from %s: %s", config_path, config)
    return config
