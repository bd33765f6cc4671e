"""Project-level configuration from pyproject.toml.

Reads the [tool.forestviz] section to override drawing defaults:

    [tool.forestviz]
    width = 500
    height = 300
    layout_radius = 100
    node_radius = 20
    font_size = 14
    palette = ["#E0FFFF", "#FFFFE0", "#FFB6C1", "#90EE90", "#F08080", "#ADD8E6"]
    highlight_color = "gold"
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from forestviz.exceptions import ConfigError

DEFAULT_PALETTE: tuple[str, ...] = (
    "#E0FFFF",
    "#FFFFE0",
    "#FFB6C1",
    "#90EE90",
    "#F08080",
    "#ADD8E6",
)
MIN_PALETTE_SIZE = 6


@dataclass(frozen=True)
class ForestvizConfig:
    """Drawing configuration from [tool.forestviz] in pyproject.toml."""

    width: int = 500
    height: int = 300
    layout_radius: float = 100
    node_radius: float = 20
    font_size: int = 14
    palette: tuple[str, ...] = DEFAULT_PALETTE
    highlight_color: str = "gold"

    def __post_init__(self) -> None:
        for key in ("width", "height", "layout_radius", "node_radius", "font_size"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                raise ConfigError(key, f"must be a positive number, got {value!r}")
        if not isinstance(self.palette, (list, tuple)) or not all(
            isinstance(color, str) and color for color in self.palette
        ):
            raise ConfigError("palette", f"must be a list of color strings, got {self.palette!r}")
        if not isinstance(self.highlight_color, str) or not self.highlight_color:
            raise ConfigError(
                "highlight_color", f"must be a color string, got {self.highlight_color!r}"
            )
        if len(self.palette) < MIN_PALETTE_SIZE:
            raise ConfigError(
                "palette",
                f"needs at least {MIN_PALETTE_SIZE} colors, got {len(self.palette)}",
            )
        if len(set(self.palette)) != len(self.palette):
            raise ConfigError("palette", "colors must be distinct")

    @property
    def center(self) -> tuple[float, float]:
        """Viewport center, the origin of the circular layout."""
        return (self.width / 2, self.height / 2)


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def config_from_mapping(section: dict[str, Any]) -> ForestvizConfig:
    """Build a config from a [tool.forestviz] table, ignoring unknown keys."""
    known = {f.name for f in fields(ForestvizConfig)}
    values = {key: value for key, value in section.items() if key in known}
    if isinstance(values.get("palette"), list):
        values["palette"] = tuple(values["palette"])
    return ForestvizConfig(**values)


def load_config(start: Path | None = None) -> ForestvizConfig:
    """Load [tool.forestviz] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.forestviz] section.

    Raises:
        ConfigError: If a configured value is invalid
    """
    path = find_pyproject(start)
    if path is None:
        return ForestvizConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        try:
            import tomli as tomllib
        except ImportError:
            return ForestvizConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("forestviz", {})
    if not section:
        return ForestvizConfig()

    return config_from_mapping(section)
