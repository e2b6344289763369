"""Scene description and shared constants for the renderer."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

WIDTH = 800
HEIGHT = 600
TILE_SIZE = 64
FOV = math.pi / 3
NUM_RAYS = WIDTH


class MapError(ValueError):
    """Raised when a scene file or one of its parts is invalid."""


@dataclass(frozen=True)
class Rgb:
    """A colour with 8-bit red, green and blue channels."""

    red: int
    green: int
    blue: int


@dataclass
class MapConfig:
    """Everything read from a scene file: textures, colours and the grid."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor_color: str | None = None
    ceiling_color: str | None = None
    floor: Rgb | None = None
    ceiling: Rgb | None = None
    grid: list[str] | None = field(default=None)

    def describe(self) -> str:
        """Return a human-readable dump of the configuration."""
        lines = [
            f"North texture: {self.north}",
            f"South texture: {self.south}",
            f"West texture: {self.west}",
            f"East texture: {self.east}",
            f"floor color: {self.floor_color}",
            f"Ceiling color: {self.ceiling_color}",
            _rgb_line("Ceiling", self.ceiling),
            _rgb_line("floor", self.floor),
        ]
        if self.grid is None:
            lines.append("map is NULL")
        else:
            lines.extend(self.grid)
        return "\n".join(lines) + "\n"


def _rgb_line(label: str, rgb: Rgb | None) -> str:
    if rgb is None:
        return f"{label} color: not parsed"
    return f"{label} color R: {rgb.red}; G: {rgb.green}; B: {rgb.blue};"