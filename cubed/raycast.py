"""Player placement, movement and ray casting over the map grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .config import FOV, HEIGHT, NUM_RAYS, TILE_SIZE, MapError

MOVE_STEP = 5.0
ROTATION_STEP = 0.05
_GRID_LIMIT = 10
_RAY_STEP = 1.0

_START_ANGLES = {
    "W": math.pi,
    "E": 0.0,
    "N": -math.pi / 2,
    "S": math.pi / 2,
}


@dataclass
class Player:
    """Position in world units and viewing angle in radians."""

    x: float
    y: float
    angle: float


def player_position(grid: Sequence[str]) -> Player:
    """Return the player placed on the first start cell of the grid.

    The row index gives ``x`` and the column index gives ``y``.
    """
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char in _START_ANGLES:
                return Player(
                    x=row * TILE_SIZE + TILE_SIZE // 2,
                    y=col * TILE_SIZE + TILE_SIZE // 2,
                    angle=_START_ANGLES[char],
                )
    raise MapError("Map has no player start position")


def is_wall_at(grid: Sequence[str], x: float, y: float) -> bool:
    """True if the world point lies in a wall or outside the playable area."""
    col = int((x - TILE_SIZE // 2) / TILE_SIZE)
    row = int((y - TILE_SIZE // 2) / TILE_SIZE)
    if col < 0 or row < 0 or row >= _GRID_LIMIT or col >= _GRID_LIMIT:
        return True
    if row >= len(grid) or col >= len(grid[row]):
        return True
    return grid[row][col] == "1"


def normalize_angle(angle: float) -> float:
    """Bring ``angle`` into the range [0, 2*pi)."""
    angle = math.fmod(angle, 2 * math.pi)
    if angle < 0:
        angle += 2 * math.pi
    return angle


def cast_ray(grid: Sequence[str], player: Player, ray_angle: float) -> float:
    """Step along the ray until it hits a wall and return the distance travelled."""
    ray_angle = normalize_angle(ray_angle)
    dx = math.cos(ray_angle) * _RAY_STEP
    dy = math.sin(ray_angle) * _RAY_STEP
    ray_x, ray_y = player.x, player.y
    while not is_wall_at(grid, ray_x, ray_y):
        ray_x += dx
        ray_y += dy
    return math.hypot(ray_x - player.x, ray_y - player.y)


def move_player(
    grid: Sequence[str], player: Player, move_step: float, direction: int
) -> None:
    """Move the player along its angle unless the destination is a wall."""
    nx = player.x + math.cos(player.angle) * move_step * direction
    ny = player.y + math.sin(player.angle) * move_step * direction
    if not is_wall_at(grid, nx, ny):
        player.x = nx
        player.y = ny


def calculate_wall_height(grid: Sequence[str], player: Player, column: int) -> float:
    """Return the projected wall height for a screen column, fish-eye corrected."""
    ray_angle = player.angle - FOV / 2 + column * FOV / NUM_RAYS
    dist = cast_ray(grid, player, ray_angle) * math.cos(ray_angle - player.angle)
    if dist == 0:
        return math.inf
    return TILE_SIZE * HEIGHT / dist


def wall_spans(grid: Sequence[str], player: Player) -> list[tuple[int, int]]:
    """Return, per screen column, the visible rows [start, end) of the wall."""
    return [
        _span(calculate_wall_height(grid, player, column))
        for column in range(NUM_RAYS)
    ]


def _span(height: float) -> tuple[int, int]:
    if math.isinf(height):
        return 0, HEIGHT
    start = int(HEIGHT // 2 - height / 2)
    end = int(start + height)
    return max(start, 0), min(end, HEIGHT)