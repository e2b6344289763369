"""Normalisation and validation of the map grid."""

from __future__ import annotations

from collections.abc import Sequence

from .config import MapError

PLAYER_CHARS = frozenset("NSEW")
_OPEN_CHARS = frozenset("01 ")


def normalize_map(lines: Sequence[str]) -> list[str]:
    """Pad every row with spaces to the length of the longest one."""
    width = max((len(line) for line in lines), default=0)
    return [line.ljust(width) for line in lines]


def check_map(lines: Sequence[str]) -> None:
    """Raise MapError unless the grid has valid characters and closed walls."""
    if not check_map_characters(lines):
        raise MapError("Map have invalid characters or miss one or more")
    if not check_map_walls(lines):
        raise MapError("Map is not surrounded by walls")


def check_map_characters(lines: Sequence[str]) -> bool:
    """True if the grid holds only '0', '1', ' ', exactly one player and a '0'."""
    player_seen = False
    zero_seen = False
    for line in lines:
        for char in line:
            if char not in _OPEN_CHARS:
                if char in PLAYER_CHARS and not player_seen:
                    player_seen = True
                else:
                    return False
            if char == "0":
                zero_seen = True
    return player_seen and zero_seen


def check_map_walls(lines: Sequence[str]) -> bool:
    """True if the outer rows and first column are walls and the inside is closed."""
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if index in (0, last) and not set(line) <= {"1", " "}:
            return False
        if line and line[0] not in ("1", " "):
            return False
    return check_inner_walls(lines)


def check_inner_walls(lines: Sequence[str]) -> bool:
    """True if every open cell inside the grid has no blank orthogonal neighbour."""
    for row in range(1, len(lines) - 1):
        for col in range(1, len(lines[row])):
            if lines[row][col] in ("1", " "):
                continue
            neighbours = (
                _cell(lines, row, col - 1),
                _cell(lines, row - 1, col),
                _cell(lines, row, col + 1),
                _cell(lines, row + 1, col),
            )
            if " " in neighbours:
                return False
    return True


def _cell(lines: Sequence[str], row: int, col: int) -> str:
    line = lines[row]
    return line[col] if 0 <= col < len(line) else " "