"""Reading a scene file into a validated MapConfig."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator, Sequence

from .colors import parse_rgb_colors
from .config import MapConfig, MapError
from .grid import check_map, normalize_map

_TRIM = " \t\n"
_IDENTIFIERS = (
    ("NO", "north"),
    ("SO", "south"),
    ("WE", "west"),
    ("EA", "east"),
    ("F", "floor_color"),
    ("C", "ceiling_color"),
)


def check_args(argv: Sequence[str]) -> str:
    """Return the scene path from the command-line arguments or raise MapError.

    ``argv`` holds the arguments after the program name; exactly one is
    expected, longer than five characters, whose last dot starts ``.cub``.
    """
    if len(argv) != 1:
        raise MapError("Invalid number of arguments")
    path = argv[0]
    dot = path.rfind(".")
    if len(path) > 5 and dot != -1 and path[dot : dot + 4] == ".cub":
        return path
    raise MapError("Invalid argument")


def skip_empty_lines(lines: Iterator[str]) -> str | None:
    """Consume blank lines and return the first non-blank one, or None at the end."""
    for line in lines:
        if line.strip(_TRIM):
            return line
    return None


def parse_id_line(line: str, identifier: str, current: str | None) -> str | None:
    """Return the value of ``line`` if it starts with ``identifier``.

    The identifier must be followed by a space or tab. Returns None when the
    line is for another identifier; raises MapError if ``current`` is already set.
    """
    if not line.startswith(identifier):
        return None
    rest = line[len(identifier) :]
    if not rest or rest[0] not in " \t":
        return None
    if current is not None:
        raise MapError("Duplicate texture")
    return rest.lstrip(" \t").split("\n", 1)[0]


def parse_one_line(line: str, config: MapConfig) -> None:
    """Store one texture or colour line in ``config`` or raise MapError."""
    for identifier, attribute in _IDENTIFIERS:
        value = parse_id_line(line, identifier, getattr(config, attribute))
        if value is not None:
            setattr(config, attribute, value)
            return
    raise MapError("Invalid texture identifier")


def parse_texture_and_color(lines: Iterable[str], config: MapConfig) -> None:
    """Read the six texture and colour lines, then parse the two colours."""
    lines = iter(lines)
    found = 0
    line = skip_empty_lines(lines)
    while found < 6 and line is not None:
        parse_one_line(line.strip(_TRIM), config)
        found += 1
        if found < 6:
            line = skip_empty_lines(lines)
    if found != 6:
        raise MapError("Missing textures or colors")
    parse_rgb_colors(config)


def check_textures_exist(config: MapConfig) -> None:
    """Raise MapError unless all four texture files can be opened for reading."""
    for path in (config.north, config.south, config.east, config.west):
        if path is None:
            raise MapError("Missing texture path")
        try:
            descriptor = os.open(path, os.O_RDONLY)
        except OSError as exc:
            raise MapError(f"{path}: {exc.strerror}") from exc
        os.close(descriptor)


def parse_map_lines(lines: Iterable[str], config: MapConfig) -> None:
    """Read the grid that follows the header into ``config.grid``."""
    lines = iter(lines)
    first = skip_empty_lines(lines)
    if first is None:
        raise MapError("Map is empty")
    collected = [first]
    for line in lines:
        if not line.strip(_TRIM):
            raise MapError("Map have a empty line")
        collected.append(line)
    rows = [row for row in "".join(collected).split("\n") if row]
    config.grid = normalize_map(rows)


def parse_map(path: str | os.PathLike[str]) -> MapConfig:
    """Parse and validate the scene file at ``path``."""
    config = MapConfig()
    try:
        handle = open(path, encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as exc:
        raise MapError(f"{os.fspath(path)}: {exc.strerror}") from exc
    with handle:
        parse_texture_and_color(handle, config)
        check_textures_exist(config)
        parse_map_lines(handle, config)
    assert config.grid is not None
    check_map(config.grid)
    return config