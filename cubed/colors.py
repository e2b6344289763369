"""Parsing of floor and ceiling colour specifications."""

from __future__ import annotations

from .config import MapConfig, MapError, Rgb

_DIGITS = frozenset("0123456789")


def count_commas(text: str) -> int:
    """Return the number of commas in ``text``."""
    return text.count(",")


def check_color(text: str) -> int:
    """Convert one colour channel to an int in 0..255 or raise MapError."""
    value = text.strip(" \t")
    if not set(value) <= _DIGITS:
        raise MapError(f"Invalid color value: {text!r}")
    number = int(value) if value else 0
    if not 0 <= number <= 255:
        raise MapError(f"Color value out of range: {text!r}")
    return number


def parse_color(text: str) -> Rgb:
    """Parse ``"R,G,B"`` into an Rgb; empty fields between commas are skipped."""
    parts = [part for part in text.split(",") if part]
    if len(parts) != 3:
        raise MapError(f"Invalid color: {text!r}")
    red, green, blue = (check_color(part) for part in parts)
    return Rgb(red, green, blue)


def parse_rgb_colors(config: MapConfig) -> None:
    """Fill ``config.floor`` and ``config.ceiling`` from their raw strings."""
    config.floor = _parse_named(config.floor_color, "floor")
    config.ceiling = _parse_named(config.ceiling_color, "ceiling")


def _parse_named(text: str | None, name: str) -> Rgb:
    if text is None or count_commas(text) != 2:
        raise MapError(f"Invalid {name} color")
    try:
        return parse_color(text)
    except MapError as exc:
        raise MapError(f"Invalid {name} color") from exc