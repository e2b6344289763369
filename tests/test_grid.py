import pytest

from cubed.config import MapError
from cubed.grid import (
    check_inner_walls,
    check_map,
    check_map_characters,
    check_map_walls,
    normalize_map,
)

VALID = ["111111", "100N01", "111111"]
IRREGULAR = ["  111", "111N1", "10001", "11111"]


def test_normalize_equal_widths():
    rows = normalize_map(["1", "111", "11"])
    assert len({len(row) for row in rows}) == 1
    assert len(rows[0]) == len("111")


def test_normalize_preserves_content():
    source = ["1", "111", "11"]
    rows = normalize_map(source)
    for original, padded in zip(source, rows):
        assert padded.startswith(original)
        assert padded[len(original):].strip(" ") == ""


def test_normalize_empty():
    assert normalize_map([]) == []


def test_check_map_valid():
    check_map(normalize_map(VALID))
    check_map(normalize_map(IRREGULAR))
    assert check_map_walls(normalize_map(IRREGULAR))


def test_characters_require_player():
    assert not check_map_characters(["111", "101", "111"])


def test_characters_reject_two_players():
    assert not check_map_characters(["1111", "1NS1", "1001", "1111"])


def test_characters_require_zero():
    assert not check_map_characters(["111", "1N1", "111"])


def test_characters_reject_unknown():
    assert not check_map_characters(["1111", "1N01", "1X01", "1111"])
    assert check_map_characters(VALID)


def test_check_map_reports_characters():
    with pytest.raises(MapError, match="invalid characters"):
        check_map(["111", "1N1", "111"])


def test_open_top_row():
    with pytest.raises(MapError, match="surrounded by walls"):
        check_map(["110111", "100N01", "111111"])


def test_open_first_column():
    assert not check_map_walls(["1111", "0N01", "1111"])


def test_hole_next_to_space():
    rows = normalize_map([" 1111", "11001", "1N 01", "11111"])
    assert not check_inner_walls(rows)
    with pytest.raises(MapError):
        check_map(rows)


def test_floor_over_short_row_is_open():
    rows = normalize_map(["1111111", "1000001", "11111"])
    assert not check_map_walls(rows)


def test_floor_at_row_end_is_open():
    assert not check_inner_walls(["1111", "1N00", "1111"])