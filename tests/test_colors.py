import pytest

from cubed.colors import check_color, count_commas, parse_color, parse_rgb_colors
from cubed.config import MapConfig, MapError, Rgb


def test_count_commas():
    assert count_commas("220,100,0") == 2
    assert count_commas("") == 0


@pytest.mark.parametrize("text, expected", [("255", 255), (" 42\t", 42), ("007", 7)])
def test_check_color_valid(text, expected):
    assert check_color(text) == expected


def test_check_color_blank_reads_as_zero():
    assert check_color("  ") == 0


@pytest.mark.parametrize("text", ["256", "-1", "+5", "1a", "4 2", "x"])
def test_check_color_invalid(text):
    with pytest.raises(MapError):
        check_color(text)


def test_parse_color_valid():
    assert parse_color("220,100,0") == Rgb(220, 100, 0)


def test_parse_color_with_spaces():
    assert parse_color(" 1 , 2 ,3 ") == Rgb(1, 2, 3)


def test_parse_color_skips_empty_fields():
    assert parse_color("1,,2,3") == Rgb(1, 2, 3)


@pytest.mark.parametrize("text", ["1,2", "1,2,3,4", "", "1,2,300"])
def test_parse_color_invalid(text):
    with pytest.raises(MapError):
        parse_color(text)


def test_parse_rgb_colors_fills_config():
    config = MapConfig(floor_color="220,100,0", ceiling_color="225,30,0")
    parse_rgb_colors(config)
    assert config.floor == Rgb(220, 100, 0)
    assert config.ceiling == Rgb(225, 30, 0)


def test_parse_rgb_colors_rejects_extra_commas():
    config = MapConfig(floor_color="1,,2,3", ceiling_color="1,2,3")
    with pytest.raises(MapError, match="floor"):
        parse_rgb_colors(config)


def test_parse_rgb_colors_bad_ceiling():
    config = MapConfig(floor_color="1,2,3", ceiling_color="1,2,999")
    with pytest.raises(MapError, match="ceiling"):
        parse_rgb_colors(config)


def test_parse_rgb_colors_missing_string():
    with pytest.raises(MapError):
        parse_rgb_colors(MapConfig(ceiling_color="1,2,3"))