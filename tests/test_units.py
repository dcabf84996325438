import pytest

from planrenderer.core.units import (
    convert_length,
    format_dimensions,
    meters_to_unit,
    to_display_length,
)


def test_meters_to_feet_rounds_to_whole_feet():
    assert convert_length(4, "m", "ft") == 13.0
    assert convert_length(1, "m", "ft") == 3.0
    assert convert_length(10, "m", "ft") == 33.0


def test_feet_to_meters_rounds_to_centimeters():
    assert convert_length(13, "ft", "m") == 3.96
    assert convert_length(10, "ft", "m") == 3.05


def test_same_unit_is_identity():
    assert convert_length(4.37, "m", "m") == 4.37
    assert convert_length(12.5, "ft", "ft") == 12.5


@pytest.mark.parametrize("meters", [0.5, 1.0, 2.75, 4.0, 7.3, 12.0, 30.0])
def test_round_trip_stays_within_half_a_foot(meters):
    back = convert_length(convert_length(meters, "m", "ft"), "ft", "m")
    assert abs(back - meters) <= 0.5 * 0.3048 + 0.005


def test_unknown_unit_is_rejected():
    with pytest.raises(ValueError):
        convert_length(1, "m", "yd")
    with pytest.raises(ValueError):
        meters_to_unit(1, "cm")


def test_display_text_uses_one_decimal():
    assert to_display_length(4, "m") == "4.0m"
    assert to_display_length(4, "ft") == "13.1ft"


def test_format_dimensions_in_feet():
    assert format_dimensions(4, 5, "ft") == "13.1ft x 16.4ft"


def test_format_dimensions_in_meters():
    assert format_dimensions(3.5, 4, "m") == "3.5m x 4.0m"
