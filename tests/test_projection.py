"""Tests for Web Mercator helpers and HDMS formatting."""

import math

import pytest
from flight_reveal.projection import (
    HALF_SIZE,
    RADIUS,
    WORLD_WIDTH,
    from_lon_lat,
    project_line,
    to_lon_lat,
    to_string_hdms,
    world_offset,
)


def test_origin():
    x, y = from_lon_lat((0.0, 0.0))
    assert x == pytest.approx(0.0)
    assert y == pytest.approx(0.0, abs=1e-6)


def test_antimeridian_is_half_width():
    assert from_lon_lat((180.0, 0.0))[0] == pytest.approx(HALF_SIZE)
    assert WORLD_WIDTH == pytest.approx(2 * HALF_SIZE)


def test_round_trip():
    lon, lat = to_lon_lat(from_lon_lat((8.29, 47.1)))
    assert lon == pytest.approx(8.29)
    assert lat == pytest.approx(47.1)


def test_polar_latitude_is_clamped():
    assert from_lon_lat((0.0, 90.0))[1] == pytest.approx(HALF_SIZE)


def test_to_lon_lat_wraps_longitude():
    x, y = from_lon_lat((10.0, 0.0))
    lon, _ = to_lon_lat((x + WORLD_WIDTH, y))
    assert lon == pytest.approx(10.0)


@pytest.mark.parametrize(
    "center_x, expected",
    [(0.0, 0), (HALF_SIZE, 0), (WORLD_WIDTH + 1, 1), (-1.0, -1), (-WORLD_WIDTH - 1, -2)],
)
def test_world_offset(center_x, expected):
    assert world_offset(center_x) == expected


class TestHDMS:
    """Degree/minute/second strings."""

    def test_north_east(self):
        assert to_string_hdms((8.5, 47.25)) == "47° 15′ 00″ N 8° 30′ 00″ E"

    def test_south_west(self):
        assert to_string_hdms((-73.5, -33.75)) == "33° 45′ 00″ S 73° 30′ 00″ W"

    def test_zero_has_no_hemisphere(self):
        assert to_string_hdms((0.0, 0.0)) == "0° 00′ 00″ 0° 00′ 00″"

    def test_fraction_digits(self):
        assert to_string_hdms((0.0, 10.5), fraction_digits=2) == "10° 30′ 00.00″ N 0° 00′ 00.00″"

    def test_seconds_carry_into_minutes(self):
        # 59.9999... seconds round up to the next minute.
        assert to_string_hdms((0.0, 10.0 + 59.9999 / 3600)).startswith("10° 01′ 00″")


def test_project_line_matches_point_projection():
    line = [(-0.45, 51.47), (180.0, 0.0), (0.0, 89.9)]
    projected = project_line(line)
    assert len(projected) == 3
    for got, point in zip(projected, line):
        assert got == pytest.approx(from_lon_lat(point))
    assert projected[1][0] == pytest.approx(HALF_SIZE)
    assert projected[2][1] == pytest.approx(HALF_SIZE)
    assert project_line([]) == []


def test_mercator_matches_spherical_formula():
    lon, lat = -0.4543, 51.47
    x, y = from_lon_lat((lon, lat))
    assert x == pytest.approx(RADIUS * math.radians(lon))
    assert y == pytest.approx(RADIUS * math.log(math.tan(math.pi / 4 + math.radians(lat) / 2)))
