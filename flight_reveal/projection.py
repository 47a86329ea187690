"""Web Mercator (EPSG:3857) helpers and coordinate formatting."""

from __future__ import annotations

import math
from typing import Iterable

from pyproj import Transformer

from flight_reveal.types import Coordinate

RADIUS = 6378137.0
HALF_SIZE = math.pi * RADIUS
WORLD_EXTENT = (-HALF_SIZE, -HALF_SIZE, HALF_SIZE, HALF_SIZE)
WORLD_WIDTH = WORLD_EXTENT[2] - WORLD_EXTENT[0]

# Latitude at which the square Mercator extent ends.
MAX_LATITUDE = math.degrees(2 * math.atan(math.exp(math.pi)) - math.pi / 2)

_TO_MERCATOR = Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True)
_FROM_MERCATOR = Transformer.from_crs("EPSG:3857", "EPSG:4326", always_xy=True)


def _clamp_lat(lat: float) -> float:
    return max(-MAX_LATITUDE, min(MAX_LATITUDE, lat))


def from_lon_lat(lon_lat: Coordinate) -> Coordinate:
    lon, lat = lon_lat
    x, y = _TO_MERCATOR.transform(lon, _clamp_lat(lat))
    return (float(x), float(y))


def to_lon_lat(coordinate: Coordinate) -> Coordinate:
    """Inverse of :func:`from_lon_lat`. Longitude is wrapped to [-180, 180]."""
    x, y = coordinate
    lon, lat = _FROM_MERCATOR.transform(x, y)
    lon, lat = float(lon), float(lat)
    if lon < -180 or lon > 180:
        lon = (lon + 180) % 360 - 180
    return (lon, lat)


def project_line(lon_lats: Iterable[Coordinate]) -> list[Coordinate]:
    points = list(lon_lats)
    if not points:
        return []
    xs, ys = _TO_MERCATOR.transform(
        [lon for lon, _ in points], [_clamp_lat(lat) for _, lat in points]
    )
    return [(float(x), float(y)) for x, y in zip(xs, ys)]


def world_offset(center_x: float, world_width: float = WORLD_WIDTH) -> int:
    """Number of whole world widths between the view centre and the prime meridian."""
    return math.floor(center_x / world_width)


def _degrees_to_string_hdms(hemispheres: str, degrees: float, fraction_digits: int) -> str:
    normalized = (degrees + 180) % 360 - 180
    x = abs(3600 * normalized)
    precision = 10**fraction_digits

    deg = math.floor(x / 3600)
    minutes = math.floor((x - deg * 3600) / 60)
    seconds = x - deg * 3600 - minutes * 60
    seconds = math.ceil(seconds * precision) / precision

    if seconds >= 60:
        seconds = 0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        deg += 1

    hemisphere = ""
    if normalized != 0:
        hemisphere = " " + hemispheres[1 if normalized < 0 else 0]

    width = 2 + (fraction_digits + 1 if fraction_digits > 0 else 0)
    sec_str = f"{seconds:0{width}.{fraction_digits}f}"
    return f"{deg}° {minutes:02d}′ {sec_str}″{hemisphere}"


def to_string_hdms(lon_lat: Coordinate, fraction_digits: int = 0) -> str:
    """Format a lon/lat pair as degrees, minutes and seconds, latitude first."""
    lon, lat = lon_lat
    return (
        _degrees_to_string_hdms("NS", lat, fraction_digits)
        + " "
        + _degrees_to_string_hdms("EW", lon, fraction_digits)
    )
