"""Great-circle arcs between two lon/lat points, split at the antimeridian."""

from __future__ import annotations

import math

from flight_reveal.types import Coordinate


def _interpolate(start: Coordinate, end: Coordinate, npoints: int) -> list[Coordinate]:
    lon1, lat1 = math.radians(start[0]), math.radians(start[1])
    lon2, lat2 = math.radians(end[0]), math.radians(end[1])

    d = 2 * math.asin(
        math.sqrt(
            math.sin((lat1 - lat2) / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin((lon1 - lon2) / 2) ** 2
        )
    )
    sin_d = math.sin(d)
    if abs(sin_d) < 1e-12:
        raise ValueError(f"start {start} and end {end} are antipodal")

    points: list[Coordinate] = []
    for i in range(npoints):
        f = i / (npoints - 1)
        a = math.sin((1 - f) * d) / sin_d
        b = math.sin(f * d) / sin_d
        x = a * math.cos(lat1) * math.cos(lon1) + b * math.cos(lat2) * math.cos(lon2)
        y = a * math.cos(lat1) * math.sin(lon1) + b * math.cos(lat2) * math.sin(lon2)
        z = a * math.sin(lat1) + b * math.sin(lat2)
        lat = math.atan2(z, math.sqrt(x * x + y * y))
        lon = math.atan2(y, x)
        points.append((math.degrees(lon), math.degrees(lat)))
    # Pin the endpoints so rounding never moves them.
    points[0] = (float(start[0]), float(start[1]))
    points[-1] = (float(end[0]), float(end[1]))
    return points


def split_antimeridian(points: list[Coordinate]) -> list[list[Coordinate]]:
    """Cut a line wherever consecutive longitudes jump across +/-180."""
    if not points:
        return []
    lines: list[list[Coordinate]] = [[points[0]]]
    for prev, cur in zip(points, points[1:]):
        if abs(cur[0] - prev[0]) > 180:
            edge = 180.0 if prev[0] > 0 else -180.0
            unwrapped = cur[0] + 2 * edge
            t = (edge - prev[0]) / (unwrapped - prev[0])
            lat = prev[1] + t * (cur[1] - prev[1])
            lines[-1].append((edge, lat))
            lines.append([(-edge, lat)])
        lines[-1].append(cur)
    return lines


def great_circle(start: Coordinate, end: Coordinate, npoints: int = 100) -> list[list[Coordinate]]:
    """Return one or two lon/lat lines tracing the great circle from start to end.

    Raises ValueError for antipodal endpoints, which have no unique route.
    """
    if npoints < 2:
        raise ValueError("npoints must be at least 2")
    if start == end:
        return [[tuple(start), tuple(end)]]
    return split_antimeridian(_interpolate(start, end, npoints))
