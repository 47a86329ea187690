"""Graticule, flight line, and marker rendering."""
from __future__ import annotations

import math
from typing import Iterable, Sequence

import pygame

from flight_reveal import LineDraw, MarkerDraw, Path
from flight_reveal.projection import HALF_SIZE, from_lon_lat, world_offset

from ui.constants import (
    ANTIMERIDIAN_COLOR,
    EQUATOR_COLOR,
    GRATICULE_COLOR,
    GRATICULE_STEP,
    LINE_COLOR,
    LINE_WIDTH,
    MARKER_END,
    MARKER_ICON_PX,
    MARKER_MAX_R,
    MARKER_MIN_R,
    MARKER_START,
)
from ui.map_view import MapView


def _polyline(
    surface: pygame.Surface,
    view: MapView,
    coordinates: Sequence[tuple[float, float]],
    color: tuple[int, int, int],
    width: int,
) -> None:
    if len(coordinates) < 2:
        return
    points = [view.to_screen(x, y) for x, y in coordinates]
    pygame.draw.lines(surface, color, False, points, width)


def draw_graticule(surface: pygame.Surface, view: MapView, world_width: float) -> None:
    """Draw meridians and parallels for every world copy in view."""
    x0, _, x1, _ = view.extent()
    top = view.to_screen(0, HALF_SIZE)[1]
    bottom = view.to_screen(0, -HALF_SIZE)[1]

    for k in range(math.floor(x0 / world_width), math.floor(x1 / world_width) + 1):
        for lon in range(-180, 180, GRATICULE_STEP):
            x = from_lon_lat((lon, 0))[0] + k * world_width
            sx = view.to_screen(x, 0)[0]
            color = ANTIMERIDIAN_COLOR if lon == -180 else GRATICULE_COLOR
            pygame.draw.line(surface, color, (sx, top), (sx, bottom))

    for lat in range(-60, 90, GRATICULE_STEP):
        sy = view.to_screen(0, from_lon_lat((0, lat))[1])[1]
        color = EQUATOR_COLOR if lat == 0 else GRATICULE_COLOR
        pygame.draw.line(surface, color, (0, sy), (view.width, sy))


def draw_settled(
    surface: pygame.Surface, view: MapView, paths: Iterable[Path], world_width: float
) -> None:
    """Static style for finished paths, wrapped like the animated ones."""
    k = world_offset(view.center[0], world_width)
    for path in paths:
        for offset in (k, k + 1):
            dx = offset * world_width
            _polyline(surface, view, [(x + dx, y) for x, y in path.coordinates], LINE_COLOR, LINE_WIDTH)


def draw_commands(
    surface: pygame.Surface, view: MapView, commands: Iterable[LineDraw | MarkerDraw]
) -> None:
    markers = []
    for command in commands:
        if isinstance(command, LineDraw):
            _polyline(surface, view, command.coordinates, LINE_COLOR, LINE_WIDTH)
        else:
            markers.append(command)

    # Markers go on top of every line.
    for marker in markers:
        radius = max(MARKER_MIN_R, min(MARKER_MAX_R, round(MARKER_ICON_PX * marker.scale)))
        color = MARKER_START if marker.kind == "start" else MARKER_END
        pos = view.to_screen(*marker.position)
        pygame.draw.circle(surface, color, pos, radius)
        pygame.draw.circle(surface, (255, 255, 255), pos, radius, 1)
