"""Screen <-> map unit conversion for a pannable, zoomable view."""
from __future__ import annotations

from flight_reveal.projection import HALF_SIZE

from ui.constants import MAX_RESOLUTION, MIN_RESOLUTION, SCREEN_H, SCREEN_W, STATUS_H


class MapView:
    """View centre and resolution. Horizontal panning is unbounded."""

    def __init__(self, center: tuple[float, float], resolution: float) -> None:
        self.center = center
        self.resolution = resolution
        self.width = SCREEN_W
        self.height = SCREEN_H - STATUS_H

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        cx, cy = self.center
        return (
            self.width / 2 + (x - cx) / self.resolution,
            self.height / 2 - (y - cy) / self.resolution,
        )

    def to_map(self, px: float, py: float) -> tuple[float, float]:
        cx, cy = self.center
        return (
            cx + (px - self.width / 2) * self.resolution,
            cy - (py - self.height / 2) * self.resolution,
        )

    def pan(self, dx_px: float, dy_px: float) -> None:
        cx, cy = self.center
        cy = cy + dy_px * self.resolution
        # Keep the view inside the square Mercator extent vertically.
        cy = max(-HALF_SIZE, min(HALF_SIZE, cy))
        self.center = (cx - dx_px * self.resolution, cy)

    def zoom(self, factor: float) -> None:
        self.resolution = max(MIN_RESOLUTION, min(MAX_RESOLUTION, self.resolution * factor))

    def extent(self) -> tuple[float, float, float, float]:
        x0, y1 = self.to_map(0, 0)
        x1, y0 = self.to_map(self.width, self.height)
        return (x0, y0, x1, y1)
