"""FrameRenderer - per-frame draw commands for revealing paths."""

from __future__ import annotations

from typing import Iterable

from flight_reveal.clock import RevealClock
from flight_reveal.projection import world_offset
from flight_reveal.types import (
    Coordinate,
    DrawCommand,
    FrameState,
    LineDraw,
    MarkerDraw,
    Path,
)


def translate(coordinates: tuple[Coordinate, ...], dx: float) -> tuple[Coordinate, ...]:
    return tuple((x + dx, y) for x, y in coordinates)


class FrameRenderer:
    def __init__(self, clock: RevealClock, world_width: float, marker_scale: float = 0.05) -> None:
        self._clock = clock
        self._world_width = world_width
        self._marker_scale = marker_scale

    @property
    def world_width(self) -> float:
        return self._world_width

    def render(
        self, paths: Iterable[Path], frame: FrameState
    ) -> tuple[list[DrawCommand], list[Path]]:
        """Return draw commands for this frame and the paths that just finished.

        Each visible path is drawn in the world copy under the view centre
        and in the next copy east of it, so it stays visible right after the
        view pans across a wrap boundary.
        """
        commands: list[DrawCommand] = []
        finished: list[Path] = []
        offset = world_offset(frame.center[0], self._world_width)
        scale = self._marker_scale / frame.resolution

        for path in paths:
            if path.finished:
                continue
            reveal = self._clock.reveal(path, frame.time)
            if reveal.visible_points == 0:
                continue
            if reveal.finished:
                path.finished = True
                finished.append(path)

            for k in (offset, offset + 1):
                commands.append(
                    LineDraw(translate(reveal.coordinates, k * self._world_width), k)
                )

            dx = offset * self._world_width
            first = reveal.coordinates[0]
            last = reveal.coordinates[-1]
            commands.append(MarkerDraw((first[0] + dx, first[1]), "start", scale))
            commands.append(MarkerDraw((last[0] + dx, last[1]), "end", scale))

        return commands, finished
