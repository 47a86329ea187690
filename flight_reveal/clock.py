"""RevealClock - how much of a path is visible at a given time."""

from __future__ import annotations

import math
from dataclasses import dataclass

from flight_reveal.types import Coordinate, Path


def path_duration(point_count: int, reveal_rate: float) -> float:
    """Milliseconds needed to reveal ``point_count`` points."""
    if point_count <= 1:
        return 0.0
    return (point_count - 1) / reveal_rate


@dataclass(frozen=True, slots=True)
class Reveal:
    coordinates: tuple[Coordinate, ...]
    finished: bool

    @property
    def visible_points(self) -> int:
        return len(self.coordinates)


class RevealClock:
    def __init__(self, reveal_rate: float) -> None:
        if reveal_rate <= 0:
            raise ValueError("reveal_rate must be positive")
        self._reveal_rate = reveal_rate

    @property
    def reveal_rate(self) -> float:
        return self._reveal_rate

    def duration(self, path: Path) -> float:
        return path_duration(len(path), self._reveal_rate)

    def visible_points(self, path: Path, now: float) -> int:
        """The start point shows at elapsed 0, then one more every 1/rate ms."""
        total = len(path)
        if total == 0 or path.start_time is None or now < path.start_time:
            return 0
        elapsed = now - path.start_time
        return min(math.floor(elapsed * self._reveal_rate) + 1, total)

    def reveal(self, path: Path, now: float) -> Reveal:
        visible = self.visible_points(path, now)
        return Reveal(
            coordinates=path.coordinates[:visible],
            finished=visible >= len(path),
        )
