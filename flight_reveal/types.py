"""Shared types for the flight reveal animation core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal, Sequence, Union

Coordinate = tuple[float, float]


class Path:
    """One continuous drawable segment of a flight's great-circle route.

    ``coordinates`` is read-only. Only ``start_time`` and ``finished`` are
    mutated, by admission and by the frame renderer.
    """

    __slots__ = ("_coordinates", "start_time", "finished", "group")

    def __init__(
        self,
        coordinates: Sequence[Sequence[float]],
        start_time: float | None = None,
        finished: bool = False,
        group: int = -1,
    ) -> None:
        self._coordinates: tuple[Coordinate, ...] = tuple(
            (float(x), float(y)) for x, y in coordinates
        )
        self.start_time = start_time
        self.finished = finished
        self.group = group

    @property
    def coordinates(self) -> tuple[Coordinate, ...]:
        return self._coordinates

    @property
    def first(self) -> Coordinate:
        return self._coordinates[0]

    @property
    def last(self) -> Coordinate:
        return self._coordinates[-1]

    def __len__(self) -> int:
        return len(self._coordinates)

    def __repr__(self) -> str:
        return (
            f"Path(points={len(self._coordinates)}, start_time={self.start_time!r}, "
            f"finished={self.finished!r}, group={self.group!r})"
        )


@dataclass(frozen=True, slots=True)
class FrameState:
    time: float
    resolution: float
    center: Coordinate


@dataclass(frozen=True, slots=True)
class LineDraw:
    """Visible prefix of a path, already translated into one world copy."""

    coordinates: tuple[Coordinate, ...]
    world_offset: int


@dataclass(frozen=True, slots=True)
class MarkerDraw:
    position: Coordinate
    kind: Literal["start", "end"]
    scale: float


DrawCommand = Union[LineDraw, MarkerDraw]

PathGroup = Sequence[Path]

FinishHook = Callable[[Path, float], None]


class SnapshotError(Exception):
    """Raised on restore failures (version or configuration mismatch)."""


class DatasetError(ValueError):
    """Raised when flight records cannot be read as endpoint pairs."""
