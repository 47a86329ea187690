"""AnimationController - owns the registry, the loader, and the frame renderer."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Iterable

from flight_reveal.arc import great_circle
from flight_reveal.clock import RevealClock
from flight_reveal.config import AnimationConfig
from flight_reveal.dataset import FlightRecord
from flight_reveal.loader import AdmissionHandle, StaggeredLoader
from flight_reveal.projection import project_line
from flight_reveal.registry import PathRegistry
from flight_reveal.renderer import FrameRenderer
from flight_reveal.types import (
    DrawCommand,
    FinishHook,
    FrameState,
    Path,
    PathGroup,
    SnapshotError,
)

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class AnimationController:
    """Drives staggered admission and per-frame reveal of flight paths.

    Admission due times and ``FrameState.time`` are compared directly, so
    both must come from the same millisecond clock. ``admit``, ``load`` and
    ``poll`` fall back to ``time_fn`` when ``now`` is omitted; pass the
    host's frame clock as ``time_fn`` (or pass ``now`` explicitly) whenever
    frame times come from anything other than ``time.monotonic``.
    """

    def __init__(
        self,
        config: AnimationConfig | None = None,
        time_fn: Callable[[], float] | None = None,
        request_next_frame: Callable[[], None] | None = None,
    ) -> None:
        self._config = config if config is not None else AnimationConfig()
        self._time_fn = time_fn if time_fn is not None else _monotonic_ms
        self._request_next_frame = request_next_frame
        self._clock = RevealClock(self._config.reveal_rate)
        self._registry = PathRegistry()
        self._loader = StaggeredLoader(self._registry, self._config.reveal_rate)
        self._renderer = FrameRenderer(
            self._clock, self._config.world_width, self._config.marker_scale
        )
        self._finish_hooks: list[FinishHook] = []

    @property
    def config(self) -> AnimationConfig:
        return self._config

    @property
    def clock(self) -> RevealClock:
        return self._clock

    @property
    def registry(self) -> PathRegistry:
        return self._registry

    @property
    def loader(self) -> StaggeredLoader:
        return self._loader

    def active(self) -> list[Path]:
        return self._registry.active()

    def settled(self) -> list[Path]:
        return self._registry.settled()

    @property
    def idle(self) -> bool:
        """True once nothing is pending or revealing."""
        return self._loader.pending == 0 and not self._registry.active()

    def on_finish(self, hook: FinishHook) -> None:
        self._finish_hooks.append(hook)

    def _now(self, now: float | None) -> float:
        return self._time_fn() if now is None else now

    # -- Admission --

    def admit(
        self, group: PathGroup, delay: float = 0.0, now: float | None = None
    ) -> AdmissionHandle:
        return self._loader.schedule(list(group), delay, self._now(now))

    def build_group(self, record: FlightRecord, index: int = -1) -> list[Path]:
        """Great-circle paths in map units for one (from, to) lat/lon record."""
        (from_lat, from_lon), (to_lat, to_lon) = record
        lines = great_circle(
            (from_lon, from_lat), (to_lon, to_lat), self._config.arc_points
        )
        return [Path(tuple(project_line(line)), group=index) for line in lines]

    def load(
        self, records: Iterable[FlightRecord], now: float | None = None
    ) -> list[AdmissionHandle]:
        """Schedule every record, staggering groups by the configured delay."""
        start = self._now(now)
        handles = []
        for i, record in enumerate(records):
            group = self.build_group(record, i)
            handles.append(
                self._loader.schedule(group, i * self._config.inter_group_delay_ms, start)
            )
        logger.debug("scheduled %d flight(s) from %.1f", len(handles), start)
        return handles

    def cancel_pending(self) -> int:
        return self._loader.cancel_all()

    def reset(self) -> None:
        """Drop pending admissions and every admitted path."""
        self._loader.cancel_all()
        self._registry.clear()

    # -- Frames --

    def poll(self, now: float | None = None) -> int:
        """Fire due admissions without drawing. Returns how many groups fired."""
        return len(self._loader.fire_due(self._now(now)))

    def tick(self, frame: FrameState) -> list[DrawCommand]:
        """Render one frame. ``frame.time`` must use the same clock as ``time_fn``."""
        self._loader.fire_due(frame.time)
        commands, finished = self._renderer.render(self._registry.active(), frame)
        for path in finished:
            self._registry.settle(path)
            for hook in self._finish_hooks:
                hook(path, frame.time)
        # The host keeps calling tick even after every path has settled.
        if self._request_next_frame is not None:
            self._request_next_frame()
        return commands

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "reveal_rate": self._config.reveal_rate,
            "world_width": self._config.world_width,
            "paths": [_serialize_path(p) for p in self._registry],
            "pending": [
                {"due": h.due, "paths": [_serialize_path(p) for p in h.paths]}
                for h in self._loader.queued()
            ],
        }

    def restore(self, data: dict[str, Any]) -> None:
        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )
        rate = data.get("reveal_rate")
        if rate != self._config.reveal_rate:
            raise SnapshotError(
                f"Reveal rate mismatch: snapshot has {rate}, controller has {self._config.reveal_rate}"
            )
        width = data.get("world_width")
        if width != self._config.world_width:
            raise SnapshotError(
                f"World width mismatch: snapshot has {width}, controller has {self._config.world_width}"
            )

        self.reset()
        for path_data in data["paths"]:
            self._registry.admit(_deserialize_path(path_data))
        for entry in data["pending"]:
            paths = [_deserialize_path(p) for p in entry["paths"]]
            self._loader.schedule(paths, 0.0, entry["due"])


def _serialize_path(path: Path) -> dict[str, Any]:
    return {
        "coordinates": [list(c) for c in path.coordinates],
        "start_time": path.start_time,
        "finished": path.finished,
        "group": path.group,
    }


def _deserialize_path(data: dict[str, Any]) -> Path:
    return Path(
        coordinates=tuple(tuple(c) for c in data["coordinates"]),
        start_time=data["start_time"],
        finished=data["finished"],
        group=data["group"],
    )
