"""StaggeredLoader - delayed, atomic admission of path groups."""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass, field
from typing import Callable

from flight_reveal.clock import path_duration
from flight_reveal.registry import PathRegistry
from flight_reveal.types import Path, PathGroup

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class AdmissionHandle:
    """One-shot admission timer. Fires once at ``due`` unless cancelled."""

    due: float
    paths: tuple[Path, ...]
    cancelled: bool = False
    fired: bool = False
    _on_cancel: Callable[[AdmissionHandle], None] | None = field(
        default=None, repr=False
    )

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> bool:
        """Cancel a pending admission. Returns False if it already fired."""
        if not self.pending:
            return False
        self.cancelled = True
        if self._on_cancel is not None:
            self._on_cancel(self)
        return True


class StaggeredLoader:
    def __init__(self, registry: PathRegistry, reveal_rate: float) -> None:
        if reveal_rate <= 0:
            raise ValueError("reveal_rate must be positive")
        self._registry = registry
        self._reveal_rate = reveal_rate
        self._queue: list[tuple[float, int, AdmissionHandle]] = []
        self._seq = itertools.count()
        self._pending = 0
        self._queued_paths: set[Path] = set()

    @property
    def pending(self) -> int:
        return self._pending

    def schedule(self, group: PathGroup, delay: float, now: float) -> AdmissionHandle:
        """Queue ``group`` for admission ``delay`` ms after ``now``.

        Raises ValueError if a path appears twice in the group, is already
        admitted, or is queued in another pending group. Nothing is queued
        in that case.
        """
        if delay < 0:
            raise ValueError("delay must not be negative")
        paths = tuple(group)
        if len(set(paths)) != len(paths):
            raise ValueError("group contains the same path more than once")
        for path in paths:
            if self._registry.contains(path):
                raise ValueError("path is already admitted")
            if path in self._queued_paths:
                raise ValueError("path is already queued in another group")
        handle = AdmissionHandle(
            due=now + delay, paths=paths, _on_cancel=self._cancelled
        )
        heapq.heappush(self._queue, (handle.due, next(self._seq), handle))
        self._pending += 1
        self._queued_paths.update(paths)
        return handle

    def _cancelled(self, handle: AdmissionHandle) -> None:
        self._pending -= 1
        self._queued_paths.difference_update(handle.paths)
        logger.debug("cancelled admission of %d path(s) due at %.1f", len(handle.paths), handle.due)

    def fire_due(self, now: float) -> list[AdmissionHandle]:
        """Admit every group whose due time has been reached, in due order."""
        fired: list[AdmissionHandle] = []
        while self._queue and self._queue[0][0] <= now:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            self._admit(handle)
            fired.append(handle)
        return fired

    def queued(self) -> list[AdmissionHandle]:
        """Pending handles in firing order."""
        return [h for _, _, h in sorted(self._queue, key=lambda e: e[:2]) if h.pending]

    def cancel_all(self) -> int:
        count = 0
        for _, _, handle in self._queue:
            if handle.cancel():
                count += 1
        self._queue.clear()
        return count

    def _admit(self, handle: AdmissionHandle) -> None:
        handle.fired = True
        self._pending -= 1
        self._queued_paths.difference_update(handle.paths)
        if any(self._registry.contains(path) for path in handle.paths):
            # Admitted behind the loader's back since scheduling; drop the whole group.
            logger.warning(
                "skipped admission of %d path(s) due at %.1f: already admitted",
                len(handle.paths),
                handle.due,
            )
            return
        start = handle.due
        for path in handle.paths:
            path.start_time = start
            self._registry.admit(path)
            start += path_duration(len(path), self._reveal_rate)
        if handle.paths:
            logger.debug("admitted %d path(s) at %.1f", len(handle.paths), handle.due)
