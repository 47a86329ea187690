"""PathRegistry - admitted paths, partitioned into active and settled."""

from __future__ import annotations

from typing import Iterator

from flight_reveal.types import Path


class PathRegistry:
    def __init__(self) -> None:
        self._active: list[Path] = []
        self._settled: list[Path] = []
        self._members: set[Path] = set()

    def admit(self, path: Path) -> None:
        """Add a path. Paths that are already finished go straight to settled."""
        if path in self._members:
            raise ValueError("path is already admitted")
        if not path.coordinates:
            path.finished = True
        self._members.add(path)
        if path.finished:
            self._settled.append(path)
        else:
            self._active.append(path)

    def settle(self, path: Path) -> None:
        """Move a finished path out of the per-frame set."""
        if not path.finished:
            raise ValueError("only finished paths can be settled")
        try:
            self._active.remove(path)
        except ValueError:
            return
        self._settled.append(path)

    def active(self) -> list[Path]:
        return list(self._active)

    def settled(self) -> list[Path]:
        return list(self._settled)

    def contains(self, path: Path) -> bool:
        return path in self._members

    def clear(self) -> None:
        self._active.clear()
        self._settled.clear()
        self._members.clear()

    def __iter__(self) -> Iterator[Path]:
        yield from self._settled
        yield from self._active

    def __len__(self) -> int:
        return len(self._active) + len(self._settled)
