"""Flight records: ``[[fromLat, fromLon], [toLat, toLon]]`` pairs."""

from __future__ import annotations

import json
from pathlib import Path as FilePath
from typing import Any

from flight_reveal.types import Coordinate, DatasetError

FlightRecord = tuple[Coordinate, Coordinate]


def _point(value: Any, index: int) -> Coordinate:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise DatasetError(f"record {index}: endpoint must be a [lat, lon] pair, got {value!r}")
    try:
        return (float(value[0]), float(value[1]))
    except (TypeError, ValueError) as exc:
        raise DatasetError(f"record {index}: non-numeric endpoint {value!r}") from exc


def parse_flights(data: Any) -> list[FlightRecord]:
    """Convert decoded JSON into (from, to) lat/lon tuples.

    Only the shape is checked; coordinates out of range pass through.
    """
    if not isinstance(data, list):
        raise DatasetError(f"expected a list of flights, got {type(data).__name__}")
    records: list[FlightRecord] = []
    for i, entry in enumerate(data):
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise DatasetError(f"record {i}: expected [from, to], got {entry!r}")
        records.append((_point(entry[0], i), _point(entry[1], i)))
    return records


def load_flights(path: str | FilePath) -> list[FlightRecord]:
    with open(path, encoding="utf-8") as fh:
        try:
            data = json.load(fh)
        except json.JSONDecodeError as exc:
            raise DatasetError(f"{path}: {exc}") from exc
    return parse_flights(data)
