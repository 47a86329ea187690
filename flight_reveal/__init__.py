"""flight-reveal - Progressive great-circle flight path animation."""

from flight_reveal.clock import Reveal, RevealClock, path_duration
from flight_reveal.config import AnimationConfig
from flight_reveal.controller import AnimationController
from flight_reveal.events import MapEvents
from flight_reveal.loader import AdmissionHandle, StaggeredLoader
from flight_reveal.popup import Popup, bind_popup
from flight_reveal.registry import PathRegistry
from flight_reveal.renderer import FrameRenderer
from flight_reveal.types import (
    DatasetError,
    FrameState,
    LineDraw,
    MarkerDraw,
    Path,
    SnapshotError,
)

__all__ = [
    "AnimationController",
    "AnimationConfig",
    "PathRegistry",
    "StaggeredLoader",
    "AdmissionHandle",
    "RevealClock",
    "Reveal",
    "path_duration",
    "FrameRenderer",
    "FrameState",
    "LineDraw",
    "MarkerDraw",
    "Path",
    "MapEvents",
    "Popup",
    "bind_popup",
    "DatasetError",
    "SnapshotError",
]
