"""Animation settings."""

from __future__ import annotations

from dataclasses import dataclass

from flight_reveal.projection import WORLD_WIDTH


@dataclass(frozen=True, slots=True)
class AnimationConfig:
    reveal_rate: float = 0.02  # points per millisecond
    inter_group_delay_ms: float = 50.0
    arc_points: int = 100
    marker_scale: float = 0.05
    world_width: float = WORLD_WIDTH

    def __post_init__(self) -> None:
        if self.reveal_rate <= 0:
            raise ValueError("reveal_rate must be positive")
        if self.inter_group_delay_ms < 0:
            raise ValueError("inter_group_delay_ms must not be negative")
        if self.arc_points < 2:
            raise ValueError("arc_points must be at least 2")
        if self.marker_scale <= 0:
            raise ValueError("marker_scale must be positive")
        if self.world_width <= 0:
            raise ValueError("world_width must be positive")
