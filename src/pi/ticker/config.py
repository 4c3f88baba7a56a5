"""Configuration for the ticker component."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal

from pi.ticker.alphabet import NUMBER_LIST
from pi.ticker.easing import Easing, ease_in_out

Gravity = Literal["left", "center", "right"]

_GRAVITIES = ("left", "center", "right")


@dataclass
class TickerOptions:
    """Animation and layout options."""

    alphabet: str | Iterable[str] = NUMBER_LIST
    animation_duration_ms: int = 350
    frame_interval_ms: int = 16
    easing: Easing = field(default=ease_in_out)
    gravity: Gravity = "left"
    padding_x: int = 0

    def __post_init__(self) -> None:
        if self.animation_duration_ms < 0:
            raise ValueError(f"animation_duration_ms must be >= 0, got {self.animation_duration_ms}")
        if self.frame_interval_ms <= 0:
            raise ValueError(f"frame_interval_ms must be > 0, got {self.frame_interval_ms}")
        if self.gravity not in _GRAVITIES:
            raise ValueError(f"gravity must be one of {_GRAVITIES}, got {self.gravity!r}")
        if self.padding_x < 0:
            raise ValueError(f"padding_x must be >= 0, got {self.padding_x}")
