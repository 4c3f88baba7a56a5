"""Easing curves mapping linear time in [0, 1] to animation progress."""

from __future__ import annotations

import math
from typing import Callable

Easing = Callable[[float], float]


def linear(t: float) -> float:
    return t


def ease_in_out(t: float) -> float:
    """Accelerate then decelerate (half a cosine period)."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return (1.0 - math.cos(math.pi * t)) / 2.0


def ease_out(t: float) -> float:
    """Start fast and decelerate into the target."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return 1.0 - (1.0 - t) * (1.0 - t)
