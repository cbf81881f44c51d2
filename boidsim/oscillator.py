"""A point that traces a Lissajous curve as time passes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vector import Vector2

__all__ = ["Oscillator"]


@dataclass
class Oscillator:
    """Moves around the point (10, 10) on a curve of amplitude 10."""

    time_passed: float = 0.0
    position: Vector2 = field(default_factory=Vector2)

    def process(self, delta: float) -> Vector2:
        """Advance time by ``delta`` seconds and return the new position."""
        self.time_passed += delta
        t = self.time_passed
        self.position = Vector2(
            10.0 + 10.0 * math.sin(t * 2.0),
            10.0 + 10.0 * math.cos(t * 1.5),
        )
        return self.position