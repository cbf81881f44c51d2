"""A unit on the map that moves by the velocity its boid steps choose."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .vector import Vector2

__all__ = ["BirdUnit"]


@dataclass(eq=False)
class BirdUnit:
    """Position, velocity and identity of a flying unit driven by boid steps."""

    unique_id: int = 0
    unit_id: int = 0
    team_id: int = 0
    grid_position: tuple[int, int] = (0, 0)
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    target_position: Vector2 = field(default_factory=Vector2)
    boid_data: Optional[Any] = None
    boid_logic: Optional[Any] = None
    boid_seeking_active: bool = False

    def apply_boid_step(self, step: Any, delta: float) -> Vector2:
        """Adopt the step's velocity, move by it for ``delta`` seconds and return the new position."""
        self.velocity = step.velocity
        self.position = self.position + self.velocity * delta
        return self.position