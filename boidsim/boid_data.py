"""Tunable steering parameters of a boid and the world borders shared by all boids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

__all__ = ["WorldBorders", "BoidDataSnapshot", "BoidData"]


@dataclass
class WorldBorders:
    """Edges of the playable world, shared by every boid."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0


@dataclass(frozen=True)
class BoidDataSnapshot:
    """Read-only copy of a boid's parameters together with the world borders."""

    world_margin: float
    world_pull_force: float
    cohesion_force: float
    separation_force: float
    alignment_force: float
    chase_force: float
    self_separation_range: float
    combat_range: float
    view_range: float
    view_angle: float
    max_speed: float
    left_border: float
    right_border: float
    top_border: float
    bottom_border: float


@dataclass(eq=False)
class BoidData:
    """Steering forces, ranges and limits of one kind of boid.

    ``view_angle`` is in degrees. The world borders live on the class in
    :attr:`borders` and are therefore the same for every instance.
    """

    borders: ClassVar[WorldBorders] = WorldBorders()

    world_margin: float = 10.0
    world_pull_force: float = 10.0
    cohesion_force: float = 10.0
    separation_force: float = 10.0
    alignment_force: float = 10.0
    chase_force: float = 10.0
    self_separation_range: float = 20.0
    combat_range: float = 5.0
    view_range: float = 20.0
    view_angle: float = 120.0
    max_speed: float = 30.0

    def snapshot(self) -> BoidDataSnapshot:
        """Freeze the current parameters and the shared borders into one record."""
        borders = type(self).borders
        return BoidDataSnapshot(
            world_margin=self.world_margin,
            world_pull_force=self.world_pull_force,
            cohesion_force=self.cohesion_force,
            separation_force=self.separation_force,
            alignment_force=self.alignment_force,
            chase_force=self.chase_force,
            self_separation_range=self.self_separation_range,
            combat_range=self.combat_range,
            view_range=self.view_range,
            view_angle=self.view_angle,
            max_speed=self.max_speed,
            left_border=borders.left,
            right_border=borders.right,
            top_border=borders.top,
            bottom_border=borders.bottom,
        )