"""Classifies a boid's neighbours by range, view and combat distance."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from .snapshot import BoidSnapshot, NearbyBoids, SimulationStep

__all__ = ["BaseSet", "BoidSimulator"]


class BaseSet(IntEnum):
    """Built-in behaviour sets a simulator can run."""

    WANDERING = 0
    COMBAT = 1


@dataclass(eq=False)
class BoidSimulator:
    """Runs one simulation step per boid and remembers the last result."""

    last_step: Optional[SimulationStep] = None

    def simulate_boid(
        self, boid: BoidSnapshot, nearby: Iterable[BoidSnapshot]
    ) -> SimulationStep:
        """Sort ``nearby`` into range, view and combat bands around ``boid``.

        A neighbour is in range when strictly closer than the view range, in
        view when it also lies inside the field of view around the heading,
        and in combat when strictly closer than the combat range. The step's
        velocity is the boid's own, limited to its maximum speed.
        """
        forward = boid.velocity.normalized()
        fov_cos_threshold = math.cos(boid.view_angle * 0.5)
        view_dist_sq = boid.view_range * boid.view_range
        combat_dist_sq = boid.combat_range * boid.combat_range

        found = NearbyBoids()
        for other in nearby:
            offset = other.position - boid.position
            offset_sq = offset.length_squared()
            if offset_sq >= view_dist_sq:
                continue
            found.in_range.append(other)
            if forward.dot(offset.normalized()) >= fov_cos_threshold:
                found.in_view.append(other)
            if offset_sq < combat_dist_sq:
                found.in_combat.append(other)

        velocity = boid.velocity
        if velocity.length_squared() > boid.max_speed * boid.max_speed:
            velocity = velocity.normalized() * boid.max_speed

        step = SimulationStep(velocity=velocity, nearby=found)
        self.last_step = step
        return step