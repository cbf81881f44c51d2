"""Per-frame records of a boid: its state, its tuning profile and what it found nearby."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

from .vector import Vector2

__all__ = ["BoidSnapshot", "BoidProfile", "NearbyBoids", "SimulationStep"]


@dataclass
class BoidSnapshot:
    """State of one boid frozen at the start of a simulation step.

    ``view_angle`` is the full field of view in radians.
    """

    unique_id: int = 0
    layer_id: int = 0
    team_id: int = 0
    position: Vector2 = field(default_factory=Vector2)
    velocity: Vector2 = field(default_factory=Vector2)
    view_angle: float = math.pi
    view_range: float = 20.0
    combat_range: float = 5.0
    separation_range: float = 3.0
    max_speed: float = 10.0


@dataclass(eq=False)
class BoidProfile:
    """Tunable limits and ranges of one kind of boid; ``view_angle`` is in radians."""

    max_speed: float = 10.0
    view_range: float = 20.0
    view_angle: float = math.pi
    separation_range: float = 3.0
    combat_range: float = 5.0


@dataclass
class NearbyBoids:
    """Neighbours of a boid sorted into the bands they were found in."""

    in_range: list[Any] = field(default_factory=list)
    in_view: list[Any] = field(default_factory=list)
    in_combat: list[Any] = field(default_factory=list)


@dataclass
class SimulationStep:
    """Velocity chosen for a boid in one step and the neighbours behind it."""

    velocity: Vector2 = field(default_factory=Vector2)
    nearby: NearbyBoids = field(default_factory=NearbyBoids)