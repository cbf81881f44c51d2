"""Behaviour states that turn a boid's neighbourhood into its next velocity."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

from .boid_data import BoidDataSnapshot
from .vector import Vector2

__all__ = [
    "StateKind",
    "Neighbour",
    "BoidStep",
    "world_pull",
    "BehaviourState",
    "SeekingState",
    "CombatState",
]


class StateKind(Enum):
    """Behaviour a boid is in."""

    SEEKING = 0
    COMBAT = 1


@dataclass(frozen=True)
class Neighbour:
    """What a boid knows about another boid near it."""

    position: Vector2
    velocity: Vector2 = field(default_factory=Vector2)
    separation_range: float = 3.0


@dataclass
class BoidStep:
    """Result of one behaviour step: the new velocity and what was found nearby."""

    velocity: Vector2
    in_range: list[Any] = field(default_factory=list)
    in_combat_range: list[Any] = field(default_factory=list)
    in_view_range: list[Any] = field(default_factory=list)
    next_state: StateKind = StateKind.SEEKING


def world_pull(data: BoidDataSnapshot, position: Vector2) -> Vector2:
    """Force pushing a boid back inside the world when it is within the margin of an edge."""
    margin = data.world_margin
    pull = data.world_pull_force
    margin_inv = 1.0 / margin if margin > 0.0 else 0.0
    right_threshold = data.right_border - margin
    bottom_threshold = data.bottom_border - margin

    fx = 0.0
    if position.x < margin:
        fx += pull * ((margin - position.x) * margin_inv)
    elif position.x > right_threshold:
        fx -= pull * ((position.x - right_threshold) * margin_inv)

    fy = 0.0
    if position.y < margin:
        fy += pull * ((margin - position.y) * margin_inv)
    elif position.y > bottom_threshold:
        fy -= pull * ((position.y - bottom_threshold) * margin_inv)

    return Vector2(fx, fy)


class _Scan(NamedTuple):
    in_range: list[Any]
    in_view: list[Any]
    in_combat: list[Any]
    avoid: Vector2


def _scan(
    data: BoidDataSnapshot,
    position: Vector2,
    velocity: Vector2,
    nearby_boids: Iterable[Any],
) -> _Scan:
    forward = velocity.normalized()
    fov_cos_threshold = math.cos(math.radians(data.view_angle * 0.5))
    max_dist_sq = data.view_range * data.view_range
    max_combat_sq = data.combat_range * data.combat_range

    in_range: list[Any] = []
    in_view: list[Any] = []
    in_combat: list[Any] = []
    avoid = Vector2()

    for other in nearby_boids:
        offset = other.position - position
        off_sq = offset.length_squared()
        if off_sq >= max_dist_sq:
            continue
        in_range.append(other)

        separation_sq = other.separation_range * other.separation_range
        if 0.0 < off_sq < separation_sq:
            avoid = avoid + offset / off_sq

        if forward.dot(offset.normalized()) >= fov_cos_threshold:
            in_view.append(other)

        if off_sq < max_combat_sq:
            in_combat.append(other)

    return _Scan(in_range, in_view, in_combat, avoid)


def _separation(data: BoidDataSnapshot, scan: _Scan) -> Vector2:
    if not scan.in_range:
        return Vector2()
    avoid_force = scan.avoid / float(len(scan.in_range))
    if avoid_force.length_squared() > 0.0:
        return avoid_force.normalized() * data.separation_force
    return Vector2()


def _limit_speed(data: BoidDataSnapshot, velocity: Vector2) -> Vector2:
    if velocity.length_squared() > data.max_speed * data.max_speed:
        return velocity.normalized() * data.max_speed
    return velocity


def _next_state(scan: _Scan) -> StateKind:
    return StateKind.COMBAT if scan.in_combat else StateKind.SEEKING


class BehaviourState(ABC):
    """A behaviour that computes one step for a boid from its neighbours."""

    @abstractmethod
    def simulate_step(
        self,
        data: BoidDataSnapshot,
        position: Vector2,
        velocity: Vector2,
        nearby_boids: Iterable[Any],
    ) -> BoidStep:
        """Compute the next velocity and classify the neighbours."""

    def world_pull(self, data: BoidDataSnapshot, position: Vector2) -> Vector2:
        """Force keeping the boid inside the world borders."""
        return world_pull(data, position)


@dataclass
class SeekingState(BehaviourState):
    """Flocking behaviour: separation, cohesion, alignment and an optional chase target.

    A ``chase_target`` at the origin means there is nothing to chase.
    """

    chase_target: Vector2 = field(default_factory=Vector2)

    def simulate_step(
        self,
        data: BoidDataSnapshot,
        position: Vector2,
        velocity: Vector2,
        nearby_boids: Iterable[Any],
    ) -> BoidStep:
        scan = _scan(data, position, velocity, nearby_boids)
        new_velocity = velocity + _separation(data, scan)

        if scan.in_view:
            count = float(len(scan.in_view))
            centre = Vector2()
            heading = Vector2()
            for other in scan.in_view:
                centre = centre + other.position
                heading = heading + other.velocity
            cohesion = centre / count - position
            if cohesion.length_squared() > 0.0:
                new_velocity = new_velocity + cohesion.normalized() * data.cohesion_force
            alignment = heading / count
            if alignment.length_squared() > 0.0:
                new_velocity = new_velocity + alignment.normalized() * data.alignment_force

        new_velocity = new_velocity + self.world_pull(data, position)

        if self.chase_target:
            chase_dir = self.chase_target - position
            if chase_dir.length_squared() > 0.0:
                new_velocity = new_velocity + chase_dir.normalized() * data.chase_force

        return BoidStep(
            velocity=_limit_speed(data, new_velocity),
            in_range=scan.in_range,
            in_combat_range=scan.in_combat,
            in_view_range=scan.in_view,
            next_state=_next_state(scan),
        )


class CombatState(BehaviourState):
    """Combat behaviour: only separation and the world pull steer the boid."""

    def simulate_step(
        self,
        data: BoidDataSnapshot,
        position: Vector2,
        velocity: Vector2,
        nearby_boids: Iterable[Any],
    ) -> BoidStep:
        scan = _scan(data, position, velocity, nearby_boids)
        new_velocity = velocity + _separation(data, scan)
        new_velocity = new_velocity + self.world_pull(data, position)
        return BoidStep(
            velocity=_limit_speed(data, new_velocity),
            in_range=scan.in_range,
            in_combat_range=scan.in_combat,
            in_view_range=scan.in_view,
            next_state=_next_state(scan),
        )