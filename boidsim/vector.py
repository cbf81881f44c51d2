"""Two-dimensional vectors and the per-step record of a physics body."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any

__all__ = ["Vector2", "PhysicsStep"]


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __bool__(self) -> bool:
        return self.x != 0.0 or self.y != 0.0

    def __iter__(self):
        yield self.x
        yield self.y

    def length_squared(self) -> float:
        """Squared Euclidean length."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0.0:
            return Vector2()
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: Vector2) -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y


@dataclass
class PhysicsStep:
    """What one simulation step found for a body and the velocity it chose."""

    in_range: list[Any] = field(default_factory=list)
    in_view: list[Any] = field(default_factory=list)
    requested_filters: list[Any] = field(default_factory=list)
    new_velocity: Vector2 = field(default_factory=Vector2)