"""Physical body of a boid as seen by the simulation server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .vector import PhysicsStep

__all__ = ["PhysicsBody"]


@dataclass(eq=False)
class PhysicsBody:
    """A boid's identity, grouping, limits, last step and requested neighbour filters."""

    unique_id: int = 0
    team_id: int = 0
    layer_id: int = 0
    sublayer_id: int = 0
    old_step: PhysicsStep = field(default_factory=PhysicsStep)
    requested_filters: list[Any] = field(default_factory=list)
    max_speed: float = 0.0
    view_angle: float = 0.0
    view_radius: int = 0

    @property
    def requested_filter_count(self) -> int:
        """Number of filters currently requested."""
        return len(self.requested_filters)

    def add_requested_filter(self, item: Any) -> None:
        """Append a filter; duplicates are kept."""
        self.requested_filters.append(item)

    def remove_requested_filter(self, item: Any) -> None:
        """Remove the first occurrence of a filter; absent filters are ignored."""
        try:
            self.requested_filters.remove(item)
        except ValueError:
            pass

    def clear_requested_filters(self) -> None:
        """Drop every requested filter."""
        self.requested_filters.clear()

    def has_requested_filter(self, item: Any) -> bool:
        """Whether the filter has been requested."""
        return item in self.requested_filters