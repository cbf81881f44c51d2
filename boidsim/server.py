"""Registry that hands out boid ids and recycles the ids of removed boids."""

from __future__ import annotations

from typing import Optional

from .body import PhysicsBody

__all__ = ["BoidServer"]


class BoidServer:
    """Keeps registered bodies in slots indexed by their unique id.

    Ids freed by unregistering are reused, most recently freed first.
    """

    def __init__(self, thread_count: int = 1) -> None:
        self.thread_count = thread_count
        self._slots: list[Optional[PhysicsBody]] = []
        self._expired_ids: list[int] = []

    @property
    def registered_boids(self) -> list[PhysicsBody]:
        """Registered bodies ordered by unique id."""
        return [boid for boid in self._slots if boid is not None]

    @property
    def registered_boid_count(self) -> int:
        return sum(1 for boid in self._slots if boid is not None)

    @property
    def expired_ids(self) -> list[int]:
        """Ids waiting to be reused, in the order they were freed."""
        return list(self._expired_ids)

    def _take_expired_id(self) -> Optional[int]:
        while self._expired_ids:
            boid_id = self._expired_ids.pop()
            if 0 <= boid_id < len(self._slots) and self._slots[boid_id] is None:
                return boid_id
        return None

    def register_boid(self, boid: PhysicsBody) -> bool:
        """Give the body an id and store it; False if it is already registered."""
        if self.has_boid(boid):
            return False
        boid_id = self._take_expired_id()
        if boid_id is None:
            boid_id = len(self._slots)
            self._slots.append(boid)
        else:
            self._slots[boid_id] = boid
        boid.unique_id = boid_id
        return True

    def unregister_boid(self, boid: PhysicsBody) -> bool:
        """Remove the body and free its id; False if it is not registered."""
        if not self.has_boid(boid):
            return False
        self._slots[boid.unique_id] = None
        self._expired_ids.append(boid.unique_id)
        return True

    def has_boid(self, boid: PhysicsBody) -> bool:
        """Whether this very body occupies the slot of its id."""
        boid_id = boid.unique_id
        return 0 <= boid_id < len(self._slots) and self._slots[boid_id] is boid

    def clear_expired_ids(self) -> None:
        """Forget the freed ids so they are not reused."""
        self._expired_ids.clear()

    def clear_all_boids(self) -> None:
        """Drop every registered body."""
        self._slots.clear()