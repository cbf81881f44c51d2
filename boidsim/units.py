"""Unit statistics: template data, live data and the effects of one step."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["UnitBaseData", "UnitData", "UnitStep"]


@dataclass(eq=False)
class UnitBaseData:
    """Template statistics shared by every unit of one kind."""

    unit_id: int = 0
    base_health: float = 100.0
    base_strength: float = 10.0
    base_speed: float = 50.0
    base_defense: float = 5.0
    passives: list[Any] = field(default_factory=list)
    trait: Optional[Any] = None

    def add_passive(self, passive: Any) -> None:
        """Append a passive; duplicates are kept."""
        self.passives.append(passive)

    def remove_passive(self, passive: Any) -> None:
        """Remove the first occurrence of a passive; absent passives are ignored."""
        try:
            self.passives.remove(passive)
        except ValueError:
            pass


@dataclass(eq=False)
class UnitData:
    """Current statistics of one unit, with the template it was made from."""

    health: float = 100.0
    strength: float = 10.0
    speed: float = 50.0
    defense: float = 5.0
    attack_radius: int = 100
    view_radius: int = 150
    n_attack_target: int = 1
    base_data: Optional[UnitBaseData] = None


@dataclass
class UnitStep:
    """Damage, healing and inflictions gathered for one unit during a step."""

    unique_id: int = 0
    hurt: float = 0.0
    heal: float = 0.0
    inflictions: list[Any] = field(default_factory=list)

    def join(self, other: UnitStep) -> None:
        """Fold another step into this one.

        Hurt and heal are added; inflictions from ``other`` are appended in
        order unless an equal one is already present.
        """
        self.hurt += other.hurt
        self.heal += other.heal
        for infliction in list(other.inflictions):
            if infliction not in self.inflictions:
                self.inflictions.append(infliction)