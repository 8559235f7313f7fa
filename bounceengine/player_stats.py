"""Health, stamina, mana and level of a player."""

from __future__ import annotations

from dataclasses import dataclass, field

from .components import Component
from .event import Event


@dataclass(eq=False)
class PlayerStats(Component):
    """Player statistics; effective values are the current ones times their multiplier."""

    base_health: float = 0.0
    current_health: float = 0.0
    health_mult: float = 1.0
    base_stamina: float = 0.0
    current_stamina: float = 0.0
    stamina_mult: float = 1.0
    base_mana: float = 0.0
    current_mana: float = 0.0
    mana_mult: float = 1.0
    level: int = 0
    on_level_up: Event = field(default_factory=Event)
    on_level_down: Event = field(default_factory=Event)

    def level_up(self, n_levels: int = 1) -> None:
        self.level += n_levels
        if self.on_level_up.has_methods():
            self.on_level_up.fire()

    def level_down(self, n_levels: int = 1) -> None:
        self.level -= n_levels
        if self.on_level_down.has_methods():
            self.on_level_down.fire()

    def health(self) -> float:
        return self.current_health * self.health_mult

    def reduce_health(self, amount: float) -> None:
        self.current_health -= amount / self.health_mult

    def stamina(self) -> float:
        return self.current_stamina * self.stamina_mult

    def reduce_stamina(self, amount: float) -> None:
        self.current_stamina -= amount / self.stamina_mult

    def mana(self) -> float:
        return self.current_mana * self.mana_mult

    def reduce_mana(self, amount: float) -> None:
        self.current_mana -= amount / self.mana_mult