"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from adventure.core.types import Outcome

MAX_HEALTH = 5
STARTING_HEALTH = 5
# Replay deliberately starts one heart down.
REPLAY_HEALTH = 4


@dataclass(slots=True)
class PlayerState:
    """Health counter and inventory carried across scenarios."""

    health: int = STARTING_HEALTH
    inventory: Dict[str, None] = field(default_factory=dict)

    def has_item(self, item_id: str) -> bool:
        return item_id in self.inventory

    def add_item(self, item_id: str) -> bool:
        """Add an item, returning False when it was already held."""
        if item_id in self.inventory:
            return False
        self.inventory[item_id] = None
        return True

    def lose_health(self, amount: int) -> int:
        self.health = max(0, self.health - amount)
        return self.health

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0

    def items(self) -> list[str]:
        return list(self.inventory)

    def reset(self, health: int) -> None:
        self.health = health
        self.inventory.clear()


@dataclass
class GameState:
    """Minimal game state storage."""

    current_scenario_id: str
    player: PlayerState = field(default_factory=PlayerState)
    finished: Outcome | None = None
