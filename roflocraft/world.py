"""The world: a player and the terrain grids around it."""

from __future__ import annotations

from dataclasses import dataclass, field

from roflocraft.grid import Grid
from roflocraft.player import Player


@dataclass
class World:
    """Holds the terrain grids and the player moving through them."""

    grids: list[Grid] = field(default_factory=list)
    player: Player = field(default_factory=lambda: Player((0.0, 5.0, 0.0)))

    def update(self, dt: float) -> None:
        """Advance the simulation by dt seconds."""
        self.player.update(dt, self.grids)