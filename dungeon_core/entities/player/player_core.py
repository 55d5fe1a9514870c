"""
player_core.py
--------------
The Player entity: grid cell, health, shield charges and ability charge.
Per-frame behavior lives in the sibling modules and is sequenced by
GameplayController.
"""

import pygame

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.runtime.game_settings import Grid, Layers
from dungeon_core.entities.base_entity import BaseEntity
from dungeon_core.entities.entity_state import MovementPhase
from dungeon_core.entities.entity_types import CollisionTags, EntityCategory
from dungeon_core.entities.items.shield import ShieldOrbit
from .player_config import load_player_config


REQUIRED_SECTIONS = ("core_attributes", "movement", "powerups", "combat",
                     "shield", "ability", "feedback")


class Player(BaseEntity):
    """Represents the controllable player entity."""

    def __init__(self, cell=None, config=None, tile_size=Grid.TILE_SIZE):
        """
        Args:
            cell: Spawn (col, row); defaults to the center of the reference grid
            config: Full player config dict; loaded from player.json when None
            tile_size: World units per grid cell
        """
        self.cfg = config if config is not None else load_player_config()

        missing = [s for s in REQUIRED_SECTIONS if s not in self.cfg]
        if missing:
            DebugLogger.fail(f"Player config missing sections: {missing}", category="loading")
            raise ValueError(f"Invalid player config: missing {missing}")

        core = self.cfg["core_attributes"]
        if cell is None:
            cell = (Grid.COLS // 2, Grid.ROWS // 2)

        self.tile_size = tile_size
        self.spawn_cell = (int(cell[0]), int(cell[1]))
        x, y = self._cell_to_world(self.spawn_cell)
        super().__init__(x, y, size=core["hitbox_size"], category=EntityCategory.PLAYER)

        self.layer = Layers.PLAYER
        self.collision_tag = CollisionTags.PLAYER
        self.max_health = core["max_health"]
        self.ability_threshold = self.cfg["ability"]["threshold"]

        self._reset_stats()

        DebugLogger.init(f"Player at cell {self.cell}, health {self.health}", category="session")

    def _reset_stats(self):
        self.cell = self.spawn_cell
        self.health = max(0, min(self.cfg["core_attributes"]["health"], self.max_health))
        self.shield_charges = 0
        self.shield_angle = 0.0
        self.shield = None
        self.charge = 0
        self.velocity = pygame.Vector2(0, 0)
        self.transition = None
        self.last_move_time = None
        self.snap_to_cell()

    # ===========================================================
    # Grid Position
    # ===========================================================
    def _cell_to_world(self, cell):
        return cell[0] * self.tile_size, cell[1] * self.tile_size

    @property
    def phase(self) -> MovementPhase:
        return MovementPhase.IDLE if self.transition is None else MovementPhase.TRANSITIONING

    def snap_to_cell(self):
        """Set world position exactly to the current cell's canonical coordinates."""
        self.move_to(*self._cell_to_world(self.cell))

    def place(self, cell):
        """Teleport to a cell, cancelling any in-flight move."""
        self.cell = (int(cell[0]), int(cell[1]))
        self.transition = None
        self.velocity.xy = (0, 0)
        self.snap_to_cell()

    # ===========================================================
    # Health & Charge
    # ===========================================================
    def take_damage(self, amount: int) -> int:
        """Lose health, clamped at zero. Returns the health lost."""
        before = self.health
        self.health = max(0, self.health - amount)
        return before - self.health

    def heal(self, amount: int) -> int:
        """Gain health, clamped at max_health. Returns the health gained."""
        before = self.health
        self.health = min(self.max_health, self.health + amount)
        return self.health - before

    def add_charge(self, amount: int):
        """Accumulate ability charge, capped at the trigger threshold."""
        self.charge = max(0, min(self.ability_threshold, self.charge + int(amount)))

    @property
    def charge_ready(self) -> bool:
        return self.charge >= self.ability_threshold

    # ===========================================================
    # Shield Visual
    # ===========================================================
    def ensure_shield(self):
        """Create the orbiting shield visual if it does not exist."""
        if self.shield is None:
            self.shield = ShieldOrbit(self, radius=self.cfg["shield"]["orbit_radius"])
            self.shield.follow(self.shield_angle)
            DebugLogger.state("Shield spawned", category="combat")
        return self.shield

    def remove_shield(self):
        if self.shield is None:
            return
        self.shield.destroy()
        self.shield = None
        DebugLogger.state("Shield despawned", category="combat")

    # ===========================================================
    # Session
    # ===========================================================
    def reset(self, cell=None):
        """Restore starting stats for a new session."""
        if cell is not None:
            self.spawn_cell = (int(cell[0]), int(cell[1]))
        self.remove_shield()
        self._reset_stats()
