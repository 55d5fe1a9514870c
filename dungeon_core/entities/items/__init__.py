from dungeon_core.entities.items.item_types import PowerUpKind
from dungeon_core.entities.items.base_item import GridPickup, PowerUpPickup, KeyPickup
from dungeon_core.entities.items.shield import ShieldOrbit

__all__ = ['PowerUpKind', 'GridPickup', 'PowerUpPickup', 'KeyPickup', 'ShieldOrbit']
