from dungeon_core.entities.enemies.base_enemy import BaseEnemy

__all__ = ['BaseEnemy']
