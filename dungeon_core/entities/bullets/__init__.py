from dungeon_core.entities.bullets.base_bullet import EnemyProjectile, PlayerBullet

__all__ = ['EnemyProjectile', 'PlayerBullet']
