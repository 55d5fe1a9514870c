"""
collision_manager.py
--------------------
World-space overlap queries between the player and room entities.

The core resolves every overlap itself (shield absorb, contact damage,
key pickup), so this module only detects; it never dispatches responses.
"""

from typing import Iterable, Iterator

from dungeon_core.core.debug.debug_logger import DebugLogger


def overlaps(entity_a, entity_b) -> bool:
    """True when both overlap boxes intersect. Touching edges do not count."""
    entity_a.sync_rect()
    entity_b.sync_rect()
    return entity_a.rect.colliderect(entity_b.rect)


def overlapping(entity, candidates: Iterable) -> Iterator:
    """
    Yield active candidates overlapping entity, in enumeration order.
    Iterates a snapshot so callers may remove candidates while consuming.
    """
    for other in list(candidates):
        if other is None or not getattr(other, "active", False):
            continue
        if overlaps(entity, other):
            DebugLogger.trace(
                f"{type(entity).__name__} <-> {type(other).__name__}",
                category="combat"
            )
            yield other
