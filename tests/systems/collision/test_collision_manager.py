"""
test_collision_manager.py
-------------------------
Tests for world-space overlap queries.
"""

import pytest

from dungeon_core.entities.base_entity import BaseEntity
from dungeon_core.systems.collision.collision_manager import overlapping, overlaps


@pytest.mark.parametrize("offset, expected", [
    (0, True),
    (31, True),
    (32, False),   # edges touch only
    (100, False),
])
def test_overlap_by_distance(offset, expected):
    a = BaseEntity(100, 100, size=(32, 32))
    b = BaseEntity(100 + offset, 100, size=(32, 32))
    assert overlaps(a, b) is expected


def test_overlap_uses_current_position():
    a = BaseEntity(0, 0)
    b = BaseEntity(500, 500)
    b.pos.xy = (0, 0)
    assert overlaps(a, b)


def test_overlapping_preserves_order_and_skips_inactive():
    player = BaseEntity(0, 0)
    first, dead, far, last = (BaseEntity(0, 0), BaseEntity(0, 0),
                              BaseEntity(999, 999), BaseEntity(5, 5))
    dead.destroy()
    candidates = [first, dead, far, None, last]

    assert list(overlapping(player, candidates)) == [first, last]


def test_candidates_removed_during_iteration():
    player = BaseEntity(0, 0)
    candidates = [BaseEntity(0, 0), BaseEntity(1, 1)]
    seen = []
    for other in overlapping(player, candidates):
        candidates.remove(other)
        seen.append(other)
    assert len(seen) == 2
    assert candidates == []
