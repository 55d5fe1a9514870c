"""
test_player_core.py
-------------------
Tests for the Player entity: config validation, clamping and the shield anchor.
"""

import pytest

from dungeon_core.entities.entity_state import MovementPhase
from dungeon_core.entities.entity_types import CollisionTags, EntityCategory
from dungeon_core.entities.player.player_core import REQUIRED_SECTIONS, Player


@pytest.fixture
def player(player_config):
    return Player(config=player_config)


def test_defaults(player):
    assert player.cell == (10, 6)
    assert player.phase == MovementPhase.IDLE
    assert player.category == EntityCategory.PLAYER
    assert player.collision_tag == CollisionTags.PLAYER
    assert player.rect.center == (480, 288)


@pytest.mark.parametrize("section", REQUIRED_SECTIONS)
def test_missing_config_section_rejected(player_config, section):
    del player_config[section]
    with pytest.raises(ValueError):
        Player(config=player_config)


def test_starting_health_clamped_to_max(player_config):
    player_config["core_attributes"]["health"] = 250
    assert Player(config=player_config).health == 100


class TestHealth:

    def test_damage_clamps_at_zero(self, player):
        assert player.take_damage(130) == 100
        assert player.health == 0

    def test_heal_clamps_at_max(self, player):
        player.health = 90
        assert player.heal(25) == 10
        assert player.health == 100


class TestCharge:

    @pytest.mark.parametrize("amount, expected", [(250, 250), (5000, 1000), (-10, 0)])
    def test_add_charge_clamped(self, player, amount, expected):
        player.add_charge(amount)
        assert player.charge == expected

    def test_charge_ready_at_threshold(self, player):
        player.add_charge(999)
        assert not player.charge_ready
        player.add_charge(1)
        assert player.charge_ready


class TestShieldAnchor:

    def test_ensure_is_idempotent(self, player):
        shield = player.ensure_shield()
        assert player.ensure_shield() is shield
        assert shield.owner is player

    def test_remove_destroys_visual(self, player):
        shield = player.ensure_shield()
        player.remove_shield()

        assert player.shield is None
        assert shield.active is False
        assert shield.owner is None

    def test_remove_without_visual(self, player):
        player.remove_shield()
        assert player.shield is None


def test_place_snaps_to_cell(player):
    player.move_to(13.7, 99.1)
    player.place((3, 4))
    assert tuple(player.pos) == (144, 192)
    assert player.cell == (3, 4)
