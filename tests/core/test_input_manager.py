"""
test_input_manager.py
---------------------
Tests for key bindings and per-frame edge detection.
"""

from collections import defaultdict

import pygame
import pytest

from dungeon_core.core.services.input_manager import InputManager


def keys(*down):
    state = defaultdict(bool)
    for key in down:
        state[key] = True
    return state


@pytest.fixture
def input_manager():
    return InputManager()


def test_press_is_reported_once(input_manager):
    first = input_manager.update(keys(pygame.K_x))
    second = input_manager.update(keys(pygame.K_x))

    assert first.was_pressed("ability")
    assert second.is_held("ability")
    assert not second.was_pressed("ability")


def test_release_edge(input_manager):
    input_manager.update(keys(pygame.K_SPACE))
    snapshot = input_manager.update(keys())

    assert snapshot.was_released("attack")
    assert not snapshot.is_held("attack")


def test_alternate_bindings(input_manager):
    snapshot = input_manager.update(keys(pygame.K_a, pygame.K_UP))
    assert snapshot.held == {"move_left", "move_up"}


def test_aim_point_passed_through(input_manager):
    snapshot = input_manager.update(keys(), aim=[120, 48])
    assert snapshot.aim == (120, 48)


def test_reset_makes_held_keys_press_again(input_manager):
    input_manager.update(keys(pygame.K_ESCAPE))
    input_manager.reset()
    assert input_manager.update(keys(pygame.K_ESCAPE)).was_pressed("pause")


def test_custom_bindings():
    manager = InputManager({"ability": [pygame.K_q]})
    assert manager.update(keys(pygame.K_q)).was_pressed("ability")
    assert manager.update(keys(pygame.K_x)).held == frozenset()
