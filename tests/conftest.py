"""
conftest.py
-----------
Shared pytest configuration and fixtures for dungeon_core tests.

Contains:
- Headless pygame setup (real Vector2 / Rect math, no window)
- Grid, room and session factories centered on the reference 20x12 grid
- A frame driver that feeds GameplayController with advancing time
- Input snapshot helpers
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import types

import pytest

from dungeon_core.core.runtime.game_state import SessionState
from dungeon_core.core.services.config_manager import merge_config
from dungeon_core.core.services.input_manager import ActionSnapshot
from dungeon_core.entities.enemies.base_enemy import BaseEnemy
from dungeon_core.entities.player.player_config import DEFAULT_CONFIG
from dungeon_core.scenes.game.gameplay_controller import GameplayController
from dungeon_core.systems.level.tile_map import GlyphOverlay, Room, TileGrid, TileKind


SPAWN = (10, 6)


# ===========================================================
# Config & Input
# ===========================================================

@pytest.fixture
def player_config():
    """Fresh copy of the default player config (safe to mutate)."""
    return merge_config(DEFAULT_CONFIG, {})


def held(*actions, aim=None):
    """Snapshot with actions held but not newly pressed."""
    return ActionSnapshot(held=frozenset(actions), aim=aim)


def pressed(*actions, aim=None):
    """Snapshot with actions on their rising edge."""
    return ActionSnapshot(held=frozenset(actions), pressed=frozenset(actions), aim=aim)


@pytest.fixture
def actions():
    """Access to the snapshot helpers from tests: actions.held(...), actions.pressed(...)."""
    return types.SimpleNamespace(held=held, pressed=pressed, none=ActionSnapshot())


# ===========================================================
# Grid & Room
# ===========================================================

@pytest.fixture
def make_grid():
    """
    Factory for a 20x12 floor grid with overrides.

    Usage:
        grid = make_grid({(11, 6): TileKind.SPIKE})
    """
    def _make(overrides=None, cols=20, rows=12):
        grid = TileGrid.filled(cols, rows, overlay=GlyphOverlay())
        for (col, row), kind in (overrides or {}).items():
            grid.set_kind(col, row, kind)
        return grid
    return _make


@pytest.fixture
def make_session(make_grid, player_config):
    """
    Factory for a SessionState with the player at SPAWN in a fresh room.

    Usage:
        session = make_session({(11, 6): TileKind.WATER}, health=15)
    """
    def _make(overrides=None, spawn=SPAWN, health=None, **room_kwargs):
        config = merge_config(player_config, {})
        if health is not None:
            config["core_attributes"]["health"] = health
        room = Room(make_grid(overrides), **room_kwargs)
        session = SessionState(config=config)
        session.enter_room(room, spawn_cell=spawn)
        return session
    return _make


@pytest.fixture
def session(make_session):
    return make_session()


@pytest.fixture
def make_enemy():
    """Enemy centered on a world position (defaults to overlapping SPAWN)."""
    def _make(x=SPAWN[0] * 48, y=SPAWN[1] * 48):
        return BaseEnemy(x, y)
    return _make


@pytest.fixture
def recorder():
    """Subscribe to an event type and collect every dispatched instance."""
    def _record(session, event_type):
        seen = []
        session.events.subscribe(event_type, seen.append)
        return seen
    return _record


# ===========================================================
# Frame Driver
# ===========================================================

class FrameDriver:
    """Calls GameplayController.update with steadily advancing time."""

    def __init__(self, controller, dt=10.0):
        self.controller = controller
        self.dt = dt
        self.now = 0.0

    def step(self, snapshot=None, dt=None):
        dt = self.dt if dt is None else dt
        self.now += dt
        self.controller.update(self.now, dt, snapshot)

    def run(self, frames, snapshot=None):
        for _ in range(frames):
            self.step(snapshot)

    def run_for(self, ms, snapshot=None):
        self.run(int(ms // self.dt), snapshot)


@pytest.fixture
def driver(session):
    return FrameDriver(GameplayController(session))


@pytest.fixture
def make_driver():
    def _make(session, dt=10.0):
        return FrameDriver(GameplayController(session), dt=dt)
    return _make


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "scenario: end-to-end gameplay scenarios")


def pytest_collection_modifyitems(config, items):
    """Mark everything that is not an integration or scenario test as a unit test."""
    for item in items:
        if "integration" not in item.nodeid and "scenario" not in item.keywords:
            item.add_marker(pytest.mark.unit)
