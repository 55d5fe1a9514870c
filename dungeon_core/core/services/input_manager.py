"""
input_manager.py
----------------
Polled input for the player core.

Provides:
- Action bindings for the four movement directions, ability, attack and pause
- Edge detection (pressed, held, released) computed once per frame
- An immutable per-frame ActionSnapshot handed to gameplay code
"""

from dataclasses import dataclass, field
from typing import Optional

import pygame

from dungeon_core.core.debug.debug_logger import DebugLogger


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "move_left": [pygame.K_LEFT, pygame.K_a],
    "move_right": [pygame.K_RIGHT, pygame.K_d],
    "move_up": [pygame.K_UP, pygame.K_w],
    "move_down": [pygame.K_DOWN, pygame.K_s],
    "ability": [pygame.K_x],
    "attack": [pygame.K_SPACE],
    "pause": [pygame.K_ESCAPE, pygame.K_p],
}


@dataclass(frozen=True)
class ActionSnapshot:
    """
    Input state for a single frame.

    held:     actions whose keys are down this frame
    pressed:  actions that went down this frame (rising edge)
    released: actions that went up this frame (falling edge)
    aim:      world-space aim point, if a pointer is available
    """
    held: frozenset = field(default_factory=frozenset)
    pressed: frozenset = field(default_factory=frozenset)
    released: frozenset = field(default_factory=frozenset)
    aim: Optional[tuple] = None

    def is_held(self, action: str) -> bool:
        return action in self.held

    def was_pressed(self, action: str) -> bool:
        return action in self.pressed

    def was_released(self, action: str) -> bool:
        return action in self.released


EMPTY_SNAPSHOT = ActionSnapshot()


class InputManager:
    """
    Converts raw key state into ActionSnapshots with edge detection.

    Usage:
        snapshot = input_manager.update(pygame.key.get_pressed(), aim=mouse_pos)
        if snapshot.was_pressed("ability"):   # Rising edge, once per press
            ...
    """

    def __init__(self, key_bindings=None):
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self._previous = frozenset()
        self._validate_bindings()

    def _validate_bindings(self):
        """Warn about keys bound to more than one action."""
        seen = {}
        for action, keys in self.key_bindings.items():
            for key in keys:
                if key in seen:
                    DebugLogger.warn(
                        f"Key {key} bound to both '{seen[key]}' and '{action}'",
                        category="input"
                    )
                seen[key] = action

    def update(self, key_state, aim=None) -> ActionSnapshot:
        """
        Build this frame's snapshot.

        Args:
            key_state: Indexable key state, e.g. pygame.key.get_pressed()
            aim: Optional (x, y) aim point in world coordinates
        """
        held = frozenset(
            action for action, keys in self.key_bindings.items()
            if any(key_state[key] for key in keys)
        )
        snapshot = ActionSnapshot(
            held=held,
            pressed=held - self._previous,
            released=self._previous - held,
            aim=tuple(aim) if aim is not None else None,
        )
        self._previous = held

        if snapshot.pressed:
            DebugLogger.trace(f"Pressed: {sorted(snapshot.pressed)}", category="input")
        return snapshot

    def poll(self) -> ActionSnapshot:
        """Read the live pygame keyboard and mouse. Requires an initialized display."""
        return self.update(pygame.key.get_pressed(), aim=pygame.mouse.get_pos())

    def reset(self):
        """Forget previous key state so held keys re-fire as presses."""
        self._previous = frozenset()
