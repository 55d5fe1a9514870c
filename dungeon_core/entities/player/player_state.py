"""
player_state.py
---------------
Player-exclusive movement state.

A grid move is an explicit state advanced by the core each frame:
the player stays committed to from_cell until elapsed reaches duration,
then arrives at to_cell.
"""

from dataclasses import dataclass

import pygame


@dataclass
class Transition:
    """In-flight move between two adjacent cells."""
    from_cell: tuple
    to_cell: tuple
    start: pygame.Vector2
    end: pygame.Vector2
    duration_ms: float
    elapsed_ms: float = 0.0

    @property
    def progress(self) -> float:
        """Linear progress in [0, 1]."""
        if self.duration_ms <= 0:
            return 1.0
        return min(1.0, self.elapsed_ms / self.duration_ms)

    @property
    def finished(self) -> bool:
        return self.progress >= 1.0

    def advance(self, delta_ms: float) -> pygame.Vector2:
        """Step the interpolation and return the interpolated world position."""
        self.elapsed_ms += max(0.0, delta_ms)
        return self.start.lerp(self.end, self.progress)
