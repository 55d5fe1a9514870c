"""
timer_registry.py
-----------------
Named millisecond countdowns for power-up effects and the movement cooldown.

Responsibilities
----------------
- Overwrite (never accumulate) a timer when an effect is re-applied
- Decrement every timer once per frame, clamped at zero
- Report zero as inactive
"""

from enum import Enum
from typing import Dict

from dungeon_core.core.debug.debug_logger import DebugLogger


class TimerName(str, Enum):
    """All countdowns tracked for a session."""
    TRIPLE_SHOT = "triple_shot"
    SPEED_BOOST = "speed_boost"
    SLOW_SHOT = "slow_shot"
    MOVE_COOLDOWN = "move_cooldown"


class TimerRegistry:
    """Fixed set of non-negative countdowns, in milliseconds."""

    __slots__ = ('_remaining',)

    def __init__(self):
        self._remaining: Dict[TimerName, float] = {name: 0.0 for name in TimerName}

    def set(self, name: TimerName, duration_ms: float):
        """Absolute overwrite of a timer's remaining time."""
        self._remaining[TimerName(name)] = max(0.0, float(duration_ms))
        DebugLogger.trace(f"Timer {TimerName(name).value} = {duration_ms:.0f}ms", category="powerup")

    def remaining(self, name: TimerName) -> float:
        return self._remaining[TimerName(name)]

    def is_active(self, name: TimerName) -> bool:
        return self._remaining[TimerName(name)] > 0

    def update(self, delta_ms: float):
        """Decrement every timer by elapsed frame time, clamped at zero."""
        if delta_ms <= 0:
            return
        for name, remaining in self._remaining.items():
            if remaining > 0:
                self._remaining[name] = max(0.0, remaining - delta_ms)

    def reset(self):
        for name in self._remaining:
            self._remaining[name] = 0.0

    def snapshot(self) -> Dict[str, float]:
        """Plain-dict view for UI readers."""
        return {name.value: remaining for name, remaining in self._remaining.items()}
