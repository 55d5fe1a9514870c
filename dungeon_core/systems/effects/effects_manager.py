"""
effects_manager.py
------------------
Floating feedback text, independent of gameplay logic.

Gameplay code dispatches a FeedbackEvent and moves on; this manager
spawns a FloatingText for it and drops the text once its display time ends.
"""

from dungeon_core.core.debug.debug_logger import DebugLogger
from dungeon_core.core.runtime.game_settings import Layers
from dungeon_core.core.services.event_manager import FeedbackEvent


class FloatingText:
    """Short-lived text. position None means centered on screen."""

    __slots__ = ('text', 'position', 'color', 'duration_ms', 'elapsed_ms', 'layer')

    def __init__(self, text, position, color, duration_ms):
        self.text = text
        self.position = position
        self.color = color
        self.duration_ms = duration_ms
        self.elapsed_ms = 0.0
        self.layer = Layers.FEEDBACK

    @property
    def active(self) -> bool:
        return self.elapsed_ms < self.duration_ms

    def update(self, delta_ms: float):
        self.elapsed_ms += delta_ms


class EffectsManager:
    """Owns active feedback effects for a session."""

    def __init__(self, events=None):
        """
        Args:
            events: EventManager to listen on for FeedbackEvent
        """
        self.active_effects = []
        if events is not None:
            events.subscribe(FeedbackEvent, self._on_feedback)

    def _on_feedback(self, event: FeedbackEvent):
        self.spawn(FloatingText(event.text, event.position, event.color, event.duration_ms))

    def spawn(self, effect):
        self.active_effects.append(effect)
        DebugLogger.trace(f"Spawned effect: {effect.text!r}", category="effects")

    def update(self, delta_ms: float):
        """Age all effects and drop expired ones."""
        if not self.active_effects:
            return

        for effect in self.active_effects:
            effect.update(delta_ms)

        self.active_effects = [e for e in self.active_effects if e.active]

    def texts(self):
        return [effect.text for effect in self.active_effects]

    def clear(self):
        self.active_effects.clear()
