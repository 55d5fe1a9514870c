"""
session_stats.py
----------------
Tracks statistics for the current game session.
Owned by SessionState; there is no module-level instance.
"""


class SessionStats:
    """Container for run-specific statistics. Reset when starting a new game."""

    def __init__(self):
        self.score = 0
        self.high_score = 0
        self.treasures_collected = 0
        self.powerups_collected = 0
        self.hazard_hits = 0
        self.enemies_destroyed = 0
        self.moves = 0

    def add_score(self, amount: int):
        """Add to current score and update high score."""
        self.score += amount
        if self.score > self.high_score:
            self.high_score = self.score

    def reset(self):
        """Reset all stats for a new run. Preserves high score."""
        self.score = 0
        self.treasures_collected = 0
        self.powerups_collected = 0
        self.hazard_hits = 0
        self.enemies_destroyed = 0
        self.moves = 0
