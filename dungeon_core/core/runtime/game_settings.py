"""
game_settings.py
----------------
Centralized constants for the player and combat core.

Gameplay tunables (durations, damage, radii) live in player_config.py
so they can be overridden from config/player.json.
"""


# ===========================================================
# Grid
# ===========================================================

class Grid:
    """Reference room dimensions and tile-to-world scale."""
    COLS: int = 20
    ROWS: int = 12
    TILE_SIZE: int = 48


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order hints for the renderer."""
    FLOOR: int = 0
    PICKUPS: int = 100
    BULLETS: int = 200
    ENEMIES: int = 300
    SHIELD: int = 390
    PLAYER: int = 400
    FEEDBACK: int = 600


# ===========================================================
# Feedback Text
# ===========================================================

class FeedbackColors:
    """Fill colors for floating text and tile glyphs."""
    DAMAGE: str = "#FF0000"
    SCORE: str = "#FFD700"
    HEAL: str = "#00FF00"
    BANNER: str = "#FFFFFF"
    CONSUMED_GLYPH: str = "#666"


FLOOR_GLYPH = "."
FEEDBACK_OFFSET_Y = -20
