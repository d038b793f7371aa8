"""Visualization layer: themes, text rendering, figures, and CLI."""

from life_game.viz.cli import main
from life_game.viz.render import draw_environment, from_array, render_filmstrip, to_array
from life_game.viz.text import format_status, render
from life_game.viz.theme import (
    BLOCKS_THEME,
    DEFAULT_THEME,
    REGISTERED_THEMES,
    Theme,
    get_theme,
)

__all__ = [
    "BLOCKS_THEME",
    "DEFAULT_THEME",
    "REGISTERED_THEMES",
    "Theme",
    "draw_environment",
    "format_status",
    "from_array",
    "get_theme",
    "main",
    "render",
    "render_filmstrip",
    "to_array",
]
