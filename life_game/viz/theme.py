"""Visualization theme presets for text and matplotlib renderers.

Themes are frozen dataclasses that group all styling constants together.
Renderers accept a ``Theme`` instance, so palettes and glyphs can be swapped
via the ``--theme`` CLI argument or programmatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    """Complete collection of visualization style tokens."""

    # Text rendering
    alive_glyph: str = "1"
    dead_glyph: str = "0"
    row_separator: str = "\n"

    # Cell grid
    alive_color: str = "#FFC107"
    dead_color: str = "#1A1A1A"
    grid_line_color: str = "#333333"
    background_color: str = "#0D0D0D"
    title_color: str = "white"


# ---------------------------------------------------------------------------
# Built-in presets
# ---------------------------------------------------------------------------

DEFAULT_THEME = Theme()

BLOCKS_THEME = Theme(
    alive_glyph="█",
    dead_glyph="·",
    alive_color="#000000",
    dead_color="#FFFFFF",
    grid_line_color="#E0E0E0",
    background_color="#FFFFFF",
    title_color="black",
)

REGISTERED_THEMES: dict[str, Theme] = {
    "default": DEFAULT_THEME,
    "blocks": BLOCKS_THEME,
}


def get_theme(name: str) -> Theme:
    """Look up a theme by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_THEMES:
        valid = ", ".join(sorted(REGISTERED_THEMES))
        raise ValueError(f"Unknown theme {name!r}; available: {valid}")
    return REGISTERED_THEMES[key]
