"""Row-chunked text rendering of an Environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

from life_game.domain.environment import Status
from life_game.domain.traversal import Signal, reduce
from life_game.viz.theme import DEFAULT_THEME, Theme

if TYPE_CHECKING:
    from life_game.domain.environment import CellStatus, Environment


def format_status(status: Status, theme: Theme = DEFAULT_THEME) -> str:
    return theme.alive_glyph if status is Status.ALIVE else theme.dead_glyph


def render(env: Environment, theme: Theme = DEFAULT_THEME) -> str:
    """One line of ``width`` glyphs per row, rows joined by the theme separator."""

    def collect(item: CellStatus, glyphs: list[str]) -> tuple[Signal, list[str]]:
        _cell, status = item
        glyphs.append(format_status(status, theme))
        return Signal.CONT, glyphs

    glyphs = reduce(env, [], collect).acc
    rows = ["".join(glyphs[i : i + env.width]) for i in range(0, len(glyphs), env.width or 1)]
    return theme.row_separator.join(rows)
