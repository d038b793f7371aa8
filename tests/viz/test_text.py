"""Tests for row-chunked text rendering."""

from __future__ import annotations

import pytest

from life_game.domain.environment import Status, new
from life_game.viz.text import format_status, render
from life_game.viz.theme import BLOCKS_THEME, Theme


def test_render_glider_frame() -> None:
    env = new(5, 5, [(0, 2), (1, 3), (2, 1), (2, 2), (2, 3)])
    assert render(env) == "00000\n00100\n10100\n01100\n00000"


def test_render_non_square_rows_have_width_glyphs() -> None:
    env = new(2, 4, [(3, 0), (0, 1)])
    assert render(env) == "0001\n1000"


def test_render_tall_grid() -> None:
    env = new(3, 1, [(0, 1)])
    assert render(env) == "0\n1\n0"


@pytest.mark.parametrize(("height", "width"), [(0, 0), (0, 3), (3, 0)])
def test_render_empty_grid(height: int, width: int) -> None:
    assert render(new(height, width)) == ""


def test_render_with_theme() -> None:
    env = new(2, 2, [(0, 0), (1, 1)])
    assert render(env, BLOCKS_THEME) == "█·\n·█"


def test_render_custom_separator() -> None:
    theme = Theme(alive_glyph="#", dead_glyph=".", row_separator="|")
    assert render(new(2, 2, [(1, 0)]), theme) == ".#|.."


def test_format_status() -> None:
    assert format_status(Status.ALIVE) == "1"
    assert format_status(Status.DEAD) == "0"


def test_str_matches_render() -> None:
    env = new(3, 3, [(1, 1)])
    assert str(env) == render(env)
