"""Named seed patterns and seeding helpers."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from random import Random

from life_game.domain.environment import Cell, Environment, new


def parse_pattern(lines: Sequence[str], alive_char: str = "#") -> frozenset[Cell]:
    """Alive cells of a text pattern; row index is y, column index is x."""
    return frozenset(
        (x, y) for y, row in enumerate(lines) for x, char in enumerate(row) if char == alive_char
    )


def place_pattern(cells: Iterable[Cell], offset: tuple[int, int]) -> frozenset[Cell]:
    """Translate *cells* by ``offset = (dx, dy)``."""
    dx, dy = offset
    return frozenset((x + dx, y + dy) for x, y in cells)


GLIDER = parse_pattern(
    [
        ".....",
        "..#..",
        "#.#..",
        ".##..",
    ]
)
"""Glider heading toward +x/+y; equal to {(0,2),(1,3),(2,1),(2,2),(2,3)}."""

BLINKER = parse_pattern(
    [
        "...",
        "###",
        "...",
    ]
)
"""Period-2 oscillator."""

BLOCK = parse_pattern(
    [
        "##",
        "##",
    ]
)
"""Still life."""

TOAD = parse_pattern(
    [
        "....",
        ".###",
        "###.",
        "....",
    ]
)
"""Period-2 oscillator."""

REGISTERED_PATTERNS: dict[str, frozenset[Cell]] = {
    "glider": GLIDER,
    "blinker": BLINKER,
    "block": BLOCK,
    "toad": TOAD,
}


def get_pattern(name: str) -> frozenset[Cell]:
    """Look up a pattern by name (case-insensitive)."""
    key = name.lower()
    if key not in REGISTERED_PATTERNS:
        valid = ", ".join(sorted(REGISTERED_PATTERNS))
        raise ValueError(f"Unknown pattern {name!r}; available: {valid}")
    return REGISTERED_PATTERNS[key]


def random_environment(height: int, width: int, density: float, rng: Random) -> Environment:
    """Environment with ``round(density * width * height)`` distinct alive cells."""
    if not 0.0 <= density <= 1.0:
        raise ValueError("density must be in [0.0, 1.0]")
    all_positions = [(x, y) for y in range(height) for x in range(width)]
    n_alive = int(round(density * len(all_positions)))
    return new(height, width, rng.sample(all_positions, n_alive))
