"""Centralized domain constants for Game of Life runs.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, 0),
    (1, 0),
    (0, -1),
    (0, 1),
    (1, 1),
    (1, -1),
    (-1, 1),
    (-1, -1),
)
"""Moore-neighborhood offsets, (dx, dy)."""

UNDERPOPULATION_LIMIT = 2
"""Alive cells with fewer live neighbors than this die."""

OVERPOPULATION_LIMIT = 3
"""Alive cells with more live neighbors than this die."""

BIRTH_COUNT = 3
"""Dead cells with exactly this many live neighbors are born."""

GRID_WIDTH = 20
"""Default grid width in cells."""

GRID_HEIGHT = 20
"""Default grid height in cells."""

NUM_GENERATIONS = 50
"""Default number of generations per run."""

MAX_PERIOD = 2
"""Default longest oscillator period checked by the cycle detector."""

DEFAULT_DENSITY = 0.3
"""Default alive fraction for random seeding."""

DEFAULT_PATTERN = "glider"
"""Default seed pattern name."""

RANDOM_PATTERN = "random"
"""Pattern name that selects random seeding instead of a built-in pattern."""
