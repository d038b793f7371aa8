"""Configuration layer: constants and typed config dataclasses."""

from life_game.config.constants import (
    DEFAULT_DENSITY,
    DEFAULT_PATTERN,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_PERIOD,
    NEIGHBOR_OFFSETS,
    NUM_GENERATIONS,
    RANDOM_PATTERN,
)
from life_game.config.types import RunConfig, SimulationResult, TerminationReason

__all__ = [
    "DEFAULT_DENSITY",
    "DEFAULT_PATTERN",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "MAX_PERIOD",
    "NEIGHBOR_OFFSETS",
    "NUM_GENERATIONS",
    "RANDOM_PATTERN",
    "RunConfig",
    "SimulationResult",
    "TerminationReason",
]
