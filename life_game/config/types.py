"""Configuration dataclasses and result containers for simulation runs."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from life_game.config.constants import (
    DEFAULT_DENSITY,
    DEFAULT_PATTERN,
    GRID_HEIGHT,
    GRID_WIDTH,
    MAX_PERIOD,
    NUM_GENERATIONS,
)

if TYPE_CHECKING:
    from life_game.domain.environment import Environment

__all__ = [
    "RunConfig",
    "SimulationResult",
    "TerminationReason",
]


# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


class TerminationReason(Enum):
    """Why a run stopped before its generation budget."""

    EXTINCT = "extinct"
    STILL_LIFE = "still_life"
    OSCILLATOR = "oscillator"


@dataclass(frozen=True)
class SimulationResult:
    """Frames and termination details for one run."""

    frames: tuple[Environment, ...]
    terminated_at: int | None
    termination_reason: TerminationReason | None
    period: int | None = None

    @property
    def final(self) -> Environment:
        """Last frame of the run."""
        return self.frames[-1]

    @property
    def survived(self) -> bool:
        """True when the run used its whole generation budget."""
        return self.termination_reason is None


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RunConfig:
    """Grid, seeding and stopping knobs for one simulation run."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    generations: int = NUM_GENERATIONS
    pattern: str = DEFAULT_PATTERN
    offset: tuple[int, int] = (0, 0)
    density: float = DEFAULT_DENSITY
    sim_seed: int = 0
    max_period: int = MAX_PERIOD
    halt_on_cycle: bool = True

    def __post_init__(self) -> None:
        if self.width < 1:
            raise ValueError("width must be >= 1")
        if self.height < 1:
            raise ValueError("height must be >= 1")
        if self.generations < 0:
            raise ValueError("generations must be >= 0")
        if not self.pattern:
            raise ValueError("pattern must not be empty")
        if not 0.0 <= self.density <= 1.0:
            raise ValueError("density must be in [0.0, 1.0]")
        if self.max_period < 1:
            raise ValueError("max_period must be >= 1")
