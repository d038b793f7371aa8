"""Conway's Game of Life on a bounded grid with a row-major traversal protocol."""

from life_game.config.types import RunConfig, SimulationResult, TerminationReason
from life_game.domain.environment import (
    Cell,
    Environment,
    Status,
    get_status,
    neighbor_count,
    new,
    population,
    put_status,
    tick,
)
from life_game.domain.traversal import (
    Done,
    Halted,
    Signal,
    Suspended,
    count,
    member,
    reduce,
    slice_cells,
)
from life_game.simulation.engine import run_simulation
from life_game.viz.text import render

__all__ = [
    "Cell",
    "Done",
    "Environment",
    "Halted",
    "RunConfig",
    "Signal",
    "SimulationResult",
    "Status",
    "Suspended",
    "TerminationReason",
    "count",
    "get_status",
    "member",
    "neighbor_count",
    "new",
    "population",
    "put_status",
    "reduce",
    "render",
    "run_simulation",
    "slice_cells",
    "tick",
]
