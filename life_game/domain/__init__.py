"""Domain layer: grid state, rule engine, traversal protocol, and patterns."""

from life_game.domain.environment import (
    Cell,
    CellStatus,
    Environment,
    Status,
    get_status,
    neighbor_count,
    new,
    population,
    put_status,
    tick,
)
from life_game.domain.patterns import (
    BLINKER,
    BLOCK,
    GLIDER,
    REGISTERED_PATTERNS,
    TOAD,
    get_pattern,
    parse_pattern,
    place_pattern,
    random_environment,
)
from life_game.domain.traversal import (
    Done,
    Halted,
    Signal,
    Suspended,
    cell_at,
    count,
    iter_cells,
    member,
    reduce,
    slice_cells,
    take,
)

__all__ = [
    "BLINKER",
    "BLOCK",
    "Cell",
    "CellStatus",
    "Done",
    "Environment",
    "GLIDER",
    "Halted",
    "REGISTERED_PATTERNS",
    "Signal",
    "Status",
    "Suspended",
    "TOAD",
    "cell_at",
    "count",
    "get_pattern",
    "get_status",
    "iter_cells",
    "member",
    "neighbor_count",
    "new",
    "parse_pattern",
    "place_pattern",
    "population",
    "put_status",
    "random_environment",
    "reduce",
    "slice_cells",
    "take",
    "tick",
]
