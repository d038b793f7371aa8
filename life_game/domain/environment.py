"""Bounded, non-toroidal Game of Life grid with sparse alive-cell storage.

Sparse-storage invariant: ``cells`` holds alive coordinates only, and every
stored coordinate lies inside ``[0, width) x [0, height)``. Absence means
dead. Values are immutable; ``tick`` and ``put_status`` return new
environments and never touch the receiver.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import TypeAlias, overload

from life_game.config.constants import (
    BIRTH_COUNT,
    NEIGHBOR_OFFSETS,
    OVERPOPULATION_LIMIT,
    UNDERPOPULATION_LIMIT,
)

Cell: TypeAlias = tuple[int, int]
"""Grid coordinate ``(x, y)``: x is the column, y the row."""


class Status(IntEnum):
    """Binary cell state, externally 1 (alive) or 0 (dead)."""

    DEAD = 0
    ALIVE = 1


CellStatus: TypeAlias = tuple[Cell, Status]


@dataclass(frozen=True)
class Environment:
    """Grid bounds plus the set of currently alive cells."""

    width: int
    height: int
    cells: frozenset[Cell] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be an int, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be >= 0, got {value}")
        # Off-grid coordinates are dropped so every stored cell stays in bounds.
        cells = frozenset(
            cell
            for cell in map(_check_cell, self.cells)
            if _in_bounds(self.width, self.height, cell)
        )
        object.__setattr__(self, "cells", cells)

    # Sequence protocol, delegated to the traversal module.

    def __bool__(self) -> bool:
        return True

    def __len__(self) -> int:
        from life_game.domain.traversal import count

        return count(self)

    def __contains__(self, cell: object) -> bool:
        from life_game.domain.traversal import member

        return member(self, cell)

    def __iter__(self) -> Iterator[CellStatus]:
        from life_game.domain.traversal import iter_cells

        return iter_cells(self)

    @overload
    def __getitem__(self, key: int) -> CellStatus: ...

    @overload
    def __getitem__(self, key: slice) -> list[CellStatus]: ...

    def __getitem__(self, key: int | slice) -> CellStatus | list[CellStatus]:
        from life_game.domain.traversal import cell_at

        size = len(self)
        if isinstance(key, slice):
            return [cell_at(self, i) for i in range(*key.indices(size))]
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(f"indices must be int or slice, not {type(key).__name__}")
        return cell_at(self, key + size if key < 0 else key)

    def __str__(self) -> str:
        from life_game.viz.text import render

        return render(self)


def _check_cell(cell: object) -> Cell:
    """Return *cell* unchanged if it is a pair of ints, else raise TypeError."""
    if (
        not isinstance(cell, tuple)
        or len(cell) != 2
        or any(isinstance(c, bool) or not isinstance(c, int) for c in cell)
    ):
        raise TypeError(f"cell must be a tuple of two ints, got {cell!r}")
    return cell


def _check_status(status: object) -> Status:
    if isinstance(status, bool):
        raise TypeError(f"status must be 0 or 1, got {status!r}")
    try:
        value = operator.index(status)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(f"status must be 0 or 1, got {status!r}") from None
    return Status(value)


def _in_bounds(width: int, height: int, cell: Cell) -> bool:
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def new(height: int, width: int, alive: Iterable[Cell] = ()) -> Environment:
    """Create an environment with every coordinate in *alive* marked alive.

    Seeds outside the grid are dropped rather than rejected.
    """
    return Environment(width=width, height=height, cells=frozenset(alive))


def get_status(env: Environment, cell: Cell) -> Status:
    """Status of *cell*; coordinates off the grid read as dead."""
    _check_cell(cell)
    return Status.ALIVE if cell in env.cells else Status.DEAD


def put_status(env: Environment, cell: Cell, status: int) -> Environment:
    """Return a copy of *env* with *cell* set to *status*.

    Writes outside the grid are a no-op and return *env* itself.
    """
    _check_cell(cell)
    resolved = _check_status(status)
    if not _in_bounds(env.width, env.height, cell):
        return env
    if resolved is Status.ALIVE:
        cells = env.cells | {cell}
    else:
        cells = env.cells - {cell}
    return replace(env, cells=cells)


def neighbor_count(env: Environment, cell: Cell) -> int:
    """Number of alive Moore neighbors of *cell*, without wraparound."""
    x, y = _check_cell(cell)
    return sum(get_status(env, (x + dx, y + dy)) for dx, dy in NEIGHBOR_OFFSETS)


def population(env: Environment) -> int:
    """Number of alive cells."""
    return len(env.cells)


def tick(seed: Environment) -> Environment:
    """Advance *seed* by one generation.

    Every coordinate is visited through a full traversal of *seed*. Neighbor
    counts are always taken from *seed* while births and deaths go into a
    separate working set, so visiting order cannot change the result.
    """
    from life_game.domain.traversal import Signal, reduce

    def apply_rule(item: CellStatus, environment: set[Cell]) -> tuple[Signal, set[Cell]]:
        cell, status = item
        neighbors = neighbor_count(seed, cell)
        if status is Status.ALIVE:
            if neighbors < UNDERPOPULATION_LIMIT or neighbors > OVERPOPULATION_LIMIT:
                environment.discard(cell)
        elif neighbors == BIRTH_COUNT:
            environment.add(cell)
        return Signal.CONT, environment

    result = reduce(seed, set(seed.cells), apply_rule)
    return replace(seed, cells=frozenset(result.acc))
