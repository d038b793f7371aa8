"""Row-major traversal protocol over an Environment.

Index ``i`` maps to cell ``(i % width, i // width)``; rows are always
derived from the width, so non-square grids traverse correctly.

``reduce`` drives a step function that answers each item with a command
``(Signal, acc)``. ``CONT`` threads the accumulator to the next index,
``HALT`` stops and discards the rest, and ``SUSPEND`` stops and hands back a
continuation that resumes from the next index. Continuations capture the
environment and index immutably, so one ``Suspended`` may be resumed any
number of times.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Any, TypeAlias

from life_game.domain.environment import (
    CellStatus,
    Environment,
    _in_bounds,
    get_status,
)


class Signal(Enum):
    """Control signal returned by a reduce step function."""

    CONT = "cont"
    HALT = "halt"
    SUSPEND = "suspend"


Command: TypeAlias = tuple[Signal, Any]
StepFn: TypeAlias = Callable[[CellStatus, Any], Command]


@dataclass(frozen=True)
class Done:
    """Traversal reached the last index."""

    acc: Any


@dataclass(frozen=True)
class Halted:
    """Step function asked to stop early."""

    acc: Any


@dataclass(frozen=True)
class Suspended:
    """Step function paused the traversal; ``continuation`` picks it up again."""

    acc: Any
    continuation: Callable[[Command], ReduceResult]

    def resume(self, acc: Any, signal: Signal = Signal.CONT) -> ReduceResult:
        """Continue from where the traversal stopped, with a fresh accumulator."""
        return self.continuation((signal, acc))


ReduceResult: TypeAlias = Done | Halted | Suspended


def count(env: Environment) -> int:
    """Number of coordinates in the grid."""
    return env.width * env.height


def member(env: Environment, cell: object) -> bool:
    """True if *cell* is a coordinate of the grid; never raises."""
    if not isinstance(cell, tuple) or len(cell) != 2:
        return False
    if any(isinstance(c, bool) or not isinstance(c, int) for c in cell):
        return False
    return _in_bounds(env.width, env.height, cell)


def cell_at(env: Environment, index: int) -> CellStatus:
    """Coordinate and status at row-major *index*."""
    if not 0 <= index < count(env):
        raise IndexError(f"index {index} out of range for {count(env)} cells")
    cell = (index % env.width, index // env.width)
    return cell, get_status(env, cell)


def _reduce_from(env: Environment, index: int, command: Command, fun: StepFn) -> ReduceResult:
    total = count(env)
    while True:
        if not isinstance(command, tuple) or len(command) != 2:
            raise TypeError(f"step function must return (Signal, acc), got {command!r}")
        signal, acc = command
        if signal is Signal.HALT:
            return Halted(acc)
        if signal is Signal.SUSPEND:
            return Suspended(acc, partial(_reduce_from, env, index, fun=fun))
        if signal is not Signal.CONT:
            raise TypeError(f"unknown traversal signal {signal!r}")
        if index >= total:
            return Done(acc)
        command = fun(cell_at(env, index), acc)
        index += 1


def reduce(env: Environment, acc: Any, fun: StepFn, signal: Signal = Signal.CONT) -> ReduceResult:
    """Fold *fun* over every ``(cell, status)`` of *env* in row-major order."""
    return _reduce_from(env, 0, (signal, acc), fun)


def slice_cells(env: Environment, start: int, length: int) -> list[CellStatus]:
    """``length`` contiguous items from row-major index ``start``.

    Computed by index arithmetic; nothing before ``start`` is visited.
    """
    if start < 0 or length < 0:
        raise IndexError("start and length must be >= 0")
    if start + length > count(env):
        raise IndexError(f"slice [{start}, {start + length}) exceeds {count(env)} cells")
    return [cell_at(env, index) for index in range(start, start + length)]


def iter_cells(env: Environment) -> Iterator[CellStatus]:
    """Lazily yield every ``(cell, status)`` in row-major order."""
    for index in range(count(env)):
        yield cell_at(env, index)


def take(env: Environment, n: int) -> list[CellStatus]:
    """First *n* items of the traversal; stops early via ``HALT``."""
    if n <= 0:
        return []

    def step(item: CellStatus, taken: list[CellStatus]) -> Command:
        taken.append(item)
        return (Signal.HALT if len(taken) >= n else Signal.CONT), taken

    return reduce(env, [], step).acc
