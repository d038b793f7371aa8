"""Multi-generation driver with extinction, still-life and cycle detection."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from random import Random

from life_game.config.constants import RANDOM_PATTERN
from life_game.config.types import RunConfig, SimulationResult, TerminationReason
from life_game.domain.environment import Environment, new, population, tick
from life_game.domain.patterns import get_pattern, place_pattern, random_environment

logger = logging.getLogger(__name__)


def generations(env: Environment) -> Iterator[Environment]:
    """Yield *env*, then each following generation, forever."""
    current = env
    while True:
        yield current
        current = tick(current)


def seed_environment(config: RunConfig) -> Environment:
    """Starting environment for *config*: a placed pattern or random seeding."""
    if config.pattern.lower() == RANDOM_PATTERN:
        return random_environment(
            config.height, config.width, config.density, Random(config.sim_seed)
        )
    cells = place_pattern(get_pattern(config.pattern), config.offset)
    return new(config.height, config.width, cells)


def _find_period(frames: list[Environment], candidate: Environment, max_period: int) -> int | None:
    """Distance back to the latest earlier frame equal to *candidate*, if within max_period."""
    for period in range(1, min(max_period, len(frames)) + 1):
        if frames[-period] == candidate:
            return period
    return None


def run_simulation(config: RunConfig, seed: Environment | None = None) -> SimulationResult:
    """Tick from *seed* (or the configured pattern) for up to ``config.generations``."""
    current = seed if seed is not None else seed_environment(config)
    frames = [current]

    for generation in range(1, config.generations + 1):
        nxt = tick(current)
        logger.debug("generation=%d population=%d", generation, population(nxt))

        reason: TerminationReason | None = None
        period = _find_period(frames, nxt, config.max_period if config.halt_on_cycle else 1)
        frames.append(nxt)
        if population(nxt) == 0:
            reason = TerminationReason.EXTINCT
        elif period == 1:
            reason = TerminationReason.STILL_LIFE
        elif period is not None:
            reason = TerminationReason.OSCILLATOR

        if reason is not None:
            logger.info(
                "Run terminated at generation %d: %s%s",
                generation,
                reason.value,
                f" (period {period})" if reason is TerminationReason.OSCILLATOR else "",
            )
            return SimulationResult(
                frames=tuple(frames),
                terminated_at=generation,
                termination_reason=reason,
                period=period if reason is not TerminationReason.EXTINCT else None,
            )
        current = nxt

    logger.info(
        "Run completed %d generations, population=%d", config.generations, population(current)
    )
    return SimulationResult(frames=tuple(frames), terminated_at=None, termination_reason=None)
