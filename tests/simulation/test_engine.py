"""Tests for the multi-generation simulation driver."""

from __future__ import annotations

import itertools
import logging

import pytest

from life_game.config.types import RunConfig, TerminationReason
from life_game.domain.environment import new, population
from life_game.domain.patterns import GLIDER
from life_game.simulation.engine import generations, run_simulation, seed_environment

FRAMES = [
    [(0, 2), (1, 3), (2, 1), (2, 2), (2, 3)],
    [(1, 1), (1, 3), (2, 2), (2, 3), (3, 2)],
    [(1, 3), (2, 1), (2, 3), (3, 2), (3, 3)],
    [(1, 2), (2, 3), (2, 4), (3, 2), (3, 3)],
    [(1, 3), (2, 4), (3, 2), (3, 3), (3, 4)],
]


class TestGenerations:
    def test_yields_seed_first(self) -> None:
        env = new(5, 5, GLIDER)
        assert next(generations(env)) is env

    def test_glider_frames(self) -> None:
        frames = list(itertools.islice(generations(new(5, 5, GLIDER)), 5))
        assert frames == [new(5, 5, cells) for cells in FRAMES]


class TestSeedEnvironment:
    def test_pattern_with_offset(self) -> None:
        config = RunConfig(width=6, height=6, pattern="block", offset=(2, 3))
        assert seed_environment(config) == new(6, 6, [(2, 3), (3, 3), (2, 4), (3, 4)])

    def test_random_pattern_uses_density_and_seed(self) -> None:
        config = RunConfig(width=10, height=10, pattern="random", density=0.25, sim_seed=3)
        env = seed_environment(config)
        assert population(env) == 25
        assert env == seed_environment(config)

    def test_unknown_pattern(self) -> None:
        with pytest.raises(ValueError, match="Unknown pattern"):
            seed_environment(RunConfig(pattern="nope"))


class TestRunSimulation:
    def test_glider_runs_full_budget(self) -> None:
        result = run_simulation(RunConfig(width=5, height=5, pattern="glider", generations=4))
        assert result.survived
        assert result.terminated_at is None
        assert result.termination_reason is None
        assert list(result.frames) == [new(5, 5, cells) for cells in FRAMES]

    def test_zero_generations(self) -> None:
        result = run_simulation(RunConfig(width=5, height=5, generations=0))
        assert result.frames == (new(5, 5, GLIDER),)
        assert result.survived

    def test_isolated_cell_goes_extinct(self) -> None:
        config = RunConfig(width=5, height=5, generations=10)
        result = run_simulation(config, seed=new(5, 5, [(0, 0)]))
        assert result.termination_reason is TerminationReason.EXTINCT
        assert result.terminated_at == 1
        assert result.period is None
        assert result.final == new(5, 5)

    def test_block_is_still_life(self) -> None:
        config = RunConfig(width=4, height=4, pattern="block", offset=(1, 1), generations=10)
        result = run_simulation(config)
        assert result.termination_reason is TerminationReason.STILL_LIFE
        assert result.terminated_at == 1
        assert result.period == 1
        assert len(result.frames) == 2

    def test_blinker_is_oscillator(self) -> None:
        config = RunConfig(width=5, height=5, pattern="blinker", offset=(1, 1), generations=10)
        result = run_simulation(config)
        assert result.termination_reason is TerminationReason.OSCILLATOR
        assert result.terminated_at == 2
        assert result.period == 2
        assert result.final == result.frames[0]

    def test_cycle_detection_can_be_disabled(self) -> None:
        config = RunConfig(
            width=5,
            height=5,
            pattern="blinker",
            offset=(1, 1),
            generations=6,
            halt_on_cycle=False,
        )
        result = run_simulation(config)
        assert result.survived
        assert len(result.frames) == 7

    def test_period_longer_than_max_period_not_detected(self) -> None:
        config = RunConfig(
            width=5, height=5, pattern="blinker", offset=(1, 1), generations=4, max_period=1
        )
        result = run_simulation(config)
        assert result.survived

    def test_logs_termination(self, caplog: pytest.LogCaptureFixture) -> None:
        config = RunConfig(width=4, height=4, pattern="block", offset=(1, 1))
        with caplog.at_level(logging.INFO, logger="life_game.simulation.engine"):
            run_simulation(config)
        assert "still_life" in caplog.text
