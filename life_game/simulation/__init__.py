"""Simulation engine: generation streams and terminating runs."""

from life_game.simulation.engine import generations, run_simulation, seed_environment

__all__ = [
    "generations",
    "run_simulation",
    "seed_environment",
]
