"""Simulation framework for Pebbles.

Plays many games between scripted user strategies and the program using
the real engine, e.g. to confirm the hard opponent's win rate.

Usage:
    from pebbles.testing import BatchRunner

    runner = BatchRunner(pebbles_count=21, max_pebbles_per_turn=4)
    results = runner.run_all_pairings(num_games=100, seed=1)
"""

from .batch_runner import BatchResults, BatchRunner, PairingStats, print_results_summary
from .game_runner import (
    USER_STRATEGIES,
    GameResult,
    GameRunner,
    UserStrategy,
    cautious_user,
    greedy_user,
    optimal_user,
    random_user,
    run_game,
)

__all__ = [
    # Runners
    "GameRunner",
    "BatchRunner",
    "run_game",
    # Results
    "GameResult",
    "PairingStats",
    "BatchResults",
    "print_results_summary",
    # Strategies
    "UserStrategy",
    "USER_STRATEGIES",
    "random_user",
    "greedy_user",
    "cautious_user",
    "optimal_user",
]
