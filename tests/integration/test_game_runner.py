"""Tests for the simulation framework.

Tests cover:
- GameRunner playing complete games through the real engine
- Hard opponent: never loses a game it can force
- BatchRunner statistics and the pebbles-sim entry point

The runner uses the ACTUAL opponents from pebbles.opponents.deterministic.
"""

import json
import sys

import pytest

from pebbles.models.state import DifficultyLevel, GameState, PebblesInit
from pebbles.opponents.deterministic import is_losing_position
from pebbles.testing.batch_runner import BatchResults, BatchRunner, PairingStats, main
from pebbles.testing.game_runner import (
    USER_STRATEGIES,
    GameResult,
    GameRunner,
    optimal_user,
    run_game,
)

# =============================================================================
# GameRunner Tests
# =============================================================================


class TestGameRunner:
    """Tests for GameRunner class using actual opponents."""

    @pytest.mark.parametrize("strategy", sorted(USER_STRATEGIES))
    @pytest.mark.parametrize("difficulty", list(DifficultyLevel))
    def test_run_game_completes(self, strategy, difficulty):
        config = PebblesInit(difficulty=difficulty, pebbles_count=23, max_pebbles_per_turn=4)
        result = run_game(config, strategy, random_seed=3)

        assert isinstance(result, GameResult)
        assert result.winner in ("user", "program")
        assert result.user_strategy == strategy
        assert sum(removed for _, removed in result.moves) == 23
        assert all(1 <= removed <= 4 for _, removed in result.moves)
        # Last mover takes the last pebble
        assert result.moves[-1][0] == result.winner

    def test_players_alternate(self):
        config = PebblesInit(difficulty=DifficultyLevel.EASY, pebbles_count=30, max_pebbles_per_turn=3)
        result = run_game(config, "Random", random_seed=11)

        players = [player for player, _ in result.moves]
        assert players[0] == result.first_player
        assert all(a != b for a, b in zip(players, players[1:]))

    def test_same_seed_same_game(self):
        config = PebblesInit(difficulty=DifficultyLevel.EASY, pebbles_count=30, max_pebbles_per_turn=5)
        first = run_game(config, "Random", random_seed=42)
        second = run_game(config, "Random", random_seed=42)
        assert first.to_dict() == second.to_dict()

    def test_unknown_strategy(self):
        config = PebblesInit(pebbles_count=10, max_pebbles_per_turn=3)
        with pytest.raises(ValueError, match="Unknown user strategy"):
            GameRunner(config, "Telepathic")

    def test_to_dict(self):
        config = PebblesInit(difficulty=DifficultyLevel.HARD, pebbles_count=8, max_pebbles_per_turn=3)
        data = run_game(config, "Greedy", random_seed=0).to_dict()
        assert data["difficulty"] == "hard"
        assert data["moves_played"] == len(data["moves"])
        json.dumps(data)


# =============================================================================
# Hard Opponent Tests
# =============================================================================


class TestHardOpponent:
    """The hard opponent wins every game that can be forced."""

    @pytest.mark.parametrize("seed", range(20))
    def test_optimal_play_decided_by_start(self, seed):
        """From a multiple of k + 1 the side moving first always loses."""
        config = PebblesInit(difficulty=DifficultyLevel.HARD, pebbles_count=20, max_pebbles_per_turn=3)
        result = run_game(config, "Optimal", random_seed=seed)

        if result.first_player == "user":
            assert result.winner == "program"
        else:
            assert result.winner == "user"

    @pytest.mark.parametrize("strategy", sorted(USER_STRATEGIES))
    def test_never_loses_from_winning_start(self, strategy):
        config = PebblesInit(difficulty=DifficultyLevel.HARD, pebbles_count=21, max_pebbles_per_turn=4)
        for seed in range(15):
            result = run_game(config, strategy, random_seed=seed)
            if result.first_player == "program":
                assert result.winner == "program"

    def test_punishes_any_user_mistake(self):
        """After a user move that misses a multiple of k + 1, the program wins."""
        config = PebblesInit(difficulty=DifficultyLevel.HARD, pebbles_count=22, max_pebbles_per_turn=3)
        for seed in range(15):
            result = run_game(config, "Cautious", random_seed=seed)
            pile = config.pebbles_count
            user_blundered = False
            for player, removed in result.moves:
                pile -= removed
                if player == "user" and pile > 0 and not is_losing_position(pile, 3):
                    user_blundered = True
            if user_blundered:
                assert result.winner == "program"

    def test_optimal_user_matches_hard_policy(self):
        state = GameState(pebbles_count=15, max_pebbles_per_turn=3, pebbles_remaining=10)
        assert optimal_user(state, None) == 2


# =============================================================================
# BatchRunner Tests
# =============================================================================


class TestPairingStats:
    def test_add_result(self):
        stats = PairingStats(user_strategy="Greedy", difficulty="hard")
        stats.add_result(
            GameResult("program", "program", "hard", 5, 2, "Greedy", [("program", 2), ("user", 2), ("program", 1)])
        )
        stats.add_result(GameResult("user", "user", "hard", 5, 2, "Greedy", [("user", 2), ("program", 2), ("user", 1)]))

        assert stats.total_games == 2
        assert stats.program_wins == 1
        assert stats.user_wins == 1
        assert stats.program_first == 1
        assert stats.user_win_rate == 0.5
        assert stats.avg_game_length == 3.0

    def test_empty_rates(self):
        stats = PairingStats(user_strategy="Random", difficulty="easy")
        assert stats.user_win_rate == 0.0
        assert stats.avg_game_length == 0.0


class TestBatchRunner:
    """Tests for BatchRunner."""

    def test_run_pairing(self):
        runner = BatchRunner(pebbles_count=21, max_pebbles_per_turn=4)
        stats = runner.run_pairing("Random", DifficultyLevel.EASY, num_games=25, seed=5)

        assert stats.total_games == 25
        assert stats.user_wins + stats.program_wins == 25
        assert stats.avg_game_length > 0

    def test_hard_vs_optimal_from_losing_start(self):
        """With optimal play the winner is the side not moving first."""
        runner = BatchRunner(pebbles_count=20, max_pebbles_per_turn=3)
        stats = runner.run_pairing("Optimal", DifficultyLevel.HARD, num_games=30, seed=0)
        assert stats.program_wins == stats.total_games - stats.program_first

    def test_run_all_pairings(self):
        runner = BatchRunner(pebbles_count=12, max_pebbles_per_turn=3)
        results = runner.run_all_pairings(num_games=5, seed=1)

        assert isinstance(results, BatchResults)
        assert len(results.pairings) == len(USER_STRATEGIES) * len(DifficultyLevel)
        assert "Optimal_vs_hard" in results.pairings
        assert results.aggregate["total_games"] == 5 * len(results.pairings)
        assert results.aggregate["user_start_is_losing"] is True

        data = json.loads(results.to_json())
        assert data["pebbles_count"] == 12
        assert data["pairings"]["Random_vs_easy"]["total_games"] == 5

    @pytest.mark.slow
    def test_parallel_matches_serial(self):
        runner = BatchRunner(pebbles_count=17, max_pebbles_per_turn=3)
        serial = runner.run_pairing("Random", DifficultyLevel.EASY, num_games=10, seed=9)
        parallel = runner.run_pairing(
            "Random", DifficultyLevel.EASY, num_games=10, seed=9, max_workers=2
        )
        assert serial.to_dict() == parallel.to_dict()


class TestSimulationCli:
    def test_main_writes_results(self, tmp_path, monkeypatch, capsys):
        output = tmp_path / "results.json"
        monkeypatch.setattr(
            sys,
            "argv",
            ["pebbles-sim", "--games", "3", "--pebbles", "9", "--max-per-turn", "2",
             "--seed", "4", "--output", str(output)],
        )

        main()

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["aggregate"]["total_games"] == 24
        assert "Greedy_vs_hard" in capsys.readouterr().out

    @pytest.mark.parametrize(
        "argv,message",
        [
            (["--pebbles", "1"], "At least two pebbles"),
            (["--pebbles", "5", "--max-per-turn", "0"], "At least one pebble per turn"),
            (["--pebbles", "4", "--max-per-turn", "4"], "must be less than"),
        ],
    )
    def test_main_rejects_unplayable_pile(self, monkeypatch, capsys, argv, message):
        monkeypatch.setattr(sys, "argv", ["pebbles-sim", *argv])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 2
        assert message in capsys.readouterr().err
