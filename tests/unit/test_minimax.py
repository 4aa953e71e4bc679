"""
Unit tests for the minimax search engine.

Tests verify:
1. Depth <= 0 and positions without moves evaluate immediately (move=None)
2. Alpha-beta returns the same score as a full-width minimax
3. Searches are deterministic and never modify the input board
4. Ties go to the first move in row-major order
5. Root move scoring and move choice agree with search()
"""

import math

import numpy as np
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / 'src'))

from othello_light.game.othello import Othello, BLACK, WHITE
from othello_light.engine.evaluator import PositionEvaluator
from othello_light.engine.minimax import MinimaxEngine, SearchResult


def full_width_minimax(game, evaluator, state, depth, maximizing, player, counter=None):
    """Reference minimax without pruning, same tie-breaking as the engine."""
    if counter is not None:
        counter["nodes"] += 1
    mover = player if maximizing else game.get_opponent(player)
    moves = game.get_valid_moves(state, mover)
    if depth <= 0 or not moves:
        return evaluator(state, player), None

    best_move = moves[0]
    best_value = -math.inf if maximizing else math.inf
    for move in moves:
        score, _ = full_width_minimax(
            game, evaluator, game.get_next_state(state, move, mover), depth - 1, not maximizing, player, counter
        )
        if maximizing and score > best_value:
            best_value, best_move = score, move
        elif not maximizing and score < best_value:
            best_value, best_move = score, move
    return best_value, best_move


def random_position(game, rng, num_moves):
    state = game.get_initial_state()
    player = BLACK
    for _ in range(num_moves):
        moves = game.get_valid_moves(state, player)
        if not moves:
            player = -player
            moves = game.get_valid_moves(state, player)
            if not moves:
                break
        state = game.get_next_state(state, moves[rng.randint(len(moves))], player)
        player = -player
    if not game.get_valid_moves(state, player):
        player = -player
    return state, player


class TestTerminalNodes:
    """Test the terminal evaluation path."""

    @pytest.mark.parametrize("player", [BLACK, WHITE])
    def test_depth_zero(self, player):
        game = Othello()
        engine = MinimaxEngine(game)
        state = game.get_next_state(game.get_initial_state(), (2, 3), BLACK)

        result = engine.search(state, 0, True, player)

        assert result.move is None
        assert result.score == engine.evaluator(state, player)

    def test_negative_depth_same_as_zero(self):
        game = Othello()
        engine = MinimaxEngine(game)
        state = game.get_initial_state()

        assert engine.search(state, -3, True, BLACK).score == engine.search(state, 0, True, BLACK).score
        assert engine.search(state, -3, False, WHITE).move is None

    def test_no_moves_at_root(self):
        state = np.zeros((8, 8), dtype=np.int8)
        state[0, 0] = BLACK
        engine = MinimaxEngine()

        result = engine.search(state, 4, True, BLACK)

        assert result.move is None
        assert result.score == 51

    def test_choose_move_when_passing(self):
        state = np.zeros((8, 8), dtype=np.int8)
        state[0, 0] = BLACK
        assert MinimaxEngine().choose_move(state, WHITE, depth=3) is None


class TestAlphaBeta:
    """Test pruning correctness and search behaviour."""

    def test_matches_full_width_minimax(self):
        game = Othello()
        evaluator = PositionEvaluator(game)
        engine = MinimaxEngine(game, evaluator)
        rng = np.random.RandomState(11)

        for num_moves, depth in [(0, 4), (6, 1), (10, 2), (14, 3), (20, 2), (30, 3), (40, 2)]:
            state, to_move = random_position(game, rng, num_moves)
            for maximizing in (True, False):
                expected, _ = full_width_minimax(game, evaluator, state, depth, maximizing, to_move)
                result = engine.search(state, depth, maximizing, to_move)
                assert result.score == expected

    def test_pruning_visits_fewer_nodes(self):
        game = Othello()
        engine = MinimaxEngine(game)
        state, player = random_position(game, np.random.RandomState(5), 12)

        pruned = engine.search(state, 3, True, player).nodes_searched

        counter = {"nodes": 0}
        full_width_minimax(game, engine.evaluator, state, 3, True, player, counter)

        assert 0 < pruned <= counter["nodes"]
        assert engine.get_stats()['nodes_searched'] == pruned

    def test_deterministic(self):
        game = Othello()
        engine = MinimaxEngine(game)
        state, player = random_position(game, np.random.RandomState(2), 15)

        first = engine.search(state, 3, True, player)
        second = engine.search(state, 3, True, player)

        assert first.score == second.score
        assert first.move == second.move

    def test_input_not_mutated(self):
        game = Othello()
        engine = MinimaxEngine(game)
        state, player = random_position(game, np.random.RandomState(4), 10)
        before = state.copy()

        engine.search(state, 3, True, player)

        assert np.array_equal(state, before)

    def test_returned_move_is_legal(self):
        game = Othello()
        engine = MinimaxEngine(game)
        state, player = random_position(game, np.random.RandomState(8), 16)

        maximizing = engine.search(state, 2, True, player)
        minimizing = engine.search(state, 2, False, player)

        assert maximizing.move in game.get_valid_moves(state, player)
        assert minimizing.move in game.get_valid_moves(state, game.get_opponent(player))

    def test_ties_go_to_first_move(self):
        """The four opening moves are symmetric, so the first one scanned wins."""
        game = Othello()
        engine = MinimaxEngine(game)
        state = game.get_initial_state()

        assert engine.search(state, 1, True, BLACK).move == (2, 3)
        assert engine.search(state, 2, True, BLACK).move == (2, 3)

    def test_constant_evaluator_keeps_first_move(self):
        game = Othello()
        engine = MinimaxEngine(game, evaluator=lambda s, p: 0)
        state, player = random_position(game, np.random.RandomState(9), 12)

        result = engine.search(state, 3, True, player)

        assert result.score == 0
        assert result.move == game.get_valid_moves(state, player)[0]

    def test_crossed_window_stops_after_first_move(self):
        game = Othello()
        engine = MinimaxEngine(game)
        state = game.get_initial_state()

        result = engine.search(state, 2, True, BLACK, alpha=1000, beta=-1000)

        assert result.move == (2, 3)

    def test_perspective_is_fixed(self):
        """Scores are always from the perspective player's point of view."""
        game = Othello()
        engine = MinimaxEngine(game)
        state, player = random_position(game, np.random.RandomState(6), 10)

        black_view = engine.search(state, 0, True, BLACK).score
        white_view = engine.search(state, 0, False, WHITE).score

        assert black_view == -white_view

    def test_result_type(self):
        result = MinimaxEngine().search(Othello().get_initial_state(), 1, True, BLACK)
        assert isinstance(result, SearchResult)
        assert isinstance(result.move, tuple)


class TestRootHelpers:
    """Test choose_move and score_moves."""

    def test_score_moves_max_matches_search(self):
        game = Othello()
        engine = MinimaxEngine(game)
        state, player = random_position(game, np.random.RandomState(12), 14)

        for depth in (1, 2, 3):
            scored = engine.score_moves(state, player, depth)
            assert [move for move, _ in scored] == game.get_valid_moves(state, player)
            assert max(score for _, score in scored) == engine.search(state, depth, True, player).score

    @pytest.mark.parametrize("depth", [0, -2])
    def test_score_moves_clamps_shallow_depth(self, depth):
        game = Othello()
        engine = MinimaxEngine(game)
        state = game.get_initial_state()

        scored = engine.score_moves(state, BLACK, depth)

        assert scored == engine.score_moves(state, BLACK, 1)
        assert max(score for _, score in scored) == engine.search(state, 1, True, BLACK).score

    def test_choose_move(self):
        game = Othello()
        engine = MinimaxEngine(game)
        state, player = random_position(game, np.random.RandomState(13), 18)

        assert engine.choose_move(state, player, depth=2) == engine.search(state, 2, True, player).move

    def test_score_moves_without_moves(self):
        state = np.zeros((8, 8), dtype=np.int8)
        state[0, 0] = BLACK
        assert MinimaxEngine().score_moves(state, BLACK, 2) == []
