"""
Minimax search with alpha-beta pruning for Othello.

The search always scores positions from one fixed player's point of view
(the "perspective" player). It is deliberately NOT negamax: the sign of
every returned score is relative to the perspective player, whichever
side is to move at a given node. The move-rating helper depends on this
convention.

Algorithm overview:

    def minimax(state, depth, maximizing, player, alpha, beta):
        mover = player if maximizing else opponent(player)
        moves = valid_moves(state, mover)          # row-major order

        # Horizon or mover must pass
        if depth <= 0 or not moves:
            return evaluate(state, player), None

        best_move = moves[0]
        best = -inf if maximizing else +inf
        for move in moves:
            score = minimax(apply(state, mover, move), depth - 1,
                            not maximizing, player, alpha, beta)
            if maximizing:
                if score > best:                 # strict: first move wins ties
                    best, best_move = score, move
                alpha = max(alpha, best)
            else:
                ...                              # mirror image, updates beta
            if beta <= alpha:
                break                            # cutoff
        return best, best_move

Pruning only skips subtrees that cannot change the root value, so the
returned score always equals a full-width minimax search of the same depth.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from othello_light.config_othello import SEARCH_CONFIG
from othello_light.engine.evaluator import PositionEvaluator
from othello_light.game.othello import Othello


logger = logging.getLogger(__name__)

Move = Tuple[int, int]

SCORE_INF = math.inf


@dataclass
class SearchResult:
    """Result of a minimax search."""
    score: float
    move: Optional[Move]
    nodes_searched: int = 0


class MinimaxEngine:
    """
    Depth-limited minimax engine with alpha-beta pruning.

    No transposition table and no state shared between calls: each search is
    a pure function of its arguments. The only attribute touched during a
    search is the informational node counter, reset on every top-level call.
    """

    def __init__(self, game=None, evaluator=None):
        """
        Initialize minimax engine.

        Args:
            game: Othello game instance
            evaluator: Evaluation function (state, player) -> int. Defaults to
                PositionEvaluator with the EVAL_CONFIG weights.
        """
        self.game = game or Othello()
        self.evaluator = evaluator or PositionEvaluator(self.game)
        self.nodes_searched = 0

    def search(
        self,
        state: np.ndarray,
        depth: int,
        maximizing: bool,
        player: int,
        alpha: float = -SCORE_INF,
        beta: float = SCORE_INF
    ) -> SearchResult:
        """
        Main search entry point.

        Args:
            state: Board state (8, 8)
            depth: Remaining plies; anything <= 0 evaluates immediately
            maximizing: True to enumerate player's moves, False for the opponent's
            player: Perspective player whose advantage is scored
            alpha: Lower bound the maximizer is already guaranteed
            beta: Upper bound the minimizer is already guaranteed

        Returns:
            SearchResult with score (from player's view) and the chosen move,
            or move=None at a terminal node
        """
        self.nodes_searched = 0
        score, move = self._minimax(state, depth, maximizing, player, alpha, beta)
        logger.debug(
            "search depth=%d maximizing=%s player=%d -> score=%s move=%s nodes=%d",
            depth, maximizing, player, score, move, self.nodes_searched
        )
        return SearchResult(score=score, move=move, nodes_searched=self.nodes_searched)

    def _minimax(
        self,
        state: np.ndarray,
        depth: int,
        maximizing: bool,
        player: int,
        alpha: float,
        beta: float
    ) -> Tuple[float, Optional[Move]]:
        self.nodes_searched += 1

        mover = player if maximizing else self.game.get_opponent(player)
        moves = self.game.get_valid_moves(state, mover)

        if depth <= 0 or not moves:
            return self.evaluator(state, player), None

        # Seeded before any child so a move is always returned
        best_move = moves[0]
        best_value = -SCORE_INF if maximizing else SCORE_INF

        for move in moves:
            next_state = self.game.get_next_state(state, move, mover)
            score, _ = self._minimax(next_state, depth - 1, not maximizing, player, alpha, beta)

            if maximizing:
                if score > best_value:
                    best_value = score
                    best_move = move
                alpha = max(alpha, best_value)
            else:
                if score < best_value:
                    best_value = score
                    best_move = move
                beta = min(beta, best_value)

            if beta <= alpha:
                break

        return best_value, best_move

    def choose_move(self, state: np.ndarray, player: int, depth: Optional[int] = None) -> Optional[Move]:
        """
        Best move for player at the given depth (SEARCH_CONFIG default), or None
        if player has to pass.
        """
        if depth is None:
            depth = SEARCH_CONFIG['default_depth']
        return self.search(state, max(depth, 1), True, player).move

    def score_moves(self, state: np.ndarray, player: int, depth: Optional[int] = None) -> list:
        """
        Exact minimax score of every root move, in row-major order.

        Each child is searched with a full window so no score is a bound.
        The maximum of the returned scores equals search(state, depth, True, player).score.
        Depths below 1 are treated as 1, as in choose_move.

        Returns:
            List of ((row, col), score) pairs
        """
        if depth is None:
            depth = SEARCH_CONFIG['default_depth']
        depth = max(depth, 1)
        scored = []
        for move in self.game.get_valid_moves(state, player):
            next_state = self.game.get_next_state(state, move, player)
            scored.append((move, self.search(next_state, depth - 1, False, player).score))
        return scored

    def get_stats(self) -> dict:
        """Get search statistics."""
        return {
            'nodes_searched': self.nodes_searched,
        }
