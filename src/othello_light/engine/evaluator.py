"""
Positional evaluator for Othello minimax search.

Scores a board from a fixed player's point of view as a weighted sum of
five heuristics:

    piece difference   count(player) - count(opponent)
    corner control     +W per own corner, -W per opponent corner
    mobility           legal moves(player) - legal moves(opponent)
    edge control       +w / -w per non-corner edge cell
    X-squares          -X per own disc diagonal to an EMPTY corner,
                       +X per opponent disc there

The result is a heuristic estimate, not a solved game value.
"""

import numpy as np

from othello_light.config_othello import EVAL_CONFIG
from othello_light.game.othello import Othello, BOARD_SIZE, EMPTY


_LAST = BOARD_SIZE - 1

CORNERS = ((0, 0), (0, _LAST), (_LAST, 0), (_LAST, _LAST))

# X-square -> the corner it exposes
X_SQUARES = {
    (1, 1): (0, 0),
    (1, _LAST - 1): (0, _LAST),
    (_LAST - 1, 1): (_LAST, 0),
    (_LAST - 1, _LAST - 1): (_LAST, _LAST),
}

# The 24 edge cells that are not corners (indices 1..6 on each side)
EDGE_CELLS = tuple(
    [(0, i) for i in range(1, _LAST)]
    + [(_LAST, i) for i in range(1, _LAST)]
    + [(i, 0) for i in range(1, _LAST)]
    + [(i, _LAST) for i in range(1, _LAST)]
)

_EDGE_ROWS = np.array([r for r, _ in EDGE_CELLS])
_EDGE_COLS = np.array([c for _, c in EDGE_CELLS])


class PositionEvaluator:
    """
    Stateless heuristic scorer. Instances are callables (state, player) -> int,
    which is the evaluator protocol MinimaxEngine expects.
    """

    def __init__(self, game=None, weights=None):
        """
        Args:
            game: Othello instance used for move generation (mobility term)
            weights: Optional overrides for EVAL_CONFIG keys
        """
        self.game = game or Othello()
        self.weights = dict(EVAL_CONFIG)
        if weights:
            unknown = set(weights) - set(EVAL_CONFIG)
            if unknown:
                raise ValueError(f"Unknown evaluation weights: {sorted(unknown)}")
            self.weights.update(weights)

    def __call__(self, state, player):
        return self.evaluate(state, player)

    def evaluate(self, state, player):
        return sum(self.breakdown(state, player).values())

    def breakdown(self, state, player):
        """
        Weighted contribution of each heuristic term.

        Returns:
            dict with keys 'pieces', 'corners', 'mobility', 'edges', 'x_squares'
        """
        if np.shape(state) != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Expected a {BOARD_SIZE}x{BOARD_SIZE} board, got shape {np.shape(state)}")
        opponent = self.game.get_opponent(player)
        w = self.weights

        pieces = int(np.count_nonzero(state == player)) - int(np.count_nonzero(state == opponent))

        corners = 0
        for r, c in CORNERS:
            if state[r, c] == player:
                corners += 1
            elif state[r, c] == opponent:
                corners -= 1

        mobility = (
            len(self.game.get_valid_moves(state, player))
            - len(self.game.get_valid_moves(state, opponent))
        )

        edge_cells = state[_EDGE_ROWS, _EDGE_COLS]
        edges = int(np.count_nonzero(edge_cells == player)) - int(np.count_nonzero(edge_cells == opponent))

        x_squares = 0
        for (r, c), (cr, cc) in X_SQUARES.items():
            if state[cr, cc] != EMPTY:
                continue
            if state[r, c] == player:
                x_squares -= 1
            elif state[r, c] == opponent:
                x_squares += 1

        return {
            'pieces': pieces * w['piece_weight'],
            'corners': corners * w['corner_weight'],
            'mobility': mobility * w['mobility_weight'],
            'edges': edges * w['edge_weight'],
            'x_squares': x_squares * w['x_square_weight'],
        }


_global_evaluator = None


def evaluate_board(state, player):
    """Evaluate with the canonical EVAL_CONFIG weights."""
    global _global_evaluator
    if _global_evaluator is None:
        _global_evaluator = PositionEvaluator()
    return _global_evaluator.evaluate(state, player)
