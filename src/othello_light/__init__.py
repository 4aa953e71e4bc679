"""
Othello (8x8 Reversi) engine: board model, positional evaluator,
minimax/alpha-beta search and move rating.
"""

from othello_light.game.othello import Othello, InvalidMoveError, BLACK, WHITE, EMPTY
from othello_light.engine.evaluator import PositionEvaluator, evaluate_board
from othello_light.engine.minimax import MinimaxEngine, SearchResult
from othello_light.engine.move_rating import MoveRating, rate_move

__all__ = [
    'Othello',
    'InvalidMoveError',
    'BLACK',
    'WHITE',
    'EMPTY',
    'PositionEvaluator',
    'evaluate_board',
    'MinimaxEngine',
    'SearchResult',
    'MoveRating',
    'rate_move',
]
