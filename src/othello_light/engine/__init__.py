"""
Minimax search engine for Othello.

This module contains the engine components:
- Positional evaluator (pieces, corners, mobility, edges, X-squares)
- Minimax search with alpha-beta pruning from a fixed player's perspective
- Move rating against the best and worst reachable outcomes
"""

from othello_light.engine.evaluator import PositionEvaluator, evaluate_board
from othello_light.engine.minimax import MinimaxEngine, SearchResult
from othello_light.engine.move_rating import MoveRating, rate_move

__all__ = [
    'PositionEvaluator',
    'evaluate_board',
    'MinimaxEngine',
    'SearchResult',
    'MoveRating',
    'rate_move',
]
