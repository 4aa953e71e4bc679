"""
Star rating of a move that has already been played.

The played move is placed between two bounds computed from the position
before the move:

    best   search(state, depth, maximizing=True, player)
    worst  min over legal m of  search(apply(m), max(depth-1, 1), maximizing=False, player)

and its own follow-up value v(played) is normalized into [0, 1] on that
range, then mapped to 1-5 stars. All scores are from the mover's point of
view. A rating of 0 means no move was available to rate.
"""

import logging
import math
from dataclasses import dataclass
from typing import Optional

from othello_light.config_othello import RATING_CONFIG
from othello_light.engine.minimax import MinimaxEngine
from othello_light.game.othello import InvalidMoveError


logger = logging.getLogger(__name__)


@dataclass
class MoveRating:
    rating: int
    message: str
    best_score: Optional[float] = None
    worst_score: Optional[float] = None
    played_score: Optional[float] = None
    normalized: Optional[float] = None


def rating_from_normalized(normalized):
    """Map a score in [0, 1] to 1-5 stars (half rounds up)."""
    return max(1, min(5, math.floor(normalized * 4 + 0.5) + 1))


def feedback_for(rating):
    return RATING_CONFIG['feedback'][rating]


def rate_move(state, player, move, depth, engine=None):
    """
    Rate the move player made from state.

    Args:
        state: Board state BEFORE the move (unchanged by this function)
        player: Player who moved
        move: (row, col) that was played
        depth: Search depth (the difficulty level)
        engine: Optional MinimaxEngine to reuse

    Returns:
        MoveRating

    Raises:
        InvalidMoveError: if move is not one of player's legal moves
    """
    engine = engine or MinimaxEngine()
    game = engine.game

    legal = game.get_valid_moves(state, player)
    if not legal:
        return MoveRating(rating=0, message=RATING_CONFIG['no_moves_message'])

    move = (int(move[0]), int(move[1]))
    if move not in legal:
        raise InvalidMoveError(move, player, "not a legal move in this position")

    best = engine.search(state, depth, True, player).score

    reply_depth = max(depth - 1, RATING_CONFIG['min_reply_depth'])
    values = {}
    for m in legal:
        next_state = game.get_next_state(state, m, player)
        values[m] = engine.search(next_state, reply_depth, False, player).score

    worst = min(values.values())
    played = values[move]

    if best > worst:
        normalized = (played - worst) / (best - worst)
        normalized = max(0.0, min(1.0, normalized))
    elif best == worst:
        # Only one outcome reachable, so whatever was played is optimal
        normalized = 1.0
    else:
        normalized = 0.0

    rating = rating_from_normalized(normalized)
    logger.debug(
        "rate_move %s depth=%d best=%s worst=%s played=%s -> %d",
        move, depth, best, worst, played, rating
    )
    return MoveRating(
        rating=rating,
        message=feedback_for(rating),
        best_score=best,
        worst_score=worst,
        played_score=played,
        normalized=normalized,
    )
