"""
Configuration for the Othello (8x8 Reversi) minimax engine.
"""

import numbers


# Board Configuration
BOARD_CONFIG = {
    'symbols': {1: 'B', -1: 'W', 0: '_'},   # Text form used by to_string/from_string
}

# Evaluation Configuration - weights of the positional heuristic terms
EVAL_CONFIG = {
    'piece_weight': 1,          # Disc difference
    'corner_weight': 50,        # Per corner (was 25 in early versions)
    'mobility_weight': 5,       # Per legal move of difference
    'edge_weight': 5,           # Per non-corner edge cell
    'x_square_weight': 30,      # Per X-square next to an empty corner
}

# Search Configuration
SEARCH_CONFIG = {
    'default_depth': 3,
    'difficulty_levels': {      # Named presets -> search depth (plies)
        'easy': 1,
        'medium': 3,
        'hard': 5,
    },
}

# Move Rating Configuration
RATING_CONFIG = {
    'min_reply_depth': 1,       # Floor for the opponent-reply search depth
    'no_moves_message': "No moves available.",
    'feedback': {
        5: "Excellent! You found the optimal move.",
        4: "Great move! Very strong play.",
        3: "Good move, but slightly suboptimal.",
        2: "A weak move, it has some drawbacks.",
        1: "This is likely a mistake. Look for stronger alternatives.",
    },
}

# Match Configuration (scripts/engine_match.py defaults)
MATCH_CONFIG = {
    'num_games': 10,
    'black_depth': 3,
    'white_depth': 1,
    'random_opening_moves': 2,  # Random plies before engines take over (varies games)
    'log_dir': 'logs/matches',
}


def get_depth(difficulty):
    """
    Resolve a difficulty preset name (or an explicit integer depth) to a search depth.
    """
    if isinstance(difficulty, bool):
        raise ValueError(f"Difficulty must be a preset name or an integer depth, got {difficulty!r}")
    if isinstance(difficulty, numbers.Integral):
        return int(difficulty)
    levels = SEARCH_CONFIG['difficulty_levels']
    if difficulty not in levels:
        raise ValueError(f"Unknown difficulty: {difficulty!r} (expected one of {sorted(levels)})")
    return levels[difficulty]
