#!/usr/bin/env python3
"""
Play Othello against the minimax engine.
Every move you make is rated 1-5 stars against the engine's own analysis.

Usage: python scripts/play_othello.py [--color black|white] [--difficulty easy|medium|hard]
"""
import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'src'))

from othello_light.config_othello import SEARCH_CONFIG, get_depth
from othello_light.game.othello import Othello, BLACK, WHITE, player_name
from othello_light.engine.minimax import MinimaxEngine
from othello_light.engine.move_rating import rate_move

# Standard Othello notation: column letter a-h, then row number 1-8 (e.g. 'd3')
COLUMN_LABELS = "ABCDEFGH"
ROW_LABELS = "12345678"
DISCS = {BLACK: "⚫", WHITE: "⚪", 0: "· "}


def print_board(state, valid_moves=()):
    """Print the Othello board, marking legal moves with '*'"""
    print("\n    " + "  ".join(COLUMN_LABELS))
    for r, row in enumerate(state):
        cells = []
        for c, cell in enumerate(row):
            if (r, c) in valid_moves:
                cells.append("* ")
            else:
                cells.append(DISCS[int(cell)])
        print(f" {ROW_LABELS[r]}  " + " ".join(cells))
    print()


def format_move(move):
    row, col = move
    return f"{COLUMN_LABELS[col]}{ROW_LABELS[row]}"


def parse_move(text):
    """Parse 'D3' style input (column letter, row number) into (row, col)"""
    text = text.strip().upper()
    if len(text) != 2 or text[0] not in COLUMN_LABELS or text[1] not in ROW_LABELS:
        raise ValueError(f"Cannot parse move: {text!r}")
    return ROW_LABELS.index(text[1]), COLUMN_LABELS.index(text[0])


def main():
    parser = argparse.ArgumentParser(
        description="Play Othello vs the minimax engine",
        epilog="Moves use standard notation: column letter A-H then row number 1-8, e.g. D3.",
    )
    parser.add_argument('--color', choices=['black', 'white'], default='black')
    parser.add_argument('--difficulty', choices=sorted(SEARCH_CONFIG['difficulty_levels']), default='medium')
    args = parser.parse_args()

    game = Othello()
    engine = MinimaxEngine(game)
    depth = get_depth(args.difficulty)
    human = BLACK if args.color == 'black' else WHITE
    ai = game.get_opponent(human)

    print("=" * 60)
    print("🎮 Othello - Play vs Minimax")
    print("=" * 60)
    print(f"   You are {DISCS[human]} ({player_name(human)}), AI is {DISCS[ai]} ({player_name(ai)})")
    print(f"🧠 AI difficulty: {args.difficulty} (depth {depth})")
    print("   Enter moves like 'D3' or 'q' to quit")
    print("=" * 60)

    state = game.get_initial_state()
    current_player = BLACK

    while not game.is_game_over(state):
        valid_moves = game.get_valid_moves(state, current_player)

        if not valid_moves:
            print(f"⏭️  {player_name(current_player).capitalize()} has no moves and passes.")
            current_player = game.get_opponent(current_player)
            continue

        if current_player == human:
            print_board(state, valid_moves)
            print(f"{DISCS[human]} Your turn! Valid moves: {', '.join(format_move(m) for m in valid_moves)}")

            while True:
                try:
                    text = input("Your move: ").strip()
                    if text.lower() == 'q':
                        print("👋 Thanks for playing!")
                        return
                    move = parse_move(text)
                    if move not in valid_moves:
                        print("❌ Not a legal move! Try again.")
                        continue
                    break
                except ValueError:
                    print("❌ Invalid input! Use a column letter and row number, e.g. 'D3'")
                    continue

            rating = rate_move(state, human, move, depth, engine=engine)
            state = game.get_next_state(state, move, human)
            print(f"{'⭐' * rating.rating} {rating.message}")

        else:
            print(f"{DISCS[ai]} AI is thinking...")
            scored = engine.score_moves(state, ai, depth)
            move = engine.choose_move(state, ai, depth)
            state = game.get_next_state(state, move, ai)

            print(f"{DISCS[ai]} AI plays {format_move(move)}")
            print("   Move scores: " + " ".join(f"{format_move(m)}:{s}" for m, s in scored))

        current_player = game.get_opponent(current_player)

    print_board(state)
    score = game.get_score(state)
    print(f"Final score: ⚫ {score['black']} - ⚪ {score['white']}")

    winner = game.get_winner(state)
    if winner == 'draw':
        print("🤝 Game Over - Draw!")
    elif winner == player_name(human):
        print("🎉 YOU WIN! Congratulations! 🎉")
    else:
        print("🤖 AI WINS! Better luck next time!")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\n👋 Game interrupted. Thanks for playing!")
