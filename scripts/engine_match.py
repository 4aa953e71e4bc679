#!/usr/bin/env python3
"""Engine vs engine match for Othello.

Plays a series of games between two minimax engines at different depths,
alternating colors each game, and reports wins per engine (the data behind
a win-rate chart).

A few random opening plies are played before the engines take over so the
otherwise deterministic engines do not repeat the same game.

Outputs:
  - A timestamped log in logs/matches/
  - A JSON summary next to the log
"""

import sys
import json
import argparse
from pathlib import Path
from datetime import datetime

import numpy as np
from tqdm import tqdm

# repo root assumed to be parent of this file's folder
BASE_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BASE_DIR / 'src'))

from othello_light.config_othello import MATCH_CONFIG
from othello_light.game.othello import Othello, BLACK, WHITE, player_name
from othello_light.engine.minimax import MinimaxEngine


class Tee:
    """Write-through stream that mirrors match output into the log file."""

    def __init__(self, *streams):
        self.streams = streams

    def write(self, text):
        for stream in self.streams:
            stream.write(text)
            stream.flush()

    def flush(self):
        for stream in self.streams:
            stream.flush()


def open_match_log(tag: str):
    """Start teeing stdout into logs/matches/<tag>_<timestamp>.log."""
    log_dir = BASE_DIR / MATCH_CONFIG['log_dir']
    log_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_path = log_dir / f'{tag}_{stamp}.log'
    log_file = open(log_path, 'w')
    stdout = sys.stdout
    sys.stdout = Tee(stdout, log_file)
    print(f"📝 Logging to: {log_path}")
    return log_path, log_file, stdout


def close_match_log(log_file, stdout):
    sys.stdout = stdout
    log_file.close()


def play_game(game, engine, depths, rng, random_opening_moves):
    """
    Play one game.

    Args:
        depths: {BLACK: depth, WHITE: depth}

    Returns:
        (winner, final_score) where winner is 'black', 'white' or 'draw'
    """
    state = game.get_initial_state()
    player = BLACK
    ply = 0

    while not game.is_game_over(state):
        valid_moves = game.get_valid_moves(state, player)
        if not valid_moves:
            # Pass
            player = game.get_opponent(player)
            continue

        if ply < random_opening_moves:
            move = valid_moves[rng.randint(len(valid_moves))]
        else:
            move = engine.choose_move(state, player, depths[player])

        state = game.get_next_state(state, move, player)
        player = game.get_opponent(player)
        ply += 1

    return game.get_winner(state), game.get_score(state)


def run_match(args):
    """
    Play args.games games between engine A and engine B.

    Returns:
        (results, games) where results tallies 'a_wins', 'b_wins', 'draws'
        and games holds one record per game
    """
    game = Othello()
    engine = MinimaxEngine(game)
    rng = np.random.RandomState(args.seed)

    results = {'a_wins': 0, 'b_wins': 0, 'draws': 0}
    games = []

    for game_idx in tqdm(range(args.games), desc="Games"):
        a_color = BLACK if game_idx % 2 == 0 else WHITE
        depths = {a_color: args.depth_a, -a_color: args.depth_b}

        winner, score = play_game(game, engine, depths, rng, args.random_opening)

        if winner == 'draw':
            results['draws'] += 1
        elif winner == player_name(a_color):
            results['a_wins'] += 1
        else:
            results['b_wins'] += 1

        games.append({
            'game': game_idx,
            'a_color': player_name(a_color),
            'winner': winner,
            'score': score,
        })

    return results, games


def main():
    parser = argparse.ArgumentParser(description="Minimax vs minimax Othello match")
    parser.add_argument('--games', type=int, default=MATCH_CONFIG['num_games'])
    parser.add_argument('--depth-a', type=int, default=MATCH_CONFIG['black_depth'],
                        help="Search depth of engine A")
    parser.add_argument('--depth-b', type=int, default=MATCH_CONFIG['white_depth'],
                        help="Search depth of engine B")
    parser.add_argument('--random-opening', type=int, default=MATCH_CONFIG['random_opening_moves'])
    parser.add_argument('--seed', type=int, default=0)
    parser.add_argument('--no-log', action='store_true', help="Do not write a log file")
    args = parser.parse_args()

    log_path = log_file = stdout = None
    if not args.no_log:
        log_path, log_file, stdout = open_match_log(f"match_d{args.depth_a}_vs_d{args.depth_b}")

    try:
        print("=" * 60)
        print(f"⚔️  Engine A (depth {args.depth_a}) vs Engine B (depth {args.depth_b})")
        print(f"   {args.games} games, colors alternate, {args.random_opening} random opening plies")
        print("=" * 60)

        results, games = run_match(args)

        total = max(args.games, 1)
        print("\n📊 Results")
        print(f"   Engine A wins: {results['a_wins']} ({100.0 * results['a_wins'] / total:.1f}%)")
        print(f"   Engine B wins: {results['b_wins']} ({100.0 * results['b_wins'] / total:.1f}%)")
        print(f"   Draws:         {results['draws']}")

        if log_path is not None:
            summary_path = log_path.with_suffix('.json')
            with open(summary_path, 'w') as f:
                json.dump({
                    'depth_a': args.depth_a,
                    'depth_b': args.depth_b,
                    'results': results,
                    'games': games,
                }, f, indent=2)
            print(f"💾 Summary saved to: {summary_path}")
    finally:
        if log_file is not None:
            close_match_log(log_file, stdout)


if __name__ == "__main__":
    main()
