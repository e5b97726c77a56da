from __future__ import annotations

import argparse
import os
import random
import sys
from collections import Counter
from typing import Tuple

sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from game import GameOutcome, GameSession, GameSettings, enumerate_moves  # type: ignore


def play_random(settings: GameSettings, seed: int, max_moves: int) -> Tuple[GameOutcome, int, int]:
    """Plays uniformly random legal pours. Returns (outcome, moves played, legal moves left)."""
    rng = random.Random(seed)
    session = GameSession.new(settings, seed=seed)
    while not session.is_over and session.moves < max_moves:
        moves = session.legal_moves()
        if not moves:
            break
        m = rng.choice(moves)
        session.pour(m.source, m.target)
    return session.outcome, session.moves, len(enumerate_moves(session.containers))


def main() -> None:
    parser = argparse.ArgumentParser(description='Measure how often random play ends in a win, a stuck call or the move cap')
    parser.add_argument('--games', type=int, default=200)
    parser.add_argument('--difficulty', type=int, default=2)
    parser.add_argument('--complexity', type=int, default=6)
    parser.add_argument('--capacity', type=int, default=4)
    parser.add_argument('--max-moves', type=int, default=500)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    settings = GameSettings(args.difficulty, args.complexity, args.capacity).validate()
    random.seed(args.seed)
    counts: Counter = Counter()
    stuck_with_moves = 0
    total_moves = 0
    for _ in range(args.games):
        seed = random.randrange(1_000_000)
        outcome, played, left = play_random(settings, seed, args.max_moves)
        counts[outcome] += 1
        total_moves += played
        # Stuck calls made while legal pours still existed come from the futility heuristic
        if outcome is GameOutcome.STUCK and left > 0:
            stuck_with_moves += 1

    print(settings.difficulty_text())
    for outcome in GameOutcome:
        label = 'cap reached' if outcome is GameOutcome.PLAYING else outcome.value
        print(f"{label:>12}: {counts[outcome]}")
    print(f"stuck by heuristic (legal pours left): {stuck_with_moves}")
    print(f"avg moves per game: {total_moves / max(args.games, 1):.1f}")


if __name__ == '__main__':
    main()
