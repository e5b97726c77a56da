from __future__ import annotations

import enum
import logging
from typing import List, Optional, Sequence

from .container import Container
from .liquid import Liquid
from .moves import Move, enumerate_moves

logger = logging.getLogger(__name__)

# Positions with this many legal moves or fewer are stuck only when every move is futile.
FEW_MOVES = 3
# Above FEW_MOVES, this share of futile moves declares the position stuck.
FUTILE_SHARE = 0.8


class GameOutcome(enum.Enum):
    PLAYING = 'playing'
    WON = 'won'
    STUCK = 'stuck'

    @property
    def is_terminal(self) -> bool:
        return self is not GameOutcome.PLAYING


def is_won(containers: Sequence[Container]) -> bool:
    """Every container is empty or full of a single color."""
    return all(c.is_empty() or c.is_single_color_full() for c in containers)


def run_length_below(liquids: Sequence[Liquid], index: int) -> int:
    """Length of the same-colored run that ends at `index`, counting downward."""
    if index < 0 or index >= len(liquids):
        return 0
    color = liquids[index].color
    count = 1
    for i in range(index - 1, -1, -1):
        if liquids[i].color != color:
            break
        count += 1
    return count


def _fills_with_one_color(target: Container, move: Move) -> bool:
    if len(target) + move.quantity != target.capacity:
        return False
    return all(liquid.color == move.color for liquid in target.liquids)


def _empties_source(source: Container, move: Move) -> bool:
    return move.quantity == len(source)


def _separates_colors(source: Container, move: Move) -> bool:
    """The unit exposed at the source is another color and heads a run of at least two."""
    if len(source) <= move.quantity:
        return False
    exposed = len(source) - move.quantity - 1
    if source.liquids[exposed].color == move.color:
        return False
    return run_length_below(source.liquids, exposed) >= 2


def can_move_be_immediately_reversed(containers: Sequence[Container], move: Move) -> bool:
    """
    Simulates `move` without touching the containers and reports whether the
    poured run could go straight back where it came from.
    """
    source = containers[move.source]
    target = containers[move.target]
    if len(target) + move.quantity == target.capacity:
        return False
    remaining = len(source) - move.quantity
    if remaining == 0:
        return True
    return source.liquids[remaining - 1].color == move.color


def is_move_non_progressive(containers: Sequence[Container], move: Move) -> bool:
    source = containers[move.source]
    target = containers[move.target]

    if target.is_empty():
        if _empties_source(source, move):
            return False
        if _separates_colors(source, move):
            return False
        return can_move_be_immediately_reversed(containers, move)

    if _fills_with_one_color(target, move):
        return False
    if move.quantity >= 2:
        return False
    return can_move_be_immediately_reversed(containers, move)


def are_all_moves_just_shuffling(containers: Sequence[Container], moves: Sequence[Move]) -> bool:
    """True when no move completes a container, empties one, or leaves a real color separation."""
    for move in moves:
        source = containers[move.source]
        target = containers[move.target]
        if _fills_with_one_color(target, move):
            return False
        if _empties_source(source, move):
            return False
        if _separates_colors(source, move):
            return False
    return True


def all_moves_are_futile(containers: Sequence[Container], moves: Sequence[Move]) -> bool:
    futile = [m for m in moves if is_move_non_progressive(containers, m)]
    logger.debug('%d of %d legal moves judged futile', len(futile), len(moves))
    if len(moves) <= FEW_MOVES:
        return len(futile) == len(moves)
    if len(futile) / len(moves) >= FUTILE_SHARE:
        return True
    return are_all_moves_just_shuffling(containers, moves)


def is_stuck(containers: Sequence[Container], moves: Optional[List[Move]] = None) -> bool:
    """
    No legal move is left, or the legal moves only shuffle liquid back and forth.
    The futility test is a heuristic, not a solvability search.
    """
    if moves is None:
        moves = enumerate_moves(containers)
    if not moves:
        return True
    return all_moves_are_futile(containers, moves)


def opening_outcome(containers: Sequence[Container]) -> GameOutcome:
    """Outcome of a position no pour has been applied to yet: only a win ends it."""
    return GameOutcome.WON if is_won(containers) else GameOutcome.PLAYING


def evaluate(containers: Sequence[Container]) -> GameOutcome:
    """Derives the outcome from the containers alone. A win takes precedence over stuck."""
    if is_won(containers):
        return GameOutcome.WON
    if is_stuck(containers):
        return GameOutcome.STUCK
    return GameOutcome.PLAYING
