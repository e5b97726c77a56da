from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, NamedTuple, Sequence

from .container import Container
from .liquid import Color

logger = logging.getLogger(__name__)


class InvalidArgument(ValueError):
    """Raised when a pour names an out-of-range container or the same container twice."""


@dataclass(frozen=True)
class Move:
    """A candidate legal pour: `quantity` units of `color` from `source` to `target`."""
    source: int
    target: int
    quantity: int
    color: Color


class PourResult(NamedTuple):
    success: bool
    quantity: int


def _check_indices(containers: Sequence[Container], source: int, target: int) -> None:
    n = len(containers)
    if not (0 <= source < n):
        raise InvalidArgument(f'source index {source} out of range for {n} containers')
    if not (0 <= target < n):
        raise InvalidArgument(f'target index {target} out of range for {n} containers')
    if source == target:
        raise InvalidArgument(f'cannot pour container {source} into itself')


def pour_quantity(source: Container, target: Container) -> int:
    """How many units a pour from `source` to `target` would move (0 when illegal)."""
    if not source.can_pour_into(target):
        return 0
    return min(len(source.top_run()), target.available_space())


def enumerate_moves(containers: Sequence[Container]) -> List[Move]:
    """Lists every legal pour, ordered by source index then target index."""
    moves: List[Move] = []
    for i, source in enumerate(containers):
        if source.is_empty():
            continue
        for j, target in enumerate(containers):
            if i == j:
                continue
            quantity = pour_quantity(source, target)
            if quantity > 0:
                moves.append(Move(source=i, target=j, quantity=quantity, color=source.top_color()))
    return moves


def can_pour(containers: Sequence[Container], source: int, target: int) -> bool:
    _check_indices(containers, source, target)
    return containers[source].can_pour_into(containers[target])


def apply_pour(containers: Sequence[Container], source: int, target: int) -> PourResult:
    """
    Pours the top run of `containers[source]` into `containers[target]`, bounded by
    the target's free space. Legality and quantity are settled before anything is
    removed, so either the whole amount moves or nothing does.
    """
    _check_indices(containers, source, target)
    src = containers[source]
    dst = containers[target]
    quantity = pour_quantity(src, dst)
    if quantity == 0:
        return PourResult(False, 0)
    for liquid in src.remove_consecutive_top(quantity):
        dst.add_liquid(liquid)
    logger.debug('poured %d x %s from %d to %d', quantity, dst.top_color(), source, target)
    return PourResult(True, quantity)
