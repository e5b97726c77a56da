from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .container import Container
from .liquid import COLORS, Color, Liquid
from .settings import GameSettings


def deal_containers(
    complexity: int,
    difficulty: int,
    capacity: int = 4,
    seed: Optional[int] = None,
    palette: Sequence[Color] = COLORS,
) -> List[Container]:
    """
    Deals `capacity` units of each of `complexity` colors, shuffled, into the
    first `complexity` containers and leaves `difficulty` extra containers empty.
    Colors cycle through the palette if there are more colors than names.
    """
    if complexity < 1:
        raise ValueError(f'complexity must be positive, got {complexity}')
    if difficulty < 0:
        raise ValueError(f'difficulty must not be negative, got {difficulty}')
    if capacity < 1:
        raise ValueError(f'capacity must be positive, got {capacity}')
    if not palette:
        raise ValueError('palette must name at least one color')
    rng = random.Random(seed)
    units: List[Liquid] = []
    for i in range(complexity):
        color = palette[i % len(palette)]
        units.extend(Liquid(color) for _ in range(capacity))
    rng.shuffle(units)
    containers = [Container(capacity=capacity) for _ in range(complexity + difficulty)]
    for i in range(complexity):
        containers[i].liquids = units[i * capacity:(i + 1) * capacity]
    return containers


def deal_from_settings(settings: GameSettings, seed: Optional[int] = None) -> List[Container]:
    return deal_containers(
        complexity=settings.complexity,
        difficulty=settings.difficulty,
        capacity=settings.capacity,
        seed=seed,
    )
