from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict, Mapping, Optional, Tuple

from .liquid import COLORS

DIFFICULTY_RANGE: Tuple[int, int] = (1, 4)  # extra empty containers
COMPLEXITY_RANGE: Tuple[int, int] = (6, len(COLORS))  # colors, one filled container each
CAPACITY_RANGE: Tuple[int, int] = (1, 12)

DIFFICULTY_NAMES: Dict[int, str] = {
    1: 'Easy',
    2: 'Medium',
    3: 'Hard',
    4: 'Expert',
}


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f'{name} must be an integer, got {raw!r}') from None


@dataclass(frozen=True)
class GameSettings:
    """Size of a deal: `complexity` filled containers plus `difficulty` empty ones."""
    difficulty: int = 2
    complexity: int = 6
    capacity: int = 4

    def validate(self) -> 'GameSettings':
        for name, value, (lo, hi) in (
            ('difficulty', self.difficulty, DIFFICULTY_RANGE),
            ('complexity', self.complexity, COMPLEXITY_RANGE),
            ('capacity', self.capacity, CAPACITY_RANGE),
        ):
            if not (lo <= value <= hi):
                raise ValueError(f'{name} must be between {lo} and {hi}, got {value}')
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'GameSettings':
        """Reads LIQUID_SORT_DIFFICULTY / _COMPLEXITY / _CAPACITY, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            difficulty=_env_int(env, 'LIQUID_SORT_DIFFICULTY', defaults.difficulty),
            complexity=_env_int(env, 'LIQUID_SORT_COMPLEXITY', defaults.complexity),
            capacity=_env_int(env, 'LIQUID_SORT_CAPACITY', defaults.capacity),
        ).validate()

    @property
    def total_containers(self) -> int:
        return self.complexity + self.difficulty

    def difficulty_name(self) -> str:
        return DIFFICULTY_NAMES.get(self.difficulty, 'Custom')

    def difficulty_text(self) -> str:
        return (
            f'Difficulty: {self.difficulty_name()} '
            f'({self.complexity} colors, {self.difficulty} extra containers)'
        )


def settings_changed(old: GameSettings, new: GameSettings) -> bool:
    return old != new
