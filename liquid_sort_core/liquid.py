from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Color = str  # 'red', 'blue', ...

COLORS: Tuple[Color, ...] = (
    'red', 'blue', 'green', 'yellow', 'purple', 'orange',
    'pink', 'cyan', 'lime', 'brown', 'gray', 'navy',
    'maroon', 'olive', 'teal', 'silver', 'gold', 'indigo',
    'coral', 'salmon',
)


@dataclass(frozen=True)
class Liquid:
    """One unit of colored liquid. Immutable; a pour moves the same objects between containers."""
    color: Color

    def same_color(self, other: 'Liquid') -> bool:
        return self.color == other.color
