from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .liquid import Color, Liquid


@dataclass
class Container:
    """A stack of liquid units with a fixed capacity. The last element of `liquids` is the top."""
    capacity: int
    liquids: List[Liquid] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f'Container capacity must be positive, got {self.capacity}')
        if len(self.liquids) > self.capacity:
            raise ValueError(f'{len(self.liquids)} liquids do not fit in capacity {self.capacity}')

    @classmethod
    def of(cls, capacity: int, colors: Iterable[Color] = ()) -> 'Container':
        """Builds a container from colors listed bottom to top."""
        return cls(capacity=capacity, liquids=[Liquid(c) for c in colors])

    def __len__(self) -> int:
        return len(self.liquids)

    def is_full(self) -> bool:
        return len(self.liquids) >= self.capacity

    def is_empty(self) -> bool:
        return not self.liquids

    def available_space(self) -> int:
        return self.capacity - len(self.liquids)

    def top_liquid(self) -> Optional[Liquid]:
        return self.liquids[-1] if self.liquids else None

    def top_color(self) -> Optional[Color]:
        top = self.top_liquid()
        return top.color if top is not None else None

    def colors(self) -> List[Color]:
        return [liquid.color for liquid in self.liquids]

    def add_liquid(self, liquid: Liquid) -> bool:
        """Pushes a unit on top. Returns False, leaving the container unchanged, when it is full."""
        if self.is_full():
            return False
        self.liquids.append(liquid)
        return True

    def remove_liquid(self) -> Optional[Liquid]:
        """Pops the top unit, or returns None when empty."""
        if not self.liquids:
            return None
        return self.liquids.pop()

    def remove_consecutive_top(self, count: int) -> List[Liquid]:
        """
        Pops exactly `count` units from the top and returns them bottom-to-top,
        in the order they were stacked. The caller checks `count` beforehand.
        """
        if count < 0 or count > len(self.liquids):
            raise ValueError(f'Cannot remove {count} liquids from a container holding {len(self.liquids)}')
        if count == 0:
            return []
        removed = self.liquids[-count:]
        del self.liquids[-count:]
        return removed

    def top_run(self) -> List[Liquid]:
        """The maximal run of same-colored units ending at the top, bottom-to-top."""
        if not self.liquids:
            return []
        top_color = self.liquids[-1].color
        start = len(self.liquids)
        while start > 0 and self.liquids[start - 1].color == top_color:
            start -= 1
        return self.liquids[start:]

    def can_pour_into(self, target: 'Container') -> bool:
        """Color/fullness predicate only; how much would move is computed elsewhere."""
        if self.is_empty():
            return False
        if target.is_full():
            return False
        if target.is_empty():
            return True
        return self.top_color() == target.top_color()

    def is_sorted(self) -> bool:
        """Empty, or holding a single color."""
        if not self.liquids:
            return True
        first = self.liquids[0].color
        return all(liquid.color == first for liquid in self.liquids)

    def is_single_color_full(self) -> bool:
        return self.is_full() and self.is_sorted()

    def clear(self) -> None:
        self.liquids = []
