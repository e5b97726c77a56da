from __future__ import annotations

# Facade module that re-exports the liquid sort core.
# Used by the Flask app, the tools and the tests.
# Single-responsibility modules live under liquid_sort_core/*.

from liquid_sort_core.liquid import COLORS, Color, Liquid  # noqa: F401
from liquid_sort_core.container import Container  # noqa: F401
from liquid_sort_core.moves import (  # noqa: F401
    InvalidArgument,
    Move,
    PourResult,
    apply_pour,
    can_pour,
    enumerate_moves,
    pour_quantity,
)
from liquid_sort_core.outcome import (  # noqa: F401
    FEW_MOVES,
    FUTILE_SHARE,
    GameOutcome,
    all_moves_are_futile,
    are_all_moves_just_shuffling,
    can_move_be_immediately_reversed,
    evaluate,
    is_move_non_progressive,
    is_stuck,
    is_won,
    opening_outcome,
    run_length_below,
)
from liquid_sort_core.settings import GameSettings, settings_changed  # noqa: F401
from liquid_sort_core.deal import deal_containers, deal_from_settings  # noqa: F401
from liquid_sort_core.session import GameSession  # noqa: F401


def main() -> None:
    # CLI driver delegated to liquid_sort_core.cli
    from liquid_sort_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
