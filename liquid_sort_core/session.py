from __future__ import annotations

import logging
from typing import List, Optional

from .container import Container
from .deal import deal_from_settings
from .moves import Move, PourResult, apply_pour, enumerate_moves
from .outcome import GameOutcome, evaluate, opening_outcome
from .settings import GameSettings, settings_changed

logger = logging.getLogger(__name__)


class GameSession:
    """
    Holds the authoritative containers of one game and applies pours one at a time.
    A fresh deal is only checked for a win; after every successful pour the
    outcome is re-derived. Once the game is won or stuck, further pours are
    refused until the session is reset.
    """

    def __init__(self, settings: GameSettings, containers: List[Container]) -> None:
        self.settings = settings
        self.containers = containers
        self.moves = 0
        self.outcome = opening_outcome(self.containers)

    @classmethod
    def new(cls, settings: Optional[GameSettings] = None, seed: Optional[int] = None) -> 'GameSession':
        s = (settings or GameSettings()).validate()
        return cls(s, deal_from_settings(s, seed=seed))

    @property
    def is_over(self) -> bool:
        return self.outcome.is_terminal

    def legal_moves(self) -> List[Move]:
        if self.is_over:
            return []
        return enumerate_moves(self.containers)

    def pour(self, source: int, target: int) -> PourResult:
        if self.is_over:
            return PourResult(False, 0)
        result = apply_pour(self.containers, source, target)
        if result.success:
            self.moves += 1
            self._update_outcome()
        return result

    def _update_outcome(self) -> None:
        outcome = evaluate(self.containers)
        if outcome is not self.outcome:
            logger.info('game %s after %d moves', outcome.value, self.moves)
        self.outcome = outcome

    def reset(self, seed: Optional[int] = None) -> None:
        self.containers = deal_from_settings(self.settings, seed=seed)
        self.moves = 0
        self.outcome = opening_outcome(self.containers)

    def apply_settings(self, settings: GameSettings, seed: Optional[int] = None) -> bool:
        """Switches to `settings`, re-dealing only if they differ. Returns whether a reset happened."""
        settings.validate()
        if not settings_changed(self.settings, settings):
            logger.debug('settings unchanged, keeping current game')
            return False
        self.settings = settings
        self.reset(seed=seed)
        return True

    def status_message(self) -> str:
        if self.outcome is GameOutcome.WON:
            return f'You won in {self.moves} moves! {self.settings.difficulty_text()}'
        if self.outcome is GameOutcome.STUCK:
            return 'No more moves available! Try adjusting the difficulty or reset the game.'
        return f'Moves: {self.moves}'
