"""
Liquid sort core Python package.

This package contains the data structures and pure-logic rules of the
liquid sort puzzle, kept apart from the CLI and the Flask app so they can be
tested on their own.
Modules:
- liquid.py: Liquid, Color, default palette
- container.py: Container
- moves.py: Move, PourResult, enumerate_moves, can_pour, apply_pour
- outcome.py: GameOutcome, is_won, is_stuck, evaluate
- settings.py: GameSettings
- deal.py: shuffle-and-deal setup
- session.py: GameSession (the game loop)
- logging_config.py: setup_logging
- cli.py: terminal game
"""
