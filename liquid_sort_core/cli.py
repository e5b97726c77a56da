from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

from .container import Container
from .logging_config import setup_logging
from .session import GameSession
from .settings import GameSettings


def format_containers(containers: Sequence[Container]) -> str:
    """One line per container, bottom to top, with free slots shown as '.'."""
    width = len(str(len(containers)))
    lines: List[str] = []
    for i, c in enumerate(containers, start=1):
        cells = c.colors() + ['.'] * c.available_space()
        mark = ' *' if c.is_single_color_full() else ''
        lines.append(f"{i:>{width}}: [{' '.join(cells)}]{mark}")
    return "\n".join(lines)


def parse_move(text: str) -> Tuple[int, int]:
    """Parses '1 3' or '1,3' (1-based, as printed) into 0-based indices."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t.strip() != '']
    if len(parts) != 2:
        raise ValueError(f'expected two container numbers, got {text!r}')
    source, target = (int(p) for p in parts)
    return source - 1, target - 1


def build_parser() -> argparse.ArgumentParser:
    defaults = GameSettings()
    parser = argparse.ArgumentParser(description='Liquid sort puzzle in the terminal')
    parser.add_argument('--difficulty', type=int, default=None,
                        help=f'Extra empty containers (default {defaults.difficulty})')
    parser.add_argument('--complexity', type=int, default=None,
                        help=f'Number of colors / filled containers (default {defaults.complexity})')
    parser.add_argument('--capacity', type=int, default=None,
                        help=f'Units per container (default {defaults.capacity})')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the deal')
    parser.add_argument('--show-moves', action='store_true', help='List legal pours before each prompt')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    return parser


def settings_from_args(args: argparse.Namespace) -> GameSettings:
    base = GameSettings.from_env()
    return GameSettings(
        difficulty=args.difficulty if args.difficulty is not None else base.difficulty,
        complexity=args.complexity if args.complexity is not None else base.complexity,
        capacity=args.capacity if args.capacity is not None else base.capacity,
    ).validate()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else None)

    try:
        settings = settings_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    session = GameSession.new(settings, seed=args.seed)
    print(settings.difficulty_text())
    print(format_containers(session.containers))

    while not session.is_over:
        if args.show_moves:
            moves = [f"{m.source + 1}->{m.target + 1} ({m.quantity} {m.color})" for m in session.legal_moves()]
            print('Legal pours:', ', '.join(moves))
        try:
            text = input('Pour from to (e.g. 1 3), q to quit: ').strip()
        except EOFError:
            return
        if text.lower() in ('q', 'quit', 'exit'):
            return
        try:
            source, target = parse_move(text)
            result = session.pour(source, target)
        except ValueError as e:
            print(f'Could not use that move: {e}')
            continue
        if not result.success:
            print('Illegal pour. Try again.')
            continue
        print(format_containers(session.containers))
        if not session.is_over:
            print(session.status_message())

    print(session.status_message())


if __name__ == '__main__':
    main()
