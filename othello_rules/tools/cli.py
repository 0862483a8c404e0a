"""othello-rules command line: inspect boards and check move legality"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import List, Optional

from ..engine.board import Board
from ..engine.discs import Player
from ..engine.notation import notation_to_position, parse_board, position_to_notation, render_board
from ..errors import OthelloRulesError
from ..logging_setup import setup_logging
from ..settings import Settings, ensure_config, load_settings
from .diag import log_event

logger = logging.getLogger(__name__)

EXIT_ERROR = 2


def _load_board(path: Optional[str], settings: Settings) -> Board:
    if path is None:
        return Board.default()
    text = pathlib.Path(path).read_text(encoding="utf-8")
    return parse_board(text, settings.display)


def cmd_show(args: argparse.Namespace, settings: Settings) -> int:
    board = _load_board(args.board, settings)
    print(render_board(board, settings.display))
    log_event("cli", "show", board=args.board)
    return 0


def cmd_legal(args: argparse.Namespace, settings: Settings) -> int:
    board = _load_board(args.board, settings)
    pos = notation_to_position(args.square)
    player = Player.PLAYER1 if args.player == 1 else Player.PLAYER2
    legal = board.is_legal_move(pos, player)
    print("legal" if legal else "illegal")
    log_event("cli", "legal", square=args.square, player=args.player, legal=legal)
    return 0 if legal else 1


def cmd_neighbours(args: argparse.Namespace, settings: Settings) -> int:
    board = _load_board(args.board, settings)
    pos = notation_to_position(args.square)
    count = 0
    for cell, disc in board.neighbours(pos):
        print(f"{position_to_notation(cell)} {disc.name.lower()}")
        count += 1
    log_event("cli", "neighbours", square=args.square, count=count)
    return 0


def cmd_ray(args: argparse.Namespace, settings: Settings) -> int:
    board = _load_board(args.board, settings)
    center = notation_to_position(args.center)
    through = notation_to_position(args.through)
    strider = board.strider(center, through)
    direction = strider.direction.name
    cells = [f"{position_to_notation(cell)} {disc.name.lower()}" for cell, disc in strider]
    print(f"direction {direction.lower()}")
    for line in cells:
        print(line)
    log_event("cli", "ray", center=args.center, through=args.through, direction=direction, length=len(cells))
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="othello-rules", description="Inspect Othello boards and move legality")
    p.add_argument("--config", default=None, help="Path to config TOML (default: ~/.othello_rules/config.toml)")
    p.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
        help="Override the configured log level",
    )

    sub = p.add_subparsers(dest="command", required=True)

    def board_opt(sp: argparse.ArgumentParser) -> None:
        sp.add_argument("--board", default=None, help="Text board file (default: starting position)")

    sp = sub.add_parser("show", help="Print the board")
    board_opt(sp)
    sp.set_defaults(func=cmd_show)

    sp = sub.add_parser("legal", help="Check whether a move is legal")
    sp.add_argument("square", help="Target cell, e.g. d3")
    sp.add_argument("--player", type=int, choices=(1, 2), required=True)
    board_opt(sp)
    sp.set_defaults(func=cmd_legal)

    sp = sub.add_parser("neighbours", help="List the cells adjacent to a square")
    sp.add_argument("square")
    board_opt(sp)
    sp.set_defaults(func=cmd_neighbours)

    sp = sub.add_parser("ray", help="Walk from CENTER through the adjacent THROUGH to the edge")
    sp.add_argument("center")
    sp.add_argument("through")
    board_opt(sp)
    sp.set_defaults(func=cmd_ray)

    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.config is None:
            ensure_config()
        settings = load_settings(args.config)
    except OthelloRulesError as e:
        print(f"othello-rules: {e}", file=sys.stderr)
        return EXIT_ERROR

    level = settings.logging.level_no
    if args.log_level:
        level = getattr(logging, args.log_level)
    setup_logging(overwrite=settings.logging.overwrite, level=level)

    try:
        return args.func(args, settings)
    except (OthelloRulesError, ValueError, OSError) as e:
        logger.error("%s failed: %s", args.command, e)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
