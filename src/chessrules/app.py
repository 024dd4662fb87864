"""Terminal entry point: play a game by typing square pairs."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from chessrules.core.enums import PieceType
from chessrules.core.errors import ChessError
from chessrules.core.ruleset import RuleSet
from chessrules.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

_HELP = """\
Commands:
  <from> <to>              move a piece, e.g. "e2 e4"
  moves <square>           list pseudo-legal destinations
  promote <square> <type>  change a piece type (queen, rook, bishop, knight)
  board                    print the board
  quit                     leave
"""


def run_session(
    lines: Iterable[str],
    out: TextIO,
    rules: RuleSet | None = None,
) -> GameController:
    """Play commands from *lines*, writing responses to *out*."""
    ctrl = GameController()
    ctrl.new_game(rules)
    print(ctrl.game.board.render(), file=out)

    for raw in lines:
        words = raw.split()
        if not words:
            continue
        cmd = words[0].lower()
        if cmd in ("quit", "exit"):
            break
        try:
            if cmd == "help":
                print(_HELP, file=out, end="")
            elif cmd == "board":
                print(ctrl.game, file=out)
            elif cmd == "moves" and len(words) == 2:
                moves = ctrl.possible_moves(words[1])
                print("no piece" if moves is None else " ".join(moves), file=out)
            elif cmd == "promote" and len(words) == 3:
                ctrl.promote(words[1], PieceType[words[2].upper()])
                print(ctrl.game.board.render(), file=out)
            elif len(words) == 2:
                state = ctrl.submit_move(words[0], words[1])
                if state is None:
                    print("rejected", file=out)
                else:
                    print(ctrl.game.board.render(), file=out)
                    print(state.name, file=out)
            else:
                print(f"unknown command: {raw.strip()}", file=out)
        except (ChessError, KeyError) as exc:
            _LOGGER.debug("Command %r failed", raw, exc_info=True)
            print(f"error: {exc}", file=out)
    return ctrl


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="chessrules", description=__doc__)
    parser.add_argument(
        "--rules",
        choices=("standard", "legacy", "strict"),
        default="standard",
        help="rule preset (default: standard)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="logging level for engine diagnostics (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Launch the terminal game loop on stdin/stdout."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )
    run_session(sys.stdin, sys.stdout, RuleSet.by_name(args.rules))
    return 0


if __name__ == "__main__":
    sys.exit(main())
