"""Exception hierarchy for rule violations and malformed input."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import Color
    from chessrules.core.types import Square


def _name(sq: Square) -> str:
    # types imports this module for InvalidNotation.
    from chessrules.core.types import square_name

    return square_name(sq)


class ChessError(Exception):
    """Base class for every error raised by the engine."""


class InvalidNotation(ChessError, ValueError):
    """A square name that is not a file letter followed by a rank digit."""

    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid square name: {text!r}")
        self.text = text


class MoveRejected(ChessError):
    """A recoverable rejection: the game is left exactly as it was."""


class NoPieceAtSource(MoveRejected):
    def __init__(self, square: Square) -> None:
        super().__init__(f"There is no piece on {_name(square)}")
        self.square = square


class WrongColorToMove(MoveRejected):
    def __init__(self, square: Square, active_color: Color) -> None:
        super().__init__(
            f"Piece on {_name(square)} does not belong to {active_color}"
        )
        self.square = square
        self.active_color = active_color


class IllegalDestination(MoveRejected):
    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(f"Illegal move: {_name(from_sq)} -> {_name(to_sq)}")
        self.from_sq = from_sq
        self.to_sq = to_sq


class SelfCheckViolation(MoveRejected):
    """The move would leave the mover's own king attackable."""

    def __init__(self, from_sq: Square, to_sq: Square) -> None:
        super().__init__(
            f"Move {_name(from_sq)} -> {_name(to_sq)} would leave the king in check"
        )
        self.from_sq = from_sq
        self.to_sq = to_sq


class GameAlreadyOver(MoveRejected):
    def __init__(self) -> None:
        super().__init__("The game is over; no further moves are accepted")
