"""FEN piece-placement parsing and serialization.

Only the first FEN field is handled: a custom position is a board, not a
game record.
"""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.piece import Piece
from chessrules.core.types import make_square

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Parse a FEN placement field into a :class:`Board`."""
    # Accept a full FEN string too; only the first field matters.
    fields = placement.split()
    if not fields:
        raise ValueError(f"Invalid FEN placement: {placement!r}")
    rows = fields[0].split("/")
    if len(rows) != 8:
        raise ValueError(f"Invalid FEN board (must contain 8 ranks): {placement!r}")

    board = Board()
    # FEN lists rank 8 first, matching row 0.
    for row, row_text in enumerate(rows):
        col = 0
        for ch in row_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {placement!r}")
                col += step
            else:
                if col >= 8:
                    raise ValueError(f"Invalid FEN rank width: {placement!r}")
                board[make_square(col, row)] = Piece.from_char(ch)
                col += 1
            if col > 8:
                raise ValueError(f"Invalid FEN rank width: {placement!r}")
        if col != 8:
            raise ValueError(f"Invalid FEN rank width: {placement!r}")
    return board


def placement_from_board(board: Board) -> str:
    """Serialize *board* to a FEN placement field."""
    rows: list[str] = []
    for row in range(8):
        empty = 0
        row_str = ""
        for col in range(8):
            piece = board[make_square(col, row)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row_str += str(empty)
                    empty = 0
                row_str += str(piece)
        if empty:
            row_str += str(empty)
        rows.append(row_str)
    return "/".join(rows)
