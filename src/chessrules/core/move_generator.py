"""Pseudo-legal move generation + attack detection."""

from __future__ import annotations

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.ruleset import RuleSet
from chessrules.core.types import Square, col_of, make_square, row_of

# Offsets are (d_col, d_row); row 0 is rank 8.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -2),
    (1, -2),
    (-2, -1),
    (2, -1),
    (-2, 1),
    (2, 1),
    (-1, 2),
    (1, 2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (0, -1),
    (1, -1),
    (-1, 0),
    (1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

ROOK_DIRS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (1, -1), (-1, 1), (1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS

_MAX_RAY = 7

# Pawn direction and start row are intrinsic to the pawn's own color.
_PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
_PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


class MoveGenerator:
    """Generates pseudo-legal destinations on a :class:`Board`.

    Pseudo-legal targets respect board edges, blocking pieces and capture
    eligibility, but not whether the mover's own king ends up attacked.
    That is decided by :class:`~chessrules.core.rules.Rules`.
    """

    __slots__ = ("_board", "_rules")

    def __init__(self, board: Board, rules: RuleSet | None = None) -> None:
        self._board = board
        self._rules = rules or RuleSet.standard()

    # -- Public API ---------------------------------------------------------

    def pseudo_legal_targets(self, sq: Square) -> list[Square] | None:
        """Destinations for the piece on *sq*, or ``None`` if it is empty."""
        piece = self._board[sq]
        if piece is None:
            return None

        moves: list[Square] = []
        color = piece.color
        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            self._gen_pawn(sq, color, moves)
        elif piece_type == PieceType.KNIGHT:
            self._gen_leaper(sq, color, KNIGHT_OFFSETS, moves)
        elif piece_type == PieceType.BISHOP:
            self._gen_sliding(sq, color, BISHOP_DIRS, moves)
        elif piece_type == PieceType.ROOK:
            self._gen_sliding(sq, color, ROOK_DIRS, moves)
        elif piece_type == PieceType.QUEEN:
            self._gen_sliding(sq, color, QUEEN_DIRS, moves)
        elif piece_type == PieceType.KING:
            self._gen_leaper(sq, color, KING_OFFSETS, moves)
        return moves

    # -- Attack detection (public) -----------------------------------------

    def is_king_attacked(self, color: Color) -> bool:
        """Can any piece of the opponent reach a king of *color*?"""
        for sq in self._board.pieces_of(color.opposite):
            if self._hits_king(sq, color):
                return True
        return False

    def checks_from(self, sq: Square) -> bool:
        """Does the piece on *sq* attack the opposing king?"""
        piece = self._board[sq]
        if piece is None:
            return False
        return self._hits_king(sq, piece.color.opposite)

    # -- Shared primitive --------------------------------------------------

    def leap(self, sq: Square, d_col: int, d_row: int, color: Color) -> Square | None:
        """Square at the given offset from *sq*.

        ``None`` if it falls off the board (including wrapping around a side
        edge) or holds a piece of *color*.
        """
        col = col_of(sq) + d_col
        row = row_of(sq) + d_row
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        target = make_square(col, row)
        occupant = self._board[target]
        if occupant is not None and occupant.color == color:
            return None
        return target

    # -- Piece-specific generators (private) -------------------------------

    def _hits_king(self, sq: Square, king_color: Color) -> bool:
        king = Piece(king_color, PieceType.KING)
        targets = self.pseudo_legal_targets(sq) or []
        return any(self._board[t] == king for t in targets)

    def _gen_leaper(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        for d_col, d_row in offsets:
            to_sq = self.leap(sq, d_col, d_row, color)
            if to_sq is not None:
                moves.append(to_sq)

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Square],
    ) -> None:
        board = self._board
        for d_col, d_row in directions:
            for step in range(1, _MAX_RAY + 1):
                to_sq = self.leap(sq, d_col * step, d_row * step, color)
                if to_sq is None:
                    break
                moves.append(to_sq)
                if not board.is_empty(to_sq):
                    break

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Square]) -> None:
        board = self._board
        direction = _PAWN_DIRECTION[color]
        needs_empty = self._rules.pawn_push_requires_empty

        one_step = self.leap(sq, 0, direction, color)
        one_step_open = one_step is not None and (
            not needs_empty or board.is_empty(one_step)
        )
        if one_step_open:
            moves.append(one_step)

        if row_of(sq) == _PAWN_START_ROW[color]:
            two_step = self.leap(sq, 0, 2 * direction, color)
            if two_step is not None:
                if not needs_empty:
                    moves.append(two_step)
                elif one_step_open and board.is_empty(two_step):
                    moves.append(two_step)

        for d_col in (-1, 1):
            cap_sq = self.leap(sq, d_col, direction, color)
            # leap() already rejects own pieces; an occupant here is an enemy.
            if cap_sq is not None and not board.is_empty(cap_sq):
                moves.append(cap_sq)
