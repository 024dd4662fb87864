"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, make_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass(frozen=True, slots=True)
class BoardChange:
    """Undo record for a single committed move."""

    from_sq: Square
    to_sq: Square
    moved: Piece
    captured: Piece | None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


class Board:
    """Mutable 64-square board. A passive store with no rule logic."""

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def pieces_of(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, in index order."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    # -- Mutation / copying -------------------------------------------------

    def apply(self, from_sq: Square, to_sq: Square) -> BoardChange:
        """Vacate *from_sq* and overwrite *to_sq* with its piece."""
        moved = self._squares[from_sq]
        if moved is None:
            raise ValueError(f"No piece to move on square {from_sq}")
        change = BoardChange(from_sq, to_sq, moved, self._squares[to_sq])
        self._squares[to_sq] = moved
        self._squares[from_sq] = None
        return change

    def revert(self, change: BoardChange) -> None:
        """Undo a change returned by :meth:`apply`."""
        self._squares[change.from_sq] = change.moved
        self._squares[change.to_sq] = change.captured

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col in range(8):
            b[make_square(col, 6)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(col, 1)] = Piece(Color.BLACK, PieceType.PAWN)

        for col, pt in enumerate(_BACK_RANK):
            b[make_square(col, 7)] = Piece(Color.WHITE, pt)
            b[make_square(col, 0)] = Piece(Color.BLACK, pt)
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self) -> str:
        """ASCII grid, rank 8 on top; ``*`` marks an empty square."""
        border = "  +" + "-" * 25 + "+"
        rows: list[str] = [border]
        for row in range(8):
            cells = []
            for col in range(8):
                p = self[make_square(col, row)]
                cells.append(p.code if p else " *")
            rows.append(f"{8 - row} | {' '.join(cells)} |")
        rows.append(border)
        rows.append("     " + "  ".join("ABCDEFGH"))
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        from chessrules.core.placement import placement_from_board

        return f"Board({placement_from_board(self)!r})"
