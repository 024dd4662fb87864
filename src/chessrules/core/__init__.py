"""Core domain layer: pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, MoveGenerator, parse_square

    board = Board.initial()
    gen = MoveGenerator(board)
    print(gen.pseudo_legal_targets(parse_square("e2")))
"""

from chessrules.core.board import Board, BoardChange
from chessrules.core.enums import Color, GameState, PieceType
from chessrules.core.errors import (
    ChessError,
    GameAlreadyOver,
    IllegalDestination,
    InvalidNotation,
    MoveRejected,
    NoPieceAtSource,
    SelfCheckViolation,
    WrongColorToMove,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.placement import (
    STARTING_PLACEMENT,
    board_from_placement,
    placement_from_board,
)
from chessrules.core.rules import Rules
from chessrules.core.ruleset import RuleSet
from chessrules.core.types import (
    Square,
    col_of,
    make_square,
    parse_square,
    row_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameState",
    "PieceType",
    # Errors
    "ChessError",
    "GameAlreadyOver",
    "IllegalDestination",
    "InvalidNotation",
    "MoveRejected",
    "NoPieceAtSource",
    "SelfCheckViolation",
    "WrongColorToMove",
    # Types / helpers
    "Square",
    "col_of",
    "make_square",
    "parse_square",
    "row_of",
    "square_name",
    # Domain objects
    "Board",
    "BoardChange",
    "MoveGenerator",
    "Piece",
    "Rules",
    "RuleSet",
    # Placement
    "STARTING_PLACEMENT",
    "board_from_placement",
    "placement_from_board",
]
