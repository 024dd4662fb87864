"""Move legality: own-king safety, check and game-over detection."""

from __future__ import annotations

from chessrules.core.board import Board, BoardChange
from chessrules.core.enums import Color, GameState, PieceType
from chessrules.core.errors import SelfCheckViolation
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.ruleset import RuleSet
from chessrules.core.types import Square


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    @staticmethod
    def is_king_attacked(board: Board, color: Color, rules: RuleSet | None = None) -> bool:
        """Is any king of *color* reachable by an opposing piece?"""
        return MoveGenerator(board, rules).is_king_attacked(color)

    @staticmethod
    def apply_if_safe(
        board: Board,
        from_sq: Square,
        to_sq: Square,
        rules: RuleSet | None = None,
        *,
        validate: bool = True,
    ) -> BoardChange:
        """Apply a pseudo-legal move, keeping it only if the mover's king is safe.

        The move is applied tentatively; if any enemy piece can then reach
        the mover's king the board is reverted and
        :class:`SelfCheckViolation` is raised. With ``validate=False`` the
        scan is skipped and the move is committed unconditionally.
        """
        change = board.apply(from_sq, to_sq)
        if validate and Rules.is_king_attacked(board, change.moved.color, rules):
            board.revert(change)
            raise SelfCheckViolation(from_sq, to_sq)
        return change

    @staticmethod
    def resulting_state(
        board: Board, change: BoardChange, rules: RuleSet | None = None
    ) -> GameState:
        """State after *change* has been committed to *board*."""
        if change.captured is not None and change.captured.piece_type == PieceType.KING:
            return GameState.GAME_OVER

        gen = MoveGenerator(board, rules)
        if rules is not None and rules.discovered_checks:
            in_check = gen.is_king_attacked(change.moved.color.opposite)
        else:
            in_check = gen.checks_from(change.to_sq)
        return GameState.CHECK if in_check else GameState.IN_PROGRESS
