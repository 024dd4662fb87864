"""Game record: state, side to move and board owned by one game."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessrules.core.board import Board
from chessrules.core.enums import Color, GameState
from chessrules.core.ruleset import RuleSet


@dataclass
class Game:
    """Mutable game instance.

    All mutation goes through :mod:`chessrules.game.controller`; the
    instance is not shared and has no internal locking.
    """

    state: GameState = GameState.IN_PROGRESS
    active_color: Color = Color.WHITE
    board: Board = field(default_factory=Board.initial)
    rules: RuleSet = field(default_factory=RuleSet.standard)
    ply_count: int = 0

    @property
    def is_game_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    @property
    def is_check(self) -> bool:
        return self.state == GameState.CHECK

    def __str__(self) -> str:
        return f"{self.board.render()}\n{self.state.name} - {self.active_color} to move"
