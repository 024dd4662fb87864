"""Turn/state controller: the sole mutator of a :class:`Game`.

The module-level functions take the game explicitly. :class:`GameController`
wraps a single game and notifies subscribers via simple callbacks so a UI or
test can observe it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.board import BoardChange
from chessrules.core.enums import Color, GameState, PieceType
from chessrules.core.errors import (
    GameAlreadyOver,
    IllegalDestination,
    MoveRejected,
    NoPieceAtSource,
    WrongColorToMove,
)
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.placement import board_from_placement
from chessrules.core.rules import Rules
from chessrules.core.ruleset import RuleSet
from chessrules.core.types import parse_square, square_name
from chessrules.game.state import Game

_LOGGER = logging.getLogger(__name__)


# ── Functional API ───────────────────────────────────────────────────────────


def new_game(
    rules: RuleSet | None = None,
    placement: str | None = None,
    active_color: Color = Color.WHITE,
) -> Game:
    """Standard starting position (or *placement*), *active_color* to move."""
    game = Game(active_color=active_color, rules=rules or RuleSet.standard())
    if placement is not None:
        game.board = board_from_placement(placement)
    return game


def try_move(game: Game, from_pos: str, to_pos: str) -> GameState:
    """Move a piece and return the resulting state.

    Raises a :class:`MoveRejected` subclass, leaving the game untouched, if
    the move is not allowed. Raises :class:`InvalidNotation` for malformed
    square names.
    """
    _change, state = _commit(game, from_pos, to_pos)
    return state


def make_move(game: Game, from_pos: str, to_pos: str) -> GameState | None:
    """Like :func:`try_move`, but a rejection returns ``None``."""
    try:
        return try_move(game, from_pos, to_pos)
    except MoveRejected as exc:
        _LOGGER.info("Move %s -> %s rejected: %s", from_pos, to_pos, exc)
        return None


def get_possible_moves(game: Game, position: str) -> list[str] | None:
    """Pseudo-legal destinations of the piece on *position*.

    ``None`` if the square is empty. Not filtered for own-king safety.
    """
    targets = MoveGenerator(game.board, game.rules).pseudo_legal_targets(
        parse_square(position)
    )
    if targets is None:
        return None
    return [square_name(sq) for sq in targets]


def set_promotion(game: Game, position: str, new_type: PieceType) -> None:
    """Replace the type of the piece on *position*, keeping its color.

    No legality check; state and side to move are unchanged.
    """
    sq = parse_square(position)
    piece = game.board[sq]
    if piece is None:
        raise NoPieceAtSource(sq)
    game.board[sq] = piece.promoted(new_type)
    _LOGGER.debug("Promoted %s on %s to %s", piece.code, square_name(sq), new_type.name)


def get_game_state(game: Game) -> GameState:
    return game.state


def _commit(game: Game, from_pos: str, to_pos: str) -> tuple[BoardChange, GameState]:
    from_sq = parse_square(from_pos)
    to_sq = parse_square(to_pos)

    if game.is_game_over:
        raise GameAlreadyOver()

    board = game.board
    piece = board[from_sq]
    if piece is None:
        raise NoPieceAtSource(from_sq)
    if piece.color != game.active_color:
        raise WrongColorToMove(from_sq, game.active_color)

    targets = MoveGenerator(board, game.rules).pseudo_legal_targets(from_sq) or []
    if to_sq not in targets:
        raise IllegalDestination(from_sq, to_sq)

    # While in check the safety scan is skipped unless the rules demand it.
    validate = game.rules.validate_in_check or game.state != GameState.CHECK
    change = Rules.apply_if_safe(board, from_sq, to_sq, game.rules, validate=validate)

    state = Rules.resulting_state(board, change, game.rules)
    game.state = state
    game.active_color = game.active_color.opposite
    game.ply_count += 1

    _LOGGER.debug(
        "%s %s -> %s%s: %s",
        change.moved.code,
        square_name(from_sq),
        square_name(to_sq),
        f" x {change.captured.code}" if change.captured else "",
        state.name,
    )
    return change, state


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[BoardChange, GameState], None]
RejectedCallback = Callable[[MoveRejected], None]
GameOverCallback = Callable[[Color], None]  # winner


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns one :class:`Game`, applies moves and notifies listeners.

    Thread-safety: methods must be called from a single thread; a host with
    several observers serializes mutations itself.
    """

    __slots__ = ("_game", "events")

    def __init__(self, game: Game | None = None) -> None:
        self._game = game or new_game()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def game(self) -> Game:
        return self._game

    @property
    def state(self) -> GameState:
        return self._game.state

    @property
    def active_color(self) -> Color:
        return self._game.active_color

    # ── Operations ───────────────────────────────────────────────────────

    def new_game(
        self,
        rules: RuleSet | None = None,
        placement: str | None = None,
        active_color: Color = Color.WHITE,
    ) -> None:
        self._game = new_game(rules, placement, active_color)

    def submit_move(self, from_pos: str, to_pos: str) -> GameState | None:
        """Apply a move; ``None`` (and an ``on_rejected`` event) if refused."""
        mover = self._game.active_color
        try:
            change, state = _commit(self._game, from_pos, to_pos)
        except MoveRejected as exc:
            _LOGGER.info("Move %s -> %s rejected: %s", from_pos, to_pos, exc)
            self._emit_rejected(exc)
            return None

        self._emit_move(change, state)
        if state == GameState.GAME_OVER:
            self._emit_game_over(mover)
        return state

    def possible_moves(self, position: str) -> list[str] | None:
        return get_possible_moves(self._game, position)

    def promote(self, position: str, new_type: PieceType) -> None:
        set_promotion(self._game, position, new_type)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_move(self, change: BoardChange, state: GameState) -> None:
        for cb in self.events.on_move:
            cb(change, state)

    def _emit_rejected(self, error: MoveRejected) -> None:
        for cb in self.events.on_rejected:
            cb(error)

    def _emit_game_over(self, winner: Color) -> None:
        for cb in self.events.on_game_over:
            cb(winner)
