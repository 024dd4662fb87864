"""Game management layer: game record and turn/state controller.

Quick start::

    from chessrules.game import make_move, new_game

    game = new_game()
    make_move(game, "e2", "e4")  # GameState.IN_PROGRESS
"""

from chessrules.game.controller import (
    GameController,
    GameEvents,
    get_game_state,
    get_possible_moves,
    make_move,
    new_game,
    set_promotion,
    try_move,
)
from chessrules.game.state import Game

__all__ = [
    "Game",
    "GameController",
    "GameEvents",
    "get_game_state",
    "get_possible_moves",
    "make_move",
    "new_game",
    "set_promotion",
    "try_move",
]
