"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.game.controller import GameController, new_game
from chessrules.game.state import Game


@pytest.fixture
def game() -> Game:
    """Fresh game in the standard starting position."""
    return new_game()


@pytest.fixture
def ctrl() -> GameController:
    return GameController()
