"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.game.state import Game


@pytest.fixture
def game() -> Game:
    """An empty game, White to move."""
    return Game()


@pytest.fixture
def standard_game() -> Game:
    return Game.standard()
