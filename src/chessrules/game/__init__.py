"""Game layer — the state machine a caller drives move by move."""

from chessrules.game.state import Game

__all__ = ["Game"]
