"""Notation package: FEN placement parsing and serialization."""

from chessrules.core.notation.fen import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
    populate_game,
)

__all__ = [
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
    "populate_game",
]
