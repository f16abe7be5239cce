"""Core domain layer — pure chess rules with zero external dependencies."""

from chessrules.core.board import Board
from chessrules.core.enums import PROMOTION_TYPES, Color, MoveType, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import (
    STARTING_FEN,
    board_from_fen,
    board_to_fen,
)
from chessrules.core.piece import Piece
from chessrules.core.rules import FIFTY_MOVE_LIMIT, Rules
from chessrules.core.status import GameStatus, StatusKind
from chessrules.core.types import Position, parse_position, position_name

__all__ = [
    # Enums
    "Color",
    "MoveType",
    "PieceType",
    "PROMOTION_TYPES",
    "StatusKind",
    # Types / helpers
    "Position",
    "parse_position",
    "position_name",
    # Domain objects
    "Board",
    "GameStatus",
    "MoveGenerator",
    "Piece",
    "Rules",
    "FIFTY_MOVE_LIMIT",
    # Notation
    "STARTING_FEN",
    "board_from_fen",
    "board_to_fen",
]
