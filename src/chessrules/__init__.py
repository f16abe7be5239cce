"""Chess rules engine: legal move generation and game status tracking.

Quick start::

    from chessrules import Game, parse_position

    game = Game.standard()
    pawn = game.piece_at(parse_position("E2"))
    print([str(p) for p in game.get_legal_moves(pawn)])  # ['E3', 'E4']
    game.move_piece(parse_position("E2"), parse_position("E4"))
    print(game.update_game())                    # active
"""

from chessrules.core import (
    FIFTY_MOVE_LIMIT,
    PROMOTION_TYPES,
    STARTING_FEN,
    Board,
    Color,
    GameStatus,
    MoveGenerator,
    MoveType,
    Piece,
    PieceType,
    Position,
    Rules,
    StatusKind,
    board_from_fen,
    board_to_fen,
    parse_position,
    position_name,
)
from chessrules.errors import (
    ChessRulesError,
    MissingKingError,
    PromotionError,
    SetupError,
)
from chessrules.game import Game

__all__ = [
    "Board",
    "ChessRulesError",
    "Color",
    "FIFTY_MOVE_LIMIT",
    "Game",
    "GameStatus",
    "MissingKingError",
    "MoveGenerator",
    "MoveType",
    "PROMOTION_TYPES",
    "Piece",
    "PieceType",
    "Position",
    "PromotionError",
    "Rules",
    "STARTING_FEN",
    "SetupError",
    "StatusKind",
    "board_from_fen",
    "board_to_fen",
    "parse_position",
    "position_name",
]
