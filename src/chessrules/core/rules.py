"""High-level chess rules: check, checkmate, stalemate, fifty-move rule."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.enums import Color
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.status import GameStatus

if TYPE_CHECKING:
    from chessrules.game.state import Game

_LOGGER = logging.getLogger(__name__)

FIFTY_MOVE_LIMIT = 50  # half-moves without a capture or pawn move


class Rules:
    """Static rule-checker that operates on a :class:`Game`."""

    @staticmethod
    def is_color_in_check(game: Game, color: Color) -> bool:
        return MoveGenerator(game).is_color_in_check(color)

    @staticmethod
    def is_check(game: Game) -> Color | None:
        """The color whose king is attacked, if any.

        Both kings attacked at once cannot arise from legal play; it is
        reported as the side to move.
        """
        gen = MoveGenerator(game)
        white = gen.is_color_in_check(Color.WHITE)
        black = gen.is_color_in_check(Color.BLACK)
        if white and black:
            _LOGGER.warning(
                "Both kings are attacked; ruling check against side to move (%s)",
                game.current_move,
            )
            return game.current_move
        if white:
            return Color.WHITE
        if black:
            return Color.BLACK
        return None

    @staticmethod
    def has_legal_moves(game: Game, color: Color) -> bool:
        gen = MoveGenerator(game)
        return any(gen.legal_moves(piece) for piece in game.board.pieces(color))

    @staticmethod
    def is_checkmate(game: Game) -> Color | None:
        checked = Rules.is_check(game)
        if checked is None:
            return None
        if Rules.has_legal_moves(game, checked):
            return None
        return checked

    @staticmethod
    def is_stalemate(game: Game) -> bool:
        color = game.current_move
        if Rules.is_color_in_check(game, color):
            return False
        return not Rules.has_legal_moves(game, color)

    @staticmethod
    def is_fifty_move_rule(game: Game) -> bool:
        return game.halfmove_clock >= game.fifty_move_limit

    @staticmethod
    def evaluate(game: Game) -> GameStatus:
        """Recompute the status from the board, highest priority first."""
        mated = Rules.is_checkmate(game)
        if mated is not None:
            return GameStatus.checkmate(mated)

        checked = Rules.is_check(game)
        if checked is not None:
            return GameStatus.check(checked)

        if Rules.is_stalemate(game):
            return GameStatus.stalemate()

        if Rules.is_fifty_move_rule(game):
            return GameStatus.fifty_move_rule()

        return GameStatus.active()
