"""Tests for the GameStatus value."""

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.status import GameStatus, StatusKind
from chessrules.core.types import C8


class TestGameStatus:
    def test_constructors(self) -> None:
        assert GameStatus.active().kind == StatusKind.ACTIVE
        assert GameStatus.check(Color.BLACK).color == Color.BLACK
        pawn = Piece(Color.WHITE, PieceType.PAWN, C8, 5)
        assert GameStatus.promotion(pawn).piece == pawn

    def test_equality_includes_payload(self) -> None:
        assert GameStatus.check(Color.WHITE) == GameStatus.check(Color.WHITE)
        assert GameStatus.check(Color.WHITE) != GameStatus.check(Color.BLACK)
        assert GameStatus.check(Color.WHITE) != GameStatus.checkmate(Color.WHITE)

    def test_terminal_and_blocking(self) -> None:
        pawn = Piece(Color.WHITE, PieceType.PAWN, C8, 5)
        assert GameStatus.checkmate(Color.WHITE).is_terminal
        assert GameStatus.stalemate().is_terminal
        assert GameStatus.fifty_move_rule().is_terminal
        assert not GameStatus.check(Color.WHITE).is_blocking
        assert not GameStatus.promotion(pawn).is_terminal
        assert GameStatus.promotion(pawn).is_blocking

    def test_str(self) -> None:
        assert str(GameStatus.active()) == "active"
        assert str(GameStatus.checkmate(Color.BLACK)) == "checkmate(black)"
        pawn = Piece(Color.WHITE, PieceType.PAWN, C8, 5)
        assert str(GameStatus.promotion(pawn)) == "promotion(C8)"
