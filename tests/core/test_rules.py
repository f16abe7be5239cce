"""Tests for Rules: check, checkmate, stalemate, fifty-move rule."""

import logging

import pytest

from chessrules.core.enums import Color
from chessrules.core.rules import Rules
from chessrules.core.status import GameStatus
from chessrules.errors import MissingKingError
from chessrules.game.state import Game


class TestCheck:
    def test_starting_not_in_check(self) -> None:
        assert Game.standard().is_check() is None

    def test_queen_check_along_diagonal(self) -> None:
        g = Game.from_fen("rnb1kbnr/pp1ppppp/8/q1p5/4P3/3P4/PPP2PPP/RNBQKBNR")
        assert g.is_check() == Color.WHITE

    def test_blocked_diagonal_is_not_check(self) -> None:
        g = Game.from_fen("rnb1kbnr/pp1ppppp/8/q1p5/4P3/8/PPPP1PPP/RNBQKBNR")
        assert g.is_check() is None

    def test_pawn_gives_check(self) -> None:
        g = Game.from_fen("8/8/8/8/8/8/3p4/4K2k w")
        assert g.is_color_in_check(Color.WHITE)
        assert not g.is_color_in_check(Color.BLACK)

    def test_both_kings_attacked_rules_against_side_to_move(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        fen = "8/8/8/8/8/8/8/kR2r1K1"
        with caplog.at_level(logging.WARNING, logger="chessrules.core.rules"):
            assert Game.from_fen(f"{fen} w").is_check() == Color.WHITE
            assert Game.from_fen(f"{fen} b").is_check() == Color.BLACK
        assert "Both kings" in caplog.text

    def test_missing_king_is_fatal(self) -> None:
        g = Game.from_fen("8/8/8/8/8/8/8/4K3")
        with pytest.raises(MissingKingError):
            g.is_check()


class TestCheckmate:
    def test_fools_mate(self) -> None:
        g = Game.from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")
        assert g.is_checkmate() == Color.WHITE

    def test_check_with_escape_is_not_mate(self) -> None:
        g = Game.from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/4PP2/PPPP3P/RNBQKBNR")
        assert g.is_check() == Color.WHITE
        assert g.is_checkmate() is None

    def test_back_rank_mate(self) -> None:
        # R on a8 checks black king d8; white king d6 covers all escapes
        g = Game.from_fen("R2k4/8/3K4/8/8/8/8/8 b")
        assert g.is_checkmate() == Color.BLACK
        for piece in g.get_pieces():
            if piece.color == Color.BLACK:
                assert g.get_legal_moves(piece) == []

    def test_rook_mate_on_the_edge(self) -> None:
        g = Game.from_fen("8/8/8/5K1k/8/8/8/7R b")
        assert g.is_checkmate() == Color.BLACK

    def test_no_check_no_mate(self) -> None:
        assert Game.standard().is_checkmate() is None


class TestStalemate:
    def test_king_boxed_in_by_pawn_and_king(self) -> None:
        g = Game.from_fen("5k2/5P2/5K2/8/8/8/8/8 b")
        assert g.is_stalemate()
        g.current_move = Color.WHITE
        assert not g.is_stalemate()

    def test_own_pieces_block_everything(self) -> None:
        g = Game.from_fen("8/8/8/8/8/8/4p1pp/4Kbrk b")
        assert g.is_stalemate()
        g.current_move = Color.WHITE
        assert not g.is_stalemate()

    def test_bishop_covers_escape(self) -> None:
        g = Game.from_fen("k7/P7/K7/8/5B2/8/8/8 b")
        assert g.is_stalemate()

    def test_mate_is_not_stalemate(self) -> None:
        g = Game.from_fen("R2k4/8/3K4/8/8/8/8/8 b")
        assert not g.is_stalemate()


class TestFiftyMoveRule:
    def test_threshold(self) -> None:
        g = Game.from_fen("4k3/8/8/8/8/8/8/4K3 w - - 49 60")
        assert not Rules.is_fifty_move_rule(g)
        g.halfmove_clock = 50
        assert Rules.is_fifty_move_rule(g)

    def test_configurable_limit(self) -> None:
        g = Game(fifty_move_limit=100)
        g.halfmove_clock = 99
        assert not Rules.is_fifty_move_rule(g)


class TestEvaluate:
    def test_checkmate_beats_check(self) -> None:
        g = Game.from_fen("R2k4/8/3K4/8/8/8/8/8 b")
        assert Rules.evaluate(g) == GameStatus.checkmate(Color.BLACK)

    def test_check(self) -> None:
        g = Game.from_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/4PP2/PPPP3P/RNBQKBNR")
        assert Rules.evaluate(g) == GameStatus.check(Color.WHITE)

    def test_stalemate_beats_fifty_moves(self) -> None:
        g = Game.from_fen("5k2/5P2/5K2/8/8/8/8/8 b - - 80 90")
        assert Rules.evaluate(g) == GameStatus.stalemate()

    def test_fifty_moves(self) -> None:
        g = Game.from_fen("4k3/8/8/8/8/8/8/4K3 w - - 50 60")
        assert Rules.evaluate(g) == GameStatus.fifty_move_rule()

    def test_active(self) -> None:
        assert Rules.evaluate(Game.standard()) == GameStatus.active()
