"""Game state machine: turn order, move application and status."""

from __future__ import annotations

import logging

from chessrules.core.board import Board
from chessrules.core.enums import PROMOTION_TYPES, Color, MoveType, PieceType
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.notation import populate_game
from chessrules.core.piece import Piece
from chessrules.core.rules import FIFTY_MOVE_LIMIT, Rules
from chessrules.core.status import GameStatus
from chessrules.core.types import Position
from chessrules.errors import PromotionError

_LOGGER = logging.getLogger(__name__)


class Game:
    """Board plus everything needed to decide what may happen next.

    A game starts empty; populate it square by square with
    :meth:`set_piece` or in bulk with :meth:`load_fen`. Drive it with
    :meth:`move_piece` / :meth:`promote` and call :meth:`update_game`
    after every move to refresh :attr:`status`.
    """

    __slots__ = (
        "board",
        "current_move",
        "status",
        "en_passant_target",
        "halfmove_clock",
        "fifty_move_limit",
    )

    def __init__(self, fifty_move_limit: int = FIFTY_MOVE_LIMIT) -> None:
        self.board = Board()
        self.current_move = Color.WHITE
        self.status = GameStatus.active()
        self.en_passant_target: Piece | None = None
        self.halfmove_clock = 0
        self.fifty_move_limit = fifty_move_limit

    # ── Setup ────────────────────────────────────────────────────────────

    @classmethod
    def standard(cls, fifty_move_limit: int = FIFTY_MOVE_LIMIT) -> Game:
        """A game at the standard starting position, White to move."""
        game = cls(fifty_move_limit)
        game.reset(Board.initial())
        return game

    @classmethod
    def from_fen(cls, fen: str, fifty_move_limit: int = FIFTY_MOVE_LIMIT) -> Game:
        game = cls(fifty_move_limit)
        game.load_fen(fen)
        return game

    def load_fen(self, fen: str) -> None:
        """Replace the whole position with the one described by *fen*."""
        populate_game(self, fen)

    def reset(
        self, board: Board | None = None, current_move: Color = Color.WHITE
    ) -> None:
        """Install *board* (or an empty one) and clear all derived state."""
        self.board = board if board is not None else Board()
        self.current_move = current_move
        self.status = GameStatus.active()
        self.en_passant_target = None
        self.halfmove_clock = 0

    def clear_board(self) -> None:
        self.board.clear()

    def set_piece(self, piece: Piece) -> None:
        self.board.place(piece)

    def remove_piece(self, position: Position) -> Piece | None:
        return self.board.remove(position)

    # ── Queries ──────────────────────────────────────────────────────────

    def get_pieces(self) -> list[Piece]:
        """Snapshot of every piece on the board."""
        return self.board.pieces()

    def piece_at(self, position: Position) -> Piece | None:
        return self.board.get(position)

    def color_at(self, position: Position) -> Color | None:
        return self.board.color_at(position)

    def get_legal_moves(self, piece: Piece) -> list[Position]:
        return MoveGenerator(self).legal_moves(piece)

    def is_color_in_check(self, color: Color) -> bool:
        return Rules.is_color_in_check(self, color)

    def is_check(self) -> Color | None:
        return Rules.is_check(self)

    def is_checkmate(self) -> Color | None:
        return Rules.is_checkmate(self)

    def is_stalemate(self) -> bool:
        return Rules.is_stalemate(self)

    def render(self, unicode: bool = False) -> str:
        return self.board.render(unicode)

    # ── Move application ─────────────────────────────────────────────────

    def move_piece(self, src: Position, dst: Position) -> MoveType:
        """Play *src* → *dst* for the side to move.

        Returns ``MoveType.INVALID`` and leaves the game untouched when the
        move is not legal right now.
        """
        if self.status.is_blocking:
            _LOGGER.debug("Rejected %s-%s: game is %s", src, dst, self.status)
            return MoveType.INVALID

        piece = self.board.get(src)
        if piece is None or piece.color != self.current_move:
            _LOGGER.debug(
                "Rejected %s-%s: no %s piece there", src, dst, self.current_move
            )
            return MoveType.INVALID

        if dst not in self.get_legal_moves(piece):
            _LOGGER.debug("Rejected %s-%s: not a legal destination", src, dst)
            return MoveType.INVALID

        move_type = self.apply_move(src, dst)
        _LOGGER.debug("Played %s %s-%s (%s)", str(piece), src, dst, move_type.name)
        return move_type

    def apply_move(self, src: Position, dst: Position) -> MoveType:
        """Apply a validated move, including castling and en-passant side effects.

        Caller is responsible for legality check.
        """
        piece = self.board[src]
        if piece is None:
            raise ValueError(f"No piece on {src}")
        move_type = MoveGenerator(self).classify(piece, dst)

        self.en_passant_target = None
        moved, captured = self.board.relocate(src, dst)

        if move_type == MoveType.EN_PASSANT:
            captured = self.board.remove(Position(dst.file, src.rank))
        elif move_type == MoveType.CASTLING:
            step = 1 if dst.file > src.file else -1
            rook_from = Position(7 if step > 0 else 0, src.rank)
            self.board.relocate(rook_from, src + (step, 0))

        if moved.piece_type == PieceType.PAWN:
            if abs(dst.rank - src.rank) == 2:
                self.en_passant_target = moved
            if dst.rank == moved.color.opposite.back_rank:
                self.status = GameStatus.promotion(moved)

        if captured is not None or moved.piece_type == PieceType.PAWN:
            self.halfmove_clock = 0
        else:
            self.halfmove_clock += 1

        self.current_move = self.current_move.opposite
        return move_type

    def promote(self, piece_type: PieceType) -> Piece:
        """Turn the pawn awaiting promotion into *piece_type*."""
        pawn = self.status.piece
        if not self.status.is_promotion_pending or pawn is None:
            raise PromotionError(f"No promotion pending (status is {self.status})")
        if piece_type not in PROMOTION_TYPES:
            raise PromotionError(f"Cannot promote to {piece_type.name}")

        promoted = pawn.with_type(piece_type)
        self.board[pawn.position] = promoted
        self.status = GameStatus.active()
        _LOGGER.debug("Promoted pawn on %s to %s", pawn.position, piece_type.name)
        return promoted

    def update_game(self) -> GameStatus:
        """Recompute :attr:`status` from the board and return it.

        A pending promotion is left alone until :meth:`promote` resolves it.
        """
        if self.status.is_promotion_pending:
            return self.status

        status = Rules.evaluate(self)
        if status != self.status:
            _LOGGER.debug("Status %s -> %s", self.status, status)
        self.status = status
        return status

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Game:
        """Independent snapshot; moves on the copy never touch this game."""
        game = Game(self.fifty_move_limit)
        game.board = self.board.copy()
        game.current_move = self.current_move
        game.status = self.status
        game.en_passant_target = self.en_passant_target
        game.halfmove_clock = self.halfmove_clock
        return game

    def __repr__(self) -> str:
        header = f"Game(current_move={self.current_move}, status={self.status})"
        return f"{header}\n{self.board!r}"
