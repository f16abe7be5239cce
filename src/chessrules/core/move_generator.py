"""Move classification, pseudo-legal generation and the legality filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessrules.core.enums import Color, MoveType, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Delta, Position

if TYPE_CHECKING:
    from chessrules.game.state import Game


KNIGHT_OFFSETS: tuple[Delta, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[Delta, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[Delta, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[Delta, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[Delta, ...] = BISHOP_DIRS + ROOK_DIRS

_KING_HOME_FILE = 4

# (rook file, king step, files that must be empty)
_CASTLING_SIDES: tuple[tuple[int, int, tuple[int, ...]], ...] = (
    (7, 1, (5, 6)),
    (0, -1, (1, 2, 3)),
)

_PAWN_CAPTURES = (MoveType.ATTACK, MoveType.EN_PASSANT)


class MoveGenerator:
    """Generates moves for single pieces of a :class:`Game`.

    The game is never mutated. Legality checks run each candidate on a
    throwaway :meth:`Game.copy`.
    """

    __slots__ = ("_game", "_board")

    def __init__(self, game: Game) -> None:
        self._game = game
        self._board = game.board

    # -- Classification -----------------------------------------------------

    def classify(self, piece: Piece, destination: Position) -> MoveType:
        """Label *destination* for *piece*, ignoring path and movement pattern."""
        if not destination.is_valid:
            return MoveType.INVALID

        if piece.piece_type == PieceType.PAWN and self._is_en_passant(
            piece, destination
        ):
            return MoveType.EN_PASSANT

        if (
            piece.piece_type == PieceType.KING
            and abs(destination.file - piece.position.file) == 2
        ):
            return MoveType.CASTLING

        occupant = self._board.color_at(destination)
        if occupant is None:
            return MoveType.REGULAR
        if occupant != piece.color:
            return MoveType.ATTACK
        return MoveType.INVALID

    def _is_en_passant(self, piece: Piece, destination: Position) -> bool:
        target = self._game.en_passant_target
        if target is None or target.color == piece.color:
            return False
        if self._board.get(target.position) != target:
            return False
        if target.position.rank != piece.position.rank:
            return False
        if abs(target.position.file - piece.position.file) != 1:
            return False
        behind = target.position - (0, target.color.forward)
        return destination == behind and self._board.is_empty(behind)

    # -- Pseudo-legal generation -------------------------------------------

    def pseudo_moves(self, piece: Piece, castling: bool = True) -> list[Position]:
        """Destinations allowed by *piece*'s movement rules, ignoring check.

        ``castling=False`` leaves out the two-square king moves; attack
        detection uses that form so it never recurses into itself.
        """
        pt = piece.piece_type
        if pt == PieceType.PAWN:
            return self._gen_pawn(piece)
        if pt == PieceType.KNIGHT:
            return self._gen_steps(piece, KNIGHT_OFFSETS)
        if pt == PieceType.BISHOP:
            return self._gen_sliding(piece, BISHOP_DIRS)
        if pt == PieceType.ROOK:
            return self._gen_sliding(piece, ROOK_DIRS)
        if pt == PieceType.QUEEN:
            return self._gen_sliding(piece, QUEEN_DIRS)
        if pt == PieceType.KING:
            moves = self._gen_steps(piece, KING_OFFSETS)
            if castling:
                moves.extend(self._gen_castling(piece))
            return moves
        raise ValueError(f"Unknown piece type: {pt!r}")

    def _gen_pawn(self, piece: Piece) -> list[Position]:
        moves: list[Position] = []
        step = piece.color.forward

        one_step = piece.position + (0, step)
        if self.classify(piece, one_step) == MoveType.REGULAR:
            moves.append(one_step)
            if not piece.has_moved:
                two_step = piece.position + (0, 2 * step)
                if self.classify(piece, two_step) == MoveType.REGULAR:
                    moves.append(two_step)

        for df in (-1, 1):
            cap = piece.position + (df, step)
            if self.classify(piece, cap) in _PAWN_CAPTURES:
                moves.append(cap)
        return moves

    def _gen_steps(self, piece: Piece, offsets: tuple[Delta, ...]) -> list[Position]:
        moves: list[Position] = []
        for offset in offsets:
            to_pos = piece.position + offset
            if self.classify(piece, to_pos) != MoveType.INVALID:
                moves.append(to_pos)
        return moves

    def _gen_sliding(
        self, piece: Piece, directions: tuple[Delta, ...]
    ) -> list[Position]:
        moves: list[Position] = []
        for direction in directions:
            to_pos = piece.position + direction
            while to_pos.is_valid:
                kind = self.classify(piece, to_pos)
                if kind == MoveType.REGULAR:
                    moves.append(to_pos)
                    to_pos = to_pos + direction
                    continue
                if kind == MoveType.ATTACK:
                    moves.append(to_pos)
                break
        return moves

    def _gen_castling(self, king: Piece) -> list[Position]:
        rank = king.color.back_rank
        if king.has_moved or king.position != Position(_KING_HOME_FILE, rank):
            return []
        if self.is_color_in_check(king.color):
            return []

        board = self._board
        moves: list[Position] = []
        for rook_file, step, between in _CASTLING_SIDES:
            rook = board.get(Position(rook_file, rank))
            if (
                rook is None
                or rook.color != king.color
                or rook.piece_type != PieceType.ROOK
                or rook.has_moved
            ):
                continue
            if any(not board.is_empty(Position(f, rank)) for f in between):
                continue
            passed = king.position + (step, 0)
            landing = king.position + (2 * step, 0)
            if self._king_safe_on(king, passed) and self._king_safe_on(king, landing):
                moves.append(landing)
        return moves

    def _king_safe_on(self, king: Piece, square: Position) -> bool:
        trial = self._game.copy()
        trial.board.relocate(king.position, square)
        return not MoveGenerator(trial).is_color_in_check(king.color)

    # -- Legality -----------------------------------------------------------

    def legal_moves(self, piece: Piece) -> list[Position]:
        """Pseudo-legal destinations that do not leave *piece*'s king attacked."""
        candidates = self.pseudo_moves(piece)
        if self._board.find_king(piece.color) is None:
            # Nothing to expose on a kingless side.
            return candidates

        legal: list[Position] = []
        for to_pos in candidates:
            trial = self._game.copy()
            trial.apply_move(piece.position, to_pos)
            if not MoveGenerator(trial).is_color_in_check(piece.color):
                legal.append(to_pos)
        return legal

    def is_color_in_check(self, color: Color) -> bool:
        """Is *color*'s king on a square some enemy piece could move to?"""
        king_pos = self._board.king(color).position
        for enemy in self._board.pieces(color.opposite):
            if king_pos in self.pseudo_moves(enemy, castling=False):
                return True
        return False
