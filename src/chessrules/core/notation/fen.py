"""FEN placement parsing and serialization."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Position, parse_position
from chessrules.errors import SetupError

if TYPE_CHECKING:
    from chessrules.game.state import Game

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_PAWN_HOME_RANK: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}

# castling letter -> (color, rook file)
_CASTLING_CORNERS: dict[str, tuple[Color, int]] = {
    "K": (Color.WHITE, 7),
    "Q": (Color.WHITE, 0),
    "k": (Color.BLACK, 7),
    "q": (Color.BLACK, 0),
}


def board_from_fen(fen: str) -> Board:
    """Parse the piece-placement field of *fen* into a :class:`Board`.

    Only the first whitespace-separated field is read, so both a bare
    placement and a full FEN record are accepted. Pawns standing off their
    starting rank are loaded as already moved.
    """
    fields = fen.split()
    if not fields:
        raise SetupError("Empty FEN string")
    placement = fields[0]

    ranks = placement.split("/")
    if len(ranks) != 8:
        raise SetupError(f"Invalid FEN board (must contain 8 ranks): {fen!r}")
    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise SetupError(f"Invalid FEN digit {ch!r}: {fen!r}")
                file += step
            else:
                if file >= 8:
                    raise SetupError(f"Invalid FEN rank width: {fen!r}")
                piece = Piece.from_char(ch, Position(file, rank))
                board.place(_with_inferred_history(piece))
                file += 1
            if file > 8:
                raise SetupError(f"Invalid FEN rank width: {fen!r}")
        if file != 8:
            raise SetupError(f"Invalid FEN rank width: {fen!r}")
    return board


def _with_inferred_history(piece: Piece) -> Piece:
    if (
        piece.piece_type == PieceType.PAWN
        and piece.position.rank != _PAWN_HOME_RANK[piece.color]
    ):
        return replace(piece, num_moves_made=1)
    return piece


def board_to_fen(board: Board) -> str:
    """Serialise the placement field of *board*."""
    rows: list[str] = []
    for rank in range(7, -1, -1):
        empty = 0
        row = ""
        for file in range(8):
            piece = board[Position(file, rank)]
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def populate_game(game: Game, fen: str) -> None:
    """Reset *game* to the position described by *fen*.

    The placement field is required. Side to move, castling availability,
    en-passant square and half-move clock are applied when present; the
    full-move number is ignored.
    """
    parts = fen.split()
    if not (1 <= len(parts) <= 6):
        raise SetupError(f"Invalid FEN (need 1-6 fields): {fen!r}")

    board = board_from_fen(parts[0])

    side = Color.WHITE
    if len(parts) > 1:
        side = _parse_side(parts[1])

    if len(parts) > 2:
        _apply_castling(board, parts[2])

    en_passant_target: Piece | None = None
    if len(parts) > 3 and parts[3] != "-":
        en_passant_target = _resolve_en_passant(board, parts[3], side)

    halfmove = 0
    if len(parts) > 4:
        try:
            halfmove = int(parts[4])
        except ValueError:
            raise SetupError(f"Invalid FEN halfmove clock: {parts[4]!r}") from None
        if halfmove < 0:
            raise SetupError(f"Invalid FEN halfmove clock: {parts[4]!r}")

    game.reset(board, side)
    game.en_passant_target = en_passant_target
    game.halfmove_clock = halfmove


def _parse_side(side_part: str) -> Color:
    if side_part == "w":
        return Color.WHITE
    if side_part == "b":
        return Color.BLACK
    raise SetupError(f"Invalid FEN side-to-move field: {side_part!r}")


def _apply_castling(board: Board, castling_part: str) -> None:
    """Mark corner rooks whose castling right is absent as already moved."""
    rights: set[str] = set()
    if castling_part != "-":
        for ch in castling_part:
            if ch not in _CASTLING_CORNERS or ch in rights:
                raise SetupError(f"Invalid FEN castling field: {castling_part!r}")
            rights.add(ch)

    for ch, (color, rook_file) in _CASTLING_CORNERS.items():
        if ch in rights:
            continue
        rook = board.get(Position(rook_file, color.back_rank))
        if (
            rook is not None
            and rook.color == color
            and rook.piece_type == PieceType.ROOK
            and not rook.has_moved
        ):
            board.place(replace(rook, num_moves_made=1))


def _resolve_en_passant(board: Board, ep_part: str, side: Color) -> Piece:
    """Find the pawn that just skipped over the en-passant square."""
    ep = parse_position(ep_part)
    expected_rank = 5 if side == Color.WHITE else 2
    if ep.rank != expected_rank:
        raise SetupError(f"Invalid FEN en-passant square for side-to-move: {ep_part!r}")
    pawn = board.get(ep + (0, side.opposite.forward))
    if (
        pawn is None
        or pawn.color != side.opposite
        or pawn.piece_type != PieceType.PAWN
    ):
        raise SetupError(f"No pawn to capture en passant on {ep_part!r}")
    return pawn
