"""Board - piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Position
from chessrules.errors import MissingKingError

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _index(pos: Position) -> int:
    if not pos.is_valid:
        raise IndexError(f"Position off the board: ({pos.file}, {pos.rank})")
    return pos.rank * 8 + pos.file


class Board:
    """Mutable 64-square grid addressed by :class:`Position`.

    Every stored piece carries its own square as ``position``; writes that
    would break this are rejected.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, pos: Position) -> Piece | None:
        return self._squares[_index(pos)]

    def __setitem__(self, pos: Position, piece: Piece | None) -> None:
        if piece is not None and piece.position != pos:
            raise ValueError(
                f"Piece claims {piece.position} but is being stored on {pos}"
            )
        self._squares[_index(pos)] = piece

    def get(self, pos: Position) -> Piece | None:
        """Piece on *pos*, or None for empty and off-board squares."""
        if not pos.is_valid:
            return None
        return self._squares[pos.rank * 8 + pos.file]

    def color_at(self, pos: Position) -> Color | None:
        piece = self.get(pos)
        return piece.color if piece is not None else None

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) is None

    # -- Mutation -----------------------------------------------------------

    def place(self, piece: Piece) -> None:
        """Put *piece* on the square it names, replacing any occupant."""
        self[piece.position] = piece

    def remove(self, pos: Position) -> Piece | None:
        piece = self[pos]
        self[pos] = None
        return piece

    def relocate(self, src: Position, dst: Position) -> tuple[Piece, Piece | None]:
        """Move the piece on *src* to *dst*.

        Returns the moved piece (with its move count bumped) and whatever
        stood on *dst* before.
        """
        piece = self[src]
        if piece is None:
            raise ValueError(f"No piece on {src}")
        captured = self[dst]
        moved = piece.moved_to(dst)
        self[src] = None
        self[dst] = moved
        return moved, captured

    # -- Query helpers ------------------------------------------------------

    def __iter__(self) -> Iterator[Piece]:
        """Occupied squares' pieces, rank by rank from A1."""
        return (p for p in self._squares if p is not None)

    def pieces(self, color: Color | None = None) -> list[Piece]:
        if color is None:
            return list(self)
        return [p for p in self if p.color == color]

    def find_king(self, color: Color) -> Piece | None:
        for piece in self:
            if piece.color == color and piece.piece_type == PieceType.KING:
                return piece
        return None

    def king(self, color: Color) -> Piece:
        """Return *color*'s king; a board without one is unusable for checks."""
        king = self.find_king(color)
        if king is None:
            raise MissingKingError(f"No {color.name} king on board")
        return king

    # -- Copying / reset ----------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [None] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b.place(Piece(Color.WHITE, PieceType.PAWN, Position(f, 1)))
            b.place(Piece(Color.BLACK, PieceType.PAWN, Position(f, 6)))
            b.place(Piece(Color.WHITE, pt, Position(f, 0)))
            b.place(Piece(Color.BLACK, pt, Position(f, 7)))
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self, unicode: bool = False) -> str:
        """Text diagram, rank 8 on top; ``.`` marks empty squares."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[rank * 8 + file]
                if p is None:
                    row.append(".")
                else:
                    row.append(p.symbol if unicode else str(p))
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        return self.render()
