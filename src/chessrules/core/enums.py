"""Core enumerations for the rules engine."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction this side's pawns advance in."""
        return 1 if self is Color.WHITE else -1

    @property
    def back_rank(self) -> int:
        return 0 if self is Color.WHITE else 7

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class MoveType(IntEnum):
    """Classification of a candidate destination for a piece."""

    INVALID = 0
    REGULAR = 1
    ATTACK = 2
    EN_PASSANT = 3
    CASTLING = 4


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)
