"""Game status value: the closed set of states a caller polls after a move."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from chessrules.core.enums import Color
from chessrules.core.piece import Piece


class StatusKind(IntEnum):
    ACTIVE = auto()
    CHECK = auto()
    CHECKMATE = auto()
    STALEMATE = auto()
    PROMOTION = auto()
    FIFTY_MOVE_RULE = auto()


_TERMINAL = frozenset(
    {StatusKind.CHECKMATE, StatusKind.STALEMATE, StatusKind.FIFTY_MOVE_RULE}
)


@dataclass(frozen=True, slots=True)
class GameStatus:
    """Exactly one status holds at a time.

    ``color`` is set for CHECK / CHECKMATE (the side in trouble) and
    ``piece`` for PROMOTION (the pawn waiting for a new type).
    Build instances through the classmethod constructors.
    """

    kind: StatusKind
    color: Color | None = None
    piece: Piece | None = None

    @classmethod
    def active(cls) -> GameStatus:
        return cls(StatusKind.ACTIVE)

    @classmethod
    def check(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECK, color=color)

    @classmethod
    def checkmate(cls, color: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, color=color)

    @classmethod
    def stalemate(cls) -> GameStatus:
        return cls(StatusKind.STALEMATE)

    @classmethod
    def promotion(cls, piece: Piece) -> GameStatus:
        return cls(StatusKind.PROMOTION, piece=piece)

    @classmethod
    def fifty_move_rule(cls) -> GameStatus:
        return cls(StatusKind.FIFTY_MOVE_RULE)

    @property
    def is_terminal(self) -> bool:
        return self.kind in _TERMINAL

    @property
    def is_promotion_pending(self) -> bool:
        return self.kind == StatusKind.PROMOTION

    @property
    def is_blocking(self) -> bool:
        """No move may be played while this status holds."""
        return self.is_terminal or self.is_promotion_pending

    def __str__(self) -> str:
        name = self.kind.name.lower()
        if self.color is not None:
            return f"{name}({self.color})"
        if self.piece is not None:
            return f"{name}({self.piece.position})"
        return name
