"""Position value type and coordinate helpers.

Coordinates are ``(file, rank)`` pairs, 0-indexed from White's first rank:
    A1=(0, 0), B1=(1, 0), ..., H1=(7, 0)
    ...
    A8=(0, 7), ..., H8=(7, 7)

Off-board positions can be built (move deltas are added before bounds
checking) but are never stored on a board.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeAlias

from chessrules.errors import SetupError

_FILES = "ABCDEFGH"


@dataclass(frozen=True, slots=True)
class Position:
    """Integer coordinate pair with vector arithmetic."""

    file: int
    rank: int

    def __add__(self, other: Position | tuple[int, int]) -> Position:
        df, dr = _as_pair(other)
        return Position(self.file + df, self.rank + dr)

    def __sub__(self, other: Position | tuple[int, int]) -> Position:
        df, dr = _as_pair(other)
        return Position(self.file - df, self.rank - dr)

    def __iter__(self) -> Iterator[int]:
        yield self.file
        yield self.rank

    @property
    def is_valid(self) -> bool:
        return 0 <= self.file < 8 and 0 <= self.rank < 8

    def __str__(self) -> str:
        return position_name(self)


Delta: TypeAlias = tuple[int, int]


def _as_pair(other: Position | tuple[int, int]) -> Delta:
    if isinstance(other, Position):
        return other.file, other.rank
    df, dr = other
    return df, dr


def position_name(pos: Position) -> str:
    """Human-readable name, e.g. Position(4, 3) → 'E4'."""
    if not pos.is_valid:
        raise ValueError(f"Position off the board: ({pos.file}, {pos.rank})")
    return _FILES[pos.file] + str(pos.rank + 1)


def parse_position(name: str) -> Position:
    """Parse a square name, e.g. 'E4' (or 'e4') → Position(4, 3)."""
    if len(name) != 2:
        raise SetupError(f"Invalid square name: {name!r}")
    file_char, rank_char = name[0].upper(), name[1]
    if file_char not in _FILES or rank_char not in "12345678":
        raise SetupError(f"Invalid square name: {name!r}")
    return Position(_FILES.index(file_char), int(rank_char) - 1)


def all_positions() -> list[Position]:
    """The 64 board squares, rank by rank from A1."""
    return [Position(f, r) for r in range(8) for f in range(8)]


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Position(f, 0) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Position(f, 1) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Position(f, 2) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Position(f, 3) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Position(f, 4) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Position(f, 5) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Position(f, 6) for f in range(8))
A8, B8, C8, D8, E8, F8, G8, H8 = (Position(f, 7) for f in range(8))
