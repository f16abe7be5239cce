"""Exceptions raised on API misuse.

Illegal moves are not errors: :meth:`Game.move_piece` reports them as
``MoveType.INVALID``. Everything here signals a caller bug or corrupt
setup data and is not meant to be recovered from mid-game.
"""


class ChessRulesError(Exception):
    """Base class for all rules-engine errors."""


class SetupError(ChessRulesError, ValueError):
    """Malformed setup data (placement string, square name, piece letter)."""


class MissingKingError(SetupError):
    """Check detection was asked for a color with no king on the board."""


class PromotionError(ChessRulesError, RuntimeError):
    """``promote`` called without a pending promotion, or to a bad type."""
