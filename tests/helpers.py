"""Assertion and counting helpers shared by the test modules."""

from __future__ import annotations

from chessrules.core.types import Position, all_positions
from chessrules.game.state import Game


def positions(*pairs: tuple[int, int]) -> set[Position]:
    """Set of positions from ``(file, rank)`` pairs, for order-free asserts."""
    return {Position(f, r) for f, r in pairs}


def assert_positions_consistent(game: Game) -> None:
    """Every stored piece names the square it stands on."""
    for pos in all_positions():
        piece = game.piece_at(pos)
        if piece is not None:
            assert piece.position == pos


def perft(game: Game, depth: int) -> int:
    """Count leaf nodes at *depth*, playing each legal move on a copy."""
    if depth == 0:
        return 1
    nodes = 0
    for piece in game.get_pieces():
        if piece.color != game.current_move:
            continue
        destinations = game.get_legal_moves(piece)
        if depth == 1:
            nodes += len(destinations)
            continue
        for dst in destinations:
            child = game.copy()
            child.apply_move(piece.position, dst)
            nodes += perft(child, depth - 1)
    return nodes
