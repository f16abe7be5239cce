"""Tests for Position arithmetic and square names."""

import pytest

from chessrules.core.types import (
    A1,
    E4,
    H8,
    Position,
    all_positions,
    parse_position,
    position_name,
)
from chessrules.errors import SetupError


class TestPositionArithmetic:
    def test_add_tuple(self) -> None:
        assert Position(3, 1) + (0, 2) == Position(3, 3)

    def test_add_and_subtract_position(self) -> None:
        assert E4 + Position(1, 1) == Position(5, 4)
        assert E4 - Position(4, 3) == A1

    def test_off_board_is_representable(self) -> None:
        pos = A1 - (1, 0)
        assert pos == Position(-1, 0)
        assert not pos.is_valid

    def test_validity_bounds(self) -> None:
        assert A1.is_valid
        assert H8.is_valid
        assert not Position(8, 0).is_valid
        assert not Position(0, 8).is_valid

    def test_unpacks_as_pair(self) -> None:
        file, rank = E4
        assert (file, rank) == (4, 3)


class TestSquareNames:
    def test_format(self) -> None:
        assert position_name(Position(4, 3)) == "E4"
        assert str(H8) == "H8"

    def test_parse(self) -> None:
        assert parse_position("E4") == Position(4, 3)

    def test_parse_accepts_lowercase(self) -> None:
        assert parse_position("e4") == E4

    def test_parse_and_format_are_inverse_on_every_square(self) -> None:
        squares = all_positions()
        assert len(squares) == 64
        for pos in squares:
            assert parse_position(position_name(pos)) == pos

    @pytest.mark.parametrize("name", ["", "E", "E44", "I1", "A0", "A9", "11"])
    def test_parse_rejects_malformed(self, name: str) -> None:
        with pytest.raises(SetupError):
            parse_position(name)

    def test_format_rejects_off_board(self) -> None:
        with pytest.raises(ValueError):
            position_name(Position(8, 8))
