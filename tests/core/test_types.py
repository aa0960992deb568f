"""Tests for square coordinate helpers."""

import pytest

from chessgate.core.types import (
    A1, E4, H1, H8,
    coords_to_square,
    file_of,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
    square_to_coords,
)


class TestCoordinates:
    def test_rank_and_file(self) -> None:
        assert rank_of(E4) == 3
        assert file_of(E4) == 4

    def test_square_to_coords_is_rank_first(self) -> None:
        assert square_to_coords(H1) == (0, 7)
        assert square_to_coords(57) == (7, 1)

    def test_coords_round_trip_every_square(self) -> None:
        for sq in range(64):
            assert coords_to_square(*square_to_coords(sq)) == sq

    def test_make_square_is_file_first(self) -> None:
        assert make_square(4, 3) == E4

    def test_valid_range(self) -> None:
        assert is_valid_square(0)
        assert is_valid_square(63)
        assert not is_valid_square(-1)
        assert not is_valid_square(64)


class TestSquareNames:
    def test_corners(self) -> None:
        assert square_name(A1) == "a1"
        assert square_name(H8) == "h8"

    def test_parse(self) -> None:
        assert parse_square("e4") == E4
        assert parse_square("h8") == 63

    @pytest.mark.parametrize("name", ["", "e", "e9", "i1", "E4", "e44"])
    def test_parse_rejects_bad_names(self, name: str) -> None:
        with pytest.raises(ValueError, match="Invalid square name"):
            parse_square(name)
