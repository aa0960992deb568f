"""Tests for king-safety verification and rollback of rejected moves."""

import pytest

from chessgate.core.board import Board
from chessgate.core.enums import Color
from chessgate.core.errors import BoardConfigurationError, MoveError, MoveResult
from chessgate.core.piece import Piece
from chessgate.core.types import (
    D1, D2, D7, E1, E2, E4, E5, E7, E8, F1, F2, F3, G2, H2, H4, H5,
    parse_square,
)


class TestCheckRejection:
    def test_king_steps_into_queen(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[G2] = Piece.BLACK_QUEEN
        before = empty_board.squares
        assert empty_board.move(E1, F1) == MoveResult.failure(MoveError.KING_IN_CHECK)
        assert empty_board.squares == before

    def test_move_that_ignores_check(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[F2] = Piece.WHITE_PAWN
        empty_board[parse_square("e3")] = Piece.BLACK_QUEEN
        assert empty_board.move(F2, F3).error is MoveError.KING_IN_CHECK

    def test_pinned_pawn_capture_exposes_king(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[E2] = Piece.WHITE_PAWN
        empty_board[E8] = Piece.BLACK_QUEEN
        empty_board[F3] = Piece.BLACK_PAWN
        before = empty_board.squares
        assert empty_board.move(E2, F3).error is MoveError.KING_IN_CHECK
        # The captured pawn is restored too.
        assert empty_board.squares == before
        assert empty_board[F3] is Piece.BLACK_PAWN

    def test_blocking_resolves_check(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[parse_square("a4")] = Piece.WHITE_ROOK
        empty_board[E8] = Piece.BLACK_ROOK
        assert empty_board.move(parse_square("a4"), E4).ok

    def test_capturing_the_checker(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[E2] = Piece.BLACK_QUEEN
        assert empty_board.move(E1, E2) == MoveResult.success(Piece.BLACK_QUEEN)

    def test_capturing_a_defended_checker(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[E2] = Piece.BLACK_QUEEN
        empty_board[E7] = Piece.BLACK_ROOK
        assert empty_board.move(E1, E2).error is MoveError.KING_IN_CHECK
        assert empty_board[E2] is Piece.BLACK_QUEEN

    def test_knight_check(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[H2] = Piece.BLACK_KNIGHT  # covers f1 and f3
        assert empty_board.move(E1, F1).error is MoveError.KING_IN_CHECK
        assert empty_board.move(E1, D1).ok

    def test_pawn_attacks_diagonally(self, empty_board: Board) -> None:
        empty_board[E4] = Piece.WHITE_KING
        empty_board[parse_square("f6")] = Piece.BLACK_PAWN
        assert empty_board.move(E4, E5).error is MoveError.KING_IN_CHECK
        # A pawn never attacks the square straight ahead of it.
        assert empty_board.move(E4, parse_square("f5")).ok

    def test_black_king_checked_by_white_pawn(self, empty_board: Board) -> None:
        empty_board[E8] = Piece.BLACK_KING
        empty_board[parse_square("c6")] = Piece.WHITE_PAWN
        assert empty_board.move(E8, D7).error is MoveError.KING_IN_CHECK

    def test_blocked_slider_does_not_check(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[E4] = Piece.BLACK_PAWN
        empty_board[E8] = Piece.BLACK_ROOK
        assert empty_board.move(E1, E2).ok

    def test_enemy_king_is_not_an_attacker(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[parse_square("e3")] = Piece.BLACK_KING
        assert empty_board.move(E1, E2).ok

    def test_only_movers_king_is_checked(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[E8] = Piece.BLACK_KING
        empty_board[H4] = Piece.WHITE_QUEEN
        # Giving check to the opponent is fine.
        assert empty_board.move(H4, H5).ok
        assert not empty_board.is_king_safe(Color.BLACK)
        assert empty_board.is_king_safe(Color.WHITE)


class TestIsKingSafe:
    def test_start_position_is_safe(self, start_board: Board) -> None:
        assert start_board.is_king_safe(Color.WHITE)
        assert start_board.is_king_safe(Color.BLACK)

    def test_missing_king_is_safe(self, empty_board: Board) -> None:
        empty_board[E4] = Piece.BLACK_QUEEN
        assert empty_board.is_king_safe(Color.WHITE)

    def test_does_not_mutate(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[E8] = Piece.BLACK_ROOK
        before = empty_board.squares
        assert not empty_board.is_king_safe(Color.WHITE)
        assert empty_board.squares == before


class TestDuplicateKings:
    def test_move_raises_and_rolls_back(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[parse_square("a1")] = Piece.WHITE_KING
        empty_board[D2] = Piece.WHITE_PAWN
        empty_board[E7] = Piece.BLACK_PAWN
        before = empty_board.squares
        with pytest.raises(BoardConfigurationError, match="2 WHITE kings"):
            empty_board.move(D2, parse_square("d3"))
        assert empty_board.squares == before

    def test_other_side_duplicates_do_not_matter(self, empty_board: Board) -> None:
        empty_board[E1] = Piece.WHITE_KING
        empty_board[parse_square("a8")] = Piece.BLACK_KING
        empty_board[parse_square("h8")] = Piece.BLACK_KING
        assert empty_board.move(E1, E2).ok


class TestRejectionLeavesBoardUnchanged:
    @pytest.mark.parametrize(
        "placement, from_sq, to_sq, error",
        [
            ({}, 0, 8, MoveError.NO_PIECE_ON_SOURCE),
            ({0: "WHITE_KNIGHT"}, 0, 2, MoveError.ILLEGAL_KNIGHT_MOVE),
            ({4: "WHITE_KING"}, 4, 20, MoveError.ILLEGAL_KING_MOVE),
            ({8: "WHITE_PAWN"}, 8, 32, MoveError.ILLEGAL_PAWN_MOVE),
            ({3: "WHITE_QUEEN", 12: "WHITE_PAWN"}, 3, 21, MoveError.ILLEGAL_QUEEN_MOVE),
            ({0: "WHITE_ROOK", 8: "WHITE_PAWN"}, 0, 16, MoveError.ILLEGAL_ROOK_MOVE),
            ({2: "WHITE_BISHOP", 11: "WHITE_PAWN"}, 2, 20, MoveError.ILLEGAL_BISHOP_MOVE),
            (
                {4: "WHITE_KING", 12: "WHITE_PAWN", 60: "BLACK_QUEEN", 21: "BLACK_PAWN"},
                12,
                21,
                MoveError.KING_IN_CHECK,
            ),
        ],
    )
    def test_every_error_kind(
        self,
        empty_board: Board,
        placement: dict[int, str],
        from_sq: int,
        to_sq: int,
        error: MoveError,
    ) -> None:
        for sq, name in placement.items():
            empty_board[sq] = Piece[name]
        snapshot = empty_board.copy()
        result = empty_board.move(from_sq, to_sq)
        assert result == MoveResult.failure(error)
        assert result.captured is None
        assert empty_board == snapshot

    def test_shared_board_sequence(self, empty_board: Board) -> None:
        # One board, errors checked one after another as pieces are added.
        board = empty_board
        assert board.move(0, 8).error is MoveError.NO_PIECE_ON_SOURCE
        board[0] = Piece.WHITE_KNIGHT
        assert board.move(0, 2).error is MoveError.ILLEGAL_KNIGHT_MOVE
        board[4] = Piece.WHITE_KING
        assert board.move(4, 20).error is MoveError.ILLEGAL_KING_MOVE
        board[8] = Piece.WHITE_PAWN
        assert board.move(8, 32).error is MoveError.ILLEGAL_PAWN_MOVE
        board[3] = Piece.WHITE_QUEEN
        board[12] = Piece.WHITE_PAWN
        assert board.move(3, 21).error is MoveError.ILLEGAL_QUEEN_MOVE

    @pytest.mark.slow
    def test_every_move_from_start_position(self, start_board: Board) -> None:
        for from_sq in range(64):
            for to_sq in range(64):
                board = start_board.copy()
                result = board.move(from_sq, to_sq)
                if not result.ok:
                    assert board == start_board, f"{from_sq}->{to_sq} changed the board"


class TestOpeningSequence:
    def test_scholars_mate_line(self, start_board: Board) -> None:
        moves = [
            ("e2", "e4"), ("e7", "e5"),
            ("f1", "c4"), ("b8", "c6"),
            ("d1", "h5"), ("g8", "f6"),
        ]
        for from_name, to_name in moves:
            result = start_board.move(parse_square(from_name), parse_square(to_name))
            assert result == MoveResult.success(None), f"{from_name}{to_name}"

        captured = start_board.move(parse_square("h5"), parse_square("f7")).unwrap()
        assert captured is Piece.BLACK_PAWN
        assert not start_board.is_king_safe(Color.BLACK)

        # The bishop on c4 defends f7.
        assert start_board.move(E8, parse_square("f7")).error is MoveError.KING_IN_CHECK
        assert start_board.move(parse_square("a7"), parse_square("a6")).error is (
            MoveError.KING_IN_CHECK
        )

    def test_white_pieces_blocked_at_start(self, start_board: Board) -> None:
        assert start_board.move(parse_square("a1"), parse_square("a3")).error is (
            MoveError.ILLEGAL_ROOK_MOVE
        )
        assert start_board.move(parse_square("c1"), parse_square("e3")).error is (
            MoveError.ILLEGAL_BISHOP_MOVE
        )
        assert start_board.move(parse_square("g1"), parse_square("f3")).ok
