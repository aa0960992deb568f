"""Board - piece placement on an 8x8 board and single-move legality."""

from __future__ import annotations

import logging

from chessgate.core.enums import Color, PieceType
from chessgate.core.errors import BoardConfigurationError, MoveError, MoveResult
from chessgate.core.piece import Piece
from chessgate.core.tables import (
    BISHOP_TABLE,
    KING_TABLE,
    KNIGHT_TABLE,
    QUEEN_TABLE,
    ROOK_TABLE,
    AttackTable,
)
from chessgate.core.types import (
    BOARD_SIZE,
    Square,
    file_of,
    is_valid_square,
    make_square,
    rank_of,
    square_name,
    squares_between,
)

_LOGGER = logging.getLogger(__name__)

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

_ILLEGAL_MOVE_ERRORS: dict[PieceType, MoveError] = {
    PieceType.PAWN: MoveError.ILLEGAL_PAWN_MOVE,
    PieceType.KNIGHT: MoveError.ILLEGAL_KNIGHT_MOVE,
    PieceType.BISHOP: MoveError.ILLEGAL_BISHOP_MOVE,
    PieceType.ROOK: MoveError.ILLEGAL_ROOK_MOVE,
    PieceType.QUEEN: MoveError.ILLEGAL_QUEEN_MOVE,
    PieceType.KING: MoveError.ILLEGAL_KING_MOVE,
}


class Board:
    """Mutable 64-square board.

    ``move`` is the only operation that changes a position during play.
    Item assignment exists for building positions by hand (puzzles, tests).
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * BOARD_SIZE

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        """Board with all 64 squares empty."""
        return cls()

    @classmethod
    def set_up(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece.of(Color.WHITE, pt)
            b[make_square(f, 1)] = Piece.WHITE_PAWN
            b[make_square(f, 6)] = Piece.BLACK_PAWN
            b[make_square(f, 7)] = Piece.of(Color.BLACK, pt)
        return b

    # -- Element access -----------------------------------------------------

    @staticmethod
    def _checked(sq: Square) -> Square:
        if not is_valid_square(sq):
            raise ValueError(f"Square out of range: {sq!r}")
        return sq

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[self._checked(sq)]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[self._checked(sq)] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    @property
    def squares(self) -> tuple[Piece | None, ...]:
        """Snapshot of all 64 slots, a1 first."""
        return tuple(self._squares)

    # -- Query helpers ------------------------------------------------------

    def find_piece(self, piece: Piece) -> list[Square]:
        """Squares holding *piece*, in ascending order."""
        return [sq for sq, occupant in enumerate(self._squares) if occupant is piece]

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq, occupant in enumerate(self._squares)
            if occupant is not None and occupant.color == color
        ]

    def king_square(self, color: Color) -> Square | None:
        """Square of *color*'s king, or ``None`` if it has none.

        Raises :class:`BoardConfigurationError` if *color* has more than one
        king, since king safety is undefined for such a position.
        """
        kings = self.find_piece(Piece.of(color, PieceType.KING))
        if len(kings) > 1:
            names = ", ".join(square_name(sq) for sq in kings)
            raise BoardConfigurationError(f"{len(kings)} {color.name} kings on board: {names}")
        return kings[0] if kings else None

    # -- Legality predicates ------------------------------------------------

    def can_move_to_square(self, from_sq: Square, to_sq: Square) -> bool:
        """Destination rule shared by every piece: empty or enemy-occupied."""
        piece = self._squares[from_sq]
        target = self._squares[to_sq]
        if piece is None:
            return False
        return target is None or target.color != piece.color

    def is_ray_clear(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether every square strictly between two aligned squares is empty."""
        return all(self._squares[sq] is None for sq in squares_between(from_sq, to_sq))

    def _sliding_can_move(self, from_sq: Square, to_sq: Square, table: AttackTable) -> bool:
        return (
            to_sq in table[from_sq]
            and self.is_ray_clear(from_sq, to_sq)
            and self.can_move_to_square(from_sq, to_sq)
        )

    def queen_can_move_to_square(self, from_sq: Square, to_sq: Square) -> bool:
        return self._sliding_can_move(from_sq, to_sq, QUEEN_TABLE)

    def rook_can_move_to_square(self, from_sq: Square, to_sq: Square) -> bool:
        return self._sliding_can_move(from_sq, to_sq, ROOK_TABLE)

    def bishop_can_move_to_square(self, from_sq: Square, to_sq: Square) -> bool:
        return self._sliding_can_move(from_sq, to_sq, BISHOP_TABLE)

    def knight_can_move_to_square(self, from_sq: Square, to_sq: Square) -> bool:
        return to_sq in KNIGHT_TABLE[from_sq] and self.can_move_to_square(from_sq, to_sq)

    def king_can_move_to_square(self, from_sq: Square, to_sq: Square) -> bool:
        return to_sq in KING_TABLE[from_sq] and self.can_move_to_square(from_sq, to_sq)

    @staticmethod
    def pawn_attacks_square(color: Color, from_sq: Square, to_sq: Square) -> bool:
        """Diagonal one step forward, ignoring what stands on *to_sq*."""
        rank = rank_of(from_sq) + color.pawn_direction
        if not 0 <= rank < 8:
            return False
        file_idx = file_of(from_sq)
        return (file_idx > 0 and make_square(file_idx - 1, rank) == to_sq) or (
            file_idx < 7 and make_square(file_idx + 1, rank) == to_sq
        )

    def pawn_can_move_to_square(self, from_sq: Square, to_sq: Square) -> bool:
        piece = self._squares[from_sq]
        if piece is None:
            return False
        color = piece.color
        file_idx = file_of(from_sq)
        rank = rank_of(from_sq)
        if rank in (Color.WHITE.back_rank, Color.BLACK.back_rank):
            return False

        direction = color.pawn_direction
        one_step = make_square(file_idx, rank + direction)
        if to_sq == one_step:
            return self.is_empty(one_step)

        if rank == color.pawn_start_rank:
            two_step = make_square(file_idx, rank + 2 * direction)
            if to_sq == two_step:
                return self.is_empty(one_step) and self.is_empty(two_step)

        if self.pawn_attacks_square(color, from_sq, to_sq):
            target = self._squares[to_sq]
            return target is not None and target.color != color
        return False

    def _piece_can_move(self, piece: Piece, from_sq: Square, to_sq: Square) -> bool:
        piece_type = piece.piece_type
        if piece_type == PieceType.PAWN:
            return self.pawn_can_move_to_square(from_sq, to_sq)
        if piece_type == PieceType.KNIGHT:
            return self.knight_can_move_to_square(from_sq, to_sq)
        if piece_type == PieceType.BISHOP:
            return self.bishop_can_move_to_square(from_sq, to_sq)
        if piece_type == PieceType.ROOK:
            return self.rook_can_move_to_square(from_sq, to_sq)
        if piece_type == PieceType.QUEEN:
            return self.queen_can_move_to_square(from_sq, to_sq)
        if piece_type == PieceType.KING:
            return self.king_can_move_to_square(from_sq, to_sq)
        raise AssertionError(f"Unhandled piece type: {piece_type!r}")

    # -- King safety --------------------------------------------------------

    def _threatens(self, piece: Piece, from_sq: Square, target: Square) -> bool:
        if piece.piece_type == PieceType.PAWN:
            return self.pawn_attacks_square(piece.color, from_sq, target)
        return self._piece_can_move(piece, from_sq, target)

    def is_king_safe(self, color: Color) -> bool:
        """Whether no enemy piece other than a king can reach *color*'s king.

        A side without a king is considered safe.
        """
        king_sq = self.king_square(color)
        if king_sq is None:
            _LOGGER.debug("No %s king on board, skipping safety check", color)
            return True

        for sq, piece in enumerate(self._squares):
            if piece is None or piece.color == color or piece.piece_type == PieceType.KING:
                continue
            if self._threatens(piece, sq, king_sq):
                _LOGGER.debug(
                    "%s king on %s attacked from %s",
                    color,
                    square_name(king_sq),
                    square_name(sq),
                )
                return False
        return True

    # -- Mutation / copying -------------------------------------------------

    def move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        """Try to move the piece on *from_sq* to *to_sq*.

        On success the board is updated and the result carries the captured
        piece, if any. On failure the board is left exactly as it was and
        the result carries the :class:`MoveError`.
        """
        self._checked(from_sq)
        self._checked(to_sq)

        piece = self._squares[from_sq]
        if piece is None:
            return self._reject(from_sq, to_sq, MoveError.NO_PIECE_ON_SOURCE)
        if not self._piece_can_move(piece, from_sq, to_sq):
            return self._reject(from_sq, to_sq, _ILLEGAL_MOVE_ERRORS[piece.piece_type])

        captured = self._squares[to_sq]
        self._squares[to_sq] = piece
        self._squares[from_sq] = None

        try:
            safe = self.is_king_safe(piece.color)
        except BoardConfigurationError:
            self._restore(from_sq, to_sq, piece, captured)
            raise
        if not safe:
            self._restore(from_sq, to_sq, piece, captured)
            return self._reject(from_sq, to_sq, MoveError.KING_IN_CHECK)

        if captured is not None:
            _LOGGER.debug(
                "%s x %s on %s", piece.name, captured.name, square_name(to_sq)
            )
        return MoveResult.success(captured)

    def _restore(
        self, from_sq: Square, to_sq: Square, piece: Piece, captured: Piece | None
    ) -> None:
        self._squares[from_sq] = piece
        self._squares[to_sq] = captured

    @staticmethod
    def _reject(from_sq: Square, to_sq: Square, error: MoveError) -> MoveResult:
        _LOGGER.debug(
            "Rejected %s%s: %s", square_name(from_sq), square_name(to_sq), error.name
        )
        return MoveResult.failure(error)

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def render(self) -> str:
        """Text diagram, rank 8 on top, one letter per square."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self._squares[make_square(file, rank)]
                row.append(p.glyph if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

    def __repr__(self) -> str:
        return self.render()
