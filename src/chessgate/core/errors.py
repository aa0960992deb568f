"""Move rejection reasons and the result value returned by ``Board.move``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chessgate.core.piece import Piece


class MoveError(Enum):
    """Closed set of reasons a move attempt is rejected.

    These are returned as plain values, never raised.
    """

    NO_PIECE_ON_SOURCE = "first, select a piece to move"
    ILLEGAL_KNIGHT_MOVE = "the knight cannot jump there"
    ILLEGAL_KING_MOVE = "the king cannot step there"
    ILLEGAL_PAWN_MOVE = "the pawn cannot go there"
    ILLEGAL_QUEEN_MOVE = "the queen cannot reach that square"
    ILLEGAL_ROOK_MOVE = "the rook cannot reach that square"
    ILLEGAL_BISHOP_MOVE = "the bishop cannot reach that square"
    KING_IN_CHECK = "that move leaves the king in check"

    @property
    def message(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class IllegalMoveError(Exception):
    """Raised by :meth:`MoveResult.unwrap` when the move was rejected."""

    def __init__(self, error: MoveError) -> None:
        super().__init__(error.message)
        self.error = error


class BoardConfigurationError(ValueError):
    """The position cannot be evaluated, e.g. two kings of one color."""


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of a single move attempt.

    Exactly one of two shapes: success (``error is None``, ``captured`` is
    the taken piece or ``None`` for a quiet move) or failure (``error`` set,
    ``captured`` always ``None``).
    """

    captured: Piece | None = None
    error: MoveError | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.captured is not None:
            raise ValueError("A rejected move cannot capture a piece")

    @classmethod
    def success(cls, captured: Piece | None = None) -> MoveResult:
        return cls(captured=captured)

    @classmethod
    def failure(cls, error: MoveError) -> MoveResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def unwrap(self) -> Piece | None:
        """Return the captured piece, or raise if the move was rejected."""
        if self.error is not None:
            raise IllegalMoveError(self.error)
        return self.captured

    def __bool__(self) -> bool:
        return self.ok
