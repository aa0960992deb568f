"""Precomputed attack tables.

For every square and every non-pawn piece family, the ordered squares the
piece could reach on an empty board. Occupancy, blocking and checks are
layered on top by :class:`chessgate.core.board.Board`.

Each row has a fixed capacity; unused slots hold ``None``. Sliding rows are
filled contiguously direction by direction, knight rows keep one slot per
jump offset, so callers must tolerate holes.
"""

from __future__ import annotations

import logging
from typing import TypeAlias

from chessgate.core.enums import PieceType
from chessgate.core.types import BOARD_SIZE, Square, file_of, make_square, on_board, rank_of

_LOGGER = logging.getLogger(__name__)

AttackRow: TypeAlias = tuple[Square | None, ...]
AttackTable: TypeAlias = tuple[AttackRow, ...]

# (file delta, rank delta)
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (1, -1), (1, 1), (-1, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = ROOK_DIRS + BISHOP_DIRS
KING_DIRS = QUEEN_DIRS

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

MAX_ROOK_MOVES = 14
MAX_BISHOP_MOVES = 13
MAX_QUEEN_MOVES = 27
MAX_KING_MOVES = 8
MAX_KNIGHT_MOVES = 8

_SLIDING_FAMILIES: dict[PieceType, tuple[tuple[tuple[int, int], ...], int | None, int]] = {
    # family: (directions, step limit, row capacity)
    PieceType.ROOK: (ROOK_DIRS, None, MAX_ROOK_MOVES),
    PieceType.BISHOP: (BISHOP_DIRS, None, MAX_BISHOP_MOVES),
    PieceType.QUEEN: (QUEEN_DIRS, None, MAX_QUEEN_MOVES),
    PieceType.KING: (KING_DIRS, 1, MAX_KING_MOVES),
}


def _walk(sq: Square, df: int, dr: int, limit: int | None) -> list[Square]:
    """Squares from *sq* outward along (df, dr) until the edge or *limit*."""
    squares: list[Square] = []
    af = file_of(sq) + df
    ar = rank_of(sq) + dr
    while on_board(af, ar) and (limit is None or len(squares) < limit):
        squares.append(make_square(af, ar))
        af += df
        ar += dr
    return squares


def _build_sliding_row(
    sq: Square,
    directions: tuple[tuple[int, int], ...],
    limit: int | None,
    capacity: int,
) -> AttackRow:
    row: list[Square | None] = []
    for df, dr in directions:
        row.extend(_walk(sq, df, dr, limit))
    row.extend([None] * (capacity - len(row)))
    return tuple(row)


def _build_knight_row(sq: Square) -> AttackRow:
    row: list[Square | None] = [None] * MAX_KNIGHT_MOVES
    file_idx = file_of(sq)
    rank_idx = rank_of(sq)
    for i, (df, dr) in enumerate(KNIGHT_OFFSETS):
        af = file_idx + df
        ar = rank_idx + dr
        if on_board(af, ar):
            row[i] = make_square(af, ar)
    return tuple(row)


def build_table(family: PieceType) -> AttackTable:
    """Build the attack table for *family* (any piece type but pawn)."""
    if family == PieceType.KNIGHT:
        return tuple(_build_knight_row(sq) for sq in range(BOARD_SIZE))
    try:
        directions, limit, capacity = _SLIDING_FAMILIES[family]
    except KeyError:
        raise ValueError(f"No attack table for {family.name}") from None
    return tuple(
        _build_sliding_row(sq, directions, limit, capacity) for sq in range(BOARD_SIZE)
    )


# -- Precomputed lookup tables ---------------------------------------------

ROOK_TABLE = build_table(PieceType.ROOK)
BISHOP_TABLE = build_table(PieceType.BISHOP)
QUEEN_TABLE = build_table(PieceType.QUEEN)
KING_TABLE = build_table(PieceType.KING)
KNIGHT_TABLE = build_table(PieceType.KNIGHT)

_TABLES: dict[PieceType, AttackTable] = {
    PieceType.ROOK: ROOK_TABLE,
    PieceType.BISHOP: BISHOP_TABLE,
    PieceType.QUEEN: QUEEN_TABLE,
    PieceType.KING: KING_TABLE,
    PieceType.KNIGHT: KNIGHT_TABLE,
}

_LOGGER.debug("Attack tables built for %s", ", ".join(pt.name for pt in _TABLES))


def attack_table(family: PieceType) -> AttackTable:
    """Shared, precomputed table for *family*."""
    try:
        return _TABLES[family]
    except KeyError:
        raise ValueError(f"No attack table for {family.name}") from None


def reachable_squares(family: PieceType, sq: Square) -> tuple[Square, ...]:
    """Row for *sq* with the ``None`` sentinels dropped, order preserved."""
    return tuple(to_sq for to_sq in attack_table(family)[sq] if to_sq is not None)
