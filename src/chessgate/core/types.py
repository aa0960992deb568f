"""Square type alias and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63

Rank 0 is White's back rank, rank 7 is Black's.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int  # 0–63

BOARD_SIZE = 64
BOARD_WIDTH = 8

_FILE_NAMES = "abcdefgh"
_RANK_NAMES = "12345678"


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq % BOARD_WIDTH


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq // BOARD_WIDTH


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return rank * BOARD_WIDTH + file


def square_to_coords(sq: Square) -> tuple[int, int]:
    """Split a square into ``(rank, file)``."""
    return rank_of(sq), file_of(sq)


def coords_to_square(rank: int, file: int) -> Square:
    """Inverse of :func:`square_to_coords`."""
    return make_square(file, rank)


def on_board(file: int, rank: int) -> bool:
    return 0 <= file < BOARD_WIDTH and 0 <= rank < BOARD_WIDTH


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < BOARD_SIZE


def squares_between(from_sq: Square, to_sq: Square) -> list[Square]:
    """Squares strictly between two squares on a shared rank, file or diagonal.

    Returns an empty list for adjacent or unaligned squares.
    """
    d_file = file_of(to_sq) - file_of(from_sq)
    d_rank = rank_of(to_sq) - rank_of(from_sq)
    if d_file and d_rank and abs(d_file) != abs(d_rank):
        return []
    df = (d_file > 0) - (d_file < 0)
    dr = (d_rank > 0) - (d_rank < 0)
    step = dr * BOARD_WIDTH + df
    return list(range(from_sq + step, to_sq, step)) if step else []


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return _FILE_NAMES[file_of(sq)] + _RANK_NAMES[rank_of(sq)]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in _FILE_NAMES or name[1] not in _RANK_NAMES:
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(_FILE_NAMES.index(name[0]), _RANK_NAMES.index(name[1]))


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)
