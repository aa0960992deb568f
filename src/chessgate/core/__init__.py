"""Core domain layer — chess move legality with zero external dependencies.

Quick start::

    from chessgate.core import Board, parse_square

    board = Board.set_up()
    result = board.move(parse_square("e2"), parse_square("e4"))
    if not result.ok:
        print(result.error.message)
    print(board)
"""

from chessgate.core.board import Board
from chessgate.core.enums import Color, PieceType
from chessgate.core.errors import (
    BoardConfigurationError,
    IllegalMoveError,
    MoveError,
    MoveResult,
)
from chessgate.core.piece import Piece, is_light_side
from chessgate.core.tables import attack_table, build_table, reachable_squares
from chessgate.core.types import (
    Square,
    coords_to_square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
    square_to_coords,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "coords_to_square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "square_to_coords",
    # Attack tables
    "attack_table",
    "build_table",
    "reachable_squares",
    # Domain objects
    "Board",
    "Piece",
    "is_light_side",
    # Results / errors
    "BoardConfigurationError",
    "IllegalMoveError",
    "MoveError",
    "MoveResult",
]
