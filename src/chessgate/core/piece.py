"""Piece identities: the closed set of 6 types × 2 colors."""

from __future__ import annotations

from enum import Enum

from chessgate.core.enums import Color, PieceType

_GLYPHS: dict[PieceType, str] = {
    PieceType.PAWN: "P",
    PieceType.KNIGHT: "N",
    PieceType.BISHOP: "B",
    PieceType.ROOK: "R",
    PieceType.QUEEN: "Q",
    PieceType.KING: "K",
}

_UNICODE: dict[tuple[Color, PieceType], str] = {
    (Color.WHITE, PieceType.PAWN): "♙",
    (Color.WHITE, PieceType.KNIGHT): "♘",
    (Color.WHITE, PieceType.BISHOP): "♗",
    (Color.WHITE, PieceType.ROOK): "♖",
    (Color.WHITE, PieceType.QUEEN): "♕",
    (Color.WHITE, PieceType.KING): "♔",
    (Color.BLACK, PieceType.PAWN): "♟",
    (Color.BLACK, PieceType.KNIGHT): "♞",
    (Color.BLACK, PieceType.BISHOP): "♝",
    (Color.BLACK, PieceType.ROOK): "♜",
    (Color.BLACK, PieceType.QUEEN): "♛",
    (Color.BLACK, PieceType.KING): "♚",
}


class Piece(Enum):
    """Immutable piece identity.

    A piece carries no position of its own; where it stands is a property
    of the board slot holding it.
    """

    WHITE_PAWN = (Color.WHITE, PieceType.PAWN)
    WHITE_KNIGHT = (Color.WHITE, PieceType.KNIGHT)
    WHITE_BISHOP = (Color.WHITE, PieceType.BISHOP)
    WHITE_ROOK = (Color.WHITE, PieceType.ROOK)
    WHITE_QUEEN = (Color.WHITE, PieceType.QUEEN)
    WHITE_KING = (Color.WHITE, PieceType.KING)
    BLACK_PAWN = (Color.BLACK, PieceType.PAWN)
    BLACK_KNIGHT = (Color.BLACK, PieceType.KNIGHT)
    BLACK_BISHOP = (Color.BLACK, PieceType.BISHOP)
    BLACK_ROOK = (Color.BLACK, PieceType.ROOK)
    BLACK_QUEEN = (Color.BLACK, PieceType.QUEEN)
    BLACK_KING = (Color.BLACK, PieceType.KING)

    def __init__(self, color: Color, piece_type: PieceType) -> None:
        self.color = color
        self.piece_type = piece_type

    # ── Classification ───────────────────────────────────────────────────

    @property
    def is_white(self) -> bool:
        return self.color == Color.WHITE

    @property
    def is_black(self) -> bool:
        return self.color == Color.BLACK

    @classmethod
    def of(cls, color: Color, piece_type: PieceType) -> Piece:
        """Look up the piece for a (color, type) pair."""
        return cls((color, piece_type))

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def glyph(self) -> str:
        """Board letter (uppercase = white, lowercase = black)."""
        letter = _GLYPHS[self.piece_type]
        return letter if self.is_white else letter.lower()

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]

    def __str__(self) -> str:
        return self.glyph

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its board letter, e.g. 'N' → white knight."""
        for piece_type, letter in _GLYPHS.items():
            if char == letter:
                return cls.of(Color.WHITE, piece_type)
            if char == letter.lower():
                return cls.of(Color.BLACK, piece_type)
        raise ValueError(f"Invalid piece character: {char!r}")


def is_light_side(piece: Piece) -> bool:
    """Whether *piece* belongs to White, the side whose back rank is rank 1."""
    return piece.is_white
