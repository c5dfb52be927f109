"""Piece value object and its FEN / glyph spellings."""

from __future__ import annotations

from dataclasses import dataclass

from fenboard.core.enums import Color, PieceType

# Lowercase FEN letter per piece type; White uses the uppercase form.
_TYPE_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}

# Material in pawns. The king gets a sentinel larger than any other army.
PIECE_VALUES: dict[PieceType, int] = {
    PieceType.PAWN: 1,
    PieceType.KNIGHT: 3,
    PieceType.BISHOP: 3,
    PieceType.ROOK: 5,
    PieceType.QUEEN: 9,
    PieceType.KING: 127,
}

# Unicode chess symbols, indexed [color][piece_type]
_GLYPHS: dict[Color, dict[PieceType, str]] = {
    Color.WHITE: dict(zip(PieceType, "♙♘♗♖♕♔")),
    Color.BLACK: dict(zip(PieceType, "♟♞♝♜♛♚")),
}


def _fen_letter(color: Color, piece_type: PieceType) -> str:
    letter = _TYPE_LETTERS[piece_type]
    return letter.upper() if color == Color.WHITE else letter


_FROM_CHAR: dict[str, tuple[Color, PieceType]] = {
    _fen_letter(color, pt): (color, pt) for color in Color for pt in PieceType
}

PIECE_CHARS = frozenset(_FROM_CHAR)
"""Every letter allowed in the piece-placement field of a FEN string."""


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        return _fen_letter(self.color, self.piece_type)

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _FROM_CHAR[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _GLYPHS[self.color][self.piece_type]

    @property
    def value(self) -> int:
        return PIECE_VALUES[self.piece_type]
