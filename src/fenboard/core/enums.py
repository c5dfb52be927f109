"""Side, piece kind and castling-right enumerations."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class Color(IntEnum):
    WHITE = 0
    BLACK = 1


class PieceType(IntEnum):
    """Piece kinds, pawn first and king last."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class CastlingRights(IntFlag):
    """Castling availability as written in the FEN castling field."""

    NONE = 0
    WHITE_KINGSIDE = 1
    WHITE_QUEENSIDE = 2
    BLACK_KINGSIDE = 4
    BLACK_QUEENSIDE = 8
    ALL = 15
