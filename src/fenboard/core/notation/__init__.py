"""Notation package: FEN parsing, serialization and its error types."""

from fenboard.core.notation.errors import (
    FenError,
    InvalidCastling,
    InvalidCounter,
    InvalidEnPassant,
    InvalidRank,
    InvalidSideToMove,
    MalformedStructure,
)
from fenboard.core.notation.fen import STARTING_FEN, position_from_fen, position_to_fen

__all__ = [
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    # Errors
    "FenError",
    "InvalidCastling",
    "InvalidCounter",
    "InvalidEnPassant",
    "InvalidRank",
    "InvalidSideToMove",
    "MalformedStructure",
]
