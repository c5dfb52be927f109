"""Core domain layer — position model, FEN codec and rendering, no Qt imports.

Quick start::

    from fenboard.core import PositionStore, FenError

    store = PositionStore()
    try:
        store.set_fen("8/8/4k3/8/8/4K3/8/8 w - - 0 1")
    except FenError as exc:
        print(exc.field, exc.text)
    print(store.render_current())
"""

from fenboard.core.board import Board
from fenboard.core.enums import CastlingRights, Color, PieceType
from fenboard.core.notation import (
    STARTING_FEN,
    FenError,
    InvalidCastling,
    InvalidCounter,
    InvalidEnPassant,
    InvalidRank,
    InvalidSideToMove,
    MalformedStructure,
    position_from_fen,
    position_to_fen,
)
from fenboard.core.piece import Piece
from fenboard.core.position import Position
from fenboard.core.render import BoardRenderer, RenderOptions, render_board
from fenboard.core.store import PositionStore
from fenboard.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "Board",
    "Piece",
    "Position",
    "PositionStore",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
    "FenError",
    "InvalidCastling",
    "InvalidCounter",
    "InvalidEnPassant",
    "InvalidRank",
    "InvalidSideToMove",
    "MalformedStructure",
    # Rendering
    "BoardRenderer",
    "RenderOptions",
    "render_board",
]
