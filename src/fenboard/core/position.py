"""Position — complete board state (placement + metadata) as an immutable value."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field

from fenboard.core.board import Board
from fenboard.core.enums import CastlingRights, Color
from fenboard.core.piece import Piece
from fenboard.core.types import Square, is_valid_square, rank_of, square_name

# Rank index (0-based) of the en-passant target for each side to move:
# White moves next after a black double push (target on rank 6) and vice versa.
EN_PASSANT_RANK: dict[Color, int] = {Color.WHITE: 5, Color.BLACK: 2}


@dataclass(frozen=True, slots=True)
class Position:
    """Full position: board + side to move + castling + en passant + clocks.

    Positions are never mutated. Construction checks the structural
    invariants (not game legality) and raises :class:`ValueError` when
    one is broken; use :meth:`replace` to derive a modified position.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1

    def __post_init__(self) -> None:
        if self.halfmove_clock < 0:
            raise ValueError(f"Halfmove clock must be >= 0: {self.halfmove_clock}")
        if self.fullmove_number < 1:
            raise ValueError(f"Fullmove number must be >= 1: {self.fullmove_number}")
        if self.en_passant is not None:
            if not is_valid_square(self.en_passant):
                raise ValueError(f"Invalid en-passant square: {self.en_passant}")
            if rank_of(self.en_passant) != EN_PASSANT_RANK[self.side_to_move]:
                raise ValueError(
                    f"En-passant square {square_name(self.en_passant)} is not reachable "
                    f"with {self.side_to_move.name.lower()} to move"
                )

    @classmethod
    def initial(cls) -> Position:
        """Standard chess starting position."""
        return cls()

    def piece_at(self, sq: Square) -> Piece | None:
        return self.board[sq]

    def replace(self, **changes: object) -> Position:
        """Copy with *changes* applied; the result is validated again."""
        return dataclasses.replace(self, **changes)
