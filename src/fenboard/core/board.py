"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from fenboard.core.enums import Color, PieceType
from fenboard.core.piece import Piece
from fenboard.core.types import Square, make_square

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

Row = tuple[Piece | None, ...]


class Board:
    """Read-only 64-square board.

    Cells are stored in square order (a1 first, h8 last). A board never
    changes after construction; :meth:`with_piece` derives a new one.
    """

    __slots__ = ("_squares",)

    def __init__(self, cells: Iterable[Piece | None] | None = None) -> None:
        squares = tuple(cells) if cells is not None else (None,) * 64
        if len(squares) != 64:
            raise ValueError(f"Board needs 64 cells, got {len(squares)}")
        self._squares: tuple[Piece | None, ...] = squares

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    def rows(self) -> tuple[Row, ...]:
        """Rank-major grid as displayed: rank 8 first, file a first in each row."""
        return tuple(
            self._squares[rank * 8 : rank * 8 + 8] for rank in range(7, -1, -1)
        )

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in enumerate(self._squares) if piece == target]

    def has_piece(self, color: Color, piece_type: PieceType) -> bool:
        """Whether *color* has at least one piece of *piece_type*."""
        return Piece(color, piece_type) in self._squares

    def all_pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def piece_counts(self, color: Color) -> dict[PieceType, int]:
        """Number of *color*'s pieces per type (zero entries included)."""
        counts = dict.fromkeys(PieceType, 0)
        for piece in self._squares:
            if piece is not None and piece.color == color:
                counts[piece.piece_type] += 1
        return counts

    def material(self, color: Color, *, include_king: bool = False) -> int:
        """Sum of :attr:`Piece.value` over *color*'s pieces."""
        return sum(
            piece.value
            for piece in self._squares
            if piece is not None
            and piece.color == color
            and (include_king or piece.piece_type != PieceType.KING)
        )

    def king_square(self, color: Color) -> Square:
        """Return the first king square for *color*."""
        kings = self.pieces(color, PieceType.KING)
        if not kings:
            raise ValueError(f"No {color.name} king on board")
        return kings[0]

    # -- Derivation ---------------------------------------------------------

    def with_piece(self, sq: Square, piece: Piece | None) -> Board:
        """Copy of this board with *sq* set to *piece* (``None`` clears it)."""
        squares = list(self._squares)
        squares[sq] = piece
        return Board(squares)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        squares: list[Piece | None] = [None] * 64
        for f, pt in enumerate(_BACK_RANK):
            squares[make_square(f, 0)] = Piece(Color.WHITE, pt)
            squares[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            squares[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            squares[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return cls(squares)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        lines = [
            f"{8 - idx} " + " ".join(str(p) if p else "." for p in row)
            for idx, row in enumerate(self.rows())
        ]
        lines.append("  a b c d e f g h")
        return "\n".join(lines)
