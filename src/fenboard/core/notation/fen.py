"""FEN parsing and serialization."""

from __future__ import annotations

from fenboard.core.board import Board
from fenboard.core.enums import CastlingRights, Color
from fenboard.core.notation.errors import (
    InvalidCastling,
    InvalidCounter,
    InvalidEnPassant,
    InvalidRank,
    InvalidSideToMove,
    MalformedStructure,
)
from fenboard.core.piece import PIECE_CHARS, Piece
from fenboard.core.position import EN_PASSANT_RANK, Position
from fenboard.core.types import (
    FILE_NAMES,
    Square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FIELD_COUNT = 6
_EMPTY_RUN_DIGITS = "12345678"

# Canonical serialisation order of the castling letters.
_CASTLING_LETTERS: dict[str, CastlingRights] = {
    "K": CastlingRights.WHITE_KINGSIDE,
    "Q": CastlingRights.WHITE_QUEENSIDE,
    "k": CastlingRights.BLACK_KINGSIDE,
    "q": CastlingRights.BLACK_QUEENSIDE,
}

_SIDES: dict[str, Color] = {"w": Color.WHITE, "b": Color.BLACK}


def position_from_fen(fen: str) -> Position:
    """Parse a FEN string into a :class:`Position`.

    Fields are checked left to right and the first problem raises the
    matching :class:`~fenboard.core.notation.errors.FenError` subclass.
    Nothing is shared or mutated, so a failed call has no side effects.
    """
    parts = fen.strip().split(" ")
    if len(parts) != _FIELD_COUNT:
        raise MalformedStructure(fen, len(parts))

    placement, side_part, castling_part, ep_part, half_part, full_part = parts

    board = _parse_placement(placement)
    side = _parse_side(side_part)
    castling = _parse_castling(castling_part)
    ep = _parse_en_passant(ep_part, side)
    halfmove = _parse_counter("halfmove", half_part, minimum=0)
    fullmove = _parse_counter("fullmove", full_part, minimum=1)

    return Position(board, side, castling, ep, halfmove, fullmove)


def _parse_placement(placement: str) -> Board:
    ranks = placement.split("/")
    squares: list[Piece | None] = [None] * 64

    for rank_idx, rank_text in enumerate(ranks[:8]):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch in _EMPTY_RUN_DIGITS:
                file += int(ch)
            elif ch in PIECE_CHARS:
                if file < 8:
                    squares[make_square(file, rank)] = Piece.from_char(ch)
                file += 1
            else:
                raise InvalidRank(rank_idx, rank_text, f"unexpected character {ch!r}")
        if file != 8:
            raise InvalidRank(rank_idx, rank_text, f"{file} columns instead of 8")

    if len(ranks) > 8:
        raise InvalidRank(8, ranks[8], f"{len(ranks)} ranks instead of 8")
    if len(ranks) < 8:
        raise InvalidRank(len(ranks), "", f"{len(ranks)} ranks instead of 8")

    return Board(squares)


def _parse_side(side_part: str) -> Color:
    try:
        return _SIDES[side_part]
    except KeyError:
        raise InvalidSideToMove(side_part) from None


def _parse_castling(castling_part: str) -> CastlingRights:
    castling = CastlingRights.NONE
    if castling_part == "-":
        return castling
    if not castling_part:
        raise InvalidCastling(castling_part)

    seen: set[str] = set()
    for ch in castling_part:
        right = _CASTLING_LETTERS.get(ch)
        if right is None or ch in seen:
            raise InvalidCastling(castling_part)
        seen.add(ch)
        castling |= right
    return castling


def _parse_en_passant(ep_part: str, side: Color) -> Square | None:
    if ep_part == "-":
        return None
    if len(ep_part) != 2 or ep_part[0] not in FILE_NAMES or ep_part[1] not in "36":
        raise InvalidEnPassant(ep_part)

    ep = parse_square(ep_part)
    if rank_of(ep) != EN_PASSANT_RANK[side]:
        reason = f"target not reachable with {side.name.lower()} to move"
        raise InvalidEnPassant(ep_part, reason)
    return ep


def _parse_counter(name: str, text: str, *, minimum: int) -> int:
    if not (text.isascii() and text.isdigit()):
        raise InvalidCounter(name, text)
    try:
        value = int(text)
    except ValueError:
        # More digits than the interpreter will convert.
        raise InvalidCounter(name, text) from None
    if value < minimum:
        raise InvalidCounter(name, text)
    return value


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to canonical FEN.

    Empty squares are always written as maximal runs, castling letters in
    ``KQkq`` order, and counters without leading zeros.
    """
    # 1. Board
    rows: list[str] = []
    for row in pos.board.rows():
        empty = 0
        text = ""
        for piece in row:
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)
    board_str = "/".join(rows)

    # 2. Side
    side_str = "w" if pos.side_to_move == Color.WHITE else "b"

    # 3. Castling
    castling_str = "".join(
        ch for ch, right in _CASTLING_LETTERS.items() if pos.castling & right
    )

    # 4. En passant
    ep_str = square_name(pos.en_passant) if pos.en_passant is not None else "-"

    return (
        f"{board_str} {side_str} {castling_str or '-'} {ep_str} "
        f"{pos.halfmove_clock} {pos.fullmove_number}"
    )
