"""Square indices and their algebraic names.

Squares count from a1=0 along each rank to h8=63, so ``sq >> 3`` is the
rank and ``sq & 7`` the file.
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int

FILE_NAMES = "abcdefgh"


def file_of(sq: Square) -> int:
    return sq & 7


def rank_of(sq: Square) -> int:
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    return rank * 8 + file


def is_valid_square(sq: int) -> bool:
    return 0 <= sq < 64


def square_name(sq: Square) -> str:
    """Algebraic name of *sq*, e.g. 28 -> 'e4'."""
    return f"{FILE_NAMES[file_of(sq)]}{rank_of(sq) + 1}"


def parse_square(name: str) -> Square:
    """Square index for an algebraic name such as ``'e4'``.

    Raises :class:`ValueError` for anything other than a file letter
    followed by a rank digit 1-8.
    """
    if len(name) != 2 or name[0] not in FILE_NAMES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(FILE_NAMES.index(name[0]), int(name[1]) - 1)
