"""Typed FEN decoding errors.

Every error is a :class:`ValueError` that names the failing FEN field and
the offending text so a caller can tell the user what went wrong.
"""

from __future__ import annotations


class FenError(ValueError):
    """Base class for all FEN decoding failures."""

    field: str = "fen"

    def __init__(self, text: str, message: str | None = None) -> None:
        self.text = text
        super().__init__(message or f"Invalid FEN {self.field} field: {text!r}")


class MalformedStructure(FenError):
    """The input does not split into the six FEN fields."""

    field = "structure"

    def __init__(self, text: str, count: int) -> None:
        self.count = count
        super().__init__(text, f"Invalid FEN (need 6 fields, got {count}): {text!r}")


class InvalidRank(FenError):
    """A piece-placement rank is not exactly 8 columns of known characters.

    ``index`` counts from the top of the board: 0 is rank 8, 7 is rank 1.
    """

    field = "placement"

    def __init__(self, index: int, text: str, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(text, f"Invalid FEN rank {index} ({reason}): {text!r}")


class InvalidSideToMove(FenError):
    field = "side-to-move"


class InvalidCastling(FenError):
    field = "castling"


class InvalidEnPassant(FenError):
    field = "en-passant"

    def __init__(self, text: str, reason: str = "expected '-' or [a-h][36]") -> None:
        self.reason = reason
        super().__init__(text, f"Invalid FEN en-passant field ({reason}): {text!r}")


class InvalidCounter(FenError):
    """A move counter is not a decimal integer in range.

    ``field`` is ``"halfmove"`` or ``"fullmove"``.
    """

    def __init__(self, field: str, text: str) -> None:
        self.field = field
        super().__init__(text)
