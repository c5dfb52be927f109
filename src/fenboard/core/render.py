"""Board diagrams: plain text and an HTML table fragment.

Both renderers are pure functions of a :class:`Position`. Rank 8 is always
drawn first and file a leftmost, whichever side is to move.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import Literal

from fenboard.core.piece import Piece
from fenboard.core.position import Position
from fenboard.core.types import FILE_NAMES

GlyphStyle = Literal["letters", "unicode"]


@dataclass(frozen=True)
class RenderOptions:
    """How a board diagram is drawn."""

    glyphs: GlyphStyle = "letters"
    empty: str = "."
    show_coordinates: bool = True
    light_square: str = "#f0d9b5"  # tan
    dark_square: str = "#b58863"  # brown


class BoardRenderer:
    """Turns positions into deterministic board diagrams."""

    __slots__ = ("options",)

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()

    def _cell(self, piece: Piece | None) -> str:
        if piece is None:
            return self.options.empty
        return piece.symbol if self.options.glyphs == "unicode" else str(piece)

    def render(self, position: Position) -> str:
        """Text diagram, one line per rank, cells separated by spaces."""
        lines: list[str] = []
        for idx, row in enumerate(position.board.rows()):
            cells = " ".join(self._cell(piece) for piece in row)
            lines.append(f"{8 - idx} {cells}" if self.options.show_coordinates else cells)
        if self.options.show_coordinates:
            lines.append("  " + " ".join(FILE_NAMES))
        return "\n".join(lines)

    def render_html(self, position: Position) -> str:
        """``<table>`` fragment suitable for a rich-text display surface."""
        opts = self.options
        out = ['<table class="board" cellspacing="0" cellpadding="4">']
        for idx, row in enumerate(position.board.rows()):
            rank = 7 - idx
            out.append("<tr>")
            if opts.show_coordinates:
                out.append(f"<th>{rank + 1}</th>")
            for file, piece in enumerate(row):
                # a1 (file 0, rank 0) is a dark square
                shade = opts.light_square if (file + rank) % 2 else opts.dark_square
                out.append(
                    f'<td align="center" style="background-color:{shade}">'
                    f"{html.escape(self._cell(piece))}</td>"
                )
            out.append("</tr>")
        if opts.show_coordinates:
            out.append("<tr><th></th>")
            out.extend(f"<th>{name}</th>" for name in FILE_NAMES)
            out.append("</tr>")
        out.append("</table>")
        return "".join(out)


def render_board(position: Position, options: RenderOptions | None = None) -> str:
    """Plain-text diagram of *position*."""
    return BoardRenderer(options).render(position)
