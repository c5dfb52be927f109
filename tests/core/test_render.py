"""Tests for text and HTML board diagrams."""

from fenboard.core.enums import Color
from fenboard.core.notation import STARTING_FEN, position_from_fen
from fenboard.core.position import Position
from fenboard.core.render import BoardRenderer, RenderOptions, render_board

_STARTING_DIAGRAM = "\n".join(
    [
        "8 r n b q k b n r",
        "7 p p p p p p p p",
        "6 . . . . . . . .",
        "5 . . . . . . . .",
        "4 . . . . . . . .",
        "3 . . . . . . . .",
        "2 P P P P P P P P",
        "1 R N B Q K B N R",
        "  a b c d e f g h",
    ]
)


class TestTextRendering:
    def test_starting_position(self) -> None:
        assert render_board(position_from_fen(STARTING_FEN)) == _STARTING_DIAGRAM

    def test_white_back_rank_at_bottom(self) -> None:
        lines = render_board(Position.initial()).splitlines()
        assert lines[-2] == "1 R N B Q K B N R"
        assert lines[0].startswith("8 r")

    def test_orientation_ignores_side_to_move(self) -> None:
        pos = Position.initial()
        assert render_board(pos) == render_board(pos.replace(side_to_move=Color.BLACK))

    def test_equal_positions_render_identically(self) -> None:
        fen = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 1"
        assert render_board(position_from_fen(fen)) == render_board(position_from_fen(fen))

    def test_without_coordinates(self) -> None:
        text = render_board(Position.initial(), RenderOptions(show_coordinates=False))
        lines = text.splitlines()
        assert len(lines) == 8
        assert lines[0] == "r n b q k b n r"
        assert lines[7] == "R N B Q K B N R"

    def test_unicode_glyphs(self) -> None:
        renderer = BoardRenderer(RenderOptions(glyphs="unicode"))
        lines = renderer.render(Position.initial()).splitlines()
        assert lines[0] == "8 ♜ ♞ ♝ ♛ ♚ ♝ ♞ ♜"
        assert lines[7] == "1 ♖ ♘ ♗ ♕ ♔ ♗ ♘ ♖"

    def test_custom_empty_marker(self) -> None:
        pos = position_from_fen("8/8/8/8/8/8/8/4K3 w - - 0 1")
        lines = render_board(pos, RenderOptions(empty="-")).splitlines()
        assert lines[0] == "8 - - - - - - - -"
        assert lines[7] == "1 - - - - K - - -"

    def test_shortcut_matches_renderer(self) -> None:
        pos = Position.initial()
        assert render_board(pos) == BoardRenderer().render(pos)


class TestHtmlRendering:
    def test_table_shape(self) -> None:
        markup = BoardRenderer().render_html(Position.initial())
        assert markup.startswith('<table class="board"')
        assert markup.endswith("</table>")
        assert markup.count("<td") == 64
        assert markup.count("<tr>") == 9

    def test_rank_eight_first_on_light_square(self) -> None:
        markup = BoardRenderer().render_html(Position.initial())
        assert markup.index("<th>8</th>") < markup.index("<th>1</th>")
        assert (
            '<th>8</th><td align="center" style="background-color:#f0d9b5">r</td>'
            in markup
        )

    def test_a1_is_dark(self) -> None:
        markup = BoardRenderer().render_html(Position.initial())
        assert '<th>1</th><td align="center" style="background-color:#b58863">R</td>' in markup

    def test_without_coordinates(self) -> None:
        opts = RenderOptions(show_coordinates=False)
        markup = BoardRenderer(opts).render_html(Position.initial())
        assert "<th>" not in markup
        assert markup.count("<tr>") == 8

    def test_escapes_empty_marker(self) -> None:
        opts = RenderOptions(empty="<")
        markup = BoardRenderer(opts).render_html(Position.initial())
        assert "&lt;" in markup
        assert "><<" not in markup
