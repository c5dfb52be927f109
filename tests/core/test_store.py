"""Tests for PositionStore."""

from __future__ import annotations

import logging
import threading

import pytest

from fenboard.core.enums import Color
from fenboard.core.notation import (
    STARTING_FEN,
    InvalidCounter,
    InvalidEnPassant,
    InvalidRank,
    MalformedStructure,
    position_from_fen,
)
from fenboard.core.position import Position
from fenboard.core.render import BoardRenderer, RenderOptions
from fenboard.core.store import PositionStore

_E4_FEN = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
_ENDGAME_FEN = "8/8/4k3/8/8/4K3/8/8 w - - 0 1"


class TestStoreDefaults:
    def test_starts_at_initial_position(self) -> None:
        store = PositionStore()
        assert store.current() == Position.initial()
        assert store.fen() == STARTING_FEN

    def test_explicit_starting_position(self) -> None:
        pos = position_from_fen(_ENDGAME_FEN)
        store = PositionStore(pos)
        assert store.current() is pos

    def test_independent_stores(self) -> None:
        first, second = PositionStore(), PositionStore()
        first.set_fen(_ENDGAME_FEN)
        assert second.fen() == STARTING_FEN


class TestSetFen:
    def test_success_replaces_position(self) -> None:
        store = PositionStore()
        returned = store.set_fen(_E4_FEN)
        assert store.current() is returned
        assert store.current().side_to_move == Color.BLACK
        assert store.fen() == _E4_FEN

    def test_render_follows_replacement(self) -> None:
        store = PositionStore()
        store.set_fen(_ENDGAME_FEN)
        lines = store.render_current().splitlines()
        assert lines[2] == "6 . . . . k . . ."
        assert lines[5] == "3 . . . . K . . ."

    @pytest.mark.parametrize(
        ("fen", "error"),
        [
            ("not a fen string", MalformedStructure),
            ("pppppppp/8/8/8/8/8/8/7 w - - 0 1", InvalidRank),
            ("8/8/8/8/8/8/8/8 w - e3 0 1", InvalidEnPassant),
            ("8/8/8/8/8/8/8/8 w - - 0 " + "1" * 5000, InvalidCounter),
        ],
    )
    def test_failure_leaves_state_untouched(self, fen: str, error: type) -> None:
        store = PositionStore()
        store.set_fen(_E4_FEN)
        before = store.current()
        rendered_before = store.render_current()
        html_before = store.render_current_html()

        with pytest.raises(error):
            store.set_fen(fen)

        assert store.current() is before
        assert store.render_current() == rendered_before
        assert store.render_current_html() == html_before

    def test_reset(self) -> None:
        store = PositionStore()
        store.set_fen(_ENDGAME_FEN)
        assert store.reset() == Position.initial()
        assert store.fen() == STARTING_FEN

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="fenboard.core.store")
        store = PositionStore()
        with pytest.raises(MalformedStructure):
            store.set_fen("garbage")
        assert "Rejected FEN 'garbage'" in caplog.text


class TestStoreRenderer:
    def test_injected_renderer(self) -> None:
        renderer = BoardRenderer(RenderOptions(show_coordinates=False))
        store = PositionStore(renderer=renderer)
        assert store.renderer is renderer
        assert store.render_current().splitlines()[0] == "r n b q k b n r"

    def test_renderer_can_be_swapped(self) -> None:
        store = PositionStore()
        store.renderer = BoardRenderer(RenderOptions(glyphs="unicode"))
        assert "♔" in store.render_current()


class TestStoreConcurrency:
    def test_readers_never_see_partial_state(self) -> None:
        store = PositionStore()
        allowed = {
            PositionStore(position_from_fen(fen)).render_current()
            for fen in (STARTING_FEN, _E4_FEN, _ENDGAME_FEN)
        }
        seen: list[str] = []
        errors: list[BaseException] = []
        stop = threading.Event()

        def writer(fens: tuple[str, ...]) -> None:
            try:
                for i in range(300):
                    store.set_fen(fens[i % len(fens)])
                    with pytest.raises(MalformedStructure):
                        store.set_fen("bad input")
            except BaseException as exc:  # noqa: BLE001 - surfaced below
                errors.append(exc)

        def reader() -> None:
            while True:
                seen.append(store.render_current())
                if stop.is_set():
                    return

        writers = [
            threading.Thread(target=writer, args=((_E4_FEN, _ENDGAME_FEN),)),
            threading.Thread(target=writer, args=((STARTING_FEN, _E4_FEN),)),
        ]
        readers = [threading.Thread(target=reader) for _ in range(3)]
        for thread in readers + writers:
            thread.start()
        for thread in writers:
            thread.join()
        stop.set()
        for thread in readers:
            thread.join()

        assert not errors
        assert seen
        assert set(seen) <= allowed
