"""PositionStore — owner of the single live position."""

from __future__ import annotations

import logging
import threading

from fenboard.core.notation import FenError, position_from_fen, position_to_fen
from fenboard.core.position import Position
from fenboard.core.render import BoardRenderer

_LOGGER = logging.getLogger(__name__)


class PositionStore:
    """Holds exactly one current :class:`Position` and swaps it atomically.

    The store is created by the host application and handed to whatever
    needs it; there is no module-level instance. Positions are immutable,
    so :meth:`current` hands out the live value itself. The only write path
    is :meth:`set_fen` (and :meth:`reset`): decoding happens outside the
    lock, then the reference is swapped under it. A failed decode leaves
    the store untouched and re-raises the
    :class:`~fenboard.core.notation.errors.FenError`.
    """

    __slots__ = ("_position", "_lock", "_renderer")

    def __init__(
        self,
        position: Position | None = None,
        renderer: BoardRenderer | None = None,
    ) -> None:
        self._position = position if position is not None else Position.initial()
        self._lock = threading.Lock()
        self._renderer = renderer or BoardRenderer()

    @property
    def renderer(self) -> BoardRenderer:
        return self._renderer

    @renderer.setter
    def renderer(self, renderer: BoardRenderer) -> None:
        self._renderer = renderer

    # ── Reads ────────────────────────────────────────────────────────────

    def current(self) -> Position:
        """Snapshot of the current position."""
        with self._lock:
            return self._position

    def fen(self) -> str:
        """Canonical FEN of the current position."""
        return position_to_fen(self.current())

    def render_current(self) -> str:
        """Text diagram of the current position."""
        return self._renderer.render(self.current())

    def render_current_html(self) -> str:
        """HTML diagram of the current position."""
        return self._renderer.render_html(self.current())

    # ── Writes ───────────────────────────────────────────────────────────

    def set_fen(self, fen: str) -> Position:
        """Replace the current position with the one described by *fen*."""
        try:
            position = position_from_fen(fen)
        except FenError as exc:
            _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
            raise
        self._swap(position)
        return position

    def reset(self) -> Position:
        """Go back to the standard starting position."""
        position = Position.initial()
        self._swap(position)
        return position

    def _swap(self, position: Position) -> None:
        with self._lock:
            self._position = position
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Position replaced: %s", position_to_fen(position))
