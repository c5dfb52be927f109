"""MainWindow — board diagram plus a FEN entry form."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QActionGroup, QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from fenboard.core.notation import FenError
from fenboard.core.render import BoardRenderer
from fenboard.core.store import PositionStore
from fenboard.ui.i18n import LANGUAGES, set_language, t
from fenboard.ui.settings import AppSettings
from fenboard.ui.styles.theme import BOARD_FONT_FAMILY, BOARD_FONT_SIZE

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Shows the store's position and lets the user replace it from FEN.

    The window never touches the position directly: it hands text to
    :meth:`PositionStore.set_fen` and redraws from
    :meth:`PositionStore.render_current_html`.
    """

    def __init__(
        self,
        store: PositionStore | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self.setMinimumSize(560, 560)

        self._store = store if store is not None else PositionStore()
        self._settings = settings if settings is not None else AppSettings()

        self._setup_ui()
        self._setup_menu()
        self._apply_settings()
        self._status_bar.showMessage(t().status_ready)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(8)

        self._board_label = QLabel()
        self._board_label.setObjectName("boardLabel")
        self._board_label.setTextFormat(Qt.TextFormat.RichText)
        self._board_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._board_label.setFont(QFont(BOARD_FONT_FAMILY, BOARD_FONT_SIZE))
        root.addWidget(self._board_label, stretch=1)

        self._fen_display = QLabel()
        self._fen_display.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._fen_display.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        root.addWidget(self._fen_display)

        form = QHBoxLayout()
        self._fen_label = QLabel()
        form.addWidget(self._fen_label)

        self._fen_input = QLineEdit()
        self._fen_input.returnPressed.connect(self._on_submit)
        form.addWidget(self._fen_input, stretch=1)

        self._btn_set = QPushButton()
        self._btn_set.clicked.connect(self._on_submit)
        form.addWidget(self._btn_set)

        self._btn_reset = QPushButton()
        self._btn_reset.clicked.connect(self._on_reset)
        form.addWidget(self._btn_reset)
        root.addLayout(form)

        self._status_bar = QStatusBar()
        self.setStatusBar(self._status_bar)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._file_menu = menu_bar.addMenu("")
        self._act_quit = QAction(self)
        self._act_quit.triggered.connect(self.close)
        self._file_menu.addAction(self._act_quit)

        self._view_menu = menu_bar.addMenu("")
        self._act_unicode = QAction(self, checkable=True)
        self._act_unicode.toggled.connect(self._on_unicode_toggled)
        self._view_menu.addAction(self._act_unicode)

        self._act_coords = QAction(self, checkable=True)
        self._act_coords.toggled.connect(self._on_coordinates_toggled)
        self._view_menu.addAction(self._act_coords)

        self._language_menu = self._view_menu.addMenu("")
        self._language_group = QActionGroup(self)
        self._language_actions: dict[str, QAction] = {}
        for language in LANGUAGES:
            action = QAction(language, self, checkable=True)
            action.triggered.connect(
                lambda _checked=False, lang=language: self._on_language_chosen(lang)
            )
            self._language_group.addAction(action)
            self._language_menu.addAction(action)
            self._language_actions[language] = action

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._file_menu.setTitle(s.menu_file)
        self._act_quit.setText(s.menu_quit)
        self._view_menu.setTitle(s.menu_view)
        self._act_unicode.setText(s.menu_unicode_pieces)
        self._act_coords.setText(s.menu_show_coordinates)
        self._language_menu.setTitle(s.menu_language)
        self._fen_label.setText(s.fen_label)
        self._fen_input.setPlaceholderText(s.fen_placeholder)
        self._btn_set.setText(s.btn_set_fen)
        self._btn_reset.setText(s.btn_reset)

    # ── Settings ─────────────────────────────────────────────────────────

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def _apply_settings(self) -> None:
        s = self._settings

        # Language must come first so all retranslate calls use the new locale
        set_language(s.language)
        self.retranslate_ui()

        for action, checked in (
            (self._act_unicode, s.glyphs == "unicode"),
            (self._act_coords, s.show_coordinates),
        ):
            action.blockSignals(True)
            action.setChecked(checked)
            action.blockSignals(False)
        language_action = self._language_actions.get(s.language)
        if language_action is not None:
            language_action.setChecked(True)

        self._store.renderer = BoardRenderer(s.render_options())
        self.refresh_board()

    def _on_unicode_toggled(self, checked: bool) -> None:
        self._settings.glyphs = "unicode" if checked else "letters"
        self._apply_settings()

    def _on_coordinates_toggled(self, checked: bool) -> None:
        self._settings.show_coordinates = checked
        self._apply_settings()

    def _on_language_chosen(self, language: str) -> None:
        self._settings.language = language
        self._apply_settings()

    # ── FEN form ─────────────────────────────────────────────────────────

    def refresh_board(self) -> None:
        """Redraw the diagram and the FEN line from the store."""
        self._board_label.setText(self._store.render_current_html())
        self._fen_display.setText(self._store.fen())

    def _on_submit(self) -> None:
        text = self._fen_input.text()
        try:
            self._store.set_fen(text)
        except FenError as exc:
            _LOGGER.info("Rejected FEN input: %s", exc)
            self._fen_input.setText(t().invalid_fen)
            self._fen_input.selectAll()
            self._status_bar.showMessage(
                t().status_invalid_fen.format(field=exc.field, text=exc.text)
            )
            return

        self._fen_input.clear()
        self.refresh_board()
        self._status_bar.showMessage(t().status_position_set.format(fen=self._store.fen()))

    def _on_reset(self) -> None:
        self._store.reset()
        self.refresh_board()
        self._status_bar.showMessage(t().status_position_reset)
