"""Internationalisation strings for the fenboard UI.

Usage::

    from fenboard.ui.i18n import t, set_language

    set_language("Russian")
    print(t().btn_set_fen)          # "Установить"
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_file: str
    menu_quit: str
    menu_view: str
    menu_unicode_pieces: str
    menu_show_coordinates: str
    menu_language: str

    # ── FEN form ─────────────────────────────────────────────────────────
    fen_label: str
    fen_placeholder: str
    btn_set_fen: str
    btn_reset: str
    invalid_fen: str  # echoed into the input field on rejection

    # ── Status bar ───────────────────────────────────────────────────────
    status_ready: str
    status_position_set: str  # "Position set: {fen}"
    status_position_reset: str
    status_invalid_fen: str  # "Invalid {field} field: {text}"


_EN = Strings(
    window_title="FEN Board",
    menu_file="&File",
    menu_quit="&Quit",
    menu_view="&View",
    menu_unicode_pieces="Unicode pieces",
    menu_show_coordinates="Show coordinates",
    menu_language="Language",
    fen_label="FEN:",
    fen_placeholder="rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
    btn_set_fen="Set FEN",
    btn_reset="Reset",
    invalid_fen="invalid FEN string",
    status_ready="Ready",
    status_position_set="Position set: {fen}",
    status_position_reset="Starting position restored",
    status_invalid_fen="Invalid {field} field: {text!r}",
)

_RU = Strings(
    window_title="FEN-доска",
    menu_file="&Файл",
    menu_quit="&Выход",
    menu_view="&Вид",
    menu_unicode_pieces="Фигуры Unicode",
    menu_show_coordinates="Показывать координаты",
    menu_language="Язык",
    fen_label="FEN:",
    fen_placeholder="rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1",
    btn_set_fen="Установить",
    btn_reset="Сброс",
    invalid_fen="некорректная строка FEN",
    status_ready="Готово",
    status_position_set="Позиция установлена: {fen}",
    status_position_reset="Начальная позиция восстановлена",
    status_invalid_fen="Ошибка в поле {field}: {text!r}",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
