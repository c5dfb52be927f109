"""Fixtures shared by the core and UI tests."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

# No display on headless Linux; Qt must render offscreen there.
_HEADLESS = sys.platform.startswith("linux") and not (
    os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY")
)
if _HEADLESS:
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """The process-wide QApplication, created on first use."""
    from PyQt6.QtWidgets import QApplication

    yield QApplication.instance() or QApplication([])


@pytest.fixture(autouse=True)
def _english_strings() -> Iterator[None]:
    """Every test starts and ends with the English string table."""
    from fenboard.ui.i18n import set_language

    set_language("English")
    yield
    set_language("English")
