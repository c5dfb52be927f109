"""Fixtures for the Qt window tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest


@pytest.fixture(autouse=True)
def _close_windows(qapp) -> Iterator[None]:
    """Close windows a test left open before the next one runs."""
    yield
    for widget in qapp.topLevelWidgets():
        widget.close()
    qapp.processEvents()
