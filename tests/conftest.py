"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator

import pytest

from reversie.core.enums import PlayerSlot
from reversie.game.engine import GameEngine
from reversie.game.interfaces import DiscAllowance
from reversie.game.player import AIPlayer, HumanPlayer

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for signal/slot tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app


@pytest.fixture
def hh_engine() -> GameEngine:
    """Human vs human engine with the standard allowance, canonical start."""
    return GameEngine(
        HumanPlayer(PlayerSlot.FIRST, "Alice"),
        HumanPlayer(PlayerSlot.SECOND, "Bob"),
    )


@pytest.fixture
def ha_engine() -> GameEngine:
    """Human vs computer engine; undo is disabled in this seating."""
    return GameEngine(
        HumanPlayer(PlayerSlot.FIRST, "Alice"),
        AIPlayer(PlayerSlot.SECOND),
    )


@pytest.fixture
def plain_engine() -> GameEngine:
    """Human vs human engine where nobody owns any special discs."""
    return GameEngine(
        HumanPlayer(PlayerSlot.FIRST, allowance=DiscAllowance.plain_only()),
        HumanPlayer(PlayerSlot.SECOND, allowance=DiscAllowance.plain_only()),
    )
