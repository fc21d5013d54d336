"""Shared fixtures for the tic-tac-toe tests."""

import pytest
from PySide6.QtCore import QCoreApplication

from tictactoe.game_engine import GameEngine
from tictactoe.mode import ModeSelector


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Single application instance for all QObject based tests."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def selector():
    return ModeSelector()


@pytest.fixture
def engine(selector):
    return GameEngine(selector.mode_changed)

