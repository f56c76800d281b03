"""Pytest configuration for sprite editor tests."""

import pytest
from PyQt6.QtCore import QCoreApplication
from PyQt6.QtGui import QColor

from sprite_core import EditJournal, FrameStore


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """QTimer needs an application instance; signals are delivered directly."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def store_and_journal():
    """An 8x8 frame store wired to an edit journal, as the session wires them."""
    holder = {}
    journal = EditJournal(lambda index: holder["store"].frame(index))
    store = FrameStore(8, journal=journal)
    holder["store"] = store
    return store, journal


@pytest.fixture
def black():
    return QColor(0, 0, 0, 255)


@pytest.fixture
def red():
    return QColor(255, 0, 0, 255)


@pytest.fixture
def recorder():
    """Collect every emission of a signal as a tuple of its arguments."""
    def record(signal):
        received = []
        signal.connect(lambda *args: received.append(args))
        return received
    return record
