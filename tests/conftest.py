"""Shared fixtures: a headless QApplication and a thread pool that runs nothing on its own."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


class FakeThreadPool:
    """Collects started workers so tests decide when, and in which order, they complete."""

    def __init__(self):
        self.workers = []

    def start(self, worker):
        self.workers.append(worker)

    def requests_for(self, destination):
        return [w.request for w in self.workers if w.request.destination == destination]

    def workers_for(self, destination):
        return [w for w in self.workers if w.request.destination == destination]


@pytest.fixture(scope="session", autouse=True)
def qapp():
    """Provide one QApplication for timers and widgets."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def fake_pool():
    return FakeThreadPool()
