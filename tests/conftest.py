"""Pytest configuration - consistent CWD and shared fixtures."""
from __future__ import annotations

import os
from pathlib import Path
import pytest

from filter_viz.model.modulation import FilterParams

ROOT = Path(__file__).resolve().parents[1]

# Widgets are built without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


def pytest_sessionstart(session):
    os.chdir(ROOT)


# Fixtures used by multiple test files

@pytest.fixture
def project_root():
    """Return path to project root."""
    return ROOT


@pytest.fixture
def params():
    """Fresh parameter set with the shipped defaults."""
    return FilterParams()


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication for timer and widget tests."""
    from PyQt5.QtWidgets import QApplication
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
