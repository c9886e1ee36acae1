"""
Test Configuration File

Unified setup for Python path, avoiding sys.path.insert in each test file.
Provides the QApplication fixture required for PyQt6 tests and the shared
fakes used by the reconciler tests.
"""

import os
import sys
from pathlib import Path

import pytest

# Add the src directory to the Python path
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(scope="session")
def qapp():
    """
    Create QApplication for all tests.

    Uses session scope to avoid creating multiple QApplication instances.
    """
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt6.QtWidgets import QApplication

    # Check if a QApplication instance already exists
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def transport():
    from fakes import FakeTransport
    return FakeTransport()


@pytest.fixture
def graph():
    from soundgraph.core.graph.memory_graph import InMemoryAudioGraph
    return InMemoryAudioGraph(spectrum_source=lambda: list(range(256)) * 64)


@pytest.fixture
def scheduler():
    from soundgraph.core.scheduling import ManualTickScheduler
    return ManualTickScheduler()
