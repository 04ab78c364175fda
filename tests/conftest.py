"""
Shared pytest fixtures for spacebind tests.
"""

import pytest
from pubsub import pub

from spacebind.geometry import Area
from spacebind.virtual import VirtualDisplay, VirtualScreen, VirtualWindow


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without a display")


@pytest.fixture(autouse=True)
def clean_bus():
    """Drop pub/sub listeners registered by a test."""
    yield
    pub.unsubAll()


@pytest.fixture
def make_window():
    """Factory fixture for creating virtual windows."""

    def _make(app_id="com.example.app", x=0, y=0, width=800, height=600, title="test"):
        return VirtualWindow(app_id, Area(x, y, width, height), title=title)

    return _make


@pytest.fixture
def standard_area():
    """Standard 1920x1080 screen frame."""
    return Area(0, 0, 1920, 1080)


@pytest.fixture
def laptop_area():
    """Laptop 1440x900 screen frame, right of a 1920 wide screen."""
    return Area(1920, 0, 1440, 900)


@pytest.fixture
def single_display(standard_area):
    """One screen with two spaces."""
    return VirtualDisplay([VirtualScreen("main", standard_area, spaces=2)])


@pytest.fixture
def dual_display(standard_area, laptop_area):
    """External screen with two spaces and a laptop screen with one."""
    return VirtualDisplay(
        [
            VirtualScreen("external", standard_area, spaces=2),
            VirtualScreen("laptop", laptop_area, spaces=1),
        ]
    )
