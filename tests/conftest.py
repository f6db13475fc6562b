"""
Pytest configuration and shared fixtures for Open Pixel tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import pytest

from OP_Libs.HistoryLib.app_state import ApplicationState
from OP_Libs.RasterLib.raster import Raster


class FakeClock:
    """Manually advanced time source for the history reducer."""

    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    """
    Provide a clock that only moves when advanced.

    Returns:
        A FakeClock starting at t=100.0 seconds
    """
    return FakeClock()


@pytest.fixture
def blank_raster():
    """
    Provide a 10x10 white raster.

    Returns:
        Raster filled with "#ffffff"
    """
    return Raster.empty(10, 10, "#ffffff")


@pytest.fixture
def start_state(blank_raster):
    """
    Provide a state with the draw tool, black selected and a 10x10 white picture.
    """
    return ApplicationState(tool="draw", color="#000000", picture=blank_raster)


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 255),  # Gray
    ]
