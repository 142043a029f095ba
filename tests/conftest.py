"""
Pytest configuration and shared fixtures for pathgen tests.

Provides the robot config used by the worked examples and a few canonical
waypoint layouts (straight line, quarter turn, reversal).
"""

import os
import sys

import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from pathgen.config import PathConfig  # noqa: E402
from pathgen.geometry import Point, Waypoint  # noqa: E402

# Handle length that makes a cubic Bezier quarter circle
KAPPA = 0.5522847498


def straight(length: float = 10.0) -> list[Waypoint]:
    """Two waypoints along +x with handles at thirds (uniform parametric speed)."""
    third = length / 3.0
    return [
        Waypoint(0.0, 0.0, exit_handle=Point(third, 0.0)),
        Waypoint(length, 0.0, entry_handle=Point(-third, 0.0)),
    ]


def quarter_turn(radius: float = 10.0) -> list[Waypoint]:
    """Counter-clockwise quarter circle from (radius, 0) to (0, radius)."""
    h = KAPPA * radius
    return [
        Waypoint(radius, 0.0, exit_handle=Point(0.0, h)),
        Waypoint(0.0, radius, entry_handle=Point(h, 0.0)),
    ]


def reversal() -> list[Waypoint]:
    """Drive 10 units along +x, stop, then reverse 10 units along +y."""
    third = 10.0 / 3.0
    return [
        Waypoint(0.0, 0.0, exit_handle=Point(third, 0.0)),
        Waypoint(
            10.0,
            0.0,
            entry_handle=Point(-third, 0.0),
            exit_handle=Point(0.0, third),
            reverse=True,
        ),
        Waypoint(10.0, 10.0, entry_handle=Point(0.0, -third)),
    ]


@pytest.fixture
def config() -> PathConfig:
    """Robot limits from the worked examples."""
    return PathConfig(max_velocity=24.0, max_acceleration=12.0, k=3.0, spacing=0.5)


@pytest.fixture
def make_straight():
    """Factory for straight two-waypoint paths of a given length."""
    return straight


@pytest.fixture
def straight_path() -> list[Waypoint]:
    return straight()


@pytest.fixture
def quarter_path() -> list[Waypoint]:
    return quarter_turn()


@pytest.fixture
def reversal_path() -> list[Waypoint]:
    return reversal()
