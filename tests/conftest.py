"""
pytest configuration and shared fixtures.
"""

import pytest

from pygeoboard import Board


@pytest.fixture
def board():
    """Fresh board with default options."""
    return Board()


@pytest.fixture
def slider(board):
    """Slider from (0, 0) to (4, 0) over [0, 10], starting at 5."""
    return board.create('slider', [[0, 0], [4, 0], [0, 5, 10]])


@pytest.fixture
def segment(board):
    """Segment from (0, 0) to (4, 0)."""
    p1 = board.create('point', [0, 0])
    p2 = board.create('point', [4, 0])
    return board.create('segment', [p1, p2])
