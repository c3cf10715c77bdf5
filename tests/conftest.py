"""Shared pytest fixtures for the turtlesoup test suite.

Fixtures:
    turtle: fresh SimpleTurtle at the origin facing +x
    close: helper comparing a Point to an (x, y) pair within tolerance
"""

import pytest

from turtlesoup.turtle import SimpleTurtle


@pytest.fixture
def turtle():
    return SimpleTurtle()


@pytest.fixture
def close():
    def _close(point, expected, tol=1e-9):
        ex, ey = expected
        return abs(point.x - ex) <= tol and abs(point.y - ey) <= tol

    return _close
