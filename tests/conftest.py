import pytest

from hypermaze.generators.maze import MazeGraph
from hypermaze.navigation import NavigationState


SEED = 684153987


@pytest.fixture
def seed():
    return SEED


@pytest.fixture
def square_maze():
    return MazeGraph((3, 3), SEED)


@pytest.fixture
def cube_level():
    return NavigationState.generate((4, 3, 2), SEED)


@pytest.fixture
def corridor_level():
    # Only one passage layout is possible: a straight line along dimension 0
    return NavigationState.generate((5, 1), SEED)
