import pytest

from pathfinding_lab.problems.grid import GridMap


@pytest.fixture
def open_grid():
    return GridMap.open(5, 5)


@pytest.fixture
def split_grid():
    # solid wall down column x=2, no gap
    return GridMap.open(5, 5, walls=[(2, y) for y in range(5)])


@pytest.fixture
def enclosed_grid():
    # goal (4, 4) boxed in by (3, 4) and (4, 3)
    return GridMap.open(5, 5, walls=[(3, 4), (4, 3)])
