# Defines the grid-query interface every search reads through (walkability, neighbors, distances).
# pathfinding_lab/core/oracle.py
from __future__ import annotations
from typing import NamedTuple, Protocol, Sequence, Tuple


class Position(NamedTuple):
    """Integer grid coordinate. Compares and hashes like the plain (x, y) tuple."""
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)


# 4-directional moves in the order neighbors are reported: right, left, up, down.
# Tie-breaking in every algorithm depends on this order.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def manhattan(a: Tuple[int, int], b: Tuple[int, int]) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


class GridOracle(Protocol):
    """Read-only view of a grid, as seen by the search algorithms.

    Queries never fail: out-of-bounds or blocked cells simply answer False / nothing.
    """
    def in_bounds(self, pos: Position) -> bool: ...
    def is_walkable(self, pos: Position) -> bool: ...
    def neighbors(self, pos: Position) -> Sequence[Position]: ...
    def distance(self, a: Position, b: Position) -> int: ...
    # Must never overestimate, or A* loses its optimality guarantee.
    def heuristic(self, a: Position, b: Position) -> int: ...
