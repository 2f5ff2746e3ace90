# pathfinding_lab/problems/grid.py
from __future__ import annotations
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..core.oracle import NEIGHBOR_OFFSETS, Position, manhattan

# Tile codes of the level data; only OBSTACLE blocks movement.
EMPTY, OBSTACLE, START, END = 0, 1, 2, 3

_CHARS = {".": EMPTY, "#": OBSTACLE, "S": START, "G": END}


class GridMap:
    """
    Rectangular 4-neighbor grid backed by a numpy array indexed [y, x].

    - in_bounds(p): 0 <= x < width and 0 <= y < height
    - is_walkable(p): in bounds and not an OBSTACLE tile
    - neighbors(p): walkable cells right, left, up, down of p (in that order)
    - distance(a, b): Manhattan distance unless a cost function is supplied
    - heuristic(a, b): Manhattan distance (admissible on a 4-neighbor grid)
    """
    def __init__(self, cells, distance_fn: Optional[Callable[[Position, Position], int]] = None):
        self.cells = np.asarray(cells, dtype=np.int8)
        if self.cells.ndim != 2:
            raise ValueError(f"grid cells must be 2-dimensional, got shape {self.cells.shape}")
        self._distance = distance_fn or manhattan

    @property
    def height(self) -> int:
        return int(self.cells.shape[0])

    @property
    def width(self) -> int:
        return int(self.cells.shape[1])

    def in_bounds(self, pos: Position) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def is_walkable(self, pos: Position) -> bool:
        return self.in_bounds(pos) and self.cells[pos[1], pos[0]] != OBSTACLE

    def neighbors(self, pos: Position) -> List[Position]:
        x, y = pos
        out = []
        for dx, dy in NEIGHBOR_OFFSETS:
            q = Position(x + dx, y + dy)
            if self.is_walkable(q):
                out.append(q)
        return out

    def distance(self, a: Position, b: Position) -> int:
        return self._distance(a, b)

    def heuristic(self, a: Position, b: Position) -> int:
        return manhattan(a, b)

    # -------- construction helpers --------

    @classmethod
    def open(cls, width: int, height: int, walls: Iterable[Tuple[int, int]] = ()) -> "GridMap":
        cells = np.full((height, width), EMPTY, dtype=np.int8)
        for x, y in walls:
            cells[y, x] = OBSTACLE
        return cls(cells)

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> "GridMap":
        """Parse '.' free, '#' wall, 'S' start, 'G' goal. rows[0] is y = 0."""
        if not rows or len({len(r) for r in rows}) != 1:
            raise ValueError("rows must be non-empty and of equal length")
        try:
            cells = [[_CHARS[ch] for ch in row] for row in rows]
        except KeyError as e:
            raise ValueError(f"unknown tile character {e.args[0]!r}") from None
        return cls(cells)

    def find(self, tile: int) -> Optional[Position]:
        ys, xs = np.nonzero(self.cells == tile)
        if len(xs) == 0:
            return None
        return Position(int(xs[0]), int(ys[0]))

    @property
    def start(self) -> Optional[Position]:
        return self.find(START)

    @property
    def goal(self) -> Optional[Position]:
        return self.find(END)

    def walls(self) -> List[Position]:
        ys, xs = np.nonzero(self.cells == OBSTACLE)
        return [Position(int(x), int(y)) for x, y in zip(xs, ys)]


def make_sample_grid() -> GridMap:
    # Example: 12x8 grid, a wall with a single gap
    return GridMap.from_strings([
        "S.....#.....",
        "......#.....",
        "..###.#.###.",
        "....#.#...#.",
        "....#.....#.",
        "..###.#####.",
        "......#....G",
        "......#.....",
    ])
