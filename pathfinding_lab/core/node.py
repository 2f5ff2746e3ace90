# pathfinding_lab/core/node.py
# Search nodes live in an arena owned by a single search call; predecessors are arena indices.
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional
from .oracle import Position

NO_PARENT = -1


@dataclass
class SearchNode:
    position: Position
    g: float = 0.0
    h: float = 0.0
    parent: int = NO_PARENT

    @property
    def f(self) -> float:
        return self.g + self.h


class NodeArena:
    """One SearchNode per distinct position, addressed by insertion index."""

    def __init__(self) -> None:
        self._nodes: List[SearchNode] = []
        self._index: Dict[Position, int] = {}

    def add(self, position: Position, g: float = 0.0, h: float = 0.0, parent: int = NO_PARENT) -> int:
        if position in self._index:
            raise ValueError(f"position {position!r} already has a node in this arena")
        idx = len(self._nodes)
        self._nodes.append(SearchNode(Position(*position), float(g), float(h), parent))
        self._index[position] = idx
        return idx

    def index_of(self, position: Position) -> Optional[int]:
        return self._index.get(position)

    def relax(self, idx: int, g: float, h: float, parent: int) -> None:
        node = self._nodes[idx]
        node.g = float(g)
        node.h = float(h)
        node.parent = parent

    def __getitem__(self, idx: int) -> SearchNode:
        return self._nodes[idx]

    def __len__(self) -> int:
        return len(self._nodes)
