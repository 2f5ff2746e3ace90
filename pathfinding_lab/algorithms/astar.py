# pathfinding_lab/algorithms/astar.py
# A*: best-first on g + h, with the oracle supplying both the edge cost and the admissible heuristic.
from __future__ import annotations
from typing import Callable, Optional
from .base import SearchSteps
from .best_first import best_first_steps
from ..core.oracle import GridOracle, Position

NAME = "A*"

def a_star_search(
    start: Position,
    end: Position,
    oracle: GridOracle,
    edge_cost: Optional[Callable[[Position, Position], float]] = None,
) -> SearchSteps:
    cost = edge_cost or (oracle.distance if oracle is not None else None)
    h = oracle.heuristic if oracle is not None else None
    return best_first_steps(start, end, oracle, name=NAME, edge_cost=cost, h=h)
