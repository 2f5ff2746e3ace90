# This code implements Uniform Cost Search (Dijkstra) by reusing the generic best-first search function.
# pathfinding_lab/algorithms/ucs.py
from __future__ import annotations
from .base import SearchSteps
from .best_first import best_first_steps
from ..core.oracle import GridOracle, Position

NAME = "Dijkstra"

def uniform_cost_search(start: Position, end: Position, oracle: GridOracle) -> SearchSteps:
    # h = 0 and every move costs 1, so selection is purely by cost-so-far
    return best_first_steps(start, end, oracle, name=NAME, edge_cost=lambda a, b: 1.0, h=None)
