from __future__ import annotations
from collections import deque
from typing import List, Optional, Sequence

from ..core.oracle import GridOracle, Position, manhattan


def path_violations(oracle: GridOracle, path: Sequence[Position],
                    start: Optional[Position] = None, end: Optional[Position] = None) -> List[str]:
    """Everything wrong with a path: off-grid or blocked cells, non-unit steps, wrong endpoints."""
    problems = []
    if not path:
        return ["path is empty"]
    if start is not None and path[0] != start:
        problems.append(f"path starts at {tuple(path[0])}, expected {tuple(start)}")
    if end is not None and path[-1] != end:
        problems.append(f"path ends at {tuple(path[-1])}, expected {tuple(end)}")
    for i, p in enumerate(path):
        if not oracle.is_walkable(p):
            problems.append(f"step {i}: {tuple(p)} is not walkable")
    for i in range(1, len(path)):
        if manhattan(path[i - 1], path[i]) != 1:
            problems.append(f"step {i}: {tuple(path[i - 1])} -> {tuple(path[i])} is not a 4-neighbor move")
    return problems


def is_valid_path(oracle: GridOracle, path: Sequence[Position],
                  start: Optional[Position] = None, end: Optional[Position] = None) -> bool:
    return not path_violations(oracle, path, start, end)


def sanity_check_oracle(oracle: GridOracle, origin: Position, max_states: int = 10_000) -> str:
    """Walks cells breadth-first from origin and checks neighbors are walkable, adjacent and symmetric."""
    seen = set()
    q = deque([origin])
    while q and len(seen) < max_states:
        s = q.popleft()
        if s in seen:
            continue
        seen.add(s)
        for n in oracle.neighbors(s):
            if not oracle.is_walkable(n) or not oracle.in_bounds(n):
                raise AssertionError(f"neighbor {tuple(n)} of {tuple(s)} is not walkable")
            if manhattan(s, n) != 1:
                raise AssertionError(f"neighbor {tuple(n)} of {tuple(s)} is not adjacent")
            if s not in oracle.neighbors(n):
                raise AssertionError(f"{tuple(s)} -> {tuple(n)} has no reverse edge")
            q.append(n)
    return f"OK: visited {len(seen)} cells; neighbor relation is consistent."
